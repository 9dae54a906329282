"""Observer wiring for attempt sessions."""

import logging
from typing import Protocol

from . import events
from .aggregate import Kind, Set, Source

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Anything that wants to hear about session events."""

    def observe(self, event: events.Event) -> None:
        ...


class Mux:
    """
    Ordered fan-out of events to attached observers.

    Delivery is synchronous: every observer has seen an event, in
    attachment order, before ``observe`` returns. Attaching or detaching
    from inside an observer callback is not supported.
    """

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)
        logger.debug(f"Observer attached ({len(self._observers)} total)")

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug(f"Observer detached ({len(self._observers)} total)")

    def __len__(self) -> int:
        return len(self._observers)

    def observe(self, event: events.Event) -> None:
        for observer in self._observers:
            observer.observe(event)

    def observe_split(self, short: str, event: events.SplitEvent) -> None:
        self.observe(events.Split(short=short, event=event))

    def observe_aggregate_set(self, short: str, aggregate: Set, source: Source) -> None:
        """Send both scopes of ``source`` from ``aggregate`` as split events."""
        for scope, time in aggregate[source].items():
            self.observe_split(
                short,
                events.AggregateUpdated(kind=Kind(source=source, scope=scope), time=time),
            )
