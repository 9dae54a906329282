"""
The attempt session: controller for one run and its observers.

A session holds the game/category metadata, the current run, the
comparison being raced against, and the observers to keep informed. All
mutation goes through :meth:`Session.perform`, which recomputes the run's
aggregates and paces and then notifies observers, in that order.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from . import events
from .actions import Action, Clear, NewRun, Pop, Push
from .aggregate import Set, Source
from .comparison import Comparison, ComparisonProvider, NullProvider
from .models.category import GameCategoryInfo
from .models.history import HistoryRecord
from .models.run import Locator, Run, Status
from .models.time import Time
from .observer import Mux, Observer
from .pace import PacedTime
from .sweep import Sweep, recompute

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class Session:
    """
    Holds all data for an attempt session.

    Observers are attached through :attr:`observers` (or :meth:`attach`
    for listeners joining mid-session). The comparison provider is pulled
    only at construction, when replaced, and on every reset.
    """

    def __init__(
        self,
        metadata: GameCategoryInfo,
        run: Run,
        provider: ComparisonProvider | None = None,
        clock: Clock | None = None,
    ):
        """
        Initialize a session.

        Args:
            metadata: Game/category being run
            run: Starting run
            provider: Comparison provider (default: no comparisons)
            clock: Timestamp source for outgoing runs (default: UTC wall clock)
        """
        self.metadata = metadata
        self.observers = Mux()

        self._run = run
        self._comparison = Comparison.null()
        self._provider: ComparisonProvider = provider or NullProvider()
        self._clock: Clock = clock or utc_now

        self._pull_comparison()

    # -----------------------------
    # Collaborators
    # -----------------------------
    def set_comparison_provider(self, provider: ComparisonProvider) -> None:
        """Replace the comparison provider and refresh the comparison immediately."""
        self._provider = provider
        self._refresh_comparison()

    def set_clock(self, clock: Clock) -> None:
        self._clock = clock

    def attach(self, observer: Observer) -> None:
        """Attach ``observer`` and bring it up to date with the session."""
        self.observers.attach(observer)
        single = Mux()
        single.attach(observer)
        self._dump(single)

    # -----------------------------
    # Queries
    # -----------------------------
    @property
    def comparison(self) -> Comparison:
        return self._comparison

    @property
    def run(self) -> Run:
        return self._run

    def num_splits(self) -> int:
        return self._run.num_splits()

    def position_of(self, locator: Locator) -> int | None:
        return self._run.position_of(locator)

    def status(self) -> Status:
        return self._run.status()

    def run_as_historic(self) -> HistoryRecord | None:
        """The current run as a history record, or None if it has not started."""
        completeness = self._run.status().to_completeness()
        if completeness is None:
            return None
        return self._run.as_historic_record(self.metadata.short, completeness, self._clock())

    def recompute(self) -> Sweep:
        """Aggregates and paces for the current run, without notifying anyone."""
        return recompute(self._run, self._comparison)

    # -----------------------------
    # Actions
    # -----------------------------
    def perform(self, action: Action) -> None:
        """Perform ``action`` on the current run."""
        if isinstance(action, Push):
            self._push_to(action.locator, action.time)
        elif isinstance(action, Pop):
            self._pop_from(action.locator)
        elif isinstance(action, Clear):
            self._clear_at(action.locator)
        elif isinstance(action, NewRun):
            self._reset()
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def _push_to(self, locator: Locator, time: Time) -> None:
        split = self._run.get(locator)
        if split is None:
            logger.debug(f"Push to unknown split {locator!r} ignored")
            return

        split.push(time)
        self.observers.observe_split(split.short, events.TimePushed(time=time))
        self._observe_paces_and_aggregates()

    def _pop_from(self, locator: Locator) -> None:
        split = self._run.get(locator)
        if split is None:
            logger.debug(f"Pop from unknown split {locator!r} ignored")
            return

        time = split.pop()
        if time is None:
            return

        self.observers.observe_split(split.short, events.TimePopped(time=time))
        self._observe_paces_and_aggregates()

    def _clear_at(self, locator: Locator) -> None:
        split = self._run.get(locator)
        if split is None:
            logger.debug(f"Clear of unknown split {locator!r} ignored")
            return

        count = split.clear()
        if count == 0:
            return

        self.observers.observe_split(split.short, events.TimesCleared(count=count))
        self._observe_paces_and_aggregates()

    def _reset(self) -> None:
        record = self.run_as_historic()
        self.observers.observe(events.Reset(record=record))
        self._run.reset()
        logger.info(f"{self.metadata.short}: starting attempt {self._run.attempt_number}")
        self._observe_attempt()
        self._refresh_comparison()

    # -----------------------------
    # Comparison
    # -----------------------------
    def _pull_comparison(self) -> None:
        comparison = self._provider.comparison()
        if comparison is None:
            logger.debug("Comparison provider had nothing new; keeping current comparison")
            return
        self._comparison = comparison

    def _refresh_comparison(self) -> None:
        self._pull_comparison()
        self._observe_comparison(self.observers)

    # -----------------------------
    # Notification
    # -----------------------------
    def dump_to_observers(self) -> None:
        """
        Send the full session picture to every observer.

        Meant to be called once, after the initial observers are attached.
        """
        self._dump(self.observers)

    def _dump(self, target: Mux) -> None:
        target.observe(events.GameCategory(info=self.metadata))
        for split in self._run:
            target.observe(events.AddSplit(short=split.short, name=split.info.name))
        target.observe(events.Attempt(info=self._run.attempt))
        self._observe_comparison(target)

        if self._run.status() is Status.NOT_STARTED:
            return

        for split in self._run:
            for time in split.times:
                target.observe_split(split.short, events.TimePushed(time=time))
        self._observe_sweep(target, self.recompute())

    def _observe_attempt(self) -> None:
        self.observers.observe(events.Attempt(info=self._run.attempt))

    def _observe_paces_and_aggregates(self) -> None:
        self._observe_sweep(self.observers, self.recompute())

    @staticmethod
    def _observe_sweep(target: Mux, sweep: Sweep) -> None:
        for summary in sweep.splits:
            target.observe_split(summary.short, events.PaceUpdated(pace=summary.pace))
            target.observe_aggregate_set(summary.short, summary.aggregates, Source.ATTEMPT)
        target.observe(events.Total(paced=sweep.total, source=Source.ATTEMPT))

    def _observe_comparison(self, target: Mux) -> None:
        target.observe(
            events.Total(
                paced=PacedTime.inconclusive(self._comparison.total),
                source=Source.COMPARISON,
            )
        )
        for split in self._run:
            aggregate = self._comparison.aggregate_for(split.short)
            if aggregate is not None:
                target.observe_aggregate_set(
                    split.short, Set(comparison=aggregate), Source.COMPARISON
                )
