"""
Presentation cache: per-split display state rebuilt from session events.

The presenter never looks at the session directly. It only applies the
events it observes, so it stays in sync with the engine without polling.
"""

import logging

from pydantic import BaseModel, Field

from . import events
from .aggregate import Pair, Set, Source
from .models.category import AttemptInfo, GameCategoryInfo
from .models.short import ShortMap
from .pace import PacedTime, SplitInRun

logger = logging.getLogger(__name__)


class SplitState(BaseModel):
    """Presenter state about one split."""

    name: str
    num_times: int = 0
    aggregates: Set = Set()
    pace: SplitInRun = SplitInRun()

    def reset(self) -> None:
        """Clear per-run state, keeping the name."""
        self.num_times = 0
        self.aggregates = Set()
        self.pace = SplitInRun()

    def handle(self, event: events.SplitEvent) -> None:
        if isinstance(event, events.TimePushed):
            self.num_times += 1
        elif isinstance(event, events.TimePopped):
            self.num_times = max(0, self.num_times - 1)
        elif isinstance(event, events.TimesCleared):
            self.num_times = 0
        elif isinstance(event, events.PaceUpdated):
            self.pace = event.pace
        elif isinstance(event, events.AggregateUpdated):
            pair = self.aggregates[event.kind.source]
            update = {event.kind.scope.value: event.time}
            updated: Pair = pair.model_copy(update=update)
            if event.kind.source is Source.ATTEMPT:
                self.aggregates = self.aggregates.model_copy(update={"attempt": updated})
            else:
                self.aggregates = self.aggregates.model_copy(update={"comparison": updated})


class PresenterState:
    """
    Observer holding everything a split display needs.

    A `GameCategory` event starts a new layout, so the same state can be
    attached to another session and rebuilt from its dump.
    """

    def __init__(self) -> None:
        self.game_category: GameCategoryInfo | None = None
        self.attempt = AttemptInfo()
        self.splits: list[SplitState] = []
        self.totals: dict[Source, PacedTime] = {
            Source.ATTEMPT: PacedTime(),
            Source.COMPARISON: PacedTime(),
        }
        self._short_map = ShortMap()

    def num_splits(self) -> int:
        return len(self.splits)

    def split(self, short: str) -> SplitState | None:
        index = self._short_map.index_of(short)
        if index is None:
            return None
        return self.splits[index]

    def observe(self, event: events.Event) -> None:
        if isinstance(event, events.GameCategory):
            self._clear_layout()
            self.game_category = event.info
        elif isinstance(event, events.AddSplit):
            self._add_split(event.short, event.name)
        elif isinstance(event, events.Attempt):
            self.attempt = event.info
        elif isinstance(event, events.Reset):
            self._reset()
        elif isinstance(event, events.Split):
            self._handle_split_event(event.short, event.event)
        elif isinstance(event, events.Total):
            self.totals[event.source] = event.paced

    def _clear_layout(self) -> None:
        self.splits = []
        self._short_map = ShortMap()
        self.attempt = AttemptInfo()
        self.totals = {source: PacedTime() for source in Source}

    def _add_split(self, short: str, name: str) -> None:
        self._short_map.insert(short, len(self.splits))
        self.splits.append(SplitState(name=name))

    def _reset(self) -> None:
        for split in self.splits:
            split.reset()
        self.totals[Source.ATTEMPT] = PacedTime()

    def _handle_split_event(self, short: str, event: events.SplitEvent) -> None:
        split = self.split(short)
        if split is None:
            logger.debug(f"Event for unknown split {short!r} ignored")
            return
        split.handle(event)
