"""Run model: the ordered splits of the current attempt."""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime
from enum import Enum

from .category import AttemptInfo, ShortDescriptor
from .history import HistoryRecord, SplitTiming
from .short import ShortMap
from .split import Split

logger = logging.getLogger(__name__)

# A split locator: zero-based index or short id.
Locator = int | str


class Status(str, Enum):
    """Run status, derived from which splits have times."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    def to_completeness(self) -> bool | None:
        """
        Map to a history completion flag.

        Returns:
            None if the run has not started, else whether it completed
        """
        if self is Status.NOT_STARTED:
            return None
        return self is Status.COMPLETED


class Run:
    """
    An attempt at a game/category.

    Owns its splits and the attempt counters. Short ids are mapped to
    indices once, at construction, and never reassigned.
    """

    def __init__(self, splits: Iterable[Split], attempt: AttemptInfo | None = None):
        """
        Initialize a run.

        Args:
            splits: Splits in run order
            attempt: Attempt counters (default: first attempt)

        Raises:
            DuplicateShortError: If two splits share a short id
        """
        self.splits: list[Split] = list(splits)
        self.attempt = attempt or AttemptInfo()

        self._short_map = ShortMap()
        for index, split in enumerate(self.splits):
            self._short_map.insert(split.short, index)

    def __iter__(self) -> Iterator[Split]:
        return iter(self.splits)

    @property
    def attempt_number(self) -> int:
        return self.attempt.total

    def num_splits(self) -> int:
        return len(self.splits)

    def position_of(self, locator: Locator) -> int | None:
        """Resolve a locator to a split index, or None if it names no split."""
        if isinstance(locator, str):
            return self._short_map.index_of(locator)
        if 0 <= locator < len(self.splits):
            return locator
        return None

    def get(self, locator: Locator) -> Split | None:
        index = self.position_of(locator)
        if index is None:
            return None
        return self.splits[index]

    def status(self) -> Status:
        logged = sum(1 for split in self.splits if split.num_times() > 0)
        if logged == 0:
            return Status.NOT_STARTED
        if logged == len(self.splits):
            return Status.COMPLETED
        return Status.IN_PROGRESS

    def reset(self) -> None:
        """Clear every split's times and move on to the next attempt."""
        was_completed = self.status() is Status.COMPLETED
        for split in self.splits:
            split.clear()
        self.attempt = self.attempt.next(was_completed)
        logger.debug(f"Run reset, now on attempt {self.attempt.total}")

    def timing_as_historic(self) -> list[SplitTiming]:
        return [
            SplitTiming(info=split.info, times=list(split.times)) for split in self.splits
        ]

    def as_historic_record(
        self, category: ShortDescriptor, was_completed: bool, timestamp: datetime
    ) -> HistoryRecord:
        return HistoryRecord(
            category_locator=category,
            was_completed=was_completed,
            date=timestamp,
            timing=self.timing_as_historic(),
        )
