"""Historic run records handed to history storage."""

from datetime import datetime

from pydantic import BaseModel, Field

from .category import ShortDescriptor
from .split import SplitInfo
from .time import Time, sum_times


class SplitTiming(BaseModel):
    """All times logged on one split of an outgoing run."""

    info: SplitInfo
    times: list[Time] = Field(default_factory=list)

    def total(self) -> Time:
        return sum_times(self.times)


class HistoryRecord(BaseModel):
    """
    Snapshot of a finished (or abandoned) run.

    Produced by the session on reset and written by a history store.
    """

    category_locator: ShortDescriptor
    was_completed: bool
    date: datetime = Field(description="When the run was archived")
    timing: list[SplitTiming] = Field(
        default_factory=list,
        description="Per-split times, in split order",
    )

    def total(self) -> Time:
        """Sum of every time in the run."""
        return sum_times(split.total() for split in self.timing)
