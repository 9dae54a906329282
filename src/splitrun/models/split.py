"""Split data model for per-segment attempt timing."""

from pydantic import BaseModel, ConfigDict, Field

from .time import Time, sum_times


class SplitInfo(BaseModel):
    """Identity metadata for a split."""

    model_config = ConfigDict(frozen=True)

    short: str = Field(
        description="Short identifier, unique within a run (e.g. 'pp1')",
        min_length=1,
    )
    name: str = Field(description="Display name (e.g. 'Palmtree Panic 1')")


class Split(BaseModel):
    """
    Represents a single split in the current attempt.

    Holds the split's identity and the stack of times logged against it.
    Times are only ever appended or removed from the end.
    """

    info: SplitInfo
    times: list[Time] = Field(
        default_factory=list,
        description="Times logged on this split, oldest first",
    )

    @classmethod
    def new(cls, short: str, name: str) -> "Split":
        return cls(info=SplitInfo(short=short, name=name))

    @property
    def short(self) -> str:
        return self.info.short

    def push(self, time: Time) -> None:
        self.times.append(time)

    def pop(self) -> Time | None:
        """Remove and return the most recent time, or None if there is none."""
        if not self.times:
            return None
        return self.times.pop()

    def clear(self) -> int:
        """Drop every logged time; returns how many were dropped."""
        count = len(self.times)
        self.times = []
        return count

    def num_times(self) -> int:
        return len(self.times)

    def total(self) -> Time:
        return sum_times(self.times)
