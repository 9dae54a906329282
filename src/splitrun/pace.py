"""Pace classification of attempt times against a comparison."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .models.time import Delta, Time


class Pace(str, Enum):
    """How the attempt stands relative to the comparison."""

    INCONCLUSIVE = "inconclusive"
    AHEAD = "ahead"
    BEHIND = "behind"
    ON_PACE = "on_pace"


class SplitInRun(BaseModel):
    """
    Pace of one split within the run so far.

    ``delta`` is the magnitude of (comparison - attempt) cumulative time;
    its sign is carried by ``pace``. It is None when the pace is
    inconclusive.
    """

    model_config = ConfigDict(frozen=True)

    pace: Pace = Pace.INCONCLUSIVE
    delta: Time | None = None

    @classmethod
    def inconclusive(cls) -> "SplitInRun":
        return cls()

    @classmethod
    def from_delta(cls, delta: Delta) -> "SplitInRun":
        """Classify a signed (comparison - attempt) delta."""
        if delta.is_zero():
            return cls(pace=Pace.ON_PACE, delta=delta.magnitude)
        if delta.negative:
            return cls(pace=Pace.BEHIND, delta=delta.magnitude)
        return cls(pace=Pace.AHEAD, delta=delta.magnitude)

    @classmethod
    def between(cls, attempt: Time | None, comparison: Time | None) -> "SplitInRun":
        if attempt is None or comparison is None:
            return cls.inconclusive()
        return cls.from_delta(Time.delta(comparison, attempt))

    def overall(self) -> Pace:
        """The pace to report for the run as a whole at this split."""
        return self.pace

    def __str__(self) -> str:
        if self.delta is None or self.pace is Pace.INCONCLUSIVE:
            return self.pace.value
        sign = "-" if self.pace is Pace.AHEAD else "+"
        return f"{self.pace.value} ({sign}{self.delta})"


class PacedTime(BaseModel):
    """A time annotated with the pace at which it was reached."""

    model_config = ConfigDict(frozen=True)

    pace: Pace = Pace.INCONCLUSIVE
    time: Time | None = None

    @classmethod
    def inconclusive(cls, time: Time | None) -> "PacedTime":
        return cls(pace=Pace.INCONCLUSIVE, time=time)
