"""Time model for split durations.

Times are exact, non-negative durations held as a whole number of
milliseconds. They can be added and compared but not subtracted: the
difference between two times is a signed :class:`Delta`.
"""

import re
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidComponentError, TimeParseError

MILLIS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60

MILLIS_PER_MINUTE = MILLIS_PER_SECOND * SECONDS_PER_MINUTE
MILLIS_PER_HOUR = MILLIS_PER_MINUTE * MINUTES_PER_HOUR

# [[h:]m:]s[.fff]
_TIME_PATTERN = re.compile(
    r"^(?:(?:(?P<hours>\d+):)?(?P<minutes>\d+):)?(?P<seconds>\d+)(?:\.(?P<millis>\d{1,3}))?$"
)


def _check_component(name: str, value: int, limit: int | None = None) -> None:
    if value < 0 or (limit is not None and value >= limit):
        raise InvalidComponentError(name, value, limit)


class Time(BaseModel):
    """
    A split duration.

    Stored and compared as a single millisecond count; decomposed into
    hours, minutes, seconds and milliseconds only for display.
    """

    model_config = ConfigDict(frozen=True)

    millis: int = Field(
        default=0,
        description="Total duration in milliseconds",
        ge=0,
    )

    @classmethod
    def from_components(
        cls, hours: int = 0, minutes: int = 0, seconds: int = 0, millis: int = 0
    ) -> "Time":
        """
        Build a time from its display components.

        Args:
            hours: Whole hours (unbounded)
            minutes: Minutes, 0..59
            seconds: Seconds, 0..59
            millis: Milliseconds, 0..999

        Returns:
            The corresponding Time

        Raises:
            InvalidComponentError: If any component is out of range
        """
        _check_component("hours", hours)
        _check_component("minutes", minutes, MINUTES_PER_HOUR)
        _check_component("seconds", seconds, SECONDS_PER_MINUTE)
        _check_component("millis", millis, MILLIS_PER_SECOND)

        return cls(
            millis=hours * MILLIS_PER_HOUR
            + minutes * MILLIS_PER_MINUTE
            + seconds * MILLIS_PER_SECOND
            + millis
        )

    @classmethod
    def parse(cls, text: str) -> "Time":
        """
        Parse a time written as ``[[h:]m:]s[.fff]``.

        Examples:
            ```python
            Time.parse("1:30")          # 00:01:30.000
            Time.parse("00:01:30.000")  # same
            Time.parse("45.5")          # 00:00:45.500
            ```

        Raises:
            TimeParseError: If the text is not in the expected shape
            InvalidComponentError: If a component is out of range
        """
        match = _TIME_PATTERN.match(text.strip())
        if match is None:
            raise TimeParseError(f"Invalid time: {text!r}")

        millis_text = match.group("millis") or "0"
        return cls.from_components(
            hours=int(match.group("hours") or 0),
            minutes=int(match.group("minutes") or 0),
            seconds=int(match.group("seconds")),
            millis=int(millis_text.ljust(3, "0")),
        )

    def components(self) -> tuple[int, int, int, int]:
        """Split this time into (hours, minutes, seconds, millis)."""
        hours, rest = divmod(self.millis, MILLIS_PER_HOUR)
        minutes, rest = divmod(rest, MILLIS_PER_MINUTE)
        seconds, millis = divmod(rest, MILLIS_PER_SECOND)
        return hours, minutes, seconds, millis

    def is_zero(self) -> bool:
        return self.millis == 0

    @staticmethod
    def delta(minuend: "Time", subtrahend: "Time") -> "Delta":
        """Signed difference ``minuend - subtrahend``."""
        diff = minuend.millis - subtrahend.millis
        return Delta(negative=diff < 0, magnitude=Time(millis=abs(diff)))

    def __add__(self, other: object) -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time(millis=self.millis + other.millis)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.millis < other.millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.millis <= other.millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.millis > other.millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.millis >= other.millis

    def __str__(self) -> str:
        hours, minutes, seconds, millis = self.components()
        return f"{hours:02}:{minutes:02}:{seconds:02}.{millis:03}"


ZERO = Time()


class Delta(BaseModel):
    """Signed difference between two times, kept as (sign, magnitude)."""

    model_config = ConfigDict(frozen=True)

    negative: bool = False
    magnitude: Time = ZERO

    def is_zero(self) -> bool:
        return self.magnitude.is_zero()

    def __str__(self) -> str:
        sign = "-" if self.negative else "+"
        return f"{sign}{self.magnitude}"


def sum_times(times: Iterable[Time]) -> Time:
    """Sum an iterable of times (ZERO if empty)."""
    return Time(millis=sum(t.millis for t in times))
