"""
Aggregate times for splits.

Two scopes of aggregate are tracked (the total of all times logged on a
split, and the cumulative total over all splits up to and including it)
from two sources (the current attempt, and the comparison baseline).
"""

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from .models.split import Split
from .models.time import Time

if TYPE_CHECKING:
    from .comparison import Comparison


class Source(str, Enum):
    """Where an aggregate time comes from."""

    ATTEMPT = "attempt"
    COMPARISON = "comparison"


class Scope(str, Enum):
    """What an aggregate time covers."""

    SPLIT = "split"
    CUMULATIVE = "cumulative"


class Kind(BaseModel):
    """A (source, scope) combination."""

    model_config = ConfigDict(frozen=True)

    source: Source
    scope: Scope

    def __str__(self) -> str:
        return f"{self.source.value}-{self.scope.value}"


ATTEMPT_SPLIT = Kind(source=Source.ATTEMPT, scope=Scope.SPLIT)
ATTEMPT_CUMULATIVE = Kind(source=Source.ATTEMPT, scope=Scope.CUMULATIVE)
COMPARISON_SPLIT = Kind(source=Source.COMPARISON, scope=Scope.SPLIT)
COMPARISON_CUMULATIVE = Kind(source=Source.COMPARISON, scope=Scope.CUMULATIVE)


class Pair(BaseModel):
    """Split-scope and cumulative-scope times from one source."""

    model_config = ConfigDict(frozen=True)

    split: Time | None = None
    cumulative: Time | None = None

    def __getitem__(self, scope: Scope) -> Time | None:
        if scope is Scope.SPLIT:
            return self.split
        return self.cumulative

    def items(self) -> Iterator[tuple[Scope, Time | None]]:
        yield Scope.SPLIT, self.split
        yield Scope.CUMULATIVE, self.cumulative


class Set(BaseModel):
    """All four aggregate times cached for one split."""

    model_config = ConfigDict(frozen=True)

    attempt: Pair = Pair()
    comparison: Pair = Pair()

    def __getitem__(self, source: Source) -> Pair:
        if source is Source.ATTEMPT:
            return self.attempt
        return self.comparison

    def get(self, kind: Kind) -> Time | None:
        return self[kind.source][kind.scope]


def aggregates(
    splits: Iterable[Split], comparison: "Comparison | None" = None
) -> Iterator[tuple[Split, Set]]:
    """
    Lazily compute the aggregate set for each split, in split order.

    The attempt split time is the total of the split's times, or None when
    the split has none. The attempt cumulative is the running total, defined
    only while every split up to and including this one has been logged;
    after the first empty split it stays None. Comparison values are copied
    from ``comparison`` unchanged.

    Each call starts afresh; nothing is cached between calls.
    """
    running: Time | None = Time()
    for split in splits:
        attempt = Pair()
        if split.num_times() == 0:
            running = None
        else:
            split_total = split.total()
            if running is not None:
                running = running + split_total
            attempt = Pair(split=split_total, cumulative=running)

        baseline = Pair()
        if comparison is not None:
            baseline = comparison.aggregate_for(split.short) or Pair()

        yield split, Set(attempt=attempt, comparison=baseline)
