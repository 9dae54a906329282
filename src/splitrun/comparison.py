"""Comparison baselines and the providers that supply them."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from .aggregate import Pair, Set
from .models.split import Split
from .models.time import Time
from .pace import SplitInRun


class Comparison(BaseModel):
    """
    Baseline snapshot that attempt times are paced against.

    Immutable: a refreshed comparison replaces the old one wholesale.
    """

    model_config = ConfigDict(frozen=True)

    splits: dict[str, Pair] = Field(
        default_factory=dict,
        description="Comparison split and cumulative times, by split short id",
    )
    total: Time | None = Field(default=None, description="Comparison time for the whole run")

    @classmethod
    def null(cls) -> "Comparison":
        """A comparison with no data."""
        return cls()

    def is_null(self) -> bool:
        return not self.splits and self.total is None

    def aggregate_for(self, short: str) -> Pair | None:
        return self.splits.get(short)


def split_pace(split: Split, aggregate: Set) -> SplitInRun:
    """
    Classify the pace of ``split`` given its aggregate set.

    A split with no logged times is always inconclusive, as is one with
    no comparison cumulative time.
    """
    if split.num_times() == 0:
        return SplitInRun.inconclusive()
    return SplitInRun.between(aggregate.attempt.cumulative, aggregate.comparison.cumulative)


class ComparisonProvider(Protocol):
    """Anything that can supply a comparison on request."""

    def comparison(self) -> Comparison | None:
        """Return a fresh comparison, or None to keep the current one."""
        ...


class NullProvider:
    """Provider that never has a comparison."""

    def comparison(self) -> Comparison | None:
        return None


class FixedProvider:
    """Provider that always returns the same snapshot."""

    def __init__(self, comparison: Comparison):
        self._comparison = comparison

    def comparison(self) -> Comparison | None:
        return self._comparison
