"""Pure recompute step: aggregates and paces for every split of a run."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .aggregate import Set, aggregates
from .comparison import Comparison, split_pace
from .models.split import Split
from .pace import PacedTime, SplitInRun


class SplitSummary(BaseModel):
    """Recomputed aggregates and pace for one split."""

    model_config = ConfigDict(frozen=True)

    short: str
    aggregates: Set
    pace: SplitInRun


class Sweep(BaseModel):
    """Result of one recompute pass over a run."""

    model_config = ConfigDict(frozen=True)

    splits: list[SplitSummary] = Field(default_factory=list)
    total: PacedTime = PacedTime()

    def summary_for(self, short: str) -> SplitSummary | None:
        for summary in self.splits:
            if summary.short == short:
                return summary
        return None


def recompute(splits: Iterable[Split], comparison: Comparison | None = None) -> Sweep:
    """
    Recompute every split's aggregates and pace.

    The attempt total is the cumulative time of the last split whose
    cumulative is defined (ties go to the later split), paced with that
    split's overall pace.
    """
    summaries: list[SplitSummary] = []
    total = PacedTime()

    for split, aggregate in aggregates(splits, comparison):
        pace = split_pace(split, aggregate)
        summaries.append(SplitSummary(short=split.short, aggregates=aggregate, pace=pace))

        cumulative = aggregate.attempt.cumulative
        if cumulative is not None and (total.time is None or total.time <= cumulative):
            total = PacedTime(pace=pace.overall(), time=cumulative)

    return Sweep(splits=summaries, total=total)
