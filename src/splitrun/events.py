"""
Events broadcast by an attempt session to its observers.

Every event is a frozen pydantic model with a ``type`` discriminator, so
``event.model_dump(mode="json")`` gives a message-ready dict.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .aggregate import Kind, Source
from .models.category import AttemptInfo, GameCategoryInfo
from .models.history import HistoryRecord
from .models.time import Time
from .pace import PacedTime, SplitInRun


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Split events
# ---------------------------------------------------------------------------


class TimePushed(_Event):
    """A time was pushed onto the split."""

    type: Literal["time_pushed"] = "time_pushed"
    time: Time


class TimePopped(_Event):
    """The most recent time was popped off the split."""

    type: Literal["time_popped"] = "time_popped"
    time: Time


class TimesCleared(_Event):
    """Every time on the split was dropped at once."""

    type: Literal["times_cleared"] = "times_cleared"
    count: int = Field(ge=1)


class AggregateUpdated(_Event):
    """An aggregate time of the split changed; None means no longer defined."""

    type: Literal["aggregate"] = "aggregate"
    kind: Kind
    time: Time | None = None


class PaceUpdated(_Event):
    type: Literal["pace"] = "pace"
    pace: SplitInRun


SplitEvent = Annotated[
    TimePushed | TimePopped | TimesCleared | AggregateUpdated | PaceUpdated,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Session events
# ---------------------------------------------------------------------------


class AddSplit(_Event):
    """Initial information about a split."""

    type: Literal["add_split"] = "add_split"
    short: str
    name: str


class Reset(_Event):
    """The run was reset; carries the outgoing run, if it had started."""

    type: Literal["reset"] = "reset"
    record: HistoryRecord | None = None


class Attempt(_Event):
    type: Literal["attempt"] = "attempt"
    info: AttemptInfo


class GameCategory(_Event):
    type: Literal["game_category"] = "game_category"
    info: GameCategoryInfo


class Split(_Event):
    """An event on the split with the given short id."""

    type: Literal["split"] = "split"
    short: str
    event: SplitEvent


class Total(_Event):
    """The run total from one source changed."""

    type: Literal["total"] = "total"
    paced: PacedTime
    source: Source


Event = Annotated[
    AddSplit | Reset | Attempt | GameCategory | Split | Total,
    Field(discriminator="type"),
]
