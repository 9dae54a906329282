"""Game and category metadata for attempt sessions."""

from pydantic import BaseModel, ConfigDict, Field


class ShortDescriptor(BaseModel):
    """Short identifier pair locating a game/category in history storage."""

    model_config = ConfigDict(frozen=True)

    game: str = Field(description="Short name of the game, e.g. 'scd11'")
    category: str = Field(description="Short name of the category, e.g. 'btg-sonic'")

    def __str__(self) -> str:
        return f"{self.game}/{self.category}"


class GameCategoryInfo(BaseModel):
    """Display information about the game/category being run."""

    model_config = ConfigDict(frozen=True)

    game_name: str
    category_name: str
    short: ShortDescriptor


class AttemptInfo(BaseModel):
    """
    Attempt counters for a run.

    ``total`` is the attempt number of the current run; ``completed`` is
    how many earlier attempts reached the last split.
    """

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0)
    completed: int = Field(default=0, ge=0)

    def next(self, was_completed: bool) -> "AttemptInfo":
        """Counters for the attempt following this one."""
        return AttemptInfo(
            total=self.total + 1,
            completed=self.completed + (1 if was_completed else 0),
        )
