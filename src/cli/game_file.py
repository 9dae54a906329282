"""Loading game/category definitions from JSON files."""

import json
from pathlib import Path

from pydantic import BaseModel, Field

from splitrun.models.category import GameCategoryInfo, ShortDescriptor
from splitrun.models.run import Run
from splitrun.models.split import Split, SplitInfo


class GameFile(BaseModel):
    """
    On-disk description of a game/category to run.

    Example:
        ```json
        {
          "game": "scd11",
          "category": "btg-sonic",
          "game_name": "Sonic CD",
          "category_name": "Sonic - Beat the Game",
          "splits": [{"short": "pp1", "name": "Palmtree Panic 1"}]
        }
        ```
    """

    game: str
    category: str
    game_name: str | None = None
    category_name: str | None = None
    splits: list[SplitInfo] = Field(min_length=1)

    def short(self) -> ShortDescriptor:
        return ShortDescriptor(game=self.game, category=self.category)

    def info(self) -> GameCategoryInfo:
        return GameCategoryInfo(
            game_name=self.game_name or self.game,
            category_name=self.category_name or self.category,
            short=self.short(),
        )

    def new_run(self) -> Run:
        return Run(Split(info=info) for info in self.splits)


def load_game_file(path: Path) -> GameFile:
    """
    Read and validate a game file.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not JSON
        ValidationError: If the JSON does not describe a game
    """
    with open(path) as f:
        return GameFile.model_validate(json.load(f))
