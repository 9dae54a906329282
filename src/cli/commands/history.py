"""History commands for the splitrun CLI."""

from pathlib import Path

import typer

from cli import display
from cli.commands.session import load_game_or_exit
from cli.stores import build_history_store
from splitrun.config import get_settings
from splitrun.errors import SplitrunError
from splitrun.history import personal_best


def list_runs(
    game_file: Path = typer.Argument(..., help="Game/category JSON file"),
) -> None:
    """
    List stored runs for a game/category.

    Examples:
        splitrun history sonic.json
    """
    game = load_game_or_exit(game_file)

    try:
        store = build_history_store(get_settings())
        records = store.runs_for(game.short())
    except SplitrunError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None

    if not records:
        display.display_info(f"No stored runs for {game.short()}")
        return

    display.console.print(display.history_table(records))

    best = personal_best(records)
    if best is not None:
        display.display_info(f"Personal best: {best.total()}")
