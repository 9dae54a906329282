"""Session commands for the splitrun CLI."""

import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from cli import display
from cli.game_file import GameFile, load_game_file
from cli.stores import build_history_store
from splitrun.actions import Action, NewRun, parse_action
from splitrun.config import get_settings
from splitrun.errors import SplitrunError
from splitrun.history import HistoryComparisonProvider, HistoryObserver
from splitrun.presenter import PresenterState
from splitrun.session import Session

logger = logging.getLogger(__name__)

QUIT_WORDS = {"quit", "exit", "q"}

HELP_TEXT = (
    "Commands: push LOCATOR TIME | pop LOCATOR | clear LOCATOR | reset | show | quit\n"
    "LOCATOR is a split index (0, 1, ...) or short id; TIME is [[h:]m:]s[.fff]"
)


def load_game_or_exit(path: Path) -> GameFile:
    """Load a game file, reporting failures and exiting on error."""
    try:
        return load_game_file(path)
    except OSError as e:
        display.display_error(f"Cannot read game file {path}: {e}")
        raise typer.Exit(1) from None
    except (json.JSONDecodeError, ValidationError) as e:
        display.display_error(f"Invalid game file {path}: {e}")
        raise typer.Exit(1) from None


def open_session(game: GameFile, compare: bool, save: bool) -> tuple[Session, PresenterState]:
    """
    Build a session for ``game`` with a presenter attached.

    Args:
        game: Game/category definition
        compare: Race against the stored personal best
        save: Archive outgoing runs to the history store

    Returns:
        The session and the presenter state observing it
    """
    settings = get_settings()
    provider = None
    history = None

    if compare or save:
        try:
            store = build_history_store(settings)
        except SplitrunError as e:
            display.display_error(str(e))
            raise typer.Exit(1) from None
        if compare:
            provider = HistoryComparisonProvider(store, game.short())
        if save:
            history = HistoryObserver(store)

    try:
        session = Session(game.info(), game.new_run(), provider=provider)
    except SplitrunError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None

    state = PresenterState()
    session.observers.attach(state)
    if history is not None:
        session.observers.attach(history)
    session.dump_to_observers()

    logger.debug(f"Opened session for {game.short()} with {session.num_splits()} splits")
    return session, state


def perform_or_exit(session: Session, action: Action) -> None:
    """Perform an action, exiting if an observer such as the history store fails."""
    try:
        session.perform(action)
    except SplitrunError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None


def apply_line(session: Session, line: str) -> bool:
    """Parse and perform one textual action; returns False if it was rejected."""
    try:
        action = parse_action(line)
    except ValueError as e:
        display.display_error(str(e))
        return False

    perform_or_exit(session, action)
    return True


def run_session(
    game_file: Path = typer.Argument(..., help="Game/category JSON file"),
    compare: bool = typer.Option(True, "--compare/--no-compare", help="Race against the stored PB"),
    save: bool = typer.Option(True, "--save/--no-save", help="Store outgoing runs"),
) -> None:
    """
    Start an interactive timing session.

    Examples:
        splitrun run sonic.json
        splitrun run sonic.json --no-save
    """
    game = load_game_or_exit(game_file)
    session, state = open_session(game, compare=compare, save=save)

    display.display_info(HELP_TEXT)
    display.console.print(display.split_table(state))

    while True:
        try:
            line = display.console.input("[bold]> [/bold]").strip()
        except EOFError:
            break

        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            break
        if line.lower() == "show":
            display.console.print(display.split_table(state))
            continue
        if line.lower() == "help":
            display.display_info(HELP_TEXT)
            continue

        if apply_line(session, line):
            display.console.print(display.split_table(state))

    if save and session.run_as_historic() is not None:
        # Resetting archives the run in progress through the history observer.
        perform_or_exit(session, NewRun())
        display.display_success("Run saved")


def replay(
    game_file: Path = typer.Argument(..., help="Game/category JSON file"),
    actions_file: Path = typer.Argument(..., help="JSON list of action strings"),
    compare: bool = typer.Option(False, "--compare/--no-compare", help="Race against the stored PB"),
    save: bool = typer.Option(False, "--save/--no-save", help="Store outgoing runs"),
) -> None:
    """
    Replay a list of actions against a fresh run and show the result.

    Examples:
        splitrun replay sonic.json actions.json
    """
    game = load_game_or_exit(game_file)

    try:
        with open(actions_file) as f:
            lines = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        display.display_error(f"Cannot read actions file {actions_file}: {e}")
        raise typer.Exit(1) from None

    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        display.display_error("Actions file must hold a JSON list of strings")
        raise typer.Exit(1)

    session, state = open_session(game, compare=compare, save=save)

    rejected = sum(1 for line in lines if not apply_line(session, line))
    display.console.print(display.split_table(state))

    if rejected:
        display.display_error(f"{rejected} of {len(lines)} actions rejected")
        raise typer.Exit(1)
    display.display_success(f"Replayed {len(lines)} actions ({session.status().value})")
