"""splitrun CLI entry point."""

import logging

import typer
from rich.logging import RichHandler

from cli.commands.history import list_runs
from cli.commands.session import replay, run_session
from splitrun.config import get_settings

app = typer.Typer(
    name="splitrun",
    help="Split timing for speedrun attempts",
    no_args_is_help=True,
)

app.command("run")(run_session)
app.command("replay")(replay)
app.command("history")(list_runs)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
