"""Rich console output helpers for the splitrun CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from splitrun.aggregate import Source
from splitrun.models.history import HistoryRecord
from splitrun.models.time import Time
from splitrun.pace import Pace, SplitInRun
from splitrun.presenter import PresenterState

console = Console()
err_console = Console(stderr=True)

PACE_STYLES = {
    Pace.AHEAD: "green",
    Pace.BEHIND: "red",
    Pace.ON_PACE: "yellow",
    Pace.INCONCLUSIVE: "dim",
}

BLANK_TIME = "--:--:--.---"


def display_error(message: str) -> None:
    err_console.print(f"[bold red]✗[/bold red] {escape(message)}")


def display_info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {escape(message)}")


def display_success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {escape(message)}")


def format_time(time: Time | None) -> str:
    return BLANK_TIME if time is None else str(time)


def format_pace(pace: SplitInRun) -> str:
    style = PACE_STYLES[pace.pace]
    return f"[{style}]{pace}[/{style}]"


def split_table(state: PresenterState) -> Table:
    """Build the split table for the current presenter state."""
    title = "Splits"
    if state.game_category is not None:
        info = state.game_category
        title = escape(f"{info.game_name}: {info.category_name} (attempt #{state.attempt.total})")

    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Split")
    table.add_column("Times", justify="right")
    table.add_column("Split time", justify="right")
    table.add_column("Cumulative", justify="right")
    table.add_column("Comparison", justify="right")
    table.add_column("Pace")

    for index, split in enumerate(state.splits):
        table.add_row(
            str(index),
            escape(split.name),
            str(split.num_times),
            format_time(split.aggregates.attempt.split),
            format_time(split.aggregates.attempt.cumulative),
            format_time(split.aggregates.comparison.cumulative),
            format_pace(split.pace),
        )

    attempt_total = state.totals[Source.ATTEMPT]
    comparison_total = state.totals[Source.COMPARISON]
    style = PACE_STYLES[attempt_total.pace]
    table.add_section()
    table.add_row(
        "",
        "Total",
        "",
        "",
        f"[{style}]{format_time(attempt_total.time)}[/{style}]",
        format_time(comparison_total.time),
        attempt_total.pace.value,
    )
    return table


def history_table(records: list[HistoryRecord]) -> Table:
    table = Table(title="Stored runs")
    table.add_column("Date")
    table.add_column("Completed")
    table.add_column("Total", justify="right")

    for record in records:
        table.add_row(
            record.date.strftime("%Y-%m-%d %H:%M:%S"),
            "yes" if record.was_completed else "no",
            str(record.total()),
        )
    return table
