"""
History storage for outgoing runs, and comparisons built from it.

The engine itself never persists anything: a :class:`HistoryObserver`
attached to a session writes each outgoing run to a store, and a
:class:`HistoryComparisonProvider` reads the store back to build the
comparison for the next attempt.
"""

import json
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol, cast

from pydantic import TypeAdapter, ValidationError
from supabase import Client

from . import events
from .aggregate import Pair
from .comparison import Comparison
from .errors import HistoryStoreError
from .models.category import ShortDescriptor
from .models.history import HistoryRecord, SplitTiming
from .models.time import Time

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[HistoryRecord])
_timing_adapter = TypeAdapter(list[SplitTiming])


class HistoryStore(Protocol):
    """Write-mostly storage for historic runs."""

    def add(self, record: HistoryRecord) -> None:
        ...

    def runs_for(self, category: ShortDescriptor) -> list[HistoryRecord]:
        ...


class FileHistoryStore:
    """
    History store backed by a local JSON file.

    The file holds a single JSON list of records, oldest first. It is read
    on every query and rewritten on every add.
    """

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> list[HistoryRecord]:
        if not self.path.exists():
            return []
        try:
            with open(self.path) as f:
                return _records_adapter.validate_python(json.load(f))
        except OSError as e:
            logger.error(f"Cannot read history file {self.path}: {e}")
            raise HistoryStoreError(f"Cannot read history file {self.path}: {e}") from e
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"History file {self.path} is corrupt: {e}")
            raise HistoryStoreError(f"History file {self.path} is corrupt: {e}") from e

    def add(self, record: HistoryRecord) -> None:
        records = self._load()
        records.append(record)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(_records_adapter.dump_python(records, mode="json"), f, indent=2)
        except OSError as e:
            logger.error(f"Cannot write history file {self.path}: {e}")
            raise HistoryStoreError(f"Cannot write history file {self.path}: {e}") from e

        logger.info(
            f"Stored {'completed' if record.was_completed else 'incomplete'} run "
            f"for {record.category_locator} in {self.path}"
        )

    def runs_for(self, category: ShortDescriptor) -> list[HistoryRecord]:
        return [r for r in self._load() if r.category_locator == category]


class SupabaseHistoryStore:
    """
    History store backed by a Supabase table.

    Each row holds one run: the category short names, completion flag,
    date, total time in milliseconds, and the per-split timing as JSON.
    """

    def __init__(self, supabase: Client, table: str = "attempt_runs"):
        """
        Initialize store with Supabase client.

        Args:
            supabase: Authenticated Supabase client
            table: Name of the runs table
        """
        self.supabase = supabase
        self.table = table

    def add(self, record: HistoryRecord) -> None:
        row = {
            "game": record.category_locator.game,
            "category": record.category_locator.category,
            "was_completed": record.was_completed,
            "date": record.date.isoformat(),
            "total_millis": record.total().millis,
            "timing": _timing_adapter.dump_python(record.timing, mode="json"),
        }

        try:
            self.supabase.table(self.table).insert(row).execute()
        except Exception as e:
            logger.error(f"Failed to store run for {record.category_locator}: {e}")
            raise HistoryStoreError(f"Failed to store run for {record.category_locator}: {e}") from e

        logger.info(f"Stored run for {record.category_locator} in {self.table}")

    def runs_for(self, category: ShortDescriptor) -> list[HistoryRecord]:
        try:
            result = (
                self.supabase.table(self.table)
                .select("game, category, was_completed, date, timing")
                .eq("game", category.game)
                .eq("category", category.category)
                .order("date")
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to fetch runs for {category}: {e}")
            raise HistoryStoreError(f"Failed to fetch runs for {category}: {e}") from e
        rows = cast(list[dict[str, Any]], result.data)

        if not rows:
            logger.debug(f"No stored runs for {category}")
            return []

        try:
            return [
                HistoryRecord(
                    category_locator=category,
                    was_completed=row["was_completed"],
                    date=datetime.fromisoformat(row["date"]),
                    timing=_timing_adapter.validate_python(row["timing"]),
                )
                for row in rows
            ]
        except (KeyError, ValueError) as e:
            logger.error(f"Malformed run row in {self.table}: {e}")
            raise HistoryStoreError(f"Malformed run row in {self.table}: {e}") from e


class HistoryObserver:
    """Session observer that archives every outgoing run to a store."""

    def __init__(self, store: HistoryStore):
        self.store = store

    def observe(self, event: events.Event) -> None:
        if isinstance(event, events.Reset) and event.record is not None:
            self.store.add(event.record)


def personal_best(records: Iterable[HistoryRecord]) -> HistoryRecord | None:
    """The fastest completed run; the most recent one wins ties."""
    best: HistoryRecord | None = None
    for record in sorted(records, key=lambda r: r.date):
        if not record.was_completed:
            continue
        if best is None or record.total() <= best.total():
            best = record
    return best


def comparison_from_history(records: Iterable[HistoryRecord]) -> Comparison | None:
    """
    Build a comparison from the personal best among ``records``.

    Returns:
        Comparison with per-split and cumulative times of the personal
        best, or None if no run was completed
    """
    best = personal_best(records)
    if best is None:
        return None

    splits: dict[str, Pair] = {}
    running = Time()
    for split in best.timing:
        split_total = split.total()
        running = running + split_total
        splits[split.info.short] = Pair(split=split_total, cumulative=running)

    return Comparison(splits=splits, total=running)


class HistoryComparisonProvider:
    """Comparison provider that races against the stored personal best."""

    def __init__(self, store: HistoryStore, category: ShortDescriptor):
        self.store = store
        self.category = category

    def comparison(self) -> Comparison | None:
        comparison = comparison_from_history(self.store.runs_for(self.category))
        if comparison is None:
            logger.debug(f"No completed runs for {self.category}; no comparison")
        return comparison
