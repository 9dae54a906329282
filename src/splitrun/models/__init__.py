"""Data models for attempt sessions."""

from .category import AttemptInfo, GameCategoryInfo, ShortDescriptor
from .history import HistoryRecord, SplitTiming
from .run import Locator, Run, Status
from .short import ShortMap
from .split import Split, SplitInfo
from .time import ZERO, Delta, Time, sum_times

__all__ = [
    "ZERO",
    "AttemptInfo",
    "Delta",
    "GameCategoryInfo",
    "HistoryRecord",
    "Locator",
    "Run",
    "ShortDescriptor",
    "ShortMap",
    "Split",
    "SplitInfo",
    "SplitTiming",
    "Status",
    "Time",
    "sum_times",
]
