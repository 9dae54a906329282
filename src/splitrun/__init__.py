"""splitrun: attempt session engine for speedrun split timing."""

from .actions import Action, Clear, NewRun, Pop, Push, parse_action
from .aggregate import Kind, Pair, Scope, Set, Source, aggregates
from .comparison import Comparison, ComparisonProvider, FixedProvider, NullProvider
from .errors import (
    ActionParseError,
    DuplicateShortError,
    InvalidComponentError,
    SplitrunError,
    TimeParseError,
)
from .models import (
    ZERO,
    AttemptInfo,
    GameCategoryInfo,
    HistoryRecord,
    Run,
    ShortDescriptor,
    Split,
    SplitInfo,
    Status,
    Time,
)
from .observer import Mux, Observer
from .pace import Pace, PacedTime, SplitInRun
from .session import Session
from .sweep import Sweep, recompute

__all__ = [
    "ZERO",
    "Action",
    "ActionParseError",
    "AttemptInfo",
    "Clear",
    "Comparison",
    "ComparisonProvider",
    "DuplicateShortError",
    "FixedProvider",
    "GameCategoryInfo",
    "HistoryRecord",
    "InvalidComponentError",
    "Kind",
    "Mux",
    "NewRun",
    "NullProvider",
    "Observer",
    "Pace",
    "PacedTime",
    "Pair",
    "Pop",
    "Push",
    "Run",
    "Scope",
    "Session",
    "Set",
    "ShortDescriptor",
    "Source",
    "Split",
    "SplitInRun",
    "SplitInfo",
    "SplitrunError",
    "Status",
    "Sweep",
    "Time",
    "TimeParseError",
    "aggregates",
    "parse_action",
    "recompute",
]
