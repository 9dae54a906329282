"""History store selection for the CLI."""

from splitrun.config import SplitrunSettings
from splitrun.history import FileHistoryStore, HistoryStore, SupabaseHistoryStore
from splitrun.supabase_client import get_supabase_client


def build_history_store(settings: SplitrunSettings) -> HistoryStore:
    """Build the history store named by ``settings.history_backend``."""
    if settings.history_backend == "supabase":
        return SupabaseHistoryStore(get_supabase_client(settings), settings.supabase_table)
    return FileHistoryStore(settings.history_path)
