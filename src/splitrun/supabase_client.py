"""Supabase client connection utilities for splitrun history storage."""

import logging

from supabase import Client, create_client

from .config import SplitrunSettings
from .errors import SplitrunError

logger = logging.getLogger(__name__)

# Cache the client so repeated store construction reuses one connection
_supabase_client: Client | None = None


def get_supabase_client(settings: SplitrunSettings) -> Client:
    """
    Get authenticated Supabase client.

    Args:
        settings: Settings carrying the Supabase URL and key

    Returns:
        Supabase client instance

    Raises:
        SplitrunError: If the URL or key is not configured
    """
    global _supabase_client

    if _supabase_client is not None:
        return _supabase_client

    if not settings.supabase_url or not settings.supabase_key:
        raise SplitrunError(
            "Supabase history needs SPLITRUN_SUPABASE_URL and SPLITRUN_SUPABASE_KEY"
        )

    logger.debug(f"Connecting to Supabase at {settings.supabase_url}")
    _supabase_client = create_client(settings.supabase_url, settings.supabase_key)
    return _supabase_client
