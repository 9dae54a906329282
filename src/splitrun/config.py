"""Configuration for splitrun, loaded from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HISTORY_PATH = Path.home() / ".config" / "splitrun" / "history.json"


def find_env_file() -> Path | None:
    """Find the nearest .env file, searching upwards from the working directory."""
    for directory in (Path.cwd(), *Path.cwd().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


class SplitrunSettings(BaseSettings):
    """
    Settings loaded from ``SPLITRUN_*`` environment variables or a .env file.

    Attributes:
        log_level: Logging level name for the CLI
        history_backend: Where outgoing runs are stored ('file' or 'supabase')
        history_path: JSON file used by the file backend
        supabase_url: Supabase project URL (supabase backend only)
        supabase_key: Supabase service role key (supabase backend only)
        supabase_table: Table holding stored runs
    """

    model_config = SettingsConfigDict(
        env_prefix="SPLITRUN_",
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Logging level name")
    history_backend: Literal["file", "supabase"] = Field(
        default="file",
        description="History store backend",
    )
    history_path: Path = Field(
        default=DEFAULT_HISTORY_PATH,
        description="JSON history file for the file backend",
    )
    supabase_url: str | None = Field(
        default=None,
        examples=["http://127.0.0.1:54321", "https://xxx.supabase.co"],
    )
    supabase_key: str | None = Field(default=None)
    supabase_table: str = Field(default="attempt_runs")


@lru_cache
def get_settings() -> SplitrunSettings:
    """
    Get settings (cached singleton pattern).

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return SplitrunSettings()
