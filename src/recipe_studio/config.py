"""
config.py

Purpose:
    Read Recipe Studio settings from environment variables (a local .env file
    is loaded first) and create the Supabase client used for recipe storage
    and team notifications.

Usage:
    from recipe_studio.config import get_supabase_client, get_settings
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Client connection details come from env vars, never hardcoded.
from supabase import create_client, Client

from dotenv import load_dotenv

from recipe_studio.errors import ConfigurationError

load_dotenv()  # loads .env

DEFAULT_NOTIFY_FUNCTION = "notify-team"
DEFAULT_PROCESS_FUNCTION = "process-recipe"
DEFAULT_REPORT_FUNCTION = "send-admin-report"


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str]
    supabase_key: Optional[str]
    catalog_path: Optional[str] = None
    notify_function: str = DEFAULT_NOTIFY_FUNCTION
    process_function: str = DEFAULT_PROCESS_FUNCTION
    report_function: str = DEFAULT_REPORT_FUNCTION


def get_settings() -> Settings:
    """Snapshot of the current environment."""
    return Settings(
        supabase_url=os.environ.get("SUPABASE_URL"),
        # Service role for backend jobs; anon key is enough behind RLS policies
        supabase_key=os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
        or os.environ.get("SUPABASE_ANON_KEY"),
        catalog_path=os.environ.get("RECIPE_CATALOG_PATH") or None,
        notify_function=os.environ.get("NOTIFY_FUNCTION_NAME") or DEFAULT_NOTIFY_FUNCTION,
        process_function=os.environ.get("PROCESS_FUNCTION_NAME") or DEFAULT_PROCESS_FUNCTION,
        report_function=os.environ.get("ADMIN_REPORT_FUNCTION_NAME") or DEFAULT_REPORT_FUNCTION,
    )


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """Create a Supabase client using env vars."""
    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_key:
        raise ConfigurationError(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_ANON_KEY) must be set"
        )
    return create_client(settings.supabase_url, settings.supabase_key)
