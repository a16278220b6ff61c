"""Service layer: recovery engine and database access."""

from .supabase_service import SupabaseService, SupabaseDep, get_supabase_service
from .daily_log_store import (
    DailyLogStore,
    SupplementAdherenceLog,
    MoodJournal,
    HydrationTracker,
)
from .progress_service import ProgressService

__all__ = [
    "SupabaseService",
    "SupabaseDep",
    "get_supabase_service",
    "DailyLogStore",
    "SupplementAdherenceLog",
    "MoodJournal",
    "HydrationTracker",
    "ProgressService",
]
