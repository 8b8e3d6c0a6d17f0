"""Services package for business logic."""

from fitstreak.services.identity import get_user_id
from fitstreak.services.log_store import (
    LogNotFoundError,
    LogStore,
    LogStoreError,
    SQLLogStore,
    get_log_store,
)
from fitstreak.services.stats_service import (
    BadgeRule,
    StatsConfig,
    StatsService,
    stats_service,
)
from fitstreak.services.supabase_store import SupabaseLogStore

__all__ = [
    "get_user_id",
    "LogNotFoundError",
    "LogStore",
    "LogStoreError",
    "SQLLogStore",
    "get_log_store",
    "BadgeRule",
    "StatsConfig",
    "StatsService",
    "stats_service",
    "SupabaseLogStore",
]
