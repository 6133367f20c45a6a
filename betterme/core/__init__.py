"""Core building blocks for the dashboard package."""
from betterme.core.config import DashboardSettings, get_config_value, load_env_file
from betterme.core.logging import configure_logging
from betterme.core.models import (
    COLUMN_FIELDS,
    DashboardResult,
    LogEntry,
    PillarScores,
    ScoredEntry,
    WarningFlags,
    WarningTotals,
)

__all__ = [
    "COLUMN_FIELDS",
    "DashboardResult",
    "DashboardSettings",
    "LogEntry",
    "PillarScores",
    "ScoredEntry",
    "WarningFlags",
    "WarningTotals",
    "configure_logging",
    "get_config_value",
    "load_env_file",
]
