"""Core module — config, types, logging."""

from src.core.config import Settings, get_settings, load_settings, reset_settings
from src.core.logging import setup_logging
from src.core.types import (
    AlertType,
    DisputeRecord,
    DisputeStatus,
    ExpirationRecord,
    ExpirationStatus,
    StockItem,
    Urgency,
)

__all__ = [
    "AlertType",
    "DisputeRecord",
    "DisputeStatus",
    "ExpirationRecord",
    "ExpirationStatus",
    "Settings",
    "StockItem",
    "Urgency",
    "get_settings",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
