"""Alerts module — classifiers, builders, ranking and presentation."""

from src.alerts.builders import (
    build_dispute_alerts,
    build_expiration_alerts,
    build_low_stock_alerts,
    days_since,
    days_until,
)
from src.alerts.classifiers import (
    classify_dispute,
    classify_expiration,
    classify_low_stock,
    percent_short,
)
from src.alerts.engine import build_alert_feed, collect_alerts
from src.alerts.exceptions import (
    AlertError,
    ContractViolationError,
    MalformedRecordError,
)
from src.alerts.presentation import (
    badge_variant_for,
    color_class_for,
    icon_class_for,
    icon_name_for,
    present_alert,
)
from src.alerts.ranking import count_alerts, filter_alerts, rank_alerts
from src.alerts.types import (
    Alert,
    AlertCounts,
    AlertFeed,
    DisputeAlert,
    ExpiringAlert,
    LowStockAlert,
    PresentedAlert,
)

__all__ = [
    "Alert",
    "AlertCounts",
    "AlertError",
    "AlertFeed",
    "ContractViolationError",
    "DisputeAlert",
    "ExpiringAlert",
    "LowStockAlert",
    "MalformedRecordError",
    "PresentedAlert",
    "badge_variant_for",
    "build_alert_feed",
    "build_dispute_alerts",
    "build_expiration_alerts",
    "build_low_stock_alerts",
    "classify_dispute",
    "classify_expiration",
    "classify_low_stock",
    "collect_alerts",
    "color_class_for",
    "count_alerts",
    "days_since",
    "days_until",
    "filter_alerts",
    "icon_class_for",
    "icon_name_for",
    "percent_short",
    "present_alert",
    "rank_alerts",
]
