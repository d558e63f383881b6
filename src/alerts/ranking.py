"""Merge & rank — one urgency-ordered feed across all alert domains."""

from __future__ import annotations

from collections.abc import Iterable

from src.alerts.types import Alert, AlertCounts
from src.core.types import AlertType


def rank_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    """Stable sort by urgency tier (HIGH, MEDIUM, LOW).

    Alerts of equal urgency keep their input order, so any ordering a
    builder applied within its own domain survives the merge. Types are
    interleaved freely; there is no grouping by domain.
    """
    return sorted(alerts, key=lambda alert: alert.urgency.sort_rank)


def count_alerts(alerts: Iterable[Alert]) -> AlertCounts:
    """Count alerts overall and per dashboard tab."""
    counts = {alert_type: 0 for alert_type in AlertType}
    total = 0
    for alert in alerts:
        counts[alert.type] += 1
        total += 1
    return AlertCounts(
        all=total,
        expiring=counts[AlertType.EXPIRING],
        low_stock=counts[AlertType.LOW_STOCK],
        disputes=counts[AlertType.DISPUTE],
    )


def filter_alerts(
    alerts: Iterable[Alert],
    alert_type: AlertType | None = None,
) -> list[Alert]:
    """Alerts of one type (or all when ``alert_type`` is None), order kept."""
    if alert_type is None:
        return list(alerts)
    return [alert for alert in alerts if alert.type == alert_type]
