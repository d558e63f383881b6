"""Alert pipeline — build, merge, rank and annotate in one pass.

Every call is independent: alerts are rebuilt from the records given and
nothing is cached between passes. Supplying the same records and ``now``
returns identical output.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

import structlog

from src.alerts.builders import (
    build_dispute_alerts,
    build_expiration_alerts,
    build_low_stock_alerts,
)
from src.alerts.presentation import present_alert
from src.alerts.ranking import count_alerts, rank_alerts
from src.alerts.types import Alert, AlertFeed
from src.core.config import AlertsConfig, get_settings
from src.core.types import DisputeRecord, ExpirationRecord, StockItem

logger = structlog.stdlib.get_logger()


def collect_alerts(
    expiring: Iterable[ExpirationRecord | Mapping[str, Any]],
    stock: Iterable[StockItem | Mapping[str, Any]],
    disputes: Iterable[DisputeRecord | Mapping[str, Any]],
    now: datetime,
    config: AlertsConfig | None = None,
) -> list[Alert]:
    """Build alerts for all three domains and return them urgency-ranked.

    Domains are concatenated as expiring, low stock, disputes before the
    stable rank, so that is the tie order within each urgency tier.
    """
    cfg = config or get_settings().alerts

    expiring_alerts = build_expiration_alerts(
        expiring,
        now,
        lookahead_days=cfg.expiration_lookahead_days,
        labels=cfg.labels,
    )
    stock_alerts = build_low_stock_alerts(stock, labels=cfg.labels)
    dispute_alerts = build_dispute_alerts(disputes, now, labels=cfg.labels)

    merged: list[Alert] = [*expiring_alerts, *stock_alerts, *dispute_alerts]
    ranked = rank_alerts(merged)

    logger.info(
        "alerts_prioritized",
        total=len(ranked),
        expiring=len(expiring_alerts),
        low_stock=len(stock_alerts),
        disputes=len(dispute_alerts),
    )
    return ranked


def build_alert_feed(
    expiring: Iterable[ExpirationRecord | Mapping[str, Any]],
    stock: Iterable[StockItem | Mapping[str, Any]],
    disputes: Iterable[DisputeRecord | Mapping[str, Any]],
    now: datetime,
    config: AlertsConfig | None = None,
) -> AlertFeed:
    """Run :func:`collect_alerts` and attach display tokens and tab counts."""
    alerts = collect_alerts(expiring, stock, disputes, now, config=config)
    return AlertFeed(
        alerts=alerts,
        presented=[present_alert(alert) for alert in alerts],
        counts=count_alerts(alerts),
    )
