"""Alert builders — turn raw domain records into classified alerts.

One builder per alert domain. Builders read records, never mutate them,
and drop any record they cannot fully turn into an alert: a malformed
record is logged and skipped so the rest of the pass still completes.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from src.alerts.classifiers import (
    classify_dispute,
    classify_expiration,
    classify_low_stock,
)
from src.alerts.exceptions import MalformedRecordError
from src.alerts.types import DisputeAlert, ExpiringAlert, LowStockAlert
from src.core.config import AlertLabels
from src.core.types import (
    DisputeRecord,
    DisputeStatus,
    ExpirationRecord,
    ExpirationStatus,
    StockItem,
)

logger = structlog.stdlib.get_logger()

_DAY = timedelta(days=1)

_CLOSED_EXPIRATION_STATUSES = frozenset({
    ExpirationStatus.CONSUMED,
    ExpirationStatus.DISCARDED,
})

_CLOSED_DISPUTE_STATUSES = frozenset({
    DisputeStatus.RESOLVED,
    DisputeStatus.CLOSED,
})

_RecordT = TypeVar("_RecordT", bound=BaseModel)


# ── Date helpers ────────────────────────────────────────────────


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def days_until(moment: datetime, now: datetime) -> int:
    """Whole days until ``moment``, rounding partial days up.

    0.5 days remaining reports as 1; a moment in the past is <= 0.
    """
    return math.ceil((_as_utc(moment) - _as_utc(now)) / _DAY)


def days_since(moment: datetime, now: datetime) -> int:
    """Whole days elapsed since ``moment``, rounding partial days down."""
    return math.floor((_as_utc(now) - _as_utc(moment)) / _DAY)


# ── Record coercion ─────────────────────────────────────────────


def _coerce(model: type[_RecordT], record: object) -> _RecordT:
    """Return ``record`` as ``model``, validating plain mappings.

    Raises:
        MalformedRecordError: If the record does not validate.
    """
    if isinstance(record, model):
        return record
    try:
        return model.model_validate(record)
    except ValidationError as exc:
        raise MalformedRecordError(
            f"invalid {model.__name__}: {exc.error_count()} error(s)"
        ) from exc


def _record_id(record: object) -> str:
    if isinstance(record, BaseModel):
        return str(getattr(record, "id", ""))
    if isinstance(record, Mapping):
        return str(record.get("id", ""))
    return ""


def _fmt_qty(value: Decimal) -> str:
    """Render a quantity without trailing zeros or exponent notation."""
    return f"{value.normalize():f}"


# ── Builders ────────────────────────────────────────────────────


def _expiration_badge(days: int, labels: AlertLabels) -> str:
    if days <= 0:
        return labels.expired
    if days == 1:
        return labels.tomorrow
    return f"{days} {labels.days}"


def build_expiration_alerts(
    records: Iterable[ExpirationRecord | Mapping[str, Any]],
    now: datetime,
    lookahead_days: int | None = None,
    labels: AlertLabels | None = None,
) -> list[ExpiringAlert]:
    """Build expiring-item alerts, soonest expiration first.

    Records without an expiration date, consumed or discarded batches,
    and (when ``lookahead_days`` is set) batches expiring further out
    than the window are skipped.
    """
    labels = labels or AlertLabels()
    dated: list[tuple[datetime, ExpiringAlert]] = []

    for raw in records:
        try:
            record = _coerce(ExpirationRecord, raw)
        except MalformedRecordError as exc:
            logger.warning(
                "expiration_record_skipped",
                record_id=_record_id(raw),
                reason=str(exc),
            )
            continue

        if record.status in _CLOSED_EXPIRATION_STATUSES:
            continue
        if record.expiration_date is None:
            logger.debug("expiration_date_missing", record_id=record.id)
            continue

        try:
            expires_at = _as_utc(record.expiration_date)
            days = days_until(expires_at, now)
        except (OverflowError, ValueError) as exc:
            logger.warning(
                "expiration_record_skipped",
                record_id=record.id,
                reason=f"expiration_date out of range: {exc}",
            )
            continue

        if lookahead_days is not None and days > lookahead_days:
            continue

        alert = ExpiringAlert(
            id=f"dlc-{record.id}",
            title=record.product_name,
            description=f"{_fmt_qty(record.quantity)} {record.unit}".strip(),
            urgency=classify_expiration(days),
            href="/dlc",
            badge=_expiration_badge(days, labels),
            item_id=record.id,
            days_until_expiration=days,
        )
        dated.append((expires_at, alert))

    dated.sort(key=lambda pair: pair[0])
    return [alert for _, alert in dated]


def build_low_stock_alerts(
    items: Iterable[StockItem | Mapping[str, Any]],
    labels: AlertLabels | None = None,
) -> list[LowStockAlert]:
    """Build low-stock alerts for trackable items strictly below par.

    Input order is preserved.
    """
    labels = labels or AlertLabels()
    alerts: list[LowStockAlert] = []

    for raw in items:
        try:
            item = _coerce(StockItem, raw)
        except MalformedRecordError as exc:
            logger.warning(
                "stock_item_skipped",
                record_id=_record_id(raw),
                reason=str(exc),
            )
            continue

        if not item.trackable or item.par_level is None:
            continue
        if item.par_level <= 0:
            logger.warning(
                "stock_item_skipped",
                record_id=item.id,
                reason=f"non-positive par level {item.par_level}",
            )
            continue
        # At or above par never alerts
        if item.quantity >= item.par_level:
            continue

        alerts.append(LowStockAlert(
            id=f"stock-{item.id}",
            title=item.name,
            description=(
                f"{_fmt_qty(item.quantity)} / {_fmt_qty(item.par_level)} {item.unit}"
            ).strip(),
            urgency=classify_low_stock(item.quantity, item.par_level),
            href="/inventory",
            badge=labels.low_stock,
            item_id=item.id,
            quantity=item.quantity,
            par_level=item.par_level,
        ))

    return alerts


def build_dispute_alerts(
    disputes: Iterable[DisputeRecord | Mapping[str, Any]],
    now: datetime,
    labels: AlertLabels | None = None,
) -> list[DisputeAlert]:
    """Build alerts for unresolved disputes. Input order is preserved."""
    labels = labels or AlertLabels()
    alerts: list[DisputeAlert] = []

    for raw in disputes:
        try:
            dispute = _coerce(DisputeRecord, raw)
        except MalformedRecordError as exc:
            logger.warning(
                "dispute_record_skipped",
                record_id=_record_id(raw),
                reason=str(exc),
            )
            continue

        if dispute.status in _CLOSED_DISPUTE_STATUSES:
            continue
        if dispute.opened_at is None:
            logger.warning(
                "dispute_record_skipped",
                record_id=dispute.id,
                reason="missing opened_at",
            )
            continue

        try:
            days = days_since(dispute.opened_at, now)
        except (OverflowError, ValueError) as exc:
            logger.warning(
                "dispute_record_skipped",
                record_id=dispute.id,
                reason=f"opened_at out of range: {exc}",
            )
            continue

        alerts.append(DisputeAlert(
            id=f"dispute-{dispute.id}",
            title=dispute.title,
            description=dispute.supplier_name,
            urgency=classify_dispute(days),
            href="/disputes",
            badge=f"{days} {labels.days_open}",
            dispute_id=dispute.id,
            days_since_opened=days,
        ))

    return alerts
