"""Urgency classifiers — map one domain signal to a three-tier Urgency.

Each classifier is pure and total over its valid inputs. Thresholds are
module constants so the rule set can be audited on its own.
"""

from __future__ import annotations

from decimal import Decimal

from src.alerts.exceptions import ContractViolationError
from src.core.types import Urgency

# ── Thresholds ──────────────────────────────────────────────────

EXPIRATION_HIGH_MAX_DAYS = 2
EXPIRATION_MEDIUM_MAX_DAYS = 5

LOW_STOCK_HIGH_PCT = Decimal("80")
LOW_STOCK_MEDIUM_PCT = Decimal("50")

DISPUTE_HIGH_MIN_DAYS = 7
DISPUTE_MEDIUM_MIN_DAYS = 3

Number = Decimal | int | float


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def classify_expiration(days_until_expiration: int) -> Urgency:
    """Classify an expiring item.

    Already-expired items (negative days) are HIGH, same as items about
    to expire.
    """
    if days_until_expiration <= EXPIRATION_HIGH_MAX_DAYS:
        return Urgency.HIGH
    if days_until_expiration <= EXPIRATION_MEDIUM_MAX_DAYS:
        return Urgency.MEDIUM
    return Urgency.LOW


def percent_short(quantity: Number, par_level: Number) -> Decimal:
    """Shortfall below par as a percentage of par.

    Negative when quantity is above par.

    Raises:
        ContractViolationError: If par_level is not strictly positive.
    """
    par = _to_decimal(par_level)
    if par <= 0:
        raise ContractViolationError(f"par_level must be > 0, got {par_level}")
    qty = _to_decimal(quantity)
    return (par - qty) / par * 100


def classify_low_stock(quantity: Number, par_level: Number) -> Urgency:
    """Classify a stock shortfall relative to its par level.

    Callers filter out untracked items, items without a par level and
    items at or above par before calling this.
    """
    pct = percent_short(quantity, par_level)
    if pct >= LOW_STOCK_HIGH_PCT:
        return Urgency.HIGH
    if pct >= LOW_STOCK_MEDIUM_PCT:
        return Urgency.MEDIUM
    return Urgency.LOW


def classify_dispute(days_since_opened: int) -> Urgency:
    """Classify an unresolved dispute by how long it has been open."""
    if days_since_opened >= DISPUTE_HIGH_MIN_DAYS:
        return Urgency.HIGH
    if days_since_opened >= DISPUTE_MEDIUM_MIN_DAYS:
        return Urgency.MEDIUM
    return Urgency.LOW
