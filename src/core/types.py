"""Domain types shared across the alert pipeline — quantities use Decimal."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Urgency(StrEnum):
    """Three-tier alert urgency. ``HIGH`` is the most urgent."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def sort_rank(self) -> int:
        """Position in the display order (0 sorts first)."""
        return _URGENCY_RANK[self]


_URGENCY_RANK: dict[Urgency, int] = {
    Urgency.HIGH: 0,
    Urgency.MEDIUM: 1,
    Urgency.LOW: 2,
}


class AlertType(StrEnum):
    """Alert domain. Closed set; selects classifier and payload shape."""

    EXPIRING = "expiring"
    LOW_STOCK = "lowStock"
    DISPUTE = "dispute"


# ── Inbound Records ─────────────────────────────────────────────


class ExpirationStatus(StrEnum):
    """Lifecycle of a tracked expiration date (DLC)."""

    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    CONSUMED = "CONSUMED"
    DISCARDED = "DISCARDED"


class DisputeStatus(StrEnum):
    """Lifecycle of a supplier dispute."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class ExpirationRecord(BaseModel):
    """A batch of product with a use-by date, as read from the DLC store."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    product_name: str = ""
    expiration_date: datetime | None = None
    quantity: Decimal = Decimal("0")
    unit: str = ""
    status: ExpirationStatus = ExpirationStatus.ACTIVE


class StockItem(BaseModel):
    """An inventory product with its current quantity and par level."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    name: str = ""
    quantity: Decimal = Decimal("0")
    par_level: Decimal | None = None
    unit: str = ""
    trackable: bool = True


class DisputeRecord(BaseModel):
    """A supplier/delivery dispute, as read from the dispute store."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    title: str = ""
    opened_at: datetime | None = None
    status: DisputeStatus = DisputeStatus.OPEN
    supplier_name: str = ""
    amount_disputed: Decimal | None = None
