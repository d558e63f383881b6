"""Alert variants and the outbound feed shape."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.alerts.classifiers import (
    classify_dispute,
    classify_expiration,
    classify_low_stock,
)
from src.core.types import AlertType, Urgency


class _AlertFields(BaseModel):
    """Fields every alert variant carries."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    description: str = ""
    urgency: Urgency
    href: str = ""
    badge: str = ""


class ExpiringAlert(_AlertFields):
    """An item close to (or past) its expiration date."""

    type: Literal[AlertType.EXPIRING] = AlertType.EXPIRING
    item_id: str
    days_until_expiration: int

    @model_validator(mode="after")
    def _urgency_matches_signal(self) -> ExpiringAlert:
        expected = classify_expiration(self.days_until_expiration)
        if self.urgency != expected:
            raise ValueError(
                f"urgency {self.urgency} does not match "
                f"{self.days_until_expiration} days until expiration ({expected})"
            )
        return self


class LowStockAlert(_AlertFields):
    """A trackable item below its par level."""

    type: Literal[AlertType.LOW_STOCK] = AlertType.LOW_STOCK
    item_id: str
    quantity: Decimal
    par_level: Decimal

    @model_validator(mode="after")
    def _urgency_matches_signal(self) -> LowStockAlert:
        expected = classify_low_stock(self.quantity, self.par_level)
        if self.urgency != expected:
            raise ValueError(
                f"urgency {self.urgency} does not match "
                f"{self.quantity}/{self.par_level} stock ({expected})"
            )
        return self


class DisputeAlert(_AlertFields):
    """An unresolved supplier dispute."""

    type: Literal[AlertType.DISPUTE] = AlertType.DISPUTE
    dispute_id: str
    days_since_opened: int

    @model_validator(mode="after")
    def _urgency_matches_signal(self) -> DisputeAlert:
        expected = classify_dispute(self.days_since_opened)
        if self.urgency != expected:
            raise ValueError(
                f"urgency {self.urgency} does not match "
                f"{self.days_since_opened} days open ({expected})"
            )
        return self


Alert = Annotated[
    ExpiringAlert | LowStockAlert | DisputeAlert,
    Field(discriminator="type"),
]


class AlertCounts(BaseModel):
    """Number of alerts per dashboard tab."""

    all: int = 0
    expiring: int = 0
    low_stock: int = 0
    disputes: int = 0


class PresentedAlert(BaseModel):
    """An alert plus the display tokens the rendering surface needs."""

    model_config = ConfigDict(frozen=True)

    alert: Alert
    color_class: str
    icon_class: str
    icon_name: str
    badge_variant: str


class AlertFeed(BaseModel):
    """One prioritization pass: ranked alerts, their display tokens and counts."""

    alerts: list[Alert] = Field(default_factory=list)
    presented: list[PresentedAlert] = Field(default_factory=list)
    counts: AlertCounts = AlertCounts()
