"""Tests for alert variants — urgency must agree with the payload."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.alerts.exceptions import ContractViolationError
from src.alerts.types import (
    AlertCounts,
    AlertFeed,
    DisputeAlert,
    ExpiringAlert,
    LowStockAlert,
)
from src.core.types import AlertType, Urgency


class TestExpiringAlert:
    def test_type_tag_defaults(self) -> None:
        alert = ExpiringAlert(
            id="dlc-1", urgency=Urgency.HIGH, item_id="1", days_until_expiration=1,
        )
        assert alert.type == AlertType.EXPIRING

    def test_mismatched_urgency_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not match"):
            ExpiringAlert(
                id="dlc-1", urgency=Urgency.LOW, item_id="1", days_until_expiration=1,
            )

    def test_frozen(self) -> None:
        alert = ExpiringAlert(
            id="dlc-1", urgency=Urgency.LOW, item_id="1", days_until_expiration=9,
        )
        with pytest.raises(ValidationError):
            alert.urgency = Urgency.HIGH  # type: ignore[misc]


class TestLowStockAlert:
    def test_valid(self) -> None:
        alert = LowStockAlert(
            id="stock-1",
            urgency=Urgency.MEDIUM,
            item_id="1",
            quantity=Decimal("5"),
            par_level=Decimal("10"),
        )
        assert alert.type == AlertType.LOW_STOCK

    def test_mismatched_urgency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LowStockAlert(
                id="stock-1",
                urgency=Urgency.HIGH,
                item_id="1",
                quantity=Decimal("5"),
                par_level=Decimal("10"),
            )

    def test_zero_par_level_is_contract_violation(self) -> None:
        with pytest.raises(ContractViolationError):
            LowStockAlert(
                id="stock-1",
                urgency=Urgency.HIGH,
                item_id="1",
                quantity=Decimal("0"),
                par_level=Decimal("0"),
            )


class TestDisputeAlert:
    def test_valid(self) -> None:
        alert = DisputeAlert(
            id="dispute-1", urgency=Urgency.HIGH, dispute_id="1", days_since_opened=8,
        )
        assert alert.type == AlertType.DISPUTE

    def test_mismatched_urgency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DisputeAlert(
                id="dispute-1", urgency=Urgency.HIGH, dispute_id="1", days_since_opened=1,
            )


class TestAlertFeed:
    def test_empty_defaults(self) -> None:
        feed = AlertFeed()
        assert feed.alerts == []
        assert feed.presented == []
        assert feed.counts == AlertCounts()

    def test_holds_mixed_variants(self) -> None:
        alerts = [
            DisputeAlert(id="dispute-1", urgency=Urgency.HIGH, dispute_id="1", days_since_opened=8),
            ExpiringAlert(id="dlc-1", urgency=Urgency.MEDIUM, item_id="1", days_until_expiration=4),
        ]
        feed = AlertFeed(alerts=alerts)
        assert [a.type for a in feed.alerts] == [AlertType.DISPUTE, AlertType.EXPIRING]
