"""Pure lookups from (urgency, type) to display tokens."""

from __future__ import annotations

from src.alerts.types import Alert, PresentedAlert
from src.core.types import AlertType, Urgency

# ── Style tokens ────────────────────────────────────────────────

DESTRUCTIVE_SURFACE = "bg-destructive/5 border-destructive/20"
WARNING_SURFACE = "bg-warning/10 border-warning/30"
MUTED_SURFACE = "bg-muted/50 border-border"

_HIGH_COLOR: dict[AlertType, str] = {
    AlertType.EXPIRING: DESTRUCTIVE_SURFACE,
    AlertType.LOW_STOCK: WARNING_SURFACE,
    AlertType.DISPUTE: DESTRUCTIVE_SURFACE,
}

_ICON_NAME: dict[AlertType, str] = {
    AlertType.EXPIRING: "clock",
    AlertType.LOW_STOCK: "package",
    AlertType.DISPUTE: "alert-circle",
}

_BADGE_VARIANT: dict[Urgency, str] = {
    Urgency.HIGH: "destructive",
    Urgency.MEDIUM: "warning",
    Urgency.LOW: "secondary",
}


def color_class_for(urgency: Urgency, alert_type: AlertType) -> str:
    """Background/border classes for an alert card."""
    if urgency == Urgency.HIGH:
        return _HIGH_COLOR[alert_type]
    if urgency == Urgency.MEDIUM:
        return WARNING_SURFACE
    return MUTED_SURFACE


def icon_class_for(urgency: Urgency, alert_type: AlertType) -> str:
    """Icon colour class for an alert card."""
    if alert_type == AlertType.LOW_STOCK:
        return "text-warning"
    if urgency == Urgency.HIGH:
        return "text-destructive"
    return "text-primary"


def icon_name_for(alert_type: AlertType) -> str:
    return _ICON_NAME[alert_type]


def badge_variant_for(urgency: Urgency) -> str:
    return _BADGE_VARIANT[urgency]


def present_alert(alert: Alert) -> PresentedAlert:
    """Attach every display token the dashboard needs to one alert."""
    return PresentedAlert(
        alert=alert,
        color_class=color_class_for(alert.urgency, alert.type),
        icon_class=icon_class_for(alert.urgency, alert.type),
        icon_name=icon_name_for(alert.type),
        badge_variant=badge_variant_for(alert.urgency),
    )
