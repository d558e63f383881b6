#!/usr/bin/env python3
"""Alert dashboard — ranked back-of-house alerts in the terminal.

Usage:
    python -m scripts.dashboard snapshot.json
    python -m scripts.dashboard snapshot.json --now 2025-01-20T09:00:00Z
    python -m scripts.dashboard snapshot.json --type lowStock --no-color

Snapshot JSON format::

    {
        "expiring": [
            {"id": "1", "product_name": "Saumon", "expiration_date": "2025-01-21",
             "quantity": "5", "unit": "KG", "status": "ACTIVE"}
        ],
        "stock": [
            {"id": "7", "name": "Tomates", "quantity": "2", "par_level": "10",
             "unit": "KG", "trackable": true}
        ],
        "disputes": [
            {"id": "3", "title": "Poulets manquants", "opened_at": "2025-01-12",
             "status": "IN_PROGRESS", "supplier_name": "Metro"}
        ]
    }

Records are passed to the builders as-is, so a malformed entry is skipped
on its own without rejecting the whole snapshot.
"""

from __future__ import annotations

import argparse
import json
import re
import sys
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from src.alerts.engine import build_alert_feed
from src.alerts.presentation import present_alert
from src.alerts.ranking import filter_alerts
from src.alerts.types import AlertCounts, AlertFeed, PresentedAlert
from src.core.config import load_settings
from src.core.logging import setup_logging
from src.core.types import AlertType, Urgency


class AlertSnapshot(BaseModel):
    """Raw records for one dashboard pass."""

    # Entries stay untyped; the builders validate and skip them one by one
    expiring: list[Any] = []
    stock: list[Any] = []
    disputes: list[Any] = []


# ── ANSI Color Codes ──────────────────────────────────────────────

class C:
    """ANSI color/style codes."""
    RESET   = "\033[0m"
    BOLD    = "\033[1m"
    DIM     = "\033[2m"

    WHITE   = "\033[97m"
    GREY    = "\033[90m"
    CYAN    = "\033[96m"
    GREEN   = "\033[92m"
    RED     = "\033[91m"
    YELLOW  = "\033[93m"


# ── Box Drawing Characters ────────────────────────────────────────

TL = "┌"  # top-left
TR = "┐"  # top-right
BL = "└"  # bottom-left
BR = "┘"  # bottom-right
H  = "─"  # horizontal
V  = "│"  # vertical
LT = "├"  # left-tee
RT = "┤"  # right-tee

DH  = "═"
DV  = "║"
DTL = "╔"
DTR = "╗"
DBL = "╚"
DBR = "╝"

DASHBOARD_WIDTH = 80

_URGENCY_COLOR: dict[Urgency, str] = {
    Urgency.HIGH: C.RED,
    Urgency.MEDIUM: C.YELLOW,
    Urgency.LOW: C.GREY,
}

_TYPE_LABEL: dict[AlertType, str] = {
    AlertType.EXPIRING: "EXPIRING",
    AlertType.LOW_STOCK: "STOCK",
    AlertType.DISPUTE: "DISPUTE",
}

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


# ── Formatting Helpers ────────────────────────────────────────────


def _strip_ansi(s: str) -> str:
    """Remove ANSI escape sequences for length calculations."""
    return _ANSI_RE.sub("", s)


def _box_top(width: int = DASHBOARD_WIDTH) -> str:
    return C.DIM + TL + H * (width - 2) + TR + C.RESET


def _box_bot(width: int = DASHBOARD_WIDTH) -> str:
    return C.DIM + BL + H * (width - 2) + BR + C.RESET


def _box_mid(width: int = DASHBOARD_WIDTH) -> str:
    return C.DIM + LT + H * (width - 2) + RT + C.RESET


def _box_row(content: str, width: int = DASHBOARD_WIDTH) -> str:
    """Pad content inside box borders."""
    pad = max(0, width - 2 - len(_strip_ansi(content)))
    return C.DIM + V + C.RESET + " " + content + " " * max(0, pad - 1) + C.DIM + V + C.RESET


def _center(text: str, width: int = DASHBOARD_WIDTH - 2) -> str:
    """Center text accounting for ANSI codes."""
    pad = max(0, width - len(_strip_ansi(text)))
    left = pad // 2
    return " " * left + text + " " * (pad - left)


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 1)] + "…"


# ── Section Renderers ─────────────────────────────────────────────


def render_header(now: datetime, width: int = DASHBOARD_WIDTH) -> str:
    title = f"{C.BOLD}{C.CYAN}BACK OF HOUSE{C.RESET}"
    subtitle = f"{C.DIM}Urgent Alerts{C.RESET}"
    stamp = now.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    lines = [
        "",
        C.DIM + DTL + DH * (width - 2) + DTR + C.RESET,
        C.DIM + DV + C.RESET + _center(title, width - 2) + C.DIM + DV + C.RESET,
        C.DIM + DV + C.RESET + _center(subtitle, width - 2) + C.DIM + DV + C.RESET,
        C.DIM + DV + C.RESET + _center(f"{C.DIM}{stamp}{C.RESET}", width - 2) + C.DIM + DV + C.RESET,
        C.DIM + DBL + DH * (width - 2) + DBR + C.RESET,
    ]
    return "\n".join(lines)


def render_tabs(
    counts: AlertCounts,
    active: AlertType | None = None,
    width: int = DASHBOARD_WIDTH,
) -> str:
    """Tab strip with a count per alert type; the active tab is bold."""
    tabs: list[tuple[AlertType | None, str, int]] = [
        (None, "All", counts.all),
        (AlertType.EXPIRING, "Expiring", counts.expiring),
        (AlertType.LOW_STOCK, "Stock", counts.low_stock),
        (AlertType.DISPUTE, "Disputes", counts.disputes),
    ]
    parts = []
    for tab_type, label, count in tabs:
        if tab_type == active:
            parts.append(f"{C.BOLD}{C.WHITE}[{label} {count}]{C.RESET}")
        else:
            parts.append(f"{C.DIM}{label} {count}{C.RESET}")
    return _box_row("  " + "   ".join(parts), width)


def render_alert_row(entry: PresentedAlert, width: int = DASHBOARD_WIDTH) -> str:
    alert = entry.alert
    color = _URGENCY_COLOR[alert.urgency]
    marker = f"{color}{C.BOLD}{alert.urgency.value.upper():<6}{C.RESET}"
    kind = f"{C.CYAN}{_TYPE_LABEL[alert.type]:<8}{C.RESET}"
    badge = f"{color}{alert.badge}{C.RESET}" if alert.badge else ""

    # marker(6) + kind(8) + spacing + badge
    room = width - 4 - 6 - 8 - 6 - len(alert.badge)
    text = alert.title
    if alert.description:
        text = f"{text} {C.DIM}·{C.RESET} {alert.description}"
    visible = _strip_ansi(text)
    if len(visible) > room:
        text = _truncate(visible, room)
        visible = text
    gap = " " * max(1, room - len(visible))

    return _box_row(f" {marker} {kind} {text}{gap} {badge}", width)


def render_alerts(
    presented: list[PresentedAlert],
    width: int = DASHBOARD_WIDTH,
) -> str:
    if not presented:
        return _box_row(f"  {C.GREEN}All clear, nothing needs attention{C.RESET}", width)
    return "\n".join(render_alert_row(entry, width) for entry in presented)


def render_dashboard(
    feed: AlertFeed,
    now: datetime,
    alert_type: AlertType | None = None,
    width: int = DASHBOARD_WIDTH,
) -> str:
    """Render the complete alert dashboard as a string."""
    if alert_type is None:
        presented = feed.presented
    else:
        presented = [present_alert(a) for a in filter_alerts(feed.alerts, alert_type)]

    sections = [
        render_header(now, width),
        "",
        _box_top(width),
        render_tabs(feed.counts, alert_type, width),
        _box_mid(width),
        render_alerts(presented, width),
        _box_bot(width),
        "",
    ]
    return "\n".join(sections)


# ── CLI ───────────────────────────────────────────────────────────


def load_snapshot(path: str) -> AlertSnapshot:
    """Load an AlertSnapshot from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return AlertSnapshot.model_validate(data)


def _parse_now(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    cleaned = value[:-1] + "+00:00" if value.endswith("Z") else value
    parsed = datetime.fromisoformat(cleaned)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render the urgency-ranked alert feed for a records snapshot.",
    )
    parser.add_argument(
        "snapshot",
        help="Path to snapshot JSON file",
    )
    parser.add_argument(
        "--now",
        default=None,
        help="Reference time, ISO-8601 (default: current UTC time)",
    )
    parser.add_argument(
        "--type",
        dest="alert_type",
        choices=[t.value for t in AlertType],
        default=None,
        help="Only show one alert type",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Strip ANSI colors from the output",
    )
    return parser.parse_args(argv)


def run_dashboard(args: argparse.Namespace) -> str:
    settings = load_settings(args.config)
    setup_logging()

    snapshot = load_snapshot(args.snapshot)
    now = _parse_now(args.now)
    alert_type = AlertType(args.alert_type) if args.alert_type else None

    feed = build_alert_feed(
        snapshot.expiring,
        snapshot.stock,
        snapshot.disputes,
        now,
        config=settings.alerts,
    )
    output = render_dashboard(feed, now, alert_type, width=settings.dashboard.width)
    if args.no_color or not settings.dashboard.color:
        output = _strip_ansi(output)
    return output


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    sys.stdout.write(run_dashboard(args) + "\n")


if __name__ == "__main__":
    main()
