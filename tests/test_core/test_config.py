"""Tests for src/core/config.py — YAML loading, defaults, caching."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from src.core.config import (
    AlertLabels,
    AlertsConfig,
    DashboardConfig,
    LoggingConfig,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def _clean_settings() -> None:
    """Reset the global settings cache before each test."""
    reset_settings()


class TestDefaults:
    """Settings should have sensible defaults when no YAML is provided."""

    def test_default_alerts_config(self) -> None:
        cfg = AlertsConfig()
        assert cfg.expiration_lookahead_days == 7
        assert cfg.labels.low_stock == "Low"

    def test_default_labels(self) -> None:
        labels = AlertLabels()
        assert labels.expired == "Expired"
        assert labels.tomorrow == "Tomorrow"
        assert labels.days == "days"
        assert labels.days_open == "days open"

    def test_default_dashboard_config(self) -> None:
        cfg = DashboardConfig()
        assert cfg.width == 80
        assert cfg.color is True

    def test_default_logging_config(self) -> None:
        cfg = LoggingConfig()
        assert cfg.level == "INFO"
        assert cfg.format == "json"

    def test_default_settings(self) -> None:
        s = Settings()
        assert s.alerts.expiration_lookahead_days == 7
        assert s.dashboard.width == 80
        assert s.logging.level == "INFO"


class TestYamlLoading:
    """Settings should load correctly from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        config_data = {
            "alerts": {
                "expiration_lookahead_days": 3,
                "labels": {"expired": "Perime", "tomorrow": "Demain", "days": "jours"},
            },
            "dashboard": {"width": 100, "color": False},
            "logging": {"level": "DEBUG", "format": "console"},
        }
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump(config_data))

        settings = load_settings(config_file)

        assert settings.alerts.expiration_lookahead_days == 3
        assert settings.alerts.labels.expired == "Perime"
        assert settings.alerts.labels.days == "jours"
        assert settings.dashboard.width == 100
        assert settings.dashboard.color is False
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "console"

    def test_lookahead_can_be_disabled(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("alerts:\n  expiration_lookahead_days: null\n")
        settings = load_settings(config_file)
        assert settings.alerts.expiration_lookahead_days is None

    def test_load_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.alerts.expiration_lookahead_days == 7
        assert settings.dashboard.width == 80

    def test_load_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        settings = load_settings(config_file)
        assert settings.alerts.labels.low_stock == "Low"

    def test_partial_yaml_merges_with_defaults(self, tmp_path: Path) -> None:
        config_data = {"alerts": {"labels": {"low_stock": "Bas"}}}
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump(config_data))

        settings = load_settings(config_file)
        assert settings.alerts.labels.low_stock == "Bas"
        # Other defaults still intact
        assert settings.alerts.labels.expired == "Expired"
        assert settings.alerts.expiration_lookahead_days == 7
        assert settings.logging.format == "json"


class TestCaching:
    def test_get_settings_returns_loaded_instance(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump({"dashboard": {"width": 120}}))
        loaded = load_settings(config_file)
        assert get_settings() is loaded
        assert get_settings().dashboard.width == 120

    def test_reset_clears_cache(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump({"dashboard": {"width": 120}}))
        loaded = load_settings(config_file)
        reset_settings()
        assert get_settings() is not loaded
