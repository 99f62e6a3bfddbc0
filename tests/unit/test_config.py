"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from staffroll.core.config import AppSettings, ReportConfig, StorageConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.storage.backend == "file"
    assert settings.storage.data_file == "employees.dat"


def test_report_config_defaults():
    config = ReportConfig()
    assert config.currency_symbol == "₹"
    assert config.width == 60


def test_storage_env_override(monkeypatch):
    monkeypatch.setenv("STAFFROLL_STORAGE_BACKEND", "s3")
    monkeypatch.setenv("STAFFROLL_STORAGE_DATA_FILE", "/tmp/staff.dat")
    config = StorageConfig()
    assert config.backend == "s3"
    assert config.data_file == "/tmp/staff.dat"
