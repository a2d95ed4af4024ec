"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from slurm_metrics.infrastructure.config.settings import Settings


def test_defaults(monkeypatch, tmp_path):
    """Test default settings."""
    monkeypatch.chdir(tmp_path)
    settings = Settings()

    assert settings.prometheus_base_url == "http://prometheus.flatironinstitute.org"
    assert settings.request_timeout_seconds == 30.0
    assert settings.fetch_deadline_seconds is None
    assert settings.log_format == "json"


def test_from_environment(monkeypatch, tmp_path):
    """Test settings read from environment variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROMETHEUS_BASE_URL", "http://localhost:9090")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("FETCH_DEADLINE_SECONDS", "12.5")

    settings = Settings()

    assert settings.prometheus_base_url == "http://localhost:9090"
    assert settings.request_timeout_seconds == 5.0
    assert settings.fetch_deadline_seconds == 12.5


def test_rejects_non_positive_timeout(monkeypatch, tmp_path):
    """Test timeout validation."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValidationError):
        Settings()
