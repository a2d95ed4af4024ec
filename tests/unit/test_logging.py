"""Unit tests for logging configuration."""

import structlog

from slurm_metrics.infrastructure.observability.logging import configure_logging


def test_configure_logging_json(capsys):
    """Test JSON events are written to stderr."""
    configure_logging("INFO", "json")
    try:
        structlog.get_logger().info("query_result", name="cpus_free")
        structlog.get_logger().debug("hidden_event")
    finally:
        structlog.reset_defaults()

    err = capsys.readouterr().err
    assert '"event": "query_result"' in err
    assert '"name": "cpus_free"' in err
    assert "hidden_event" not in err


def test_configure_logging_unknown_level_defaults_to_info(capsys):
    """Test an unknown level name falls back to INFO."""
    configure_logging("LOUD", "console")
    try:
        structlog.get_logger().info("visible_event")
    finally:
        structlog.reset_defaults()

    assert "visible_event" in capsys.readouterr().err
