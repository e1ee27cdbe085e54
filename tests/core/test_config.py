"""Tests for settings and logging setup."""

import logging

import pytest

from netutil import configure_logging, get_settings


def test_default_settings(monkeypatch):
    """Test defaults when no NETUTIL_ variables are set."""
    for name in ("NETUTIL_LOG_LEVEL", "NETUTIL_LOG_FILE", "NETUTIL_WAIT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.wait_timeout == 30.0


def test_settings_from_env(monkeypatch, tmp_path):
    """Test NETUTIL_ variables override defaults and levels are upper-cased."""
    monkeypatch.setenv("NETUTIL_LOG_LEVEL", " debug ")
    monkeypatch.setenv("NETUTIL_LOG_FILE", str(tmp_path / "netutil.log"))
    monkeypatch.setenv("NETUTIL_WAIT_TIMEOUT", "2.5")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_file == str(tmp_path / "netutil.log")
    assert settings.wait_timeout == 2.5


def test_settings_are_cached():
    """Test get_settings returns the same instance until the cache is cleared."""
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "name, value",
    [("NETUTIL_LOG_LEVEL", "LOUD"), ("NETUTIL_WAIT_TIMEOUT", "-1"), ("NETUTIL_WAIT_TIMEOUT", "soon")],
    ids=["unknown_level", "negative_timeout", "non_numeric_timeout"],
)
def test_invalid_settings(monkeypatch, name, value):
    """Test invalid environment values surface as RuntimeError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError, match="Invalid netutil settings"):
        get_settings()


def test_configure_logging_writes_file(tmp_path):
    """Test configure_logging installs console and file handlers once."""
    log_file = tmp_path / "netutil.log"

    configure_logging(log_file=str(log_file), log_level="DEBUG")
    configure_logging(log_level="ERROR")

    logger = logging.getLogger("netutil")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert logger.propagate is False

    logging.getLogger("netutil.reachability").debug("probe failed")
    for handler in logger.handlers:
        handler.flush()
    assert "netutil.reachability - DEBUG - probe failed" in log_file.read_text()


def test_configure_logging_force(tmp_path):
    """Test force=True reconfigures without duplicating handlers."""
    configure_logging(log_level="INFO")
    configure_logging(log_level="WARNING", force=True)

    logger = logging.getLogger("netutil")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_configure_logging_bad_file(tmp_path, capsys):
    """Test an unwritable log file only prints a warning."""
    configure_logging(log_file=str(tmp_path / "missing" / "netutil.log"), force=True)

    assert "Could not create log file" in capsys.readouterr().err
    assert len(logging.getLogger("netutil").handlers) == 1
