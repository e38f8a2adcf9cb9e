"""Tests for environment-driven settings, strict mode, and logging."""
import logging

import pytest

from bucketize import Bucketizer, configure_logging
from bucketize.config import Settings, settings


@pytest.fixture
def _restore_logger_level():
    pkg_logger = logging.getLogger("bucketize")
    level = pkg_logger.level
    yield
    pkg_logger.setLevel(level)


def test_defaults(monkeypatch):
    monkeypatch.delenv("BUCKETIZE_STRICT", raising=False)
    monkeypatch.delenv("BUCKETIZE_LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.STRICT is False
    assert s.LOG_LEVEL == "WARNING"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("BUCKETIZE_STRICT", "true")
    monkeypatch.setenv("BUCKETIZE_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.STRICT is True
    assert s.LOG_LEVEL == "debug"


def test_strict_setting_applies_to_new_bucketizers(monkeypatch):
    monkeypatch.setattr(settings, "STRICT", True)
    with pytest.raises(ValueError):
        Bucketizer().bucket(1.0, 0.0, 0.5)
    # Explicit argument overrides the setting
    assert len(Bucketizer(strict=False).bucket(1.0, 0.0, 0.5)) == 1


def test_unreachable_bucket_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="bucketize")
    Bucketizer().bucket(1.0, 0.0, 0.5)
    assert any("can never match" in r.getMessage() for r in caplog.records)


def test_bucketize_does_not_log(caplog):
    b = Bucketizer().bucket(0.0, 1.0, 0.5)
    caplog.set_level(logging.DEBUG, logger="bucketize")
    caplog.clear()
    b.bucketize(0.5)
    b.bucketize(5.0)
    assert caplog.records == []


def test_configure_logging_from_settings(monkeypatch, _restore_logger_level):
    monkeypatch.setattr(settings, "LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger("bucketize").level == logging.DEBUG


def test_configure_logging_explicit_level(_restore_logger_level):
    configure_logging(logging.ERROR)
    assert logging.getLogger("bucketize").level == logging.ERROR
    configure_logging("info")
    assert logging.getLogger("bucketize").level == logging.INFO
