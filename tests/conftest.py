import pytest

from bucketize.config import settings


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    # Keep tests independent of any BUCKETIZE_* variables in the environment
    monkeypatch.setattr(settings, "STRICT", False)
    monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
    yield
