import pytest

from sample_statistics.core.models import options


@pytest.fixture(autouse=True)
def restore_settings(monkeypatch):
    """Run every test against default process-wide settings."""
    monkeypatch.delenv(options.THRESHOLD_ENV_VAR, raising=False)
    monkeypatch.delenv(options.PRECISION_ENV_VAR, raising=False)
    options.reset_settings()
    yield
    monkeypatch.delenv(options.THRESHOLD_ENV_VAR, raising=False)
    monkeypatch.delenv(options.PRECISION_ENV_VAR, raising=False)
    options.reset_settings()
