import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("DEEPROUND_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DEEPROUND_JSON_LOGS", "false")
    monkeypatch.setenv("DEEPROUND_PRECISION_TAG_KEY", "precision")
    monkeypatch.setenv("DEEPROUND_ROUNDING_MAX_DEPTH", "256")

    from deepround.app.rounding import get_walker
    from deepround.shared.config import get_settings

    get_settings.cache_clear()
    get_walker.cache_clear()
