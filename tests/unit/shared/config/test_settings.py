import pytest

from deepround.shared.config import get_settings


def _reset_settings_cache():
    get_settings.cache_clear()


def test_settings_defaults_and_log_level_normalization(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DEEPROUND_LOG_LEVEL", "debug")
    monkeypatch.delenv("DEEPROUND_PRECISION_TAG_KEY")
    monkeypatch.delenv("DEEPROUND_ROUNDING_MAX_DEPTH")

    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "DEBUG"
    assert s.JSON_LOGS is False
    assert s.PRECISION_TAG_KEY == "precision"
    assert s.ROUNDING_MAX_DEPTH == 256


def test_settings_are_cached():
    _reset_settings_cache()

    assert get_settings() is get_settings()


def test_settings_reject_unknown_log_level(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DEEPROUND_LOG_LEVEL", "LOUD")

    # When & Then
    with pytest.raises(Exception):
        get_settings()


@pytest.mark.parametrize("depth", ["0", "401", "deep"])
def test_settings_reject_out_of_range_depth(monkeypatch, depth):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DEEPROUND_ROUNDING_MAX_DEPTH", depth)

    # When & Then
    with pytest.raises(Exception):
        get_settings()


@pytest.mark.parametrize("key", ["", "two words"])
def test_settings_reject_bad_tag_key(monkeypatch, key):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DEEPROUND_PRECISION_TAG_KEY", key)

    # When & Then
    with pytest.raises(Exception):
        get_settings()


def test_settings_ignore_unprefixed_host_variables(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    monkeypatch.setenv("ROUNDING_MAX_DEPTH", "0")

    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "DEBUG"
    assert s.ROUNDING_MAX_DEPTH == 256
