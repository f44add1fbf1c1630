"""Tests for utility functions."""

from datetime import UTC, datetime

import pytest

from rgl_api.utils.timestamps import parse_timestamp


def test_settings_validation():
    """Test settings validation."""
    from rgl_api.utils.config import Settings

    # Valid settings
    settings = Settings(log_level="info", log_format="json")
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"

    # Invalid log level
    with pytest.raises(ValueError):
        Settings(log_level="INVALID")

    # Invalid log format
    with pytest.raises(ValueError):
        Settings(log_format="invalid")

    # Rate limit must admit at least one request
    with pytest.raises(ValueError):
        Settings(rate_limit=0)


def test_settings_defaults():
    from rgl_api.utils.config import Settings

    settings = Settings()
    assert settings.api_base_url == "https://api.rgl.gg/v0/"
    assert settings.rate_limit == 2
    assert settings.rate_period == 1.0
    assert settings.rate_burst == 2


def test_settings_base_url_slash():
    from rgl_api.utils.config import Settings

    assert Settings(api_base_url="http://localhost/v0").api_base_url == "http://localhost/v0/"


def test_settings_from_environment(monkeypatch):
    from rgl_api.utils.config import Settings

    monkeypatch.setenv("RGL_RATE_LIMIT", "5")
    monkeypatch.setenv("RGL_REQUEST_TIMEOUT", "2.5")

    settings = Settings()
    assert settings.rate_limit == 5
    assert settings.request_timeout == 2.5


def test_settings_caching():
    """Test that settings are cached."""
    from rgl_api.utils.config import get_settings

    # Clear cache first
    get_settings.cache_clear()

    settings1 = get_settings()
    settings2 = get_settings()

    # Should return the same instance
    assert settings1 is settings2


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2023-02-12T21:48:27.196Z", datetime(2023, 2, 12, 21, 48, 27, 196000, tzinfo=UTC)),
        ("9999-08-24T06:20:00.000Z", datetime(9999, 8, 24, 6, 20, tzinfo=UTC)),
        ("2020-01-15T03:30:00", datetime(2020, 1, 15, 3, 30, tzinfo=UTC)),
        ("", None),
        (None, None),
    ],
)
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


def test_parse_timestamp_rejects_garbage():
    with pytest.raises(ValueError):
        parse_timestamp("next tuesday")
