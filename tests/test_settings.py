"""WeatherSettings loading from an explicit environment mapping."""
from weather_api.settings import (
    NWS_API_BASE,
    OPENWEATHER_API_BASE,
    USER_AGENT,
    WeatherSettings,
)


def test_defaults_from_empty_env():
    settings = WeatherSettings.from_env({})
    assert settings.openweather_api_key is None
    assert not settings.has_openweather_key
    assert settings.nws_api_base == NWS_API_BASE
    assert settings.openweather_api_base == OPENWEATHER_API_BASE
    assert settings.user_agent == USER_AGENT
    assert settings.request_timeout is None
    assert settings.log_level == "INFO"


def test_blank_api_key_counts_as_missing():
    assert WeatherSettings.from_env({"OPENWEATHER_API_KEY": "   "}).openweather_api_key is None


def test_overrides():
    settings = WeatherSettings.from_env(
        {
            "OPENWEATHER_API_KEY": "abc123",
            "NWS_API_BASE": "http://localhost:8080/",
            "WEATHER_USER_AGENT": "my-app/2.0",
            "WEATHER_HTTP_TIMEOUT": "7.5",
            "LOG_LEVEL": "debug",
        }
    )
    assert settings.openweather_api_key == "abc123"
    assert settings.has_openweather_key
    assert settings.nws_api_base == "http://localhost:8080"
    assert settings.user_agent == "my-app/2.0"
    assert settings.request_timeout == 7.5
    assert settings.log_level == "DEBUG"
