"""
Tests for the wttr.in weather loader and its seasonal fallback
"""

from datetime import date

import pytest
import requests

from conftest import FakeResponse, FakeSession, make_weather_payload
from src.data_pipeline.weather_loader import (
    MONSOON_DESCRIPTION, POST_MONSOON_DESCRIPTION, SUMMER_DESCRIPTION,
    WeatherAnalyzer, WeatherDataLoader
)
from src.utils.error_handler import ErrorCategory, ErrorHandler


def loader_for(response=None, error=None, **kwargs):
    session = FakeSession({"wttr.in": response} if response else {}, error=error)
    return WeatherDataLoader(session=session, error_handler=ErrorHandler(), **kwargs), session


class TestLiveWeather:

    def test_current_conditions_parsed(self):
        loader, _ = loader_for(FakeResponse(200, make_weather_payload()))
        result = loader.fetch("Mumbai")

        assert result.ok
        snapshot = result.value
        assert snapshot.temperature == 31
        assert snapshot.description == "Haze"
        assert snapshot.humidity == 62
        assert snapshot.wind_speed == 13
        assert snapshot.uv_index == "7"

    def test_request_shape(self):
        loader, session = loader_for(FakeResponse(200, make_weather_payload()), timeout=2.5)
        loader.fetch("New Delhi")

        call = session.calls[0]
        assert call["url"] == "https://wttr.in/New%20Delhi"
        assert call["params"] == {"format": "j1"}
        assert call["timeout"] == 2.5

    def test_forecast_labels_follow_dates(self):
        # 2025-01-08 is a Wednesday
        loader, _ = loader_for(FakeResponse(200, make_weather_payload(start=date(2025, 1, 8))))
        forecast = loader.fetch("Mumbai").value.forecast

        assert [day.day for day in forecast] == ["Wed", "Thu", "Fri", "Sat", "Sun", "Mon", "Tue"]

    def test_forecast_temperature_is_rounded_mean(self):
        loader, _ = loader_for(FakeResponse(200, make_weather_payload()))
        forecast = loader.fetch("Mumbai").value.forecast
        # (33 + 24) / 2 = 28.5
        assert all(day.temp == 29 for day in forecast)

    def test_forecast_icon_uses_noon_reading(self):
        loader, _ = loader_for(FakeResponse(200, make_weather_payload(weather_code="500")))
        forecast = loader.fetch("Mumbai").value.forecast
        assert {day.icon for day in forecast} == {"cloud-rain"}

    def test_forecast_capped_at_seven_days(self):
        loader, _ = loader_for(FakeResponse(200, make_weather_payload(days=10)))
        assert len(loader.fetch("Mumbai").value.forecast) == 7

    def test_forecast_labels_are_distinct(self):
        payload = make_weather_payload(days=3)
        payload["weather"].append(dict(payload["weather"][0]))
        loader, _ = loader_for(FakeResponse(200, payload))

        labels = [day.day for day in loader.fetch("Mumbai").value.forecast]
        assert labels == ["Mon", "Tue", "Wed"]

    def test_short_hourly_list_uses_first_reading(self):
        payload = make_weather_payload(days=1)
        payload["weather"][0]["hourly"] = [{"weatherCode": "650"}]
        loader, _ = loader_for(FakeResponse(200, payload))

        assert loader.fetch("Mumbai").value.forecast[0].icon == "cloud-snow"

    def test_half_degree_rounds_up(self):
        loader, _ = loader_for(FakeResponse(200, make_weather_payload(temp_c="27.5")))
        assert loader.fetch("Mumbai").value.temperature == 28

    def test_missing_uv_index_defaults_to_moderate(self):
        payload = make_weather_payload()
        del payload["current_condition"][0]["uvIndex"]
        loader, _ = loader_for(FakeResponse(200, payload))
        assert loader.fetch("Mumbai").value.uv_index == "Moderate"


class TestWeatherFailures:

    def test_http_error_status(self):
        loader, _ = loader_for(FakeResponse(503, {"message": "busy"}))
        result = loader.fetch("Mumbai")

        assert not result.ok
        assert result.error.category == ErrorCategory.API_HTTP_ERROR
        assert result.error.status_code == 503

    def test_rate_limited(self):
        loader, _ = loader_for(FakeResponse(429, {"message": "slow down"}))
        assert loader.fetch("Mumbai").error.category == ErrorCategory.API_RATE_LIMIT

    def test_connection_error(self):
        loader, _ = loader_for(error=requests.exceptions.ConnectionError("down"))
        assert loader.fetch("Mumbai").error.category == ErrorCategory.API_CONNECTION

    def test_timeout(self):
        loader, _ = loader_for(error=requests.exceptions.ReadTimeout("slow"))
        assert loader.fetch("Mumbai").error.category == ErrorCategory.API_TIMEOUT

    def test_invalid_json(self):
        loader, _ = loader_for(FakeResponse(200, None, text="<html>oops</html>"))
        assert loader.fetch("Mumbai").error.category == ErrorCategory.MALFORMED_PAYLOAD

    def test_missing_current_condition(self):
        loader, _ = loader_for(FakeResponse(200, {"weather": []}))
        assert loader.fetch("Mumbai").error.category == ErrorCategory.MALFORMED_PAYLOAD

    def test_failure_is_reported(self):
        handler = ErrorHandler()
        loader = WeatherDataLoader(
            session=FakeSession(error=requests.exceptions.ConnectionError("down")),
            error_handler=handler
        )
        loader.fetch("Mumbai")
        assert handler.get_error_statistics()["errors_by_category"] == {"api_connection": 1}

    def test_http_failure_counted_per_source(self):
        handler = ErrorHandler()
        loader = WeatherDataLoader(
            session=FakeSession({"wttr.in": FakeResponse(503, {})}),
            error_handler=handler
        )
        loader.fetch("Mumbai")

        stats = handler.get_error_statistics()
        assert stats["errors_by_category"] == {"api_http_error": 1}
        assert list(stats["errors_by_source"].values()) == [1]
        assert stats["recent"][0]["category"] == "api_http_error"


class TestSeasonalFallback:

    def test_delhi_june_is_monsoon(self):
        loader, _ = loader_for()
        snapshot = loader.fallback("Delhi", month=6)
        assert snapshot.description == MONSOON_DESCRIPTION
        assert snapshot.temperature == 38

    def test_delhi_december_is_post_monsoon(self):
        loader, _ = loader_for()
        snapshot = loader.fallback("Delhi", month=12)
        assert snapshot.description == POST_MONSOON_DESCRIPTION
        assert snapshot.temperature == 17

    @pytest.mark.parametrize("month,description", [
        (1, POST_MONSOON_DESCRIPTION),
        (2, POST_MONSOON_DESCRIPTION),
        (3, SUMMER_DESCRIPTION),
        (5, SUMMER_DESCRIPTION),
        (9, MONSOON_DESCRIPTION),
        (10, POST_MONSOON_DESCRIPTION),
    ])
    def test_season_by_month(self, month, description):
        assert WeatherAnalyzer.seasonal_description(month) == description

    def test_unknown_city_uses_default_temperature(self):
        loader, _ = loader_for()
        assert loader.fallback("Nellore", month=4).temperature == 26

    def test_fixed_fields_and_placeholder_forecast(self):
        loader, _ = loader_for()
        snapshot = loader.fallback("Mumbai", month=1)

        assert (snapshot.humidity, snapshot.wind_speed, snapshot.uv_index) == (75, 8, "High")
        assert [day.day for day in snapshot.forecast] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def test_month_defaults_to_clock(self):
        loader, _ = loader_for(today=lambda: date(2025, 7, 15))
        assert loader.fallback("Bangalore").description == MONSOON_DESCRIPTION


class TestIconForCode:

    @pytest.mark.parametrize("code,icon", [
        (200, "cloud-rain"),
        ("599", "cloud-rain"),
        (600, "cloud-snow"),
        (699, "cloud-snow"),
        (701, "cloud"),
        (800, "sun"),
        (801, "cloud-sun"),
        (113, "sun"),
        (None, "sun"),
        ("n/a", "sun"),
    ])
    def test_bucket(self, code, icon):
        assert WeatherAnalyzer.icon_for_code(code) == icon

    @pytest.mark.parametrize("code,icon", [
        ("116", "sun"),
        ("119", "sun"),
        ("122", "sun"),
        ("143", "sun"),
        ("176", "sun"),
        ("200", "cloud-rain"),
        ("248", "cloud-rain"),
        ("338", "cloud-rain"),
        ("389", "cloud-rain"),
    ])
    def test_wttr_codes(self, code, icon):
        assert WeatherAnalyzer.icon_for_code(code) == icon
