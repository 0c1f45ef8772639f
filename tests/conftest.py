"""
Shared fixtures for the travel info test suite

No test touches the network: live loaders receive a FakeSession that
serves canned payloads keyed by URL fragment.
"""

import json
import threading
from datetime import date, timedelta

import pytest
import requests
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.data_pipeline.encyclopedia_loader import EncyclopediaDataLoader
from src.data_pipeline.news_loader import NewsDataLoader
from src.data_pipeline.reference_data import ReferenceDataProvider
from src.data_pipeline.source_result import FetchError, FetchResult
from src.data_pipeline.weather_loader import WeatherDataLoader
from src.services.aggregator import TravelInfoAggregator
from src.storage.repository import InMemoryTravelRepository
from src.utils.error_handler import ErrorHandler, get_error_handler
from src.utils.performance_monitor import reset_performance_stats


# =============================================================================
# HTTP FAKES
# =============================================================================

class FakeResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records GET calls and answers from a URL-fragment table"""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []
        self._lock = threading.Lock()

    def get(self, url, params=None, headers=None, timeout=None):
        with self._lock:
            self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        for fragment, response in self.responses.items():
            if fragment in url:
                return response
        return FakeResponse(404, {"message": "not found"})


# =============================================================================
# CANNED PAYLOADS
# =============================================================================

def make_weather_payload(start=date(2025, 1, 6), days=7, temp_c="31", weather_code="800"):
    """wttr.in j1 payload; 2025-01-06 is a Monday"""
    forecast = []
    for offset in range(days):
        hourly = [{"weatherCode": "113"} for _ in range(8)]
        hourly[4] = {"weatherCode": weather_code}
        forecast.append({
            "date": (start + timedelta(days=offset)).isoformat(),
            "maxtempC": "33",
            "mintempC": "24",
            "hourly": hourly,
        })

    return {
        "current_condition": [{
            "temp_C": temp_c,
            "weatherDesc": [{"value": "Haze "}],
            "humidity": "62",
            "windspeedKmph": "13",
            "uvIndex": "7",
        }],
        "weather": forecast,
    }


def make_news_payload(count=7):
    return {
        "status": "ok",
        "items": [
            {
                "title": f"Headline {index}",
                "description": f"<p>Story <b>{index}</b>&nbsp;details</p>",
                "link": f"https://news.example.com/{index}",
                "pubDate": "2025-01-06 10:00:00",
                "author": "The Hindu" if index == 0 else "",
            }
            for index in range(count)
        ],
    }


def make_summary_payload(title="Mumbai", lat=19.076, lon=72.8777):
    payload = {
        "type": "standard",
        "title": title,
        "extract": f"{title} is a city on the west coast of India.",
    }
    if lat is not None:
        payload["coordinates"] = {"lat": lat, "lon": lon}
    return payload


# =============================================================================
# SOURCE FAKES
# =============================================================================

class FakeSource:
    """
    Scriptable source: fetch returns a fixed FetchResult, fallback delegates
    to a real loader so fallback values stay realistic
    """

    def __init__(self, result, fallback_loader, delay_event=None):
        self.result = result
        self.fallback_loader = fallback_loader
        self.delay_event = delay_event
        self.fetch_calls = []

    def fetch(self, name):
        self.fetch_calls.append(name)
        if self.delay_event is not None:
            self.delay_event.wait(timeout=5)
        return self.result

    def fallback(self, name, *args):
        return self.fallback_loader.fallback(name, *args)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def clean_process_stats():
    """Timing table and shared error counts are process-wide; start each test empty"""
    reset_performance_stats()
    get_error_handler().reset_statistics()
    yield


@pytest.fixture
def error_handler():
    return ErrorHandler()


@pytest.fixture
def repository():
    return InMemoryTravelRepository()


@pytest.fixture
def reference_data():
    return ReferenceDataProvider()


@pytest.fixture
def live_session():
    """Session where every upstream answers successfully"""
    return FakeSession({
        "wttr.in": FakeResponse(200, make_weather_payload()),
        "rss2json": FakeResponse(200, make_news_payload()),
        "wikipedia.org": FakeResponse(200, make_summary_payload()),
    })


@pytest.fixture
def offline_session():
    """Session where every upstream is unreachable"""
    return FakeSession(error=requests.exceptions.ConnectionError("network unreachable"))


@pytest.fixture
def make_aggregator(repository, reference_data, error_handler):
    """Factory building an aggregator whose live loaders share one FakeSession"""
    def factory(session, persist_weather_fallback=False, repo=None, **sources):
        aggregator = TravelInfoAggregator(
            repository=repo or repository,
            weather_source=sources.get("weather_source") or WeatherDataLoader(
                session=session, error_handler=error_handler),
            news_source=sources.get("news_source") or NewsDataLoader(
                session=session, error_handler=error_handler),
            encyclopedia_source=sources.get("encyclopedia_source") or EncyclopediaDataLoader(
                session=session, error_handler=error_handler, reference_data=reference_data),
            reference_data=reference_data,
            error_handler=error_handler,
            persist_weather_fallback=persist_weather_fallback,
        )
        return aggregator

    return factory


@pytest.fixture
def client(make_aggregator, live_session):
    with TestClient(create_app(make_aggregator(live_session))) as test_client:
        yield test_client


@pytest.fixture
def offline_client(make_aggregator, offline_session):
    with TestClient(create_app(make_aggregator(offline_session))) as test_client:
        yield test_client


def failed(source, category):
    """FetchResult failure helper for fake sources"""
    return FetchResult.failure(FetchError(source=source, message=f"{source} failed", category=category))
