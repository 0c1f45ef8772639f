"""
Travel Info Aggregator
======================

Resolves a city, fans out to the live sources concurrently, applies each
source's fallback, merges everything with the reference data and persists
the derived records.

Key Features:
- Canonical city resolution with atomic creation
- Concurrent weather, news and encyclopedia fetches with per-source timeouts
- Uniform fallback policy for every live source
- Best-effort persistence (storage failures never fail a response)

Classes:
    TravelInfoAggregator: Orchestrates one request end to end

Author: India Travel Info Team
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Any, Callable, Dict, List, Optional

from config import config
from ..data_pipeline.data_models import Article, City, CityInfo, Transportation, WeatherSnapshot
from ..data_pipeline.encyclopedia_loader import EncyclopediaDataLoader
from ..data_pipeline.name_resolver import normalize, state_for
from ..data_pipeline.news_loader import NewsDataLoader
from ..data_pipeline.reference_data import ReferenceDataProvider
from ..data_pipeline.source_result import FetchError, FetchResult, SourceOutcome, with_fallback
from ..data_pipeline.weather_loader import WeatherDataLoader
from ..storage.repository import InMemoryTravelRepository, TravelRepository
from ..utils.error_handler import (
    CityNotFoundError, ErrorCategory, ErrorContext, ErrorHandler, ErrorSeverity, get_error_handler
)


SEARCH_MESSAGE = "Comprehensive travel information for {city} loaded successfully"
SEARCH_ANY_MESSAGE = "Information for {city} loaded from Wikipedia and real-time sources"
SEARCH_ANY_NOT_FOUND_MESSAGE = (
    "Could not find information for {city}. Please check the spelling or try a different city name."
)


class TravelInfoAggregator:
    """
    Request orchestrator for the travel info API

    Sources, repository and reference data are injectable; defaults are
    the live HTTP loaders and a seeded in-memory repository.
    """

    def __init__(self, repository: Optional[TravelRepository] = None,
                 weather_source=None, news_source=None, encyclopedia_source=None,
                 reference_data: Optional[ReferenceDataProvider] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 persist_weather_fallback: Optional[bool] = None,
                 timeout: Optional[float] = None):
        """
        Initialize aggregator

        Args:
            repository (TravelRepository): City and derived-record storage
            weather_source: Object with fetch(city) and fallback(city)
            news_source: Object with fetch(city) and fallback(city)
            encyclopedia_source: Object with fetch(title) and fallback(city)
            reference_data (ReferenceDataProvider): Static per-city lookups
            error_handler (ErrorHandler): Error reporter (default: shared handler)
            persist_weather_fallback (bool): Store seasonal estimates over the last
                live snapshot (default from config)
            timeout (float): Per-source wait in seconds, before grace (default from config)
        """
        self.logger = logging.getLogger(__name__)

        self.repository = repository or InMemoryTravelRepository()
        self.reference_data = reference_data or ReferenceDataProvider()
        self.error_handler = error_handler or get_error_handler()

        self.weather_source = weather_source or WeatherDataLoader(error_handler=self.error_handler)
        self.news_source = news_source or NewsDataLoader(error_handler=self.error_handler)
        self.encyclopedia_source = encyclopedia_source or EncyclopediaDataLoader(
            error_handler=self.error_handler, reference_data=self.reference_data
        )

        if persist_weather_fallback is None:
            persist_weather_fallback = config.PERSIST_WEATHER_FALLBACK
        self.persist_weather_fallback = persist_weather_fallback

        self.timeout = timeout or config.SOURCE_TIMEOUT_SECONDS
        self.grace = config.SOURCE_TIMEOUT_GRACE_SECONDS

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    def resolve_city(self, raw_name: str) -> City:
        """
        Resolve free-text input to the stored City, creating it on first sight

        Raises:
            ValueError: If the name is empty
        """
        name = normalize(raw_name)
        return self.repository.get_or_create_city(name, state_for(name))

    def search_city(self, raw_name: str) -> Dict[str, Any]:
        """
        Build the full travel envelope for a city

        Args:
            raw_name (str): City name as typed by the user

        Returns:
            Dict: {city, weather, cityInfo (with news), hotels, restaurants, message}
        """
        city = self.resolve_city(raw_name)
        self.logger.info(f"Searching travel information for {city.name} (id={city.id})")

        results = self._fetch_concurrently({
            "weather": lambda: self.weather_source.fetch(city.name),
            "news": lambda: self.news_source.fetch(city.name),
            "encyclopedia": lambda: self.encyclopedia_source.fetch(city.name),
        })

        encyclopedia = with_fallback(
            results["encyclopedia"], lambda: self.encyclopedia_source.fallback(city.name)
        )
        city = self._update_coordinates(city, encyclopedia)

        weather = self._settle_weather(city, results["weather"])
        city_info = self._settle_city_info(city, encyclopedia.value.extract)
        news = self._settle_news(city.name, results["news"])

        return {
            "city": city.to_dict(),
            "weather": weather.to_dict(),
            "cityInfo": dict(city_info.to_dict(), news=[article.to_dict() for article in news]),
            "hotels": [hotel.to_dict() for hotel in self.reference_data.hotels(city.name)],
            "restaurants": [restaurant.to_dict() for restaurant in self.reference_data.restaurants(city.name)],
            "message": SEARCH_MESSAGE.format(city=city.name),
        }

    def get_weather(self, city_id: int) -> WeatherSnapshot:
        """
        Re-fetch and store the weather for a known city

        Raises:
            CityNotFoundError: If no city has this id
        """
        city = self._require_city(city_id)
        results = self._fetch_concurrently({
            "weather": lambda: self.weather_source.fetch(city.name),
        })
        return self._settle_weather(city, results["weather"])

    def get_city_info(self, city_id: int) -> CityInfo:
        """
        Rebuild and store the cultural profile for a known city

        Raises:
            CityNotFoundError: If no city has this id
        """
        city = self._require_city(city_id)
        results = self._fetch_concurrently({
            "encyclopedia": lambda: self.encyclopedia_source.fetch(city.name),
        })
        encyclopedia = with_fallback(
            results["encyclopedia"], lambda: self.encyclopedia_source.fallback(city.name)
        )
        self._update_coordinates(city, encyclopedia)
        return self._settle_city_info(city, encyclopedia.value.extract)

    def get_transportation(self, raw_name: str) -> Transportation:
        """Transportation options for a city name (normalized first)"""
        return self.reference_data.transportation(normalize(raw_name))

    def search_any_city(self, raw_name: str) -> Optional[Dict[str, Any]]:
        """
        Encyclopedia-led lookup for any Indian city, without touching storage

        Returns:
            Dict: Envelope like search_city, or None when the encyclopedia has
            no summary for the city
        """
        name = normalize(raw_name)
        self.logger.info(f"Searching any city: {name}")

        results = self._fetch_concurrently({
            "encyclopedia": lambda: self.encyclopedia_source.fetch(f"{name} India"),
            "weather": lambda: self.weather_source.fetch(name),
            "news": lambda: self.news_source.fetch(name),
        })

        summary_result = results["encyclopedia"]
        if not summary_result.ok:
            self.logger.info(f"No encyclopedia summary for {name}: {summary_result.error}")
            return None

        summary = summary_result.value
        weather = with_fallback(results["weather"], lambda: self.weather_source.fallback(name)).value
        news = self._settle_news(name, results["news"])
        city_info = self.reference_data.build_city_info(name, summary.extract)

        city = {
            "name": name,
            "state": state_for(name),
            "country": "India",
            "latitude": summary.latitude if summary.has_coordinates else 0,
            "longitude": summary.longitude if summary.has_coordinates else 0,
        }

        return {
            "city": city,
            "weather": weather.to_dict(),
            "cityInfo": dict(
                city_info.to_dict(),
                description=summary.extract,
                news=[article.to_dict() for article in news]
            ),
            "hotels": [hotel.to_dict() for hotel in self.reference_data.hotels(name)],
            "restaurants": [restaurant.to_dict() for restaurant in self.reference_data.restaurants(name)],
            "message": SEARCH_ANY_MESSAGE.format(city=name),
        }

    # -------------------------------------------------------------------------
    # Fan-out
    # -------------------------------------------------------------------------

    def _fetch_concurrently(self, tasks: Dict[str, Callable[[], FetchResult]]) -> Dict[str, FetchResult]:
        """
        Run source fetches in parallel and collect one FetchResult per source

        Each call gets its own pool with a worker per task, so every fetch
        starts immediately and fetches left running by other requests never
        delay it. All futures share one deadline (timeout plus grace); a fetch
        still running at the deadline is abandoned and reported as a timeout.
        """
        executor = ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix="source-fetch")
        try:
            futures = {source: executor.submit(task) for source, task in tasks.items()}
            deadline = time.monotonic() + self.timeout + self.grace

            results = {}
            for source, future in futures.items():
                remaining = max(0.0, deadline - time.monotonic())
                try:
                    results[source] = future.result(timeout=remaining)
                except FutureTimeoutError as e:
                    results[source] = self._source_failure(
                        source, f"{source} did not respond within {self.timeout + self.grace:.1f}s",
                        e, ErrorCategory.API_TIMEOUT
                    )
                except Exception as e:
                    results[source] = self._source_failure(source, f"{source} fetch raised {e!r}", e)

            return results
        finally:
            # Abandoned fetches finish on their own threads
            executor.shutdown(wait=False)

    def _source_failure(self, source: str, message: str, exception: Exception,
                        category: ErrorCategory = None) -> FetchResult:
        report = self.error_handler.handle_api_error(
            api_name=source,
            endpoint="",
            exception=exception,
            category=category
        )
        return FetchResult.failure(FetchError(source=source, message=message, category=report.category))

    # -------------------------------------------------------------------------
    # Settling results
    # -------------------------------------------------------------------------

    def _settle_weather(self, city: City, result: FetchResult) -> WeatherSnapshot:
        """
        Apply the weather fallback and the fallback persistence policy

        Live snapshots are always stored. A seasonal estimate is stored only
        when persist_weather_fallback is on; otherwise the last stored
        snapshot is returned if there is one.
        """
        outcome = with_fallback(result, lambda: self.weather_source.fallback(city.name))

        if outcome.from_fallback and not self.persist_weather_fallback:
            previous = self._persist(
                f"read weather for {city.name}", lambda: self.repository.get_weather(city.id)
            )
            if previous is not None:
                self.logger.info(f"Keeping last stored weather for {city.name}")
                return previous
            return outcome.value

        stored = self._persist(
            f"store weather for {city.name}", lambda: self.repository.upsert_weather(city.id, outcome.value)
        )
        return stored or outcome.value

    def _settle_city_info(self, city: City, historical_info: str) -> CityInfo:
        info = self.reference_data.build_city_info(city.name, historical_info)
        stored = self._persist(
            f"store city info for {city.name}", lambda: self.repository.upsert_city_info(city.id, info)
        )
        return stored or info

    def _settle_news(self, city_name: str, result: FetchResult) -> List[Article]:
        return with_fallback(result, lambda: self.news_source.fallback(city_name)).value

    def _update_coordinates(self, city: City, encyclopedia: SourceOutcome) -> City:
        """Fill in coordinates reported by the encyclopedia when still unknown"""
        summary = encyclopedia.value
        if encyclopedia.from_fallback or city.has_coordinates or not summary.has_coordinates:
            return city

        updated = self._persist(
            f"update coordinates for {city.name}",
            lambda: self.repository.update_city_coordinates(city.id, summary.latitude, summary.longitude)
        )
        if updated is None:
            return city

        self.logger.info(f"Coordinates for {city.name} set to {summary.latitude}, {summary.longitude}")
        return updated

    def _persist(self, operation: str, action: Callable[[], Any]) -> Any:
        """Run a storage call, reporting and absorbing any failure"""
        try:
            return action()
        except Exception as e:
            self.error_handler.handle_error(
                message=f"Failed to {operation}",
                exception=e,
                category=ErrorCategory.REPOSITORY_ERROR,
                severity=ErrorSeverity.MEDIUM,
                context=ErrorContext(module="services", function=operation)
            )
            return None

    def _require_city(self, city_id: int) -> City:
        city = self.repository.get_city(city_id)
        if city is None:
            raise CityNotFoundError("City not found", {"city_id": city_id})
        return city
