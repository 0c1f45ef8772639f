"""
Travel Repository
=================

Storage interface for cities and their derived records, plus the in-memory
implementation used by the API process.

Key Features:
- Exactly one City per canonical name (case-insensitive)
- Atomic get-or-create for cities
- Upsert by city id for weather snapshots and city profiles
- Thread-safe operations for concurrent request handlers

Classes:
    TravelRepository: Abstract storage interface
    InMemoryTravelRepository: Dictionary-backed, lock-protected implementation

Author: India Travel Info Team
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, List, Optional

from ..data_pipeline.data_models import City, CityInfo, WeatherSnapshot
from ..data_pipeline.reference_tables import SEED_CITIES
from ..utils.error_handler import CityNotFoundError


class TravelRepository(ABC):
    """Abstract storage for cities, weather snapshots and city profiles"""

    @abstractmethod
    def get_city(self, city_id: int) -> Optional[City]:
        pass

    @abstractmethod
    def get_city_by_name(self, name: str) -> Optional[City]:
        """Case-insensitive exact lookup by canonical name"""
        pass

    @abstractmethod
    def get_or_create_city(self, name: str, state: str, country: str = "India",
                           latitude: float = 0.0, longitude: float = 0.0) -> City:
        """Return the city with this name, creating it atomically if absent"""
        pass

    @abstractmethod
    def update_city_coordinates(self, city_id: int, latitude: float, longitude: float) -> City:
        pass

    @abstractmethod
    def list_cities(self) -> List[City]:
        pass

    @abstractmethod
    def get_weather(self, city_id: int) -> Optional[WeatherSnapshot]:
        pass

    @abstractmethod
    def upsert_weather(self, city_id: int, snapshot: WeatherSnapshot) -> WeatherSnapshot:
        """Replace the city's snapshot, or insert it when none exists"""
        pass

    @abstractmethod
    def get_city_info(self, city_id: int) -> Optional[CityInfo]:
        pass

    @abstractmethod
    def upsert_city_info(self, city_id: int, info: CityInfo) -> CityInfo:
        """Replace the city's profile, or insert it when none exists"""
        pass


class InMemoryTravelRepository(TravelRepository):
    """
    Dictionary-backed repository guarded by a single re-entrant lock

    Stored records are copied on the way in and out, so callers never
    share mutable state with the store.
    """

    def __init__(self, seed: bool = True):
        """
        Initialize repository

        Args:
            seed (bool): Pre-register the major cities with their coordinates
        """
        self.logger = logging.getLogger(__name__)

        # Thread safety
        self._lock = threading.RLock()

        self._cities: Dict[int, City] = {}
        self._city_ids_by_name: Dict[str, int] = {}
        self._weather: Dict[int, WeatherSnapshot] = {}
        self._city_info: Dict[int, CityInfo] = {}

        self._next_city_id = 1
        self._next_weather_id = 1
        self._next_city_info_id = 1

        if seed:
            for name, state, latitude, longitude in SEED_CITIES:
                self.get_or_create_city(name, state, latitude=latitude, longitude=longitude)
            self.logger.info(f"Repository seeded with {len(self._cities)} cities")

    @staticmethod
    def _name_key(name: str) -> str:
        return name.strip().lower()

    # -------------------------------------------------------------------------
    # Cities
    # -------------------------------------------------------------------------

    def get_city(self, city_id: int) -> Optional[City]:
        with self._lock:
            return self._cities.get(city_id)

    def get_city_by_name(self, name: str) -> Optional[City]:
        with self._lock:
            city_id = self._city_ids_by_name.get(self._name_key(name))
            return self._cities.get(city_id) if city_id is not None else None

    def get_or_create_city(self, name: str, state: str, country: str = "India",
                           latitude: float = 0.0, longitude: float = 0.0) -> City:
        with self._lock:
            existing = self.get_city_by_name(name)
            if existing is not None:
                return existing

            city = City(
                id=self._next_city_id,
                name=name,
                state=state,
                country=country,
                latitude=latitude,
                longitude=longitude
            )
            self._next_city_id += 1
            self._cities[city.id] = city
            self._city_ids_by_name[self._name_key(name)] = city.id

        self.logger.info(f"Created city {city.name} (id={city.id}, state={city.state})")
        return city

    def update_city_coordinates(self, city_id: int, latitude: float, longitude: float) -> City:
        with self._lock:
            city = self._cities.get(city_id)
            if city is None:
                raise CityNotFoundError("City not found", {"city_id": city_id})

            updated = replace(city, latitude=latitude, longitude=longitude)
            self._cities[city_id] = updated
            return updated

    def list_cities(self) -> List[City]:
        with self._lock:
            return [self._cities[city_id] for city_id in sorted(self._cities)]

    # -------------------------------------------------------------------------
    # Derived records
    # -------------------------------------------------------------------------

    def get_weather(self, city_id: int) -> Optional[WeatherSnapshot]:
        with self._lock:
            snapshot = self._weather.get(city_id)
            return copy.deepcopy(snapshot) if snapshot is not None else None

    def upsert_weather(self, city_id: int, snapshot: WeatherSnapshot) -> WeatherSnapshot:
        with self._lock:
            if city_id not in self._cities:
                raise CityNotFoundError("City not found", {"city_id": city_id})

            existing = self._weather.get(city_id)
            if existing is not None:
                record_id = existing.id
            else:
                record_id = self._next_weather_id
                self._next_weather_id += 1

            stored = replace(copy.deepcopy(snapshot), id=record_id, city_id=city_id)
            self._weather[city_id] = stored
            return copy.deepcopy(stored)

    def get_city_info(self, city_id: int) -> Optional[CityInfo]:
        with self._lock:
            info = self._city_info.get(city_id)
            return copy.deepcopy(info) if info is not None else None

    def upsert_city_info(self, city_id: int, info: CityInfo) -> CityInfo:
        with self._lock:
            if city_id not in self._cities:
                raise CityNotFoundError("City not found", {"city_id": city_id})

            existing = self._city_info.get(city_id)
            if existing is not None:
                record_id = existing.id
            else:
                record_id = self._next_city_info_id
                self._next_city_info_id += 1

            stored = replace(copy.deepcopy(info), id=record_id, city_id=city_id)
            self._city_info[city_id] = stored
            return copy.deepcopy(stored)

    def weather_count(self) -> int:
        """Number of stored weather snapshots"""
        with self._lock:
            return len(self._weather)

    def city_info_count(self) -> int:
        """Number of stored city profiles"""
        with self._lock:
            return len(self._city_info)
