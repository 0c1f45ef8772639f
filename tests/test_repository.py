"""
Tests for the in-memory travel repository
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.data_pipeline.data_models import ForecastDay, WeatherSnapshot
from src.data_pipeline.reference_data import ReferenceDataProvider
from src.storage.repository import InMemoryTravelRepository
from src.utils.error_handler import CityNotFoundError


def snapshot(temperature=30):
    return WeatherSnapshot(
        temperature=temperature, description="Clear", humidity=50, wind_speed=10, uv_index="5",
        forecast=[ForecastDay(day="Mon", icon="sun", temp=temperature)]
    )


class TestSeeding:

    def test_seeded_cities_in_order(self, repository):
        cities = repository.list_cities()
        assert [city.name for city in cities] == [
            "Mumbai", "Delhi", "Bangalore", "Chennai", "Kolkata", "Hyderabad", "Pune", "Ahmedabad"
        ]
        assert [city.id for city in cities] == list(range(1, 9))

    def test_seeded_coordinates(self, repository):
        mumbai = repository.get_city(1)
        assert (mumbai.latitude, mumbai.longitude) == (19.0760, 72.8777)
        assert mumbai.has_coordinates

    def test_unseeded_repository_is_empty(self):
        assert InMemoryTravelRepository(seed=False).list_cities() == []


class TestCities:

    def test_lookup_is_case_insensitive(self, repository):
        assert repository.get_city_by_name("mUMBAI").id == 1
        assert repository.get_city_by_name(" Mumbai ").id == 1

    def test_get_or_create_returns_existing(self, repository):
        city = repository.get_or_create_city("DELHI", "Somewhere")
        assert city.id == 2
        assert city.state == "Delhi"

    def test_new_city_gets_next_id(self, repository):
        city = repository.get_or_create_city("Nellore", "Andhra Pradesh")
        assert city.id == 9
        assert not city.has_coordinates
        assert repository.get_or_create_city("Nellore", "Andhra Pradesh").id == 9

    def test_missing_city(self, repository):
        assert repository.get_city(999) is None
        assert repository.get_city_by_name("Atlantis") is None

    def test_update_coordinates(self, repository):
        city = repository.get_or_create_city("Nellore", "Andhra Pradesh")
        updated = repository.update_city_coordinates(city.id, 14.44, 79.99)

        assert (updated.latitude, updated.longitude) == (14.44, 79.99)
        assert repository.get_city(city.id) == updated

    def test_update_coordinates_unknown_city(self, repository):
        with pytest.raises(CityNotFoundError):
            repository.update_city_coordinates(999, 1.0, 1.0)

    def test_concurrent_first_resolution_creates_one_city(self):
        repository = InMemoryTravelRepository(seed=False)
        barrier = threading.Barrier(16)

        def create(_):
            barrier.wait()
            return repository.get_or_create_city("Nellore", "Andhra Pradesh").id

        with ThreadPoolExecutor(max_workers=16) as executor:
            ids = set(executor.map(create, range(16)))

        assert ids == {1}
        assert len(repository.list_cities()) == 1


class TestUpserts:

    def test_weather_upsert_replaces(self, repository):
        first = repository.upsert_weather(1, snapshot(30))
        second = repository.upsert_weather(1, snapshot(25))

        assert repository.weather_count() == 1
        assert second.id == first.id
        assert second.city_id == 1
        assert repository.get_weather(1).temperature == 25

    def test_weather_ids_per_city(self, repository):
        mumbai = repository.upsert_weather(1, snapshot())
        delhi = repository.upsert_weather(2, snapshot())
        assert mumbai.id != delhi.id
        assert repository.weather_count() == 2

    def test_stored_snapshot_is_isolated(self, repository):
        original = snapshot(30)
        repository.upsert_weather(1, original)
        original.forecast.append(ForecastDay(day="Tue", icon="sun", temp=1))
        repository.get_weather(1).forecast.clear()

        assert len(repository.get_weather(1).forecast) == 1
        assert original.id is None

    def test_upsert_for_unknown_city(self, repository):
        with pytest.raises(CityNotFoundError):
            repository.upsert_weather(999, snapshot())

    def test_city_info_upsert_replaces(self, repository):
        provider = ReferenceDataProvider()
        repository.upsert_city_info(3, provider.build_city_info("Bangalore", "first"))
        stored = repository.upsert_city_info(3, provider.build_city_info("Bangalore", "second"))

        assert repository.city_info_count() == 1
        assert stored.city_id == 3
        assert repository.get_city_info(3).historical_info == "second"

    def test_concurrent_upserts_leave_one_row(self, repository):
        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(lambda t: repository.upsert_weather(1, snapshot(t)), range(40)))

        assert repository.weather_count() == 1
