"""
Tests for the curated reference data and its generic fallbacks
"""

import pytest

from src.data_pipeline import reference_tables as tables
from src.data_pipeline.reference_data import ReferenceDataProvider


UNKNOWN_CITY = "Atlantis"


@pytest.fixture
def provider():
    return ReferenceDataProvider()


class TestCuratedCities:

    def test_mumbai_hotels_are_curated(self, provider):
        hotels = provider.hotels("Mumbai")
        assert [hotel.name for hotel in hotels] == [
            "The Taj Mahal Palace", "ITC Grand Central", "Hotel Sea Green"
        ]
        assert hotels[0].image == tables.HOTEL_IMAGES[0]

    def test_restaurant_images_cycle(self, provider):
        restaurants = provider.restaurants("Kochi")
        assert len(restaurants) == 4
        assert restaurants[3].image == restaurants[0].image

    def test_delhi_transportation(self, provider):
        transport = provider.transportation("Delhi").to_dict()
        assert transport["trainStations"][0]["code"] == "NDLS"
        assert transport["airports"][0]["code"] == "DEL"
        assert set(transport["localTransport"]) == {"metro", "local", "bus", "auto"}

    def test_curated_history(self, provider):
        assert provider.historical_info("Pune").startswith("Pune, once the seat of the Maratha Empire")

    def test_all_safety_ratings_within_scale(self, provider):
        for city in list(tables.SAFETY_RATINGS) + [UNKNOWN_CITY]:
            assert 0 <= provider.safety_rating(city) <= 5


class TestLocalLanguages:

    def test_regional_language_appended(self, provider):
        assert provider.local_languages("Mumbai") == ["Hindi", "English", "Marathi"]

    def test_hindi_not_repeated_for_delhi(self, provider):
        assert provider.local_languages("Delhi") == ["Hindi", "English"]

    def test_unknown_city_defaults_to_hindi(self, provider):
        assert provider.local_languages(UNKNOWN_CITY) == ["Hindi", "English"]


class TestGenericFallbacks:
    """Unknown cities get non-empty, deterministic generic data"""

    def test_hotels_mention_city(self, provider):
        hotels = provider.hotels(UNKNOWN_CITY)
        assert len(hotels) == 3
        assert hotels[0].name == "Heritage Hotel Atlantis"
        assert hotels[1].name == "Budget Stay Atlantis"

    def test_restaurants_mention_city(self, provider):
        names = [restaurant.name for restaurant in provider.restaurants(UNKNOWN_CITY)]
        assert names == [
            "Local Delights Atlantis", "Street Food Corner", "Heritage Restaurant", "Modern Cafe Atlantis"
        ]

    def test_transportation_outline(self, provider):
        transport = provider.transportation(UNKNOWN_CITY).to_dict()
        assert transport["trainStations"] == [
            {"name": "Atlantis Railway Station", "code": "---", "distance": "City Center"}
        ]
        assert transport["airports"] == []

    def test_historical_sentence(self, provider):
        assert provider.historical_info(UNKNOWN_CITY) == (
            "Atlantis is a significant city in India with rich cultural heritage and historical importance."
        )

    def test_list_fallbacks_are_not_empty(self, provider):
        assert provider.cultural_tips(UNKNOWN_CITY)
        assert provider.tourist_attractions(UNKNOWN_CITY)
        assert provider.local_cuisine(UNKNOWN_CITY)
        assert provider.festivals(UNKNOWN_CITY)
        assert provider.best_time_to_visit(UNKNOWN_CITY)
        assert provider.crime_rate(UNKNOWN_CITY)
        assert provider.political_info(UNKNOWN_CITY)

    def test_same_unknown_name_yields_identical_content(self, provider):
        first = provider.build_city_info(UNKNOWN_CITY, "history").to_dict()
        second = provider.build_city_info(UNKNOWN_CITY, "history").to_dict()
        assert first == second
        assert [h.to_dict() for h in provider.hotels(UNKNOWN_CITY)] == \
            [h.to_dict() for h in provider.hotels(UNKNOWN_CITY)]


class TestFreshCopies:
    """Mutating a returned value never leaks into later lookups"""

    def test_list_results_are_copies(self, provider):
        tips = provider.cultural_tips("Mumbai")
        tips.append("mutated")
        assert "mutated" not in provider.cultural_tips("Mumbai")

    def test_transportation_entries_are_copies(self, provider):
        transport = provider.transportation("Mumbai")
        transport.train_stations[0]["name"] = "mutated"
        transport.local_transport["metro"] = "mutated"

        fresh = provider.transportation("Mumbai")
        assert fresh.train_stations[0]["name"] == "Chhatrapati Shivaji Terminus"
        assert fresh.local_transport["metro"] != "mutated"

    def test_hotel_records_are_new_objects(self, provider):
        provider.hotels("Delhi")[0].name = "mutated"
        assert provider.hotels("Delhi")[0].name == "The Imperial Hotel"


class TestCityInfo:

    def test_profile_fields(self, provider):
        info = provider.build_city_info("Bangalore", "Garden city").to_dict()
        assert info["historicalInfo"] == "Garden city"
        assert info["localLanguages"] == ["Hindi", "English", "Kannada"]
        assert info["safetyRating"] == 4.4
        assert info["touristSafety"] == "Generally Safe with Precautions"
        assert info["emergencyContacts"] == {
            "police": "100", "medical": "108", "fire": "101",
            "touristHelpline": "1363", "womenHelpline": "1091",
        }
        assert info["id"] is None and info["cityId"] is None
