"""
Reference Data Provider
=======================

Deterministic per-city lookups over the curated reference tables. Every
lookup is total: cities without curated data get a generic record, templated
with the city name where that reads naturally. Returned values are fresh
copies, so callers are free to mutate them.

Author: India Travel Info Team
"""

import logging
from typing import List

from .data_models import CityInfo, EmergencyContacts, Hotel, Restaurant, Transportation
from . import reference_tables as tables


DEFAULT_LANGUAGE = "Hindi"
DEFAULT_BEST_TIME = "October to February (post-monsoon, pleasant weather)"
DEFAULT_CULTURAL_TIPS = (
    "Remove shoes before entering temples and homes",
    "Dress modestly at religious sites",
    "Respect local customs and traditions",
    "Learn basic greetings in the local language",
)
DEFAULT_SAFETY_RATING = 4.0
DEFAULT_CRIME_RATE = "Moderate (standard safety precautions recommended)"
DEFAULT_ATTRACTIONS = ("Historical monuments", "Local markets", "Religious sites", "Museums")
DEFAULT_CUISINE = ("Local specialties", "Street food", "Regional cuisine")
DEFAULT_POLITICAL_INFO = "Important administrative center with regional significance."
DEFAULT_FESTIVALS = ("Regional festivals", "Diwali", "Holi", "Local celebrations")
TOURIST_SAFETY = "Generally Safe with Precautions"

HISTORICAL_INFO_TEMPLATE = (
    "{city} is a significant city in India with rich cultural heritage and historical importance."
)

DEFAULT_HOTELS = (
    ("Heritage Hotel {city}", 4.0, "City Center", "₹6,500"),
    ("Budget Stay {city}", 3.7, "Railway Station Road", "₹3,200"),
    ("Grand Palace {city}", 4.2, "Main Market", "₹8,500"),
)

DEFAULT_RESTAURANTS = (
    ("Local Delights {city}", 4.0, "Regional Specialties", "City Center", "₹₹"),
    ("Street Food Corner", 3.8, "Local Street Food", "Main Market", "₹"),
    ("Heritage Restaurant", 4.1, "Traditional Indian", "Heritage Area", "₹₹"),
    ("Modern Cafe {city}", 3.9, "Continental & Indian", "Commercial Area", "₹₹"),
)

DEFAULT_TRANSPORTATION = {
    "train_stations": (
        {"name": "{city} Railway Station", "code": "---", "distance": "City Center"},
    ),
    "bus_routes": (
        {"operator": "State Transport", "route": "City and intercity", "frequency": "Regular service"},
    ),
    "local_transport": {
        "metro": "Check local rapid transit options",
        "local": "Regional railway connections available",
        "bus": "State and private bus operators",
        "auto": "Auto rickshaw services available",
    },
    "airports": (),
}


def _format_entries(entries, city_name: str) -> List[dict]:
    return [{key: value.format(city=city_name) for key, value in entry.items()} for entry in entries]


class ReferenceDataProvider:
    """
    Static travel data keyed by canonical city name

    All methods are pure functions of the city name; the same name always
    yields equal content.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def local_language(self, city_name: str) -> str:
        return tables.LOCAL_LANGUAGES.get(city_name, DEFAULT_LANGUAGE)

    def local_languages(self, city_name: str) -> List[str]:
        """Hindi, English and the regional language, without duplicates"""
        languages = []
        for language in ("Hindi", "English", self.local_language(city_name)):
            if language not in languages:
                languages.append(language)
        return languages

    def historical_info(self, city_name: str) -> str:
        return tables.HISTORICAL_INFO.get(city_name) or HISTORICAL_INFO_TEMPLATE.format(city=city_name)

    def best_time_to_visit(self, city_name: str) -> str:
        return tables.BEST_TIME_TO_VISIT.get(city_name, DEFAULT_BEST_TIME)

    def cultural_tips(self, city_name: str) -> List[str]:
        return list(tables.CULTURAL_TIPS.get(city_name, DEFAULT_CULTURAL_TIPS))

    def safety_rating(self, city_name: str) -> float:
        """Safety score on a 0-5 scale"""
        return tables.SAFETY_RATINGS.get(city_name, DEFAULT_SAFETY_RATING)

    def crime_rate(self, city_name: str) -> str:
        return tables.CRIME_RATES.get(city_name, DEFAULT_CRIME_RATE)

    def tourist_attractions(self, city_name: str) -> List[str]:
        return list(tables.TOURIST_ATTRACTIONS.get(city_name, DEFAULT_ATTRACTIONS))

    def local_cuisine(self, city_name: str) -> List[str]:
        return list(tables.LOCAL_CUISINE.get(city_name, DEFAULT_CUISINE))

    def political_info(self, city_name: str) -> str:
        return tables.POLITICAL_INFO.get(city_name, DEFAULT_POLITICAL_INFO)

    def festivals(self, city_name: str) -> List[str]:
        return list(tables.FESTIVALS.get(city_name, DEFAULT_FESTIVALS))

    def hotels(self, city_name: str) -> List[Hotel]:
        """
        Hotel listings for a city

        Unknown cities get three generic listings named after the city.
        """
        rows = tables.HOTELS.get(city_name)
        if rows is None:
            rows = [(name.format(city=city_name), rating, location, price)
                    for name, rating, location, price in DEFAULT_HOTELS]

        return [
            Hotel(name=name, rating=rating, location=location, price=price,
                  image=tables.HOTEL_IMAGES[index % len(tables.HOTEL_IMAGES)])
            for index, (name, rating, location, price) in enumerate(rows)
        ]

    def restaurants(self, city_name: str) -> List[Restaurant]:
        """
        Restaurant listings for a city

        Unknown cities get four generic listings, two of them named after
        the city.
        """
        rows = tables.RESTAURANTS.get(city_name)
        if rows is None:
            rows = [(name.format(city=city_name), rating, cuisine, location, price_range)
                    for name, rating, cuisine, location, price_range in DEFAULT_RESTAURANTS]

        return [
            Restaurant(name=name, rating=rating, cuisine=cuisine, location=location,
                       price_range=price_range,
                       image=tables.RESTAURANT_IMAGES[index % len(tables.RESTAURANT_IMAGES)])
            for index, (name, rating, cuisine, location, price_range) in enumerate(rows)
        ]

    def transportation(self, city_name: str) -> Transportation:
        """Rail, bus, local and air connections; a generic outline when not curated"""
        data = tables.TRANSPORTATION.get(city_name)
        if data is None:
            self.logger.debug(f"No curated transportation for {city_name}, using generic outline")
            return Transportation(
                train_stations=_format_entries(DEFAULT_TRANSPORTATION["train_stations"], city_name),
                bus_routes=_format_entries(DEFAULT_TRANSPORTATION["bus_routes"], city_name),
                local_transport=dict(DEFAULT_TRANSPORTATION["local_transport"]),
                airports=[]
            )

        return Transportation(
            train_stations=[dict(station) for station in data["train_stations"]],
            bus_routes=[dict(route) for route in data["bus_routes"]],
            local_transport=dict(data["local_transport"]),
            airports=[dict(airport) for airport in data["airports"]]
        )

    def build_city_info(self, city_name: str, historical_info: str) -> CityInfo:
        """
        Assemble the cultural and safety profile for a city

        Args:
            city_name (str): Canonical city name
            historical_info (str): Encyclopedia extract or static blurb

        Returns:
            CityInfo: Unpersisted profile (id and city_id unset)
        """
        return CityInfo(
            historical_info=historical_info,
            best_time_to_visit=self.best_time_to_visit(city_name),
            local_languages=self.local_languages(city_name),
            cultural_tips=self.cultural_tips(city_name),
            safety_rating=self.safety_rating(city_name),
            crime_rate=self.crime_rate(city_name),
            tourist_safety=TOURIST_SAFETY,
            tourist_attractions=self.tourist_attractions(city_name),
            local_cuisine=self.local_cuisine(city_name),
            emergency_contacts=EmergencyContacts(),
            political_info=self.political_info(city_name),
            festivals=self.festivals(city_name)
        )
