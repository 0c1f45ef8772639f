"""
Data Models for Travel Info API
===============================

Centralized data models to avoid circular imports.
Contains City, WeatherSnapshot, CityInfo and the presentation records
returned alongside them.

Author: India Travel Info Team
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, List


@dataclass(frozen=True)
class City:
    """
    Canonical city entity, keyed case-insensitively by name

    Attributes:
        id (int): Repository-assigned identifier
        name (str): Canonical city name
        state (str): State or union territory ("India" when unknown)
        country (str): Country name
        latitude (float): Latitude, 0 when not yet known
        longitude (float): Longitude, 0 when not yet known
    """
    id: int
    name: str
    state: str
    country: str = "India"
    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def has_coordinates(self) -> bool:
        return not (self.latitude == 0 and self.longitude == 0)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class ForecastDay:
    """One forecast entry: weekday label, icon category and mean temperature"""
    day: str
    icon: str
    temp: int

    def to_dict(self) -> Dict:
        return {"day": self.day, "icon": self.icon, "temp": self.temp}


@dataclass
class WeatherSnapshot:
    """
    Current conditions plus a short forecast for one city

    Attributes:
        temperature (int): Current temperature in Celsius
        description (str): Human-readable condition text
        humidity (int): Relative humidity percentage
        wind_speed (int): Wind speed in km/h
        uv_index (str): UV index as reported by the provider
        forecast (List[ForecastDay]): Up to seven daily entries
        id (int): Repository id, None until persisted
        city_id (int): Owning city id, None until persisted
    """
    temperature: int
    description: str
    humidity: int
    wind_speed: int
    uv_index: str
    forecast: List[ForecastDay] = field(default_factory=list)
    id: Optional[int] = None
    city_id: Optional[int] = None

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "cityId": self.city_id,
            "temperature": self.temperature,
            "description": self.description,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "uvIndex": self.uv_index,
            "forecast": [day.to_dict() for day in self.forecast],
        }


@dataclass
class EmergencyContacts:
    """Nationwide emergency numbers"""
    police: str = "100"
    medical: str = "108"
    fire: str = "101"
    tourist_helpline: str = "1363"
    women_helpline: str = "1091"

    def to_dict(self) -> Dict:
        return {
            "police": self.police,
            "medical": self.medical,
            "fire": self.fire,
            "touristHelpline": self.tourist_helpline,
            "womenHelpline": self.women_helpline,
        }


@dataclass
class CityInfo:
    """
    Cultural, safety and historical profile of a city

    Attributes:
        historical_info (str): Encyclopedia extract or static blurb
        best_time_to_visit (str): Recommended travel window
        local_languages (List[str]): Languages commonly spoken
        cultural_tips (List[str]): Etiquette tips for visitors
        safety_rating (float): Safety score on a 0-5 scale
        crime_rate (str): Crime level description
        tourist_safety (str): Overall tourist safety note
        tourist_attractions (List[str]): Notable attractions
        local_cuisine (List[str]): Signature dishes
        emergency_contacts (EmergencyContacts): Emergency phone numbers
        political_info (str): Administrative/political context
        festivals (List[str]): Major festivals
        id (int): Repository id, None until persisted
        city_id (int): Owning city id, None until persisted
    """
    historical_info: str
    best_time_to_visit: str
    local_languages: List[str]
    cultural_tips: List[str]
    safety_rating: float
    crime_rate: str
    tourist_safety: str
    tourist_attractions: List[str]
    local_cuisine: List[str]
    emergency_contacts: EmergencyContacts
    political_info: Optional[str]
    festivals: List[str]
    id: Optional[int] = None
    city_id: Optional[int] = None

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "cityId": self.city_id,
            "historicalInfo": self.historical_info,
            "bestTimeToVisit": self.best_time_to_visit,
            "localLanguages": list(self.local_languages),
            "culturalTips": list(self.cultural_tips),
            "safetyRating": self.safety_rating,
            "crimeRate": self.crime_rate,
            "touristSafety": self.tourist_safety,
            "touristAttractions": list(self.tourist_attractions),
            "localCuisine": list(self.local_cuisine),
            "emergencyContacts": self.emergency_contacts.to_dict(),
            "politicalInfo": self.political_info,
            "festivals": list(self.festivals),
        }


@dataclass
class Article:
    """News article about a city"""
    title: str
    description: str
    url: str
    published_at: str
    source: str

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "publishedAt": self.published_at,
            "source": self.source,
        }


@dataclass
class EncyclopediaSummary:
    """Page summary from the encyclopedia service"""
    title: str
    extract: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass
class Hotel:
    """Hotel listing shown with a city"""
    name: str
    rating: float
    location: str
    price: str
    image: str

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class Restaurant:
    """Restaurant listing shown with a city"""
    name: str
    rating: float
    cuisine: str
    location: str
    price_range: str
    image: str

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "rating": self.rating,
            "cuisine": self.cuisine,
            "location": self.location,
            "priceRange": self.price_range,
            "image": self.image,
        }


@dataclass
class Transportation:
    """Rail, bus, local and air connections for a city"""
    train_stations: List[Dict[str, str]]
    bus_routes: List[Dict[str, str]]
    local_transport: Dict[str, str]
    airports: List[Dict[str, str]]

    def to_dict(self) -> Dict:
        return {
            "trainStations": [dict(station) for station in self.train_stations],
            "busRoutes": [dict(route) for route in self.bus_routes],
            "localTransport": dict(self.local_transport),
            "airports": [dict(airport) for airport in self.airports],
        }


# Export classes for easy import
__all__ = [
    'City', 'ForecastDay', 'WeatherSnapshot', 'EmergencyContacts', 'CityInfo',
    'Article', 'EncyclopediaSummary', 'Hotel', 'Restaurant', 'Transportation'
]
