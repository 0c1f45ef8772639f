"""
Data Pipeline Module
===================

Handles data collection for the travel info API: live loaders, the curated
reference data and the city name resolver.

Author: India Travel Info Team
"""

# Version info
__version__ = "1.0.0"
__module_name__ = "data_pipeline"

# Import main data loading classes
from .weather_loader import WeatherDataLoader
from .news_loader import NewsDataLoader
from .encyclopedia_loader import EncyclopediaDataLoader
from .reference_data import ReferenceDataProvider
from .name_resolver import normalize, state_for
from .source_result import FetchError, FetchResult, with_fallback

# Import data models
from .data_models import (
    City, WeatherSnapshot, ForecastDay, CityInfo, Article,
    EncyclopediaSummary, Hotel, Restaurant, Transportation
)

# Define public API
__all__ = [
    # Main classes
    "WeatherDataLoader",
    "NewsDataLoader",
    "EncyclopediaDataLoader",
    "ReferenceDataProvider",
    "FetchError",
    "FetchResult",
    "with_fallback",
    "normalize",
    "state_for",

    # Data models
    "City",
    "WeatherSnapshot",
    "ForecastDay",
    "CityInfo",
    "Article",
    "EncyclopediaSummary",
    "Hotel",
    "Restaurant",
    "Transportation",
]


def get_supported_data_sources():
    """Return list of supported data sources"""
    return {
        "weather": "wttr.in current conditions and forecast",
        "news": "Google News RSS via rss2json",
        "encyclopedia": "Wikipedia REST page summaries",
        "reference": "Curated per-city travel tables"
    }
