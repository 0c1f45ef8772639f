"""
India Travel Info API
=====================

Travel information aggregation for Indian cities: weather, cultural and
safety profiles, hotels, restaurants, transportation and news, combined
from live sources and curated reference data.

Author: India Travel Info Team
Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "India Travel Info Team"


def get_info():
    """Return basic information about the application"""
    return {
        "name": "India Travel Info API",
        "version": __version__,
        "author": __author__,
        "description": "City travel information aggregated from live and curated sources"
    }
