"""Travel info API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from config import config
from .. import get_info
from .schemas import SearchCityRequest
from ..services.aggregator import SEARCH_ANY_NOT_FOUND_MESSAGE, TravelInfoAggregator
from ..data_pipeline import get_supported_data_sources
from ..utils.error_handler import CityNotFoundError, TravelInfoError
from ..utils.performance_monitor import get_performance_stats, get_resource_usage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_aggregator(request: Request) -> TravelInfoAggregator:
    """Dependency to get the shared aggregator from app state"""
    return request.app.state.aggregator


@router.post("/search-city")
def search_city(search_request: SearchCityRequest,
                aggregator: TravelInfoAggregator = Depends(get_aggregator)):
    """Weather, profile, news, hotels and restaurants for a city"""
    try:
        return aggregator.search_city(search_request.city_name)
    except TravelInfoError:
        raise
    except Exception:
        logger.exception("search city error")
        raise HTTPException(status_code=500, detail="Failed to get travel information")


@router.get("/weather/{city_id}")
def get_weather(city_id: int, aggregator: TravelInfoAggregator = Depends(get_aggregator)):
    """Fresh weather snapshot for a stored city"""
    try:
        return aggregator.get_weather(city_id).to_dict()
    except TravelInfoError:
        raise
    except Exception:
        logger.exception("weather error")
        raise HTTPException(status_code=500, detail="Failed to fetch weather data")


@router.get("/city-info/{city_id}")
def get_city_info(city_id: int, aggregator: TravelInfoAggregator = Depends(get_aggregator)):
    """Rebuilt cultural and safety profile for a stored city"""
    try:
        return aggregator.get_city_info(city_id).to_dict()
    except TravelInfoError:
        raise
    except Exception:
        logger.exception("city info error")
        raise HTTPException(status_code=500, detail="Failed to fetch city information")


@router.get("/transportation/{city_name}")
def get_transportation(city_name: str, aggregator: TravelInfoAggregator = Depends(get_aggregator)):
    """Rail, bus, local and air connections for a city"""
    if not city_name.strip():
        raise HTTPException(status_code=400, detail="City name is required")

    try:
        return aggregator.get_transportation(city_name).to_dict()
    except Exception:
        logger.exception("transportation error")
        raise HTTPException(status_code=500, detail="Failed to get transportation data")


@router.post("/search-any-city")
def search_any_city(search_request: SearchCityRequest,
                    aggregator: TravelInfoAggregator = Depends(get_aggregator)):
    """Encyclopedia-led lookup for cities outside the curated set"""
    try:
        envelope = aggregator.search_any_city(search_request.city_name)
    except Exception:
        logger.exception("search any city error")
        raise HTTPException(status_code=500, detail="Failed to search city information")

    if envelope is None:
        raise CityNotFoundError(SEARCH_ANY_NOT_FOUND_MESSAGE.format(city=search_request.city_name))
    return envelope


@router.get("/health")
def health(aggregator: TravelInfoAggregator = Depends(get_aggregator)):
    """Process health: stored cities, error counts and source timings"""
    return {
        "status": "healthy",
        "version": config.APP_VERSION,
        "app": get_info(),
        "sources": get_supported_data_sources(),
        "cities": len(aggregator.repository.list_cities()),
        "errors": aggregator.error_handler.get_error_statistics(),
        "timings": get_performance_stats(),
        "resources": get_resource_usage(),
    }
