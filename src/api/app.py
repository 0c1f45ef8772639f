"""
India Travel Info API Server

FastAPI application factory. Every error response body is {"message": ...}.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import config
from .routes import router
from ..services.aggregator import TravelInfoAggregator
from ..utils.error_handler import CityNotFoundError, TravelInfoError

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    """First validation problem as plain text"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    message = str(errors[0].get("msg", "Invalid request"))
    # pydantic prefixes messages raised from field validators
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    if errors[0].get("type") == "missing":
        message = "City name is required"
    return message


def create_app(aggregator: Optional[TravelInfoAggregator] = None) -> FastAPI:
    """
    Build the API application

    Args:
        aggregator (TravelInfoAggregator): Request orchestrator, a default one
            (live sources, seeded in-memory storage) when omitted
    """
    app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION, debug=config.DEBUG_MODE)
    app.state.aggregator = aggregator or TravelInfoAggregator()

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.info(f"rejected {request.method} {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(CityNotFoundError)
    async def city_not_found_handler(request: Request, exc: CityNotFoundError):
        return JSONResponse(status_code=404, content={"message": str(exc)})

    @app.exception_handler(TravelInfoError)
    async def travel_info_error_handler(request: Request, exc: TravelInfoError):
        logger.error(f"unhandled travel info error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    app.include_router(router)

    logger.info(f"{config.APP_NAME} v{config.APP_VERSION} ready")
    return app
