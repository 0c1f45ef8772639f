"""Run the API server: python -m src.api"""

import logging

import uvicorn

from config import config
from .app import create_app

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info(f"Starting {config.APP_NAME} on {config.FASTAPI_SERVER_HOST}:{config.FASTAPI_SERVER_PORT}")
    uvicorn.run(
        create_app(),
        host=config.FASTAPI_SERVER_HOST,
        port=config.FASTAPI_SERVER_PORT,
        log_level=config.LOG_LEVEL.lower(),
    )
