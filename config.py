"""
Configuration Management for India Travel Info API
==================================================

This module handles:
- Loading environment variables from .env file
- Validating upstream endpoints, timeouts and limits
- Providing centralized configuration access
- Setting up logging handlers

Usage:
    from config import config
    timeout = config.SOURCE_TIMEOUT_SECONDS
    persist = config.PERSIST_WEATHER_FALLBACK
"""

import os
import logging
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Config(BaseSettings):
    """
    Centralized configuration class using Pydantic for validation
    Loads settings from environment variables with type checking
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =============================================================================
    # APPLICATION SETTINGS
    # =============================================================================

    APP_NAME: str = "India Travel Info API"
    APP_VERSION: str = "1.0.0"
    DEBUG_MODE: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: Optional[str] = None
    ERROR_LOG_PATH: Optional[str] = None

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is one the logging module knows"""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()

    # =============================================================================
    # UPSTREAM DATA SOURCES
    # =============================================================================

    WEATHER_API_URL: str = "https://wttr.in"
    NEWS_API_URL: str = "https://api.rss2json.com/v1/api.json"
    NEWS_FEED_URL: str = "https://news.google.com/rss/search"
    ENCYCLOPEDIA_API_URL: str = "https://en.wikipedia.org/api/rest_v1/page/summary"
    HTTP_USER_AGENT: str = "India-Travel-Info/1.0"

    # =============================================================================
    # API TIMEOUTS AND LIMITS
    # =============================================================================

    SOURCE_TIMEOUT_SECONDS: float = 5.0
    SOURCE_TIMEOUT_GRACE_SECONDS: float = 1.0
    NEWS_MAX_ARTICLES: int = 5
    FORECAST_DAYS: int = 7

    @field_validator('SOURCE_TIMEOUT_SECONDS')
    @classmethod
    def validate_timeout(cls, v):
        """Per-source timeout must be positive"""
        if v <= 0:
            raise ValueError(f"Source timeout must be positive, got {v}")
        return v

    @field_validator('NEWS_MAX_ARTICLES')
    @classmethod
    def validate_news_limit(cls, v):
        if not 1 <= v <= 5:
            raise ValueError(f"News article limit must be between 1 and 5, got {v}")
        return v

    @field_validator('FORECAST_DAYS')
    @classmethod
    def validate_forecast_days(cls, v):
        if not 1 <= v <= 7:
            raise ValueError(f"Forecast days must be between 1 and 7, got {v}")
        return v

    # =============================================================================
    # PERSISTENCE POLICY
    # =============================================================================

    # When False a failed weather fetch leaves the stored snapshot untouched
    PERSIST_WEATHER_FALLBACK: bool = False

    # =============================================================================
    # SERVER SETTINGS
    # =============================================================================

    FASTAPI_SERVER_HOST: str = "0.0.0.0"
    FASTAPI_SERVER_PORT: int = 8000

    # =============================================================================
    # CONFIGURATION SETUP
    # =============================================================================

    def create_directories(self) -> None:
        """Create log directories if file logging is enabled"""
        for path in (self.LOG_FILE_PATH, self.ERROR_LOG_PATH):
            if path and os.path.dirname(path):
                Path(os.path.dirname(path)).mkdir(parents=True, exist_ok=True)

    def setup_logging(self) -> None:
        """Configure application logging"""
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        handlers = [logging.StreamHandler()]  # Console output
        if self.LOG_FILE_PATH:
            handlers.append(logging.FileHandler(self.LOG_FILE_PATH))

        logging.basicConfig(
            level=getattr(logging, self.LOG_LEVEL),
            format=log_format,
            handlers=handlers
        )

        # Create error-specific logger
        if self.ERROR_LOG_PATH:
            error_handler = logging.FileHandler(self.ERROR_LOG_PATH)
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(logging.Formatter(log_format))
            logging.getLogger().addHandler(error_handler)

    def validate_configuration(self) -> bool:
        """
        Validate cross-field settings
        Returns True if configuration is valid, raises exception otherwise
        """
        try:
            for url in (self.WEATHER_API_URL, self.NEWS_API_URL,
                        self.NEWS_FEED_URL, self.ENCYCLOPEDIA_API_URL):
                if not url.startswith(("http://", "https://")):
                    raise ValueError(f"Upstream URL must be http(s), got {url}")

            if self.SOURCE_TIMEOUT_GRACE_SECONDS < 0:
                raise ValueError("Timeout grace period cannot be negative")

            return True

        except Exception as e:
            logging.error(f"Configuration validation failed: {e}")
            raise


def load_configuration() -> Config:
    """
    Load and validate configuration from environment
    Creates directories and sets up logging
    """
    try:
        # Load environment variables from .env file
        load_dotenv()

        config = Config()
        config.create_directories()
        config.setup_logging()
        config.validate_configuration()

        logging.info(f"Configuration loaded successfully for {config.APP_NAME} v{config.APP_VERSION}")
        return config

    except Exception as e:
        print(f"Failed to load configuration: {e}")
        raise


# =============================================================================
# GLOBAL CONFIGURATION INSTANCE
# =============================================================================

config = load_configuration()
