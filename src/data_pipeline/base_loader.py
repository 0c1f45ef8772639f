"""
Base HTTP Loader
================

Shared request handling for the live data sources: one GET per call,
bounded by the configured per-source timeout, with every failure mode
reported to the ErrorHandler and returned as a FetchResult.

Author: India Travel Info Team
"""

import logging
from typing import Any, Dict, Optional

import requests

from config import config
from .source_result import FetchError, FetchResult
from ..utils.error_handler import ErrorCategory, ErrorHandler, get_error_handler


class BaseHTTPLoader:
    """Common plumbing for weather, news and encyclopedia loaders"""

    source_name = "http"

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None,
                 error_handler: Optional[ErrorHandler] = None):
        """
        Args:
            session (requests.Session): HTTP session, a new one when omitted
            timeout (float): Per-request timeout in seconds (default from config)
            error_handler (ErrorHandler): Error reporter (default: shared handler)
        """
        self.logger = logging.getLogger(self.__class__.__module__)
        self.session = session or requests.Session()
        self.timeout = timeout or config.SOURCE_TIMEOUT_SECONDS
        self.error_handler = error_handler or get_error_handler()
        self.headers = {"User-Agent": config.HTTP_USER_AGENT, "Accept": "application/json"}

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> FetchResult:
        """Issue one GET and decode the JSON body"""
        try:
            response = self.session.get(
                url,
                params=params,
                headers=self.headers,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            return self._failure(url, exception=e)

        if response.status_code != 200:
            return self._failure(
                url,
                message=f"{self.source_name} returned HTTP {response.status_code}",
                status_code=response.status_code,
                response_text=response.text
            )

        try:
            return FetchResult.success(response.json())
        except ValueError as e:
            return self._failure(url, exception=e, category=ErrorCategory.MALFORMED_PAYLOAD)

    def _failure(self, endpoint: str, message: str = None, exception: Exception = None,
                 status_code: int = None, response_text: str = None,
                 category: ErrorCategory = None) -> FetchResult:
        """Report a failed fetch and wrap it as a FetchResult"""
        report = self.error_handler.handle_api_error(
            api_name=self.source_name,
            endpoint=endpoint,
            status_code=status_code,
            response_text=response_text,
            exception=exception,
            category=category
        )
        error = FetchError(
            source=self.source_name,
            message=message or report.technical_details,
            category=report.category,
            status_code=status_code
        )
        return FetchResult.failure(error)
