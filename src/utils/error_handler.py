"""
Error Handler Utility
====================

Failure classification and bookkeeping for the travel info API.

Upstream sources fail routinely (timeouts, HTTP errors, payloads that no
longer parse) and every such failure is recovered by a fallback, so the
handler's job is to classify it, log one line per failure and keep counts
the health endpoint can show. The domain exceptions raised by storage and
the service layer live here too.

Classes:
    ErrorHandler: Classifies, logs and counts failures
    ErrorCategory: What kind of failure it was
    ErrorContext: Where it happened
    ErrorReport: One handled failure
    TravelInfoError: Base class for domain exceptions

Author: India Travel Info Team
"""

import logging
import threading
import traceback
from collections import Counter, deque
from typing import Any, Optional, Dict
from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime

import requests


class ErrorCategory(Enum):
    DATA_VALIDATION = "data_validation"
    DATA_NOT_FOUND = "data_not_found"
    MALFORMED_PAYLOAD = "malformed_payload"

    API_CONNECTION = "api_connection"
    API_TIMEOUT = "api_timeout"
    API_RATE_LIMIT = "api_rate_limit"
    API_HTTP_ERROR = "api_http_error"

    REPOSITORY_ERROR = "repository_error"

    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


_LOG_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}

# Operator hints attached to each report and written to the log
_HINTS = {
    ErrorCategory.API_CONNECTION: "source unreachable; check outbound network access",
    ErrorCategory.API_TIMEOUT: "source too slow; raise SOURCE_TIMEOUT_SECONDS if this persists",
    ErrorCategory.API_RATE_LIMIT: "source is throttling requests",
    ErrorCategory.API_HTTP_ERROR: "source rejected the request; check the endpoint URL",
    ErrorCategory.MALFORMED_PAYLOAD: "source response no longer matches the expected shape",
    ErrorCategory.REPOSITORY_ERROR: "storage backend failed; response served without persisting",
}

RECENT_FAILURES = 20


@dataclass
class ErrorContext:
    """
    Where a failure happened

    Attributes:
        module (str): Package area, e.g. "data_pipeline" or "services"
        function (str): Operation that failed
        system_state (Dict): Extra details such as endpoint and status code
        timestamp (datetime): When the failure was handled
    """
    module: str
    function: str
    system_state: Optional[Dict] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def location(self) -> str:
        return f"{self.module}.{self.function}"


@dataclass
class ErrorReport:
    """One handled failure"""
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    technical_details: str
    context: ErrorContext
    stack_trace: Optional[str] = None
    hint: Optional[str] = None

    def summary(self) -> Dict:
        return {
            "category": self.category.value,
            "message": self.message,
            "where": self.context.location,
            "at": self.context.timestamp.isoformat(timespec="seconds")
        }


# =============================================================================
# DOMAIN EXCEPTIONS
# =============================================================================

class TravelInfoError(Exception):
    """Base exception for all travel info errors"""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.context = context or {}
        super().__init__(message)


class CityNotFoundError(TravelInfoError):
    """Referenced city id or name has no corresponding entity"""


class RepositoryError(TravelInfoError):
    """Storage operation failed"""


class ErrorHandler:
    """
    Classifies, logs and counts failures

    Safe to call from the source fetch pool; counters sit behind a lock.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        self._lock = threading.Lock()
        self._by_category: Counter = Counter()
        self._by_source: Counter = Counter()
        self._recent: deque = deque(maxlen=RECENT_FAILURES)

    def handle_error(self, message: str, exception: Exception = None,
                     category: ErrorCategory = ErrorCategory.UNKNOWN,
                     severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                     context: ErrorContext = None) -> ErrorReport:
        """
        Record and log a failure

        Args:
            message (str): Human-readable summary
            exception (Exception): Underlying exception, if any
            category (ErrorCategory): Failure classification
            severity (ErrorSeverity): Drives the log level
            context (ErrorContext): Where it happened

        Returns:
            ErrorReport: The recorded failure
        """
        report = ErrorReport(
            category=category,
            severity=severity,
            message=message,
            technical_details=str(exception) if exception else message,
            context=context or ErrorContext(module="unknown", function="unknown"),
            stack_trace=self._format_trace(exception),
            hint=_HINTS.get(category)
        )

        with self._lock:
            self._by_category[category.value] += 1
            source = (report.context.system_state or {}).get("api_name")
            if source:
                self._by_source[source] += 1
            self._recent.append(report.summary())

        self._log(report)
        return report

    def handle_api_error(self, api_name: str, endpoint: str, status_code: int = None,
                         response_text: str = None, exception: Exception = None,
                         category: ErrorCategory = None) -> ErrorReport:
        """
        Record a failed upstream call

        The category is taken from the status code or the exception when not
        given. Upstream failures always have a fallback, so severity stays at
        MEDIUM.
        """
        if category is None:
            category = self._category_for(status_code, exception)

        state = {"api_name": api_name, "endpoint": endpoint}
        if status_code:
            state["status_code"] = status_code
        if response_text:
            state["response_text"] = response_text[:200]

        message = f"{api_name} request failed"
        if status_code:
            message = f"{api_name} answered HTTP {status_code}"

        return self.handle_error(
            message=message,
            exception=exception,
            category=category,
            severity=ErrorSeverity.MEDIUM,
            context=ErrorContext(module="data_pipeline", function=f"{api_name}_request", system_state=state)
        )

    def categorize_exception(self, exception: Exception) -> ErrorCategory:
        """Map an exception raised while fetching or storing to a category"""
        checks = (
            ((requests.exceptions.Timeout, TimeoutError), ErrorCategory.API_TIMEOUT),
            (requests.exceptions.HTTPError, ErrorCategory.API_HTTP_ERROR),
            ((requests.exceptions.ConnectionError, ConnectionError), ErrorCategory.API_CONNECTION),
            ((KeyError, IndexError, TypeError, ValueError), ErrorCategory.MALFORMED_PAYLOAD),
            (RepositoryError, ErrorCategory.REPOSITORY_ERROR),
        )
        for types, category in checks:
            if isinstance(exception, types):
                return category
        return ErrorCategory.UNKNOWN

    def _category_for(self, status_code: Optional[int], exception: Optional[Exception]) -> ErrorCategory:
        if status_code == 429:
            return ErrorCategory.API_RATE_LIMIT
        if status_code:
            return ErrorCategory.API_HTTP_ERROR
        if exception is not None:
            return self.categorize_exception(exception)
        return ErrorCategory.API_CONNECTION

    @staticmethod
    def _format_trace(exception: Optional[Exception]) -> Optional[str]:
        if exception is None or exception.__traceback__ is None:
            return None
        return "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))

    def _log(self, report: ErrorReport) -> None:
        line = f"[{report.category.value}] {report.message} at {report.context.location}"
        if report.technical_details != report.message:
            line += f": {report.technical_details}"
        if report.hint:
            line += f" ({report.hint})"

        self.logger.log(_LOG_LEVELS[report.severity], line)

        if report.stack_trace and report.severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL):
            self.logger.debug(report.stack_trace)

    def get_error_statistics(self) -> Dict:
        """Failure counts for the health endpoint"""
        with self._lock:
            top = self._by_category.most_common(1)
            return {
                "total_errors": sum(self._by_category.values()),
                "errors_by_category": dict(self._by_category),
                "errors_by_source": dict(self._by_source),
                "most_common_error": top[0][0] if top else None,
                "recent": list(self._recent)
            }

    def reset_statistics(self) -> None:
        with self._lock:
            self._by_category.clear()
            self._by_source.clear()
            self._recent.clear()
        self.logger.info("Error statistics reset")


# Process-wide handler shared by sources, services and the health endpoint
_error_handler = ErrorHandler()


def get_error_handler() -> ErrorHandler:
    """Return the shared error handler"""
    return _error_handler
