"""
Source Results and Fallback Adapter
===================================

Every live data source returns a FetchResult instead of raising. The
fallback adapter turns a failed result into the source's deterministic
substitute value, so fallback behaviour is testable without network access.

Author: India Travel Info Team
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from ..utils.error_handler import ErrorCategory


T = TypeVar("T")

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """
    Failure of a single upstream fetch

    Attributes:
        source (str): Source name ("weather", "news", "encyclopedia")
        category (ErrorCategory): Failure classification
        status_code (int): HTTP status if the upstream answered
    """

    def __init__(self, source: str, message: str,
                 category: ErrorCategory = ErrorCategory.UNKNOWN,
                 status_code: Optional[int] = None):
        self.source = source
        self.category = category
        self.status_code = status_code
        super().__init__(message)


@dataclass
class FetchResult(Generic[T]):
    """Value-or-error returned by a live source"""
    value: Optional[T] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        return cls(error=error)


@dataclass
class SourceOutcome(Generic[T]):
    """Value after the fallback policy was applied"""
    value: T
    from_fallback: bool
    error: Optional[FetchError] = None


def with_fallback(result: FetchResult[T], fallback: Callable[[], T]) -> SourceOutcome[T]:
    """
    Apply a source's fallback to a failed fetch

    Args:
        result (FetchResult): Outcome of the live fetch
        fallback (Callable): Zero-argument factory for the substitute value

    Returns:
        SourceOutcome: Live value, or fallback value flagged as such
    """
    if result.ok:
        return SourceOutcome(value=result.value, from_fallback=False)

    logger.info(f"Using fallback for {result.error.source}: {result.error}")
    return SourceOutcome(value=fallback(), from_fallback=True, error=result.error)
