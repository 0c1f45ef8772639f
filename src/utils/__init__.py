"""
Utilities Module
===============

Common utility functions and helpers used across all modules:
- Error handling and exception management
- Performance monitoring of upstream calls
- Text and number helpers for parsing upstream payloads

Classes:
    ErrorHandler: Standardized error handling and exception management
    PerformanceMonitor: Tracks execution time and process resources

Functions:
    validate_coordinates(): Check if latitude/longitude are valid
    clean_text(): Strip markup and collapse whitespace
    round_half_up(): Round numeric values the way the UI displays them
    measure_time(): Performance timing decorator
"""

# Version and module info
__version__ = "1.0.0"
__module_name__ = "utils"

# Import core utility classes
from .error_handler import ErrorHandler, get_error_handler
from .performance_monitor import PerformanceMonitor, measure_time

# Import data processing utilities
from .data_utils import (
    clean_text,
    validate_coordinates,
    round_half_up
)

# Define public API
__all__ = [
    # Core utility classes
    "ErrorHandler",
    "PerformanceMonitor",
    "get_error_handler",
    "measure_time",

    # Data processing functions
    "clean_text",
    "validate_coordinates",
    "round_half_up",
]
