"""
Payload parsing helpers shared by the source loaders

Functions:
    validate_coordinates: Reject out-of-range or non-numeric coordinates
    clean_text: Strip markup and collapse whitespace in feed text
    round_half_up: Integer rounding for displayed temperatures and speeds

Author: India Travel Info Team
"""

import re
import html
import math
from typing import Any, Optional


TAG_PATTERN = re.compile(r'<[^>]+>')


def validate_coordinates(latitude: Any, longitude: Any) -> bool:
    """
    True when both values are finite numbers inside the WGS84 ranges

    >>> validate_coordinates(19.0760, 72.8777)
    True
    >>> validate_coordinates("91", 72.8)
    False
    """
    try:
        lat, lon = float(latitude), float(longitude)
    except (ValueError, TypeError):
        return False

    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return abs(lat) <= 90.0 and abs(lon) <= 180.0


def clean_text(text: str, remove_html: bool = True) -> Optional[str]:
    """
    Normalize a text field from an upstream payload

    Feed titles and descriptions arrive as HTML fragments; tags are replaced
    by spaces and entities decoded. Whitespace runs collapse to one space.

    Args:
        text (str): Raw field value
        remove_html (bool): Strip tags and entities (off for plain-text extracts)

    Returns:
        str: Cleaned text, or None when nothing is left
    """
    if not isinstance(text, str):
        return None

    if remove_html:
        text = html.unescape(TAG_PATTERN.sub(' ', text))

    return ' '.join(text.split()) or None


def round_half_up(value: Any) -> int:
    """
    Round to the nearest integer with .5 going up ("27.5" -> 28)

    Raises:
        ValueError: If the value is not a finite number
    """
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot round non-finite value: {value!r}")
    return math.floor(number + 0.5)
