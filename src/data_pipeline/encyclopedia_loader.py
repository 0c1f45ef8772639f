"""
Encyclopedia Data Loader
========================

Fetches page summaries (extract and coordinates) from the Wikipedia REST
API. Falls back to the curated historical blurbs in the reference tables.

Author: India Travel Info Team
"""

from typing import Dict, Optional
from urllib.parse import quote

from config import config
from .base_loader import BaseHTTPLoader
from .data_models import EncyclopediaSummary
from .reference_data import ReferenceDataProvider
from .source_result import FetchResult
from ..utils.data_utils import clean_text, validate_coordinates
from ..utils.error_handler import ErrorCategory
from ..utils.performance_monitor import measure_time


class EncyclopediaDataLoader(BaseHTTPLoader):
    """Loads page summaries from the encyclopedia service"""

    source_name = "encyclopedia"

    def __init__(self, session=None, timeout: Optional[float] = None, error_handler=None,
                 base_url: Optional[str] = None,
                 reference_data: Optional[ReferenceDataProvider] = None):
        super().__init__(session=session, timeout=timeout, error_handler=error_handler)
        self.base_url = (base_url or config.ENCYCLOPEDIA_API_URL).rstrip("/")
        self.reference_data = reference_data or ReferenceDataProvider()

    @measure_time(category="encyclopedia")
    def fetch(self, title: str) -> FetchResult[EncyclopediaSummary]:
        """
        Fetch the summary of a page

        Args:
            title (str): Page title, e.g. "Mumbai" or "Nellore India"

        Returns:
            FetchResult[EncyclopediaSummary]: Summary, or a failure when the page
            is missing or has no extract
        """
        endpoint = f"{self.base_url}/{quote(title, safe='')}"
        result = self._get_json(endpoint)
        if not result.ok:
            return result

        try:
            summary = self._parse_summary(result.value, title)
        except (KeyError, TypeError, AttributeError) as e:
            return self._failure(endpoint, exception=e, category=ErrorCategory.MALFORMED_PAYLOAD)

        if summary is None:
            return self._failure(
                endpoint,
                message=f"No summary available for {title}",
                category=ErrorCategory.DATA_NOT_FOUND
            )

        return FetchResult.success(summary)

    def fallback(self, city_name: str) -> EncyclopediaSummary:
        """Curated historical blurb, or the generic sentence for unknown cities"""
        return EncyclopediaSummary(
            title=city_name,
            extract=self.reference_data.historical_info(city_name)
        )

    def _parse_summary(self, data: Dict, title: str) -> Optional[EncyclopediaSummary]:
        # Disambiguation pages list candidates rather than describe a city
        if data.get("type") == "disambiguation":
            return None

        extract = clean_text(data.get("extract"), remove_html=False)
        if not extract:
            return None

        latitude = longitude = None
        coordinates = data.get("coordinates") or {}
        lat, lon = coordinates.get("lat"), coordinates.get("lon")
        if lat is not None and lon is not None and validate_coordinates(lat, lon):
            latitude, longitude = float(lat), float(lon)

        return EncyclopediaSummary(
            title=data.get("title") or title,
            extract=extract,
            latitude=latitude,
            longitude=longitude
        )
