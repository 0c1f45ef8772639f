"""
Pydantic request models for API validation
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


MAX_CITY_NAME_LENGTH = 100


class SearchCityRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city_name: str = Field(alias="cityName")

    @field_validator("city_name")
    @classmethod
    def validate_city_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("City name is required")

        cleaned = " ".join(v.split())
        if len(cleaned) > MAX_CITY_NAME_LENGTH:
            raise ValueError(f"City name too long (max {MAX_CITY_NAME_LENGTH} characters)")

        return cleaned
