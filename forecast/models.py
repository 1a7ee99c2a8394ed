"""
Models Module - Schemas for the NWS responses and the pipeline results

Only the fields the pipeline reads are declared. Unknown fields are ignored,
missing required fields fail validation instead of defaulting to zero values.
"""

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Feeling(str, Enum):
    COLD = "cold"
    MODERATE = "moderate"
    HOT = "hot"


class TimeOfDay(str, Enum):
    DAY = "day"
    NIGHT = "night"


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PointsProperties(_Schema):
    forecast: str


class PointsResponse(_Schema):
    """Body of GET /points/{lat},{lon}"""

    properties: PointsProperties


class Period(_Schema):
    """One time bucket of the forecast, e.g. "Today" or "Tonight" """

    number: Optional[int] = None
    name: str
    start_time: Optional[str] = Field(default=None, alias="startTime")
    end_time: Optional[str] = Field(default=None, alias="endTime")
    is_daytime: Optional[bool] = Field(default=None, alias="isDaytime")
    temperature: int
    temperature_unit: str = Field(alias="temperatureUnit")
    short_forecast: str = Field(alias="shortForecast")
    detailed_forecast: Optional[str] = Field(default=None, alias="detailedForecast")

    @field_validator("temperature", mode="before")
    @classmethod
    def reject_bool_temperature(cls, value):
        # Lax int parsing would read true/false as 1/0
        if isinstance(value, bool):
            raise ValueError("temperature must be a number, not a boolean")
        return value


class ForecastProperties(_Schema):
    periods: list[Period]


class ForecastPayload(_Schema):
    """Body of the forecast endpoint returned by the points lookup"""

    properties: ForecastProperties


class Extraction(NamedTuple):
    short_description: str
    feeling: Feeling
    time_of_day: TimeOfDay


class ForecastResult(NamedTuple):
    short_description: str
    feeling: Feeling

    def to_dict(self):
        return {"shortDescription": self.short_description, "feeling": self.feeling.value}
