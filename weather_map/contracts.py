from __future__ import annotations

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class LookupStatus(str, Enum):
    OK = 'Ok'
    ERROR = 'Error'


class WeatherResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: LookupStatus = LookupStatus.OK
    name: str | None = None
    latitude: float | None = Field(default=None, alias='lat')
    longitude: float | None = Field(default=None, alias='long')
    temperature: float | None = Field(default=None, alias='temp')
    wind_speed: float | None = Field(default=None, alias='windspd')
    description: str | None = None
    icon: str | None = None

    @field_validator('status', mode='before')
    @classmethod
    def _coerce_status(cls, value):
        if value == LookupStatus.ERROR.value:
            return LookupStatus.ERROR
        return LookupStatus.OK

    @model_validator(mode='after')
    def _require_position(self) -> WeatherResult:
        if self.status is LookupStatus.OK and (
            self.latitude is None or self.longitude is None
        ):
            raise ValueError('successful lookup without lat/long')
        return self


class SearchRequest(BaseModel):
    location: str


class SearchHistory(BaseModel):
    searches: list[str]


class MarkerState(BaseModel):
    lat: float
    long: float
    popup_html: str
    popup_open: bool


class MapState(BaseModel):
    center: tuple[float, float]
    zoom: int
    markers: list[MarkerState]


class SearchOutcome(BaseModel):
    outcome: str
    alert: str
    history: list[str]
    map: MapState
