"""Forecast data models: raw 3-hour samples and the derived views."""

from dataclasses import dataclass
from enum import StrEnum


class ConditionGroup(StrEnum):
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    DRIZZLE = "Drizzle"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"
    MIST = "Mist"
    FOG = "Fog"
    HAZE = "Haze"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str) -> "ConditionGroup":
        try:
            return cls(label)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class CityContext:
    name: str
    timezone_offset_seconds: int
    sunrise_epoch: float
    sunset_epoch: float


@dataclass(frozen=True)
class ForecastSample:
    timestamp_epoch: float
    local_time_text: str  # YYYY-MM-DD HH:mm:ss, as supplied upstream
    temp_kelvin: float
    temp_min_kelvin: float
    temp_max_kelvin: float
    feels_like_kelvin: float
    humidity_percent: float
    cloud_percent: float
    precipitation_probability: float  # 0.0 - 1.0
    wind_speed: float
    condition_main: str
    condition_description: str

    @property
    def condition_group(self) -> ConditionGroup:
        return ConditionGroup.from_label(self.condition_main)


@dataclass(frozen=True)
class DailySummary:
    day_key: str  # YYYY-MM-DD
    max_temp: float  # Kelvin
    min_temp: float  # Kelvin
    representative_condition: str


@dataclass(frozen=True)
class CurrentSnapshot:
    name: str
    day: str
    overview: str
    temperature: str
    high: str
    low: str
    feels_like: str
    pop: str
    condition: str
    clouds: str
    humidity: str
    wind: str
    timezone_offset_seconds: int
    sunrise_epoch: float
    sunset_epoch: float


@dataclass(frozen=True)
class ForecastResult:
    snapshot: CurrentSnapshot
    daily_summaries: tuple[DailySummary, ...]


@dataclass(frozen=True)
class HourlyEntry:
    time: str  # HH:mm in the city's offset
    temperature: str
    humidity: str
    condition: str
