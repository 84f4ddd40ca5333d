"""Wire models for the 5 day / 3 hour forecast response."""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)


class MainBlock(_WireModel):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float | None = None
    sea_level: float | None = None
    ground_level: float | None = Field(default=None, alias="grnd_level")
    humidity: float
    temp_kf: float | None = None


class WeatherBlock(_WireModel):
    id: int
    main: str
    description: str
    icon: str = ""


class CloudsBlock(_WireModel):
    all: float


class WindBlock(_WireModel):
    speed: float
    deg: float | None = None
    gust: float | None = None


class RainBlock(_WireModel):
    one_hour: float | None = Field(default=None, alias="1h")


class SysBlock(_WireModel):
    pod: str


class ListEntry(_WireModel):
    dt: float
    main: MainBlock
    weather: list[WeatherBlock] = Field(min_length=1)
    clouds: CloudsBlock
    wind: WindBlock
    visibility: float | None = None
    pop: float = Field(ge=0.0, le=1.0)
    rain: RainBlock | None = None
    sys: SysBlock | None = None
    local_time: str = Field(alias="dt_txt")


class Coord(_WireModel):
    lat: float | None = None
    lon: float | None = None


class CityBlock(_WireModel):
    id: int
    name: str
    coord: Coord | None = None
    country: str = ""
    population: int | None = None
    timezone: int
    sunrise: float
    sunset: float


class ForecastResponse(_WireModel):
    cod: str
    message: float | None = None
    cnt: int | None = None
    entries: list[ListEntry] = Field(alias="list")
    city: CityBlock
