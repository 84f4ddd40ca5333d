"""Decode raw forecast payloads into domain samples and city context."""

import logging
from pathlib import Path

from pydantic import ValidationError

from forecast.ingest.response import ForecastResponse, ListEntry
from forecast.models.errors import UpstreamDecodeError
from forecast.models.forecast import CityContext, ForecastSample

logger = logging.getLogger(__name__)


def decode_response(raw: dict | str | bytes) -> ForecastResponse:
    """Validate a raw payload (decoded dict or JSON text).

    Raises UpstreamDecodeError on malformed JSON or a payload missing
    required fields; nothing partially decoded is ever returned.
    """
    try:
        if isinstance(raw, (str, bytes)):
            return ForecastResponse.model_validate_json(raw)
        return ForecastResponse.model_validate(raw)
    except ValidationError as e:
        logger.error("Forecast response failed validation: %d errors", e.error_count())
        raise UpstreamDecodeError(f"invalid forecast response: {e}") from e


def load_response_file(path: str | Path) -> ForecastResponse:
    path = Path(path)
    try:
        text = path.read_bytes()
    except OSError as e:
        logger.error("Could not read forecast response %s: %s", path, e)
        raise UpstreamDecodeError(f"cannot read {path}: {e}") from e
    return decode_response(text)


def to_domain(
    response: ForecastResponse,
) -> tuple[list[ForecastSample], CityContext]:
    city = CityContext(
        name=response.city.name,
        timezone_offset_seconds=response.city.timezone,
        sunrise_epoch=response.city.sunrise,
        sunset_epoch=response.city.sunset,
    )
    return [_to_sample(e) for e in response.entries], city


def _to_sample(entry: ListEntry) -> ForecastSample:
    weather = entry.weather[0]
    return ForecastSample(
        timestamp_epoch=entry.dt,
        local_time_text=entry.local_time,
        temp_kelvin=entry.main.temp,
        temp_min_kelvin=entry.main.temp_min,
        temp_max_kelvin=entry.main.temp_max,
        feels_like_kelvin=entry.main.feels_like,
        humidity_percent=entry.main.humidity,
        cloud_percent=entry.clouds.all,
        precipitation_probability=entry.pop,
        wind_speed=entry.wind.speed,
        condition_main=weather.main,
        condition_description=weather.description,
    )


def decode_payload(raw: dict | str | bytes) -> tuple[list[ForecastSample], CityContext]:
    """decode_response followed by to_domain."""
    return to_domain(decode_response(raw))
