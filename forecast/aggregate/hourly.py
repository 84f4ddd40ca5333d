"""Per-sample 3-hourly rows for the forecast strip."""

from forecast.aggregate.units import DISPLAY_KELVIN_OFFSET, display_degrees, round_half_away
from forecast.models.forecast import CityContext, ForecastSample, HourlyEntry
from forecast.reporting.formatters import format_clock_time, format_degrees, format_percent


def extract_hourly(
    samples: list[ForecastSample],
    city: CityContext,
    kelvin_offset: float = DISPLAY_KELVIN_OFFSET,
) -> list[HourlyEntry]:
    """One entry per sample, in input order; times use the city's fixed offset."""
    return [
        HourlyEntry(
            time=format_clock_time(s.timestamp_epoch, city.timezone_offset_seconds),
            temperature=format_degrees(display_degrees(s.temp_kelvin, kelvin_offset)),
            humidity=format_percent(round_half_away(s.humidity_percent)),
            condition=s.condition_main,
        )
        for s in samples
    ]
