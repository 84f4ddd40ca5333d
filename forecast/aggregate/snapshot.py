"""Current-conditions snapshot built from the earliest sample."""

from forecast.aggregate.units import (
    DISPLAY_KELVIN_OFFSET,
    display_degrees,
    round_half_away,
    to_percent_string,
    to_speed_string,
)
from forecast.models.forecast import CityContext, CurrentSnapshot, ForecastSample
from forecast.reporting.formatters import (
    format_capitalized,
    format_degrees,
    format_high,
    format_low,
    format_percent,
    format_snapshot_day,
)


def extract_snapshot(
    first: ForecastSample,
    city: CityContext,
    kelvin_offset: float = DISPLAY_KELVIN_OFFSET,
) -> CurrentSnapshot:
    """Build the "now" view.

    High/low are the first sample's own extremes, not the day's aggregate.
    """
    return CurrentSnapshot(
        name=city.name,
        day=format_snapshot_day(first.timestamp_epoch),
        overview=format_capitalized(first.condition_description),
        temperature=format_degrees(display_degrees(first.temp_kelvin, kelvin_offset)),
        high=format_high(display_degrees(first.temp_max_kelvin, kelvin_offset)),
        low=format_low(display_degrees(first.temp_min_kelvin, kelvin_offset)),
        feels_like=format_degrees(
            display_degrees(first.feels_like_kelvin, kelvin_offset)
        ),
        pop=to_percent_string(first.precipitation_probability),
        condition=first.condition_main,
        clouds=format_percent(first.cloud_percent),
        humidity=format_percent(round_half_away(first.humidity_percent)),
        wind=to_speed_string(first.wind_speed),
        timezone_offset_seconds=city.timezone_offset_seconds,
        sunrise_epoch=city.sunrise_epoch,
        sunset_epoch=city.sunset_epoch,
    )
