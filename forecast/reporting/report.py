"""Output formatters for pipeline results."""

import json
from dataclasses import asdict

from forecast.aggregate.units import DISPLAY_KELVIN_OFFSET, display_degrees
from forecast.models.forecast import ForecastResult, HourlyEntry
from forecast.reporting.formatters import (
    format_clock_time,
    format_day_label,
    format_degrees,
)


def format_result_text(
    result: ForecastResult,
    kelvin_offset: float = DISPLAY_KELVIN_OFFSET,
    hourly: tuple[HourlyEntry, ...] = (),
) -> str:
    """Plain text report for the terminal."""
    s = result.snapshot
    lines = [
        f"=== {s.name} | {s.day} ===",
        f"{s.overview}: {s.temperature} (feels {s.feels_like}) {s.high} {s.low}",
        f"Condition: {s.condition} | Clouds: {s.clouds} | "
        f"Humidity: {s.humidity} | Rain: {s.pop} | Wind: {s.wind}",
        f"Sunrise: {format_clock_time(s.sunrise_epoch, s.timezone_offset_seconds)}"
        f" | Sunset: {format_clock_time(s.sunset_epoch, s.timezone_offset_seconds)}",
    ]
    if hourly:
        lines.append("--- 3-hourly ---")
    for h in hourly:
        lines.append(
            f"{h.time}  {h.condition:<14} {h.temperature:>5}  humidity {h.humidity}"
        )
    if result.daily_summaries:
        lines.append(f"--- {len(result.daily_summaries)} day forecast ---")
    for d in result.daily_summaries:
        high = format_degrees(display_degrees(d.max_temp, kelvin_offset))
        low = format_degrees(display_degrees(d.min_temp, kelvin_offset))
        lines.append(
            f"{format_day_label(d.day_key):<10} {d.representative_condition:<14}"
            f" {high:>5} / {low:>5}"
        )
    return "\n".join(lines)


def format_result_json(
    result: ForecastResult, hourly: tuple[HourlyEntry, ...] = ()
) -> str:
    """JSON report for programmatic consumption."""
    data = {
        "snapshot": asdict(result.snapshot),
        "daily_summaries": [asdict(d) for d in result.daily_summaries],
        "hourly": [asdict(h) for h in hourly],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
