"""Partition samples into calendar-day buckets."""

from forecast.aggregate.day_key import DayKeyFn, local_text_day_key
from forecast.models.forecast import CityContext, ForecastSample


def group_by_day(
    samples: list[ForecastSample],
    city: CityContext,
    day_key_fn: DayKeyFn = local_text_day_key,
) -> dict[str, list[ForecastSample]]:
    """Bucket samples by day key.

    Each bucket keeps the input's relative order, which the summarizer
    relies on for tie-breaks. Key order is unspecified; sort before display.
    """
    groups: dict[str, list[ForecastSample]] = {}
    for sample in samples:
        groups.setdefault(day_key_fn(sample, city), []).append(sample)
    return groups
