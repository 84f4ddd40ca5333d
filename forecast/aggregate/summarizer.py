"""Daily summarizer: reduces a day bucket to its extremes and headline condition."""

from forecast.models.forecast import DailySummary, ForecastSample


def summarize_day(day_key: str, samples: list[ForecastSample]) -> DailySummary:
    """Reduce one day bucket.

    max() and min() return the first of several equal candidates, so ties
    go to the earliest sample. The representative condition always comes
    from the sample that supplied the max temperature.
    """
    if not samples:
        raise RuntimeError(f"empty day bucket for {day_key}")

    warmest = max(samples, key=lambda s: s.temp_max_kelvin)
    coldest = min(samples, key=lambda s: s.temp_min_kelvin)

    return DailySummary(
        day_key=day_key,
        max_temp=warmest.temp_max_kelvin,
        min_temp=coldest.temp_min_kelvin,
        representative_condition=warmest.condition_main,
    )


def summarize_days(groups: dict[str, list[ForecastSample]]) -> list[DailySummary]:
    return [summarize_day(key, samples) for key, samples in groups.items()]
