"""Calendar-day keys for forecast samples.

The day boundary is a strategy so the choice between trusting the upstream
local-time text and recomputing from the epoch lives in one place.
"""

from collections.abc import Callable
from datetime import UTC, datetime

from forecast.config.schema import DayBoundary
from forecast.models.errors import MalformedDayKeyError
from forecast.models.forecast import CityContext, ForecastSample

DAY_KEY_LENGTH = len("YYYY-MM-DD")

DayKeyFn = Callable[[ForecastSample, CityContext], str]


def day_key(sample: ForecastSample) -> str:
    """Return the YYYY-MM-DD prefix of the sample's local time text."""
    text = sample.local_time_text
    if len(text) < DAY_KEY_LENGTH:
        raise MalformedDayKeyError(text)
    return text[:DAY_KEY_LENGTH]


def local_text_day_key(sample: ForecastSample, city: CityContext) -> str:
    return day_key(sample)


def epoch_offset_day_key(sample: ForecastSample, city: CityContext) -> str:
    local = datetime.fromtimestamp(
        sample.timestamp_epoch + city.timezone_offset_seconds, tz=UTC
    )
    return local.strftime("%Y-%m-%d")


_STRATEGIES: dict[DayBoundary, DayKeyFn] = {
    DayBoundary.LOCAL_TEXT: local_text_day_key,
    DayBoundary.EPOCH_OFFSET: epoch_offset_day_key,
}


def resolve_day_key_fn(boundary: DayBoundary) -> DayKeyFn:
    return _STRATEGIES[boundary]
