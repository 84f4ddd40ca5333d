"""Forecast pipeline: raw samples -> current snapshot + daily summaries."""

import logging

from forecast.aggregate.day_key import resolve_day_key_fn
from forecast.aggregate.grouper import group_by_day
from forecast.aggregate.hourly import extract_hourly
from forecast.aggregate.snapshot import extract_snapshot
from forecast.aggregate.summarizer import summarize_days
from forecast.config.schema import ForecastConfig
from forecast.ingest.decoder import decode_payload
from forecast.models.errors import EmptyInputError
from forecast.models.forecast import (
    CityContext,
    ForecastResult,
    ForecastSample,
    HourlyEntry,
)

logger = logging.getLogger(__name__)


class ForecastPipeline:
    """Stateless transformation; every run recomputes from its inputs."""

    def __init__(self, config: ForecastConfig | None = None):
        self.config = config or ForecastConfig()
        self._day_key_fn = resolve_day_key_fn(self.config.grouping.day_boundary)

    def run(self, samples: list[ForecastSample], city: CityContext) -> ForecastResult:
        # 1. VALIDATE
        if not samples:
            raise EmptyInputError()

        # 2. SNAPSHOT
        snapshot = extract_snapshot(
            samples[0], city, self.config.conversion.kelvin_offset
        )

        # 3. GROUP
        groups = group_by_day(samples, city, self._day_key_fn)

        # 4. REDUCE + 5. ORDER
        summaries = sorted(summarize_days(groups), key=lambda d: d.day_key)

        logger.debug(
            "Summarized %d samples into %d days for %s",
            len(samples), len(summaries), city.name,
        )
        return ForecastResult(snapshot=snapshot, daily_summaries=tuple(summaries))

    def run_response(self, raw: dict | str | bytes) -> ForecastResult:
        """Decode an upstream payload and run it.

        A payload that fails to decode raises UpstreamDecodeError before
        run() is reached.
        """
        samples, city = decode_payload(raw)
        return self.run(samples, city)

    def hourly(
        self, samples: list[ForecastSample], city: CityContext
    ) -> tuple[HourlyEntry, ...]:
        """3-hourly rows for every sample, kept separate from the run() result."""
        if not samples:
            raise EmptyInputError()
        return tuple(
            extract_hourly(samples, city, self.config.conversion.kelvin_offset)
        )
