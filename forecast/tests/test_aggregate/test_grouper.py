"""Tests for grouping samples by calendar day."""

import pytest

from forecast.aggregate.day_key import epoch_offset_day_key
from forecast.aggregate.grouper import group_by_day
from forecast.models.errors import MalformedDayKeyError
from forecast.tests.factories import make_sample


def _three_hourly(day: str, hours: list[int]):
    return [make_sample(local_time_text=f"{day} {h:02d}:00:00") for h in hours]


class TestGroupByDay:
    def test_partition_is_complete(self, london):
        samples = _three_hourly("2024-03-02", [12, 15, 18, 21]) + _three_hourly(
            "2024-03-03", [0, 3, 6]
        )
        groups = group_by_day(samples, london)

        assert set(groups) == {"2024-03-02", "2024-03-03"}
        flattened = [s for bucket in groups.values() for s in bucket]
        assert len(flattened) == len(samples)
        assert all(any(s is f for f in flattened) for s in samples)

    def test_bucket_keeps_input_order(self, london):
        samples = _three_hourly("2024-03-02", [9, 12, 15])
        groups = group_by_day(samples, london)
        assert groups["2024-03-02"] == samples
        assert [s.local_time_text for s in groups["2024-03-02"]] == [
            "2024-03-02 09:00:00",
            "2024-03-02 12:00:00",
            "2024-03-02 15:00:00",
        ]

    def test_single_sample(self, london):
        groups = group_by_day([make_sample()], london)
        assert list(groups) == ["2024-03-02"]

    def test_malformed_text_is_not_skipped(self, london):
        samples = [make_sample(), make_sample(local_time_text="bad")]
        with pytest.raises(MalformedDayKeyError):
            group_by_day(samples, london)

    def test_custom_day_key_fn(self, london):
        samples = [
            make_sample(local_time_text="2024-03-02 21:00:00", timestamp_epoch=1709413200),
            make_sample(local_time_text="2024-03-03 00:00:00", timestamp_epoch=1709424000),
        ]
        groups = group_by_day(samples, london, epoch_offset_day_key)
        assert set(groups) == {"2024-03-02", "2024-03-03"}
