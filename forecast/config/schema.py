"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class DayBoundary(StrEnum):
    LOCAL_TEXT = "local-text"      # trust the upstream dt_txt prefix
    EPOCH_OFFSET = "epoch-offset"  # recompute from dt + city timezone


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class ConversionConfig(BaseModel):
    model_config = {"extra": "forbid"}

    kelvin_offset: float = Field(default=273.5, gt=0.0)


class GroupingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    day_boundary: DayBoundary = DayBoundary.LOCAL_TEXT


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    format: OutputFormat = OutputFormat.TEXT


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    conversion: ConversionConfig = ConversionConfig()
    grouping: GroupingConfig = GroupingConfig()
    output: OutputConfig = OutputConfig()
