"""Error kinds raised at the forecast pipeline boundary."""


class ForecastError(Exception):
    """Base class for forecast data-integrity failures."""


class EmptyInputError(ForecastError):
    """Raised when the pipeline is handed no samples."""

    def __init__(self, message: str = "forecast contains no samples"):
        super().__init__(message)


class MalformedDayKeyError(ForecastError):
    """Raised when a sample's local time text has no usable date prefix."""

    def __init__(self, local_time_text: str):
        super().__init__(
            f"local time text {local_time_text!r} is shorter than a YYYY-MM-DD date"
        )
        self.local_time_text = local_time_text


class UpstreamDecodeError(ForecastError):
    """Raised when the raw forecast response cannot be decoded."""
