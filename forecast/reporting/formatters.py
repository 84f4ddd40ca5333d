"""Display string builders shared by the snapshot and the reports.

Output never depends on the process locale: weekday names are fixed
English abbreviations and numbers are plain ASCII digits.
"""

from datetime import UTC, datetime, timedelta, timezone

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def format_degrees(n: int) -> str:
    return f"{n}°"


def format_high(n: int) -> str:
    return f"H: {n}°"


def format_low(n: int) -> str:
    return f"L: {n}°"


def format_percent(n: int | float) -> str:
    return f"{format_plain_number(n)}%"


def format_speed(n: int) -> str:
    return f"{n}m/s"


def format_plain_number(x: int | float) -> str:
    """Print a number without a trailing '.0' for whole values."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def format_capitalized(text: str) -> str:
    """'scattered clouds' -> 'Scattered Clouds'."""
    return " ".join(word.capitalize() for word in text.split(" "))


def _day_month_weekday(dt: datetime) -> str:
    return f"{dt.day}/{dt.month} {_WEEKDAYS[dt.weekday()]}"


def format_snapshot_day(epoch: float) -> str:
    """'d/M E' on the UTC calendar; the city offset is deliberately not applied."""
    return _day_month_weekday(datetime.fromtimestamp(epoch, tz=UTC))


def format_day_label(day_key: str) -> str:
    """'2024-03-02' -> '2/3 Sat'; a key that is not a date is shown as is."""
    try:
        parsed = datetime.strptime(day_key, "%Y-%m-%d")
    except ValueError:
        return day_key
    return _day_month_weekday(parsed)


def format_clock_time(epoch: float, timezone_offset_seconds: int) -> str:
    """HH:mm in the city's fixed UTC offset."""
    tz = timezone(timedelta(seconds=timezone_offset_seconds))
    return datetime.fromtimestamp(epoch, tz=tz).strftime("%H:%M")
