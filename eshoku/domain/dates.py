from datetime import date, datetime

_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def format_form_date(value: str, zero_pad: bool = False) -> str:
    """Reformat a date input value (``YYYY-MM-DD``) for submission.

    By default month and day are written without zero padding, so
    ``2024-01-05`` becomes ``2024-1-5``. The value is read as a calendar
    date; no timezone conversion is applied.
    """
    parsed = date.fromisoformat(value.strip())
    if zero_pad:
        return parsed.isoformat()
    return f"{parsed.year}-{parsed.month}-{parsed.day}"


def combine_datetime(date_value: str, time_value: str) -> str:
    return date_value + "T" + time_value


def parse_room_date(value: str) -> date:
    # strptime accepts both padded and unpadded month/day
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_room_datetime(value: str) -> datetime:
    date_part, sep, time_part = value.partition("T")
    if not sep:
        raise ValueError(f"invalid datetime: {value!r}")
    day = parse_room_date(date_part)
    for fmt in _TIME_FORMATS:
        try:
            clock = datetime.strptime(time_part, fmt).time()
        except ValueError:
            continue
        return datetime.combine(day, clock)
    raise ValueError(f"invalid time: {time_part!r}")
