"""Canonical string forms for scalar values written into request bodies and queries."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Union

from dateutil import parser as date_parser

from .errors import InvalidInput
from .models import Duration


def boolean_to_string(value: bool) -> str:
    if not isinstance(value, bool):
        raise InvalidInput(f"Expected a bool, got {type(value).__name__}")
    return "true" if value else "false"


def duration_to_string(value: Any) -> str:
    """Render a duration as ISO-8601, e.g. ``P1DT11S`` or ``-P1D``.

    Accepts ``Duration``, ``datetime.timedelta`` or
    ``dateutil.relativedelta.relativedelta``. Zero units are left out; a
    zero-length duration renders as ``PT0S``.
    """
    duration = Duration.from_value(value)
    if duration.is_zero():
        return "PT0S"

    date_part = _units((duration.years, "Y"), (duration.months, "M"), (duration.days, "D"))
    time_part = _units((duration.hours, "H"), (duration.minutes, "M"))
    if duration.microseconds:
        fraction = f"{duration.microseconds:06d}".rstrip("0")
        time_part += f"{duration.seconds}.{fraction}S"
    elif duration.seconds:
        time_part += f"{duration.seconds}S"

    rendered = f"P{date_part}"
    if time_part:
        rendered += f"T{time_part}"
    return f"-{rendered}" if duration.inverted else rendered


def _units(*pairs: tuple[int, str]) -> str:
    return "".join(f"{amount}{designator}" for amount, designator in pairs if amount)


def datetime_to_string(value: Union[datetime, str]) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS+HH:MM``; naive values are UTC."""
    if isinstance(value, str):
        try:
            value = date_parser.isoparse(value)
        except (ValueError, OverflowError) as exc:
            raise InvalidInput(f"{value} is not an ISO-8601 date-time") from exc
    if not isinstance(value, datetime):
        raise InvalidInput(f"Expected a datetime, got {type(value).__name__}")

    offset = value.utcoffset()
    if offset is None:
        value = value.replace(tzinfo=timezone.utc)
    elif offset.seconds % 60 or offset.microseconds:
        raise InvalidInput(f"UTC offset {offset} is not a whole number of minutes")
    return value.isoformat(timespec="seconds")


def date_to_string(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        raise InvalidInput(f"Expected a date, got {type(value).__name__}")
    return value.isoformat()


def time_to_string(value: time) -> str:
    if isinstance(value, datetime):
        value = value.time()
    if not isinstance(value, time):
        raise InvalidInput(f"Expected a time, got {type(value).__name__}")
    return value.strftime("%H:%M:%S")
