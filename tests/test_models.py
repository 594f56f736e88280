from datetime import timedelta

import pytest
from dateutil.relativedelta import FR, relativedelta
from pydantic import ValidationError

from requestprep.errors import InvalidInput
from requestprep.models import Duration


def test_duration_rejects_negative_units() -> None:
    Duration(days=1)
    with pytest.raises(ValidationError):
        Duration(days=-1)
    with pytest.raises(ValidationError):
        Duration(microseconds=1_000_000)


def test_zero_duration_is_never_inverted() -> None:
    assert Duration(inverted=True).inverted is False
    assert Duration(inverted=True, seconds=1).inverted is True


def test_from_timedelta_splits_clock_units() -> None:
    duration = Duration.from_timedelta(-timedelta(days=2, hours=3, minutes=4, seconds=5, microseconds=6))
    assert duration == Duration(
        inverted=True, days=2, hours=3, minutes=4, seconds=5, microseconds=6
    )


def test_from_relativedelta_keeps_calendar_units() -> None:
    duration = Duration.from_relativedelta(relativedelta(years=-1, months=-2, days=-3))
    assert duration == Duration(inverted=True, years=1, months=2, days=3)


def test_from_relativedelta_rejects_absolute_fields() -> None:
    with pytest.raises(InvalidInput):
        Duration.from_relativedelta(relativedelta(weekday=FR))
    with pytest.raises(InvalidInput):
        Duration.from_relativedelta(relativedelta(hour=10))
    with pytest.raises(InvalidInput):
        Duration.from_relativedelta(relativedelta(leapdays=1))


def test_from_value_dispatches_by_type() -> None:
    duration = Duration(hours=1)
    assert Duration.from_value(duration) == duration
    assert Duration.from_value(timedelta(hours=1)) == duration
    assert Duration.from_value(relativedelta(hours=1)) == duration
    with pytest.raises(InvalidInput):
        Duration.from_value("PT1H")


def test_duration_is_immutable() -> None:
    duration = Duration(days=1)
    with pytest.raises(ValidationError):
        duration.days = -1  # type: ignore[misc]
    assert duration.days == 1


def test_from_value_revalidates_unchecked_instances() -> None:
    unchecked = Duration(days=1).model_copy(update={"days": -1})
    with pytest.raises(InvalidInput):
        Duration.from_value(unchecked)
