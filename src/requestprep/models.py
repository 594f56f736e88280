from __future__ import annotations

from datetime import timedelta
from typing import Any

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import InvalidInput

_ABSOLUTE_FIELDS = ("year", "month", "day", "weekday", "hour", "minute", "second", "microsecond")
_UNIT_FIELDS = ("years", "months", "days", "hours", "minutes", "seconds", "microseconds")


class Duration(BaseModel):
    """A signed span of calendar and clock units.

    Units are stored as given and never carried into each other, so
    ``Duration(hours=36)`` stays 36 hours rather than becoming 1 day 12 hours.
    ``inverted`` marks a negative span. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True)

    inverted: bool = False
    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)
    microseconds: int = Field(default=0, ge=0, le=999_999)

    @model_validator(mode="before")
    @classmethod
    def drop_sign_of_zero(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("inverted"):
            if not any(data.get(name) for name in _UNIT_FIELDS):
                data = {**data, "inverted": False}
        return data

    def is_zero(self) -> bool:
        return not any(
            (
                self.years,
                self.months,
                self.days,
                self.hours,
                self.minutes,
                self.seconds,
                self.microseconds,
            )
        )

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        inverted = value < timedelta(0)
        value = abs(value)
        hours, rest = divmod(value.seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return cls(
            inverted=inverted,
            days=value.days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            microseconds=value.microseconds,
        )

    @classmethod
    def from_relativedelta(cls, value: relativedelta) -> "Duration":
        absolute = [name for name in _ABSOLUTE_FIELDS if getattr(value, name) is not None]
        if absolute or value.leapdays:
            fields = ", ".join(absolute or ["leapdays"])
            raise InvalidInput(f"relativedelta with absolute fields ({fields}) is not a duration")

        units: dict[str, int] = {}
        for name in _UNIT_FIELDS:
            amount = getattr(value, name)
            if amount != int(amount):
                raise InvalidInput(f"relativedelta {name}={amount} is not a whole number")
            units[name] = int(amount)

        signs = {amount > 0 for amount in units.values() if amount}
        if len(signs) > 1:
            raise InvalidInput(f"{value!r} mixes positive and negative units")
        inverted = signs == {False}
        return cls(inverted=inverted, **{name: abs(amount) for name, amount in units.items()})

    @classmethod
    def from_value(cls, value: Any) -> "Duration":
        try:
            if isinstance(value, Duration):
                # model_copy(update=...) and model_construct skip validation
                return cls.model_validate(value.model_dump())
            if isinstance(value, timedelta):
                return cls.from_timedelta(value)
            if isinstance(value, relativedelta):
                return cls.from_relativedelta(value)
        except ValidationError as exc:
            raise InvalidInput(f"{value!r} cannot be represented as a duration") from exc
        raise InvalidInput(f"Unsupported duration type: {type(value).__name__}")
