from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

Precision = Literal["year", "month", "day"]


class FactDate(BaseModel):
    """A calendar date known to year, month or day precision.

    Years use historical numbering: -44 is 44 BC and there is no year 0.
    """

    year: int
    month: int | None = None
    day: int | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _from_date_or_iso(cls, value):
        if isinstance(value, date):
            return {"year": value.year, "month": value.month, "day": value.day}
        if isinstance(value, str):
            parts = value.split("-")
            if not 1 <= len(parts) <= 3 or not all(p.isdigit() for p in parts):
                raise ValueError(f"expected YYYY, YYYY-MM or YYYY-MM-DD, got {value!r}")
            keys = ("year", "month", "day")
            return {k: int(p) for k, p in zip(keys, parts)}
        return value

    @model_validator(mode="after")
    def _check_calendar(self) -> "FactDate":
        if self.year == 0:
            raise ValueError("there is no year 0")
        if self.day is not None and self.month is None:
            raise ValueError("a day needs a month")
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")
        if self.day is not None:
            # 2000 is a leap year, so Feb 29 passes for BC years too
            check_year = self.year if 1 <= self.year <= 9999 else 2000
            date(check_year, self.month, self.day)
        return self

    @classmethod
    def from_date(cls, value: date) -> "FactDate":
        return cls(year=value.year, month=value.month, day=value.day)

    @property
    def precision(self) -> Precision:
        if self.day is not None:
            return "day"
        if self.month is not None:
            return "month"
        return "year"

    @property
    def is_bc(self) -> bool:
        return self.year < 0

    @property
    def astronomical_year(self) -> int:
        # 1 BC is astronomical year 0
        return self.year + 1 if self.year < 0 else self.year
