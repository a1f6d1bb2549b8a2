from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from models.fact_date import FactDate
from models.person_model import PersonModel
from models.result_model import ResultModel

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_year(year: int) -> str:
    return f"{-year} BC" if year < 0 else str(year)


def format_date(value: FactDate) -> str:
    """Render only what is known: "April 1st 1976", "August 1977", "44 BC"."""
    year = format_year(value.year)
    if value.month is None:
        return year
    month = MONTH_NAMES[value.month - 1]
    if value.day is None:
        return f"{month} {year}"
    return f"{month} {ordinal(value.day)} {year}"


def years_between(start: FactDate, end: FactDate) -> int:
    """Whole years elapsed from start to end.

    When either side is too coarse to tell whether the anniversary has passed,
    the smaller candidate is returned.
    """
    years = end.astronomical_year - start.astronomical_year
    if start.month is None or end.month is None:
        years -= 1
    elif end.month < start.month:
        years -= 1
    elif end.month == start.month:
        if start.day is None or end.day is None or end.day < start.day:
            years -= 1
    return max(years, 0)


def format_result(person: PersonModel, today: Optional[date] = None) -> ResultModel:
    """Derive age and death date text. Age of the living depends on today's date."""
    age: Optional[int] = None
    date_of_death: Optional[str] = None
    precision: Optional[str] = None

    if person.date_of_death is not None:
        date_of_death = format_date(person.date_of_death)
        precision = person.date_of_death.precision
    if person.date_of_birth is not None:
        if person.is_dead:
            end = person.date_of_death
        else:
            end = FactDate.from_date(today or datetime.now(timezone.utc).date())
        if end is not None:
            age = years_between(person.date_of_birth, end)

    return ResultModel(
        name=person.name,
        age=age,
        has_dob=person.has_dob,
        is_dead=person.is_dead,
        date_of_death=date_of_death,
        date_of_death_precision=precision,
        url=person.url,
        custom_message=person.custom_message,
    )
