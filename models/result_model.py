from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Presentation-ready record for one person; lives for a single response."""

    name: str
    age: int | None = None
    has_dob: bool = False
    is_dead: bool = False
    date_of_death: str | None = None
    # "day", "month" or "year"; None when the death date is unknown
    date_of_death_precision: str | None = None
    url: str | None = None
    custom_message: str | None = None

    model_config = ConfigDict(extra="ignore")
