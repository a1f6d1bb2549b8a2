from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from .fact_date import FactDate


class PersonModel(BaseModel):
    """Normalized person facts: built from an entity or supplied by an override.

    `is_dead` follows the death fact, which may exist without a usable date.
    """

    name: str
    date_of_birth: FactDate | None = None
    date_of_death: FactDate | None = None
    is_dead: bool = False
    url: str | None = None
    custom_message: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _death_date_implies_dead(cls, data):
        if isinstance(data, dict) and data.get("date_of_death") is not None:
            data = {**data, "is_dead": True}
        return data

    @property
    def has_dob(self) -> bool:
        return self.date_of_birth is not None
