from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .person_model import PersonModel


class OverrideEntry(BaseModel):
    """Static alias configuration pairing search aliases with a fixed person payload."""

    aliases: tuple[str, ...]
    person: PersonModel

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("aliases", mode="before")
    @classmethod
    def _single_alias_to_tuple(cls, value):
        if isinstance(value, str):
            return (value,)
        return tuple(value)

    @field_validator("aliases")
    @classmethod
    def _require_alias(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("override entry needs at least one alias")
        return value

    def matches(self, search_term: str) -> bool:
        # Aliases are compared as given; callers fold the search term
        return search_term in self.aliases
