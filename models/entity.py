from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DataValue(BaseModel):
    type: str | None = None
    value: Any = None

    model_config = ConfigDict(extra="ignore")


class Snak(BaseModel):
    snaktype: str = "value"
    property: str | None = None
    datavalue: DataValue | None = None

    model_config = ConfigDict(extra="ignore")


class Statement(BaseModel):
    mainsnak: Snak
    rank: str = "normal"

    model_config = ConfigDict(extra="ignore")


class LanguageValue(BaseModel):
    language: str | None = None
    value: str

    model_config = ConfigDict(extra="ignore")


class Sitelink(BaseModel):
    site: str | None = None
    title: str

    model_config = ConfigDict(extra="ignore")


class WikidataEntity(BaseModel):
    """Upstream record shape: one entry of a wbgetentities `entities` map."""

    id: str
    claims: dict[str, list[Statement]] = Field(default_factory=dict)
    labels: dict[str, LanguageValue] = Field(default_factory=dict)
    sitelinks: dict[str, Sitelink] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("claims", "labels", "sitelinks", mode="before")
    @classmethod
    def _empty_list_as_map(cls, value):
        # The API serializes empty maps as []
        if value == []:
            return {}
        return value

    def claim_values(self, property_id: str) -> list[Any]:
        """Return the raw datavalue payloads of a property, skipping statements without a value."""
        values: list[Any] = []
        for statement in self.claims.get(property_id) or []:
            datavalue = statement.mainsnak.datavalue
            if datavalue is None or datavalue.value is None:
                continue
            values.append(datavalue.value)
        return values

    def has_claim(self, property_id: str) -> bool:
        return bool(self.claims.get(property_id))

    def asserts_claim(self, property_id: str) -> bool:
        """True when some statement gives a value, known or unknown ("somevalue").

        "novalue" statements state the property does not apply.
        """
        return any(
            statement.mainsnak.snaktype != "novalue"
            for statement in self.claims.get(property_id) or []
        )

    def label(self, language: str = "en") -> str | None:
        entry = self.labels.get(language)
        return entry.value if entry else None

    def sitelink_title(self, site: str = "enwiki") -> str | None:
        entry = self.sitelinks.get(site)
        return entry.title if entry else None
