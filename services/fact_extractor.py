from __future__ import annotations

import logging
import re
from typing import Any, Optional

from pydantic import ValidationError

from models.entity import WikidataEntity
from models.fact_date import FactDate
from models.person_model import PersonModel

DATE_OF_BIRTH = "P569"
DATE_OF_DEATH = "P570"

WIKIPEDIA_BASE_URL = "https://en.wikipedia.org/wiki/"

# Wikidata time precision codes; anything coarser than a year reads as a year
PRECISION_YEAR = 9
PRECISION_MONTH = 10
PRECISION_DAY = 11

# e.g. +1955-02-24T00:00:00Z or -0044-03-15T00:00:00Z; month/day are 00 below day precision
_WIKIDATA_TIME = re.compile(r"^([+-])(\d{1,16})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z$")


def wikipedia_url(title: str, base_url: str = WIKIPEDIA_BASE_URL) -> str:
    """Build an article URL using Wikipedia's slug convention for spaces and parentheses."""
    slug = title.replace(" ", "_").replace("(", "%28").replace(")", "%29")
    return f"{base_url}{slug}"


def parse_wikidata_time(value: Optional[str], precision: Optional[int] = None) -> Optional[FactDate]:
    """Parse a Wikidata time string, keeping only the precision the statement claims.

    BCE years come back negative. Without a precision code it is inferred from
    zeroed month/day fields. Returns None for year 0 and anything unparsable.
    """
    if not value:
        return None
    m = _WIKIDATA_TIME.match(str(value).strip())
    if not m:
        return None
    sign, year, month, day = m.group(1), int(m.group(2)), int(m.group(3)), int(m.group(4))
    if year == 0:
        return None
    if sign == "-":
        year = -year

    if precision is None:
        precision = PRECISION_DAY
    if precision <= PRECISION_YEAR or month == 0:
        month, day = None, None
    elif precision == PRECISION_MONTH or day == 0:
        day = None

    try:
        return FactDate(year=year, month=month, day=day)
    except ValidationError:
        return None


def _first_time_value(entity: WikidataEntity, property_id: str) -> Optional[FactDate]:
    for value in entity.claim_values(property_id):
        raw: Any = value.get("time") if isinstance(value, dict) else None
        precision = value.get("precision") if isinstance(value, dict) else None
        parsed = parse_wikidata_time(raw, precision if isinstance(precision, int) else None)
        if parsed is not None:
            return parsed
        logging.warning(
            f"Ignoring unusable {property_id} value {raw!r} on {entity.id}",
            extra={"step": "extract_facts", "status": "skipped"},
        )
        return None
    if entity.asserts_claim(property_id):
        logging.warning(
            f"{entity.id} has a {property_id} statement without a value",
            extra={"step": "extract_facts", "status": "skipped"},
        )
    return None


def extract(entity: WikidataEntity, base_url: str = WIKIPEDIA_BASE_URL) -> PersonModel:
    """Read name, article URL and birth/death facts off a person entity.

    A death statement marks the person dead even when its date is unknown
    or unusable.
    """
    title = entity.sitelink_title("enwiki")
    return PersonModel(
        name=entity.label("en") or entity.id,
        date_of_birth=_first_time_value(entity, DATE_OF_BIRTH),
        date_of_death=_first_time_value(entity, DATE_OF_DEATH),
        is_dead=entity.asserts_claim(DATE_OF_DEATH),
        url=wikipedia_url(title, base_url) if title else None,
    )
