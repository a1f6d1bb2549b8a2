from __future__ import annotations

from typing import Iterable, List, Optional

from models.entity import WikidataEntity
from services.errors import NotFound

INSTANCE_OF = "P31"
HUMAN = "Q5"
ENGLISH_WIKIPEDIA = "enwiki"


def is_human(entity: WikidataEntity) -> bool:
    """True when any "instance of" statement points at the human item."""
    for value in entity.claim_values(INSTANCE_OF):
        if isinstance(value, dict) and value.get("id") == HUMAN:
            return True
    return False


def has_article(entity: WikidataEntity) -> bool:
    return entity.sitelink_title(ENGLISH_WIKIPEDIA) is not None


def first_person(entities: Iterable[WikidataEntity], search_term: Optional[str] = None) -> WikidataEntity:
    """Return the first human with an English Wikipedia article, in resolver order."""
    for entity in entities:
        if is_human(entity) and has_article(entity):
            return entity
    raise NotFound(search_term)


def all_people(entities: Iterable[WikidataEntity], search_term: Optional[str] = None) -> List[WikidataEntity]:
    """Return every human entity, in resolver order; the article link is optional here."""
    people = [entity for entity in entities if is_human(entity)]
    if not people:
        raise NotFound(search_term)
    return people
