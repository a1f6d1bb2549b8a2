from __future__ import annotations

import pytest

from models.entity import WikidataEntity
from services.errors import NotFound
from services.person_filter import all_people, first_person, is_human


def _entities(*raws):
    return [WikidataEntity.model_validate(r) for r in raws]


def test_is_human_checks_any_instance_of_value(entity_factory):
    raw = entity_factory("Q1", label="Multi", instance_of="Q215627")
    raw["claims"]["P31"].append(entity_factory("Q0")["claims"]["P31"][0])
    assert is_human(WikidataEntity.model_validate(raw)) is True
    assert is_human(WikidataEntity.model_validate(entity_factory("Q2", instance_of="Q4167410"))) is False
    assert is_human(WikidataEntity.model_validate(entity_factory("Q3", instance_of=None))) is False


def test_first_person_skips_non_humans_even_with_exact_name(entity_factory):
    entities = _entities(
        entity_factory("Q1", label="Steve Jobs", instance_of="Q11424", enwiki="Steve Jobs (film)"),
        entity_factory("Q2", label="Steve Jobs", enwiki="Steve Jobs"),
    )
    assert first_person(entities).id == "Q2"


def test_first_person_requires_article(entity_factory):
    entities = _entities(
        entity_factory("Q1", label="No Article"),
        entity_factory("Q2", label="Has Article", enwiki="Has Article"),
    )
    assert first_person(entities).id == "Q2"


def test_first_person_keeps_resolver_order(entity_factory):
    entities = _entities(
        entity_factory("Q9", label="B", enwiki="B"),
        entity_factory("Q1", label="A", enwiki="A"),
    )
    assert first_person(entities).id == "Q9"


def test_first_person_not_found(entity_factory):
    with pytest.raises(NotFound) as exc:
        first_person(_entities(entity_factory("Q1", instance_of="Q515", enwiki="City")), "city")
    assert exc.value.search_term == "city"


def test_all_people_tolerates_missing_article(entity_factory):
    entities = _entities(
        entity_factory("Q1", label="A"),
        entity_factory("Q2", label="Band", instance_of="Q215380", enwiki="Band"),
        entity_factory("Q3", label="C", enwiki="C"),
    )
    assert [e.id for e in all_people(entities)] == ["Q1", "Q3"]


def test_all_people_not_found_when_empty(entity_factory):
    with pytest.raises(NotFound):
        all_people(_entities(entity_factory("Q1", instance_of=None)))
    with pytest.raises(NotFound):
        all_people([])
