from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.entity_resolver'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Settings and the override table are cached per process; tests tweak env between calls
    for name in ("OVERRIDES_PATH", "HTTP_TRACE", "HTTP_LOG_PATH", "MAX_CANDIDATES", "FETCH_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    from config.settings import get_settings
    from services.override_table import get_override_table
    get_settings.cache_clear()
    get_override_table.cache_clear()
    yield
    get_settings.cache_clear()
    get_override_table.cache_clear()


def _statement(prop: str, datavalue: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    snak: Dict[str, Any] = {"snaktype": "value" if datavalue else "somevalue", "property": prop}
    if datavalue:
        snak["datavalue"] = datavalue
    return {"mainsnak": snak, "type": "statement", "rank": "normal"}


def make_entity(
    qid: str,
    label: Optional[str] = None,
    instance_of: Optional[str] = "Q5",
    enwiki: Optional[str] = None,
    born: Optional[str] = None,
    died: Optional[str] = None,
    born_precision: int = 11,
    died_precision: int = 11,
    died_unknown: bool = False,
) -> Dict[str, Any]:
    """Build a wbgetentities-shaped entity record.

    `died_unknown` adds a P570 statement with an unknown value (snaktype "somevalue").
    """
    claims: Dict[str, List[Dict[str, Any]]] = {}
    if instance_of:
        claims["P31"] = [_statement("P31", {
            "type": "wikibase-entityid",
            "value": {"entity-type": "item", "numeric-id": int(instance_of[1:]), "id": instance_of},
        })]
    for prop, value, precision in (("P569", born, born_precision), ("P570", died, died_precision)):
        if value:
            claims[prop] = [_statement(prop, {
                "type": "time",
                "value": {"time": value, "timezone": 0, "precision": precision, "calendarmodel": "http://www.wikidata.org/entity/Q1985727"},
            })]
    if died_unknown and not died:
        claims["P570"] = [_statement("P570", None)]
    return {
        "id": qid,
        "type": "item",
        "labels": {"en": {"language": "en", "value": label}} if label else {},
        "claims": claims,
        "sitelinks": {"enwiki": {"site": "enwiki", "title": enwiki}} if enwiki else {},
    }


class FakeKnowledgeBase:
    """In-memory stand-in for WikidataClient."""

    def __init__(
        self,
        entities: Optional[List[Dict[str, Any]]] = None,
        search: Any = None,
        delays: Optional[Dict[str, float]] = None,
        failures: Optional[Dict[str, Exception]] = None,
    ) -> None:
        self.entities = {e["id"]: e for e in (entities or [])}
        if search is None:
            search = {"search": [{"id": qid} for qid in self.entities]}
        self.search_payload = search
        self.delays = delays or {}
        self.failures = failures or {}
        self.search_calls: List[str] = []
        self.entity_calls: List[List[str]] = []

    def search_entities(self, search_term: str, language: str = "en") -> Dict[str, Any]:
        self.search_calls.append(search_term)
        if isinstance(self.search_payload, Exception):
            raise self.search_payload
        return self.search_payload

    def get_entities(self, entity_ids: List[str]) -> Dict[str, Any]:
        self.entity_calls.append(list(entity_ids))
        entity_id = entity_ids[0]
        if entity_id in self.delays:
            time.sleep(self.delays[entity_id])
        if entity_id in self.failures:
            raise self.failures[entity_id]
        if entity_id not in self.entities:
            return {"entities": {entity_id: {"id": entity_id, "missing": ""}}}
        return {"entities": {entity_id: self.entities[entity_id]}}

    @property
    def network_calls(self) -> int:
        return len(self.search_calls) + len(self.entity_calls)


@pytest.fixture
def entity_factory():
    return make_entity


@pytest.fixture
def kb_factory():
    return FakeKnowledgeBase


@pytest.fixture
def steve_jobs():
    return make_entity(
        "Q19837",
        label="Steve Jobs",
        enwiki="Steve Jobs",
        born="+1955-02-24T00:00:00Z",
        died="+2011-10-05T00:00:00Z",
    )
