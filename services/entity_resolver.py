from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from config.settings import Settings, get_settings
from models.entity import WikidataEntity
from ports.knowledge_base import KnowledgeBasePort
from services.errors import NotFound, UpstreamError


class EntityResolver:
    """Turns a search term into ranked entity ids, then into full entity records."""

    def __init__(self, client: KnowledgeBasePort, settings: Optional[Settings] = None) -> None:
        self.client = client
        self.settings = settings or get_settings()

    def resolve_candidates(self, search_term: str) -> List[str]:
        """Return up to max_candidates entity ids in upstream relevance order.

        Raises UpstreamError when the payload carries an error, NotFound when
        there are no hits. Transport errors from the client propagate as-is.
        """
        data = self.client.search_entities(search_term)
        if not isinstance(data, dict):
            raise UpstreamError("Wikidata search returned a non-object payload")
        if data.get("error"):
            logging.error(
                f"Wikidata search reported an error: {data['error']}",
                extra={"step": "resolve_candidates", "status": "upstream_error", "term": search_term},
            )
            raise UpstreamError(f"Wikidata search error: {data['error']}")

        hits = data.get("search") or []
        ids = [hit["id"] for hit in hits if isinstance(hit, dict) and hit.get("id")]
        if not ids:
            raise NotFound(search_term)
        return ids[: self.settings.max_candidates]

    def fetch_entity(self, entity_id: str) -> WikidataEntity:
        try:
            data = self.client.get_entities([entity_id])
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Fetching {entity_id} failed: {e}") from e
        return self._parse_entity(entity_id, data)

    def fetch_entities(self, entity_ids: List[str]) -> List[WikidataEntity]:
        """Fetch every id concurrently; the result list follows the input order.

        The first failure, or the fan-out deadline, cancels all outstanding
        fetches and fails the whole call with UpstreamError.
        """
        if not entity_ids:
            return []
        max_workers = max(1, min(self.settings.fetch_concurrency, len(entity_ids)))
        ex = _fut.ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="wikidata-fetch")
        try:
            futures = [ex.submit(self.fetch_entity, entity_id) for entity_id in entity_ids]
            done, pending = _fut.wait(
                futures,
                timeout=self.settings.fetch_timeout_seconds,
                return_when=_fut.FIRST_EXCEPTION,
            )
            for entity_id, future in zip(entity_ids, futures):
                if future not in done or future.exception() is None:
                    continue
                error = future.exception()
                if isinstance(error, UpstreamError):
                    raise error
                raise UpstreamError(f"Fetching {entity_id} failed: {error}") from error
            if pending:
                raise UpstreamError(
                    f"Timed out after {self.settings.fetch_timeout_seconds}s fetching {len(pending)} of {len(futures)} entities"
                )
            return [future.result() for future in futures]
        finally:
            ex.shutdown(wait=False, cancel_futures=True)

    @staticmethod
    def _parse_entity(entity_id: str, data: Dict[str, Any]) -> WikidataEntity:
        if not isinstance(data, dict):
            raise UpstreamError(f"Wikidata returned a non-object payload for {entity_id}")
        if data.get("error"):
            raise UpstreamError(f"Wikidata entity error for {entity_id}: {data['error']}")
        raw = (data.get("entities") or {}).get(entity_id)
        if not isinstance(raw, dict) or "missing" in raw:
            raise UpstreamError(f"Wikidata has no entity {entity_id}")
        try:
            return WikidataEntity.model_validate(raw)
        except ValidationError as e:
            raise UpstreamError(f"Malformed entity {entity_id}: {e}") from e
