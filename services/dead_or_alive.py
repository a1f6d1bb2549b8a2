from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from config.settings import Settings, get_settings
from models.result_model import ResultModel
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.filter_people import FilterMode
from pipelines.steps import (
    ExtractFacts,
    FetchEntities,
    FilterPeople,
    FormatResults,
    MatchOverride,
    ResolveCandidates,
)
from ports.knowledge_base import KnowledgeBasePort
from services.entity_resolver import EntityResolver
from services.override_table import OverrideTable, get_override_table


class DeadOrAlive:
    """Entry points for single lookups and inline suggestions."""

    def __init__(
        self,
        client: Optional[KnowledgeBasePort] = None,
        override_table: Optional[OverrideTable] = None,
        settings: Optional[Settings] = None,
        today: Optional[date] = None,
    ) -> None:
        self.settings = settings or get_settings()
        if client is None:
            from wikidata_client import WikidataClient
            client = WikidataClient(self.settings)
        self.client = client
        self.override_table = override_table if override_table is not None else get_override_table()
        self.resolver = EntityResolver(self.client, self.settings)
        self.today = today

    def _lookup_steps(self, mode: FilterMode) -> list:
        return [
            ResolveCandidates(self.resolver),
            FetchEntities(self.resolver),
            FilterPeople(mode),
            ExtractFacts(self.settings.wikipedia_base_url),
            FormatResults(self.today),
        ]

    def resolve_single(self, search_term: str) -> ResultModel:
        """Resolve a term to one person.

        Raises NotFound, UpstreamError, or the client's transport error.
        """
        pipeline = Pipeline([MatchOverride(self.override_table, self.today)] + self._lookup_steps("first"))
        ctx = pipeline.run(RunContext(query=search_term))
        return ctx.results[0]

    def resolve_suggestions(self, search_term: str) -> List[ResultModel]:
        """Resolve a term to every matching person. Never raises; failures give []."""
        try:
            ctx = Pipeline(self._lookup_steps("all")).run(RunContext(query=search_term))
        except Exception as e:
            logging.warning(
                f"Suggestions for {search_term!r} failed: {e}",
                extra={"step": "resolve_suggestions", "status": "empty", "term": search_term, "error": type(e).__name__},
            )
            return []
        return list(ctx.results)
