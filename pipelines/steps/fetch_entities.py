from __future__ import annotations

from pipelines.runner import RunContext
from services.entity_resolver import EntityResolver


class FetchEntities:
    def __init__(self, resolver: EntityResolver) -> None:
        self.resolver = resolver

    def run(self, ctx: RunContext) -> RunContext:
        ctx.entities = self.resolver.fetch_entities(ctx.entity_ids)
        return ctx
