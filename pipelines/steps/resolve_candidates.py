from __future__ import annotations

from pipelines.runner import RunContext
from services.entity_resolver import EntityResolver


class ResolveCandidates:
    def __init__(self, resolver: EntityResolver) -> None:
        self.resolver = resolver

    def run(self, ctx: RunContext) -> RunContext:
        ctx.entity_ids = self.resolver.resolve_candidates(ctx.query or "")
        ctx.meta["candidates_total"] = len(ctx.entity_ids)
        return ctx
