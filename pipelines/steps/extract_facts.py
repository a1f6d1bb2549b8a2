from __future__ import annotations

from pipelines.runner import RunContext
from services.fact_extractor import WIKIPEDIA_BASE_URL, extract


class ExtractFacts:
    def __init__(self, base_url: str = WIKIPEDIA_BASE_URL) -> None:
        self.base_url = base_url

    def run(self, ctx: RunContext) -> RunContext:
        ctx.people = [extract(entity, self.base_url) for entity in ctx.entities]
        return ctx
