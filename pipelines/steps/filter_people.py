from __future__ import annotations

from typing import Literal

from pipelines.runner import RunContext
from services import person_filter

FilterMode = Literal["first", "all"]


class FilterPeople:
    """Keep human entities: the first with an article ("first"), or all of them ("all")."""

    def __init__(self, mode: FilterMode = "first") -> None:
        if mode not in ("first", "all"):
            raise ValueError(f"Unknown filter mode: {mode}")
        self.mode = mode

    def run(self, ctx: RunContext) -> RunContext:
        if self.mode == "first":
            ctx.entities = [person_filter.first_person(ctx.entities, ctx.query)]
        else:
            ctx.entities = person_filter.all_people(ctx.entities, ctx.query)
        ctx.meta["people_total"] = len(ctx.entities)
        return ctx
