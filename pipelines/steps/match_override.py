from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from pipelines.runner import RunContext
from services.override_table import OverrideTable
from services.result_formatter import format_result


class MatchOverride:
    def __init__(self, table: OverrideTable, today: Optional[date] = None) -> None:
        self.table = table
        self.today = today

    def run(self, ctx: RunContext) -> RunContext:
        entry = self.table.match(ctx.query)
        if entry is None:
            return ctx
        logging.info(
            f"Override hit for {ctx.query!r}",
            extra={"step": "match_override", "status": "hit", "term": ctx.query},
        )
        ctx.people = [entry.person]
        ctx.results = [format_result(entry.person, self.today)]
        ctx.meta["override"] = True
        # Overrides never touch the network
        ctx.halted = True
        return ctx
