from __future__ import annotations

from datetime import date
from typing import Optional

from pipelines.runner import RunContext
from services.result_formatter import format_result


class FormatResults:
    def __init__(self, today: Optional[date] = None) -> None:
        # Pinned date for tests; None means "today" at formatting time
        self.today = today

    def run(self, ctx: RunContext) -> RunContext:
        ctx.results = [format_result(person, self.today) for person in ctx.people]
        return ctx
