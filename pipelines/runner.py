from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Protocol, List, Optional

from utils.logging_setup import init_logging


@dataclass
class RunContext:
    query: Optional[str] = None
    entity_ids: list = field(default_factory=list)
    entities: list = field(default_factory=list)
    people: list = field(default_factory=list)
    results: list = field(default_factory=list)
    meta: dict = field(default_factory=dict)
    # Set by a step that has produced the final results; later steps are skipped
    halted: bool = False


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            if ctx.halted:
                break
            name = type(step).__name__
            started = time.monotonic()
            try:
                ctx = step.run(ctx)
            except Exception as e:
                logging.info(
                    f"{name} stopped the pipeline",
                    extra={
                        "step": name,
                        "status": "failed",
                        "duration_ms": int((time.monotonic() - started) * 1000),
                        "term": ctx.query,
                        "error": type(e).__name__,
                    },
                )
                raise
            logging.debug(
                f"{name} done",
                extra={
                    "step": name,
                    "status": "halted" if ctx.halted else "ok",
                    "duration_ms": int((time.monotonic() - started) * 1000),
                    "term": ctx.query,
                },
            )
        return ctx
