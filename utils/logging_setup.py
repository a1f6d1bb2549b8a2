from __future__ import annotations

import logging
import os
import sys

from config.settings import get_settings


_INITIALIZED: bool = False

# Structured fields appended to every line; lookups pass them via `extra=`
LOOKUP_FIELDS = ("step", "status", "duration_ms", "term", "error", "run_id")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s " + " ".join(
    f"{name}=%({name})s" for name in LOOKUP_FIELDS
)


class SafeExtraFormatter(logging.Formatter):
    """Fill lookup fields a record did not carry.

    `run_id` falls back to the RUN_ID environment variable so every line of
    one CLI invocation shares an id; other fields fall back to "-".
    """

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for name in LOOKUP_FIELDS:
            if getattr(record, name, None) is None:
                default = os.getenv("RUN_ID", "-") if name == "run_id" else "-"
                setattr(record, name, default)
        return super().format(record)


def init_logging(level: str | None = None) -> None:
    """Attach one stderr handler to the root logger; later calls are no-ops.

    stdout is left to command output (the CLI prints JSON there).
    """
    global _INITIALIZED
    if _INITIALIZED:
        return

    log_level = getattr(logging, (level or get_settings().log_level).upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        handler.setFormatter(SafeExtraFormatter(fmt=LOG_FORMAT))
        root_logger.addHandler(handler)

    # requests/urllib3 chatter is noise at INFO
    logging.getLogger("urllib3").setLevel(max(log_level, logging.WARNING))

    _INITIALIZED = True
