from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    wikidata_api_url: str
    wikipedia_base_url: str

    # Resolution limits
    max_candidates: int
    fetch_concurrency: int
    request_timeout_seconds: float
    fetch_timeout_seconds: float

    user_agent: str
    issue_tracker_url: str

    # Optional JSON file replacing the built-in override table
    overrides_path: str | None

    log_level: str
    run_env: str

    # Transport only; the core never reads it
    bot_token: str | None = None

    # Logging/tracing
    http_trace: bool = False
    http_log_path: str = "logs/http_calls.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    max_candidates = int(os.getenv("MAX_CANDIDATES", "5"))
    fetch_concurrency = int(os.getenv("FETCH_CONCURRENCY", "5"))
    if max_candidates < 1:
        raise RuntimeError("MAX_CANDIDATES must be at least 1")
    if fetch_concurrency < 1:
        raise RuntimeError("FETCH_CONCURRENCY must be at least 1")
    return Settings(
        wikidata_api_url=os.getenv("WIKIDATA_API_URL", "https://www.wikidata.org/w/api.php"),
        wikipedia_base_url=os.getenv("WIKIPEDIA_BASE_URL", "https://en.wikipedia.org/wiki/"),
        max_candidates=max_candidates,
        fetch_concurrency=fetch_concurrency,
        request_timeout_seconds=float(os.getenv("REQUEST_TIMEOUT", "10")),
        fetch_timeout_seconds=float(os.getenv("FETCH_TIMEOUT_SECONDS", "20")),
        user_agent=os.getenv("USER_AGENT", "dead-or-alive/1.0"),
        issue_tracker_url=os.getenv("ISSUE_TRACKER_URL", "https://github.com/weiran/dead-or-alive-bot/issues"),
        overrides_path=os.getenv("OVERRIDES_PATH") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        bot_token=os.getenv("BOT_TOKEN"),
        http_trace=_as_bool(os.getenv("HTTP_TRACE")),
        http_log_path=os.getenv("HTTP_LOG_PATH", "logs/http_calls.jsonl"),
    )
