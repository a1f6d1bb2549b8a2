from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def _ensure_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass


def log_call(
    *,
    caller: str,
    action: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    duration_ms: Optional[int] = None,
    status: str = "ok",
    http_status: Optional[int] = None,
    error: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing an upstream HTTP call if tracing is enabled.

    Controlled by HTTP_TRACE / HTTP_LOG_PATH in config/settings.py
    """
    from config.settings import get_settings
    settings = get_settings()
    if not settings.http_trace:
        return

    log_path = Path(settings.http_log_path)
    _ensure_parent_dir(log_path)

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "caller": caller,
        "action": action,
        "url": url,
        "params": params or {},
        "duration_ms": duration_ms,
        "status": status,
        "http_status": http_status,
        "error": error,
    }
    run_id = os.getenv("RUN_ID")
    if run_id:
        payload["run_id"] = run_id

    if extras:
        payload["extras"] = extras

    try:
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError:
        # Never break a lookup on trace failures
        return
