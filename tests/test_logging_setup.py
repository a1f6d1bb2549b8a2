from __future__ import annotations

import logging

from utils.logging_setup import LOG_FORMAT, SafeExtraFormatter


def _record(**extra):
    record = logging.LogRecord("lookup", logging.INFO, __file__, 1, "resolved", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_missing_fields_default_to_dash(monkeypatch):
    monkeypatch.delenv("RUN_ID", raising=False)
    line = SafeExtraFormatter(fmt=LOG_FORMAT).format(_record(step="FilterPeople"))
    assert "resolved step=FilterPeople status=- duration_ms=- term=- error=- run_id=-" in line


def test_run_id_comes_from_environment(monkeypatch):
    monkeypatch.setenv("RUN_ID", "abc123")
    line = SafeExtraFormatter(fmt=LOG_FORMAT).format(_record(term=None))
    assert line.endswith("term=- error=- run_id=abc123")


def test_explicit_run_id_wins(monkeypatch):
    monkeypatch.setenv("RUN_ID", "abc123")
    line = SafeExtraFormatter(fmt=LOG_FORMAT).format(_record(run_id="req-7", term="steve jobs"))
    assert "term=steve jobs" in line
    assert line.endswith("run_id=req-7")
