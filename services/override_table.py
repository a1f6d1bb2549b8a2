from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from models.override_entry import OverrideEntry


class OverrideTable:
    """Ordered, read-only alias table consulted before any network lookup."""

    def __init__(self, entries: Iterable[OverrideEntry]) -> None:
        self._entries: tuple[OverrideEntry, ...] = tuple(entries)

    @property
    def entries(self) -> tuple[OverrideEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def match(self, search_term: Optional[str]) -> Optional[OverrideEntry]:
        """Return the first entry with an alias equal to the lower-cased search term."""
        if not search_term:
            return None
        folded = search_term.lower()
        for entry in self._entries:
            if entry.matches(folded):
                return entry
        return None


def load_override_table(path: str | Path) -> OverrideTable:
    """Build a table from a JSON list of {"aliases": ..., "person": {...}} objects."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Override file {path} must contain a JSON list")
    return OverrideTable(OverrideEntry.model_validate(item) for item in data)


@lru_cache(maxsize=1)
def get_override_table() -> OverrideTable:
    from config.settings import get_settings
    settings = get_settings()
    if settings.overrides_path:
        table = load_override_table(settings.overrides_path)
        logging.info(f"Loaded {len(table)} overrides from {settings.overrides_path}")
        return table
    from config.overrides import OVERRIDES
    return OverrideTable(OVERRIDES)
