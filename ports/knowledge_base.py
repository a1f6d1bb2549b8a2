from __future__ import annotations

from typing import Any, Dict, List, Protocol


class KnowledgeBasePort(Protocol):
    def search_entities(self, search_term: str, language: str = "en") -> Dict[str, Any]:
        ...

    def get_entities(self, entity_ids: List[str]) -> Dict[str, Any]:
        ...
