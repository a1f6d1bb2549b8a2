from .knowledge_base import KnowledgeBasePort

__all__ = [
    "KnowledgeBasePort",
]
