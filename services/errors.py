from __future__ import annotations


class DeadOrAliveError(Exception):
    """Base class for resolution failures the chat layer knows how to phrase."""


class NotFound(DeadOrAliveError):
    """No search hits, or no candidate passed the person filter."""

    def __init__(self, search_term: str | None = None, reason: str = "not-found") -> None:
        self.search_term = search_term
        self.reason = reason
        super().__init__(reason if search_term is None else f"{reason}: {search_term}")


class UpstreamError(DeadOrAliveError):
    """The knowledge base reported an error, or an entity fetch failed."""
