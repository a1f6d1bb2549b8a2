"""
Transport-agnostic chat handlers.

Messages and inline queries arrive as Bot API shaped dicts; replies are plain
Markdown strings or lists of inline article dicts. Sending them is up to the
chat transport.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from config.settings import get_settings
from services.dead_or_alive import DeadOrAlive
from services.rendering import build_inline_results, render_error, render_result

COMMANDS = ("/dead", "/alive")
USAGE = "Send /dead or /alive followed by a name, e.g. /dead Steve Jobs."


def parse_text_from_command(text: str, offset: int, length: int) -> Tuple[str, str]:
    """Split a message into its command token and the text after it."""
    command = text[offset:offset + length]
    # Commands addressed in groups look like /dead@SomeBot
    command = command.split("@", 1)[0]
    rest = text[offset + length + 1:]
    return command, rest.strip()


def build_response(search_term: str, service: DeadOrAlive) -> str:
    try:
        result = service.resolve_single(search_term)
    except Exception as e:
        logging.info(
            f"Lookup for {search_term!r} failed: {e}",
            extra={"step": "build_response", "status": "error", "term": search_term, "error": type(e).__name__},
        )
        return render_error(search_term, e, get_settings().issue_tracker_url)
    return render_result(result)


def build_query_response(search_term: str, service: DeadOrAlive) -> List[Dict[str, Any]]:
    try:
        return build_inline_results(service.resolve_suggestions(search_term))
    except Exception as e:
        logging.warning(
            f"Inline results for {search_term!r} failed: {e}",
            extra={"step": "build_query_response", "status": "empty", "term": search_term, "error": type(e).__name__},
        )
        return []


def text_received(message: Dict[str, Any], service: DeadOrAlive) -> Optional[str]:
    """Return the reply for a text message, or None when it is not ours to answer."""
    text = message.get("text") or ""
    search_term = text.strip()

    entities = message.get("entities") or []
    if entities and entities[0].get("type") == "bot_command":
        first = entities[0]
        command, rest = parse_text_from_command(text, int(first.get("offset", 0)), int(first.get("length", 0)))
        if command not in COMMANDS:
            return None
        search_term = rest

    if not search_term:
        return USAGE
    return build_response(search_term, service)


def query_received(inline_query: Dict[str, Any], service: DeadOrAlive) -> List[Dict[str, Any]]:
    """Return inline articles for a query; an empty query never hits the network."""
    query = (inline_query.get("query") or "").strip()
    if not query:
        return []
    return build_query_response(query, service)
