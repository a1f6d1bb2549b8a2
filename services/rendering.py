from __future__ import annotations

from typing import Any, Dict, List, Optional

from models.result_model import ResultModel
from services.errors import NotFound, UpstreamError

DEFAULT_ISSUE_TRACKER_URL = "https://github.com/weiran/dead-or-alive-bot/issues"


def _subject(result: ResultModel) -> str:
    if result.url:
        return f"[{result.name}]({result.url})"
    return result.name


def render_result(result: ResultModel) -> str:
    """Turn a result into the one-line Markdown reply."""
    if result.custom_message:
        return result.custom_message

    subject = _subject(result)
    if result.is_dead:
        aged = f" aged {result.age}" if result.has_dob and result.age is not None else ""
        when = ""
        if result.date_of_death:
            preposition = "on" if result.date_of_death_precision in (None, "day") else "in"
            when = f" {preposition} {result.date_of_death}"
        return f"{subject} died{aged}{when}."

    if result.has_dob and result.age is not None:
        return f"{subject} is alive and kicking at {result.age} years old."
    return f"{subject} is alive."


def render_error(search_term: str, error: BaseException, issue_tracker_url: Optional[str] = None) -> str:
    if isinstance(error, NotFound):
        return f"Couldn't find a person named {search_term}."
    if isinstance(error, UpstreamError):
        url = issue_tracker_url or DEFAULT_ISSUE_TRACKER_URL
        return (
            f"Oops! The bot seems to be having issues - please open an issue at {url} "
            "(include your search term) and I'll take a look 👀😁"
        )
    return str(error) or type(error).__name__


def build_inline_results(results: List[ResultModel]) -> List[Dict[str, Any]]:
    """Map results to Bot API inline query articles, ids follow result order."""
    articles: List[Dict[str, Any]] = []
    for idx, result in enumerate(results):
        message = render_result(result)
        article: Dict[str, Any] = {
            "type": "article",
            "id": str(idx),
            "title": result.name,
            "description": message,
            "input_message_content": {
                "message_text": message,
                "parse_mode": "Markdown",
            },
        }
        if result.url:
            article["url"] = result.url
        articles.append(article)
    return articles
