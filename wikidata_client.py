"""
Wikidata API integration for person lookups.
"""
import logging
import time
from typing import Any, Dict, List, Optional

import requests

from config.settings import get_settings, Settings
from utils.http_logger import log_call


class WikidataClient:
    """Handles the Wikidata entity search and entity detail endpoints."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.api_url = self.settings.wikidata_api_url
        self.headers = {"User-Agent": self.settings.user_agent}

    def search_entities(self, search_term: str, language: str = "en") -> Dict[str, Any]:
        """Run wbsearchentities and return the raw JSON payload."""
        params = {
            'action': 'wbsearchentities',
            'search': search_term,
            'language': language,
            'uselang': language,
            'type': 'item',
            'format': 'json',
        }
        return self._get(params)

    def get_entities(self, entity_ids: List[str]) -> Dict[str, Any]:
        """Run wbgetentities for one or more ids and return the raw JSON payload."""
        params = {
            'action': 'wbgetentities',
            'ids': '|'.join(entity_ids),
            'format': 'json',
        }
        return self._get(params)

    def _get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        action = params['action']
        started = time.monotonic()
        http_status = None
        try:
            response = requests.get(
                self.api_url,
                params=params,
                headers=self.headers,
                timeout=self.settings.request_timeout_seconds,
            )
            http_status = response.status_code
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            duration_ms = int((time.monotonic() - started) * 1000)
            logging.error(
                f"Wikidata {action} failed: {e}",
                extra={"step": action, "status": "error", "duration_ms": duration_ms, "error": type(e).__name__},
            )
            log_call(
                caller="wikidata_client",
                action=action,
                url=self.api_url,
                params=params,
                duration_ms=duration_ms,
                status="error",
                http_status=http_status,
                error=str(e),
            )
            raise

        duration_ms = int((time.monotonic() - started) * 1000)
        logging.debug(
            f"Wikidata {action} returned {http_status}",
            extra={"step": action, "status": "ok", "duration_ms": duration_ms},
        )
        log_call(
            caller="wikidata_client",
            action=action,
            url=self.api_url,
            params=params,
            duration_ms=duration_ms,
            http_status=http_status,
        )
        return data
