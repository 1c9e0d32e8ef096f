# chequetrack/services/sheets_client.py

import json
import logging
from typing import Any, Callable, Dict, Optional

import requests

from chequetrack.config import HTTP_TIMEOUT

logger = logging.getLogger(__name__)


class SheetsSyncClient:
    """
    HTTP client for the spreadsheet-backed endpoint (a deployed Apps Script web app).

    The endpoint URL is read through `url_provider` on every call so a URL saved in
    settings takes effect without rebuilding the client. An empty URL disables sync.
    """

    def __init__(self, url_provider: Callable[[], str],
                 session: Optional[requests.Session] = None,
                 timeout: float = HTTP_TIMEOUT):
        self.url_provider = url_provider
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def url(self) -> str:
        return (self.url_provider() or "").strip()

    def is_configured(self) -> bool:
        return bool(self.url)

    def fetch_all(self) -> Optional[Dict[str, Any]]:
        """GET ?action=getAll. Returns the decoded body, or None on any failure."""
        url = self.url
        if not url:
            logger.debug("No sync endpoint configured, skipping fetch.")
            return None
        try:
            response = self.session.get(url, params={"action": "getAll"}, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout:
            logger.warning("Sync fetch timed out after %ss", self.timeout)
            return None
        except (requests.RequestException, ValueError) as exc:
            logger.error("Sync fetch error: %s", exc)
            return None
        if not isinstance(data, dict):
            logger.error("Sync fetch returned %s instead of an object", type(data).__name__)
            return None
        return data

    def push(self, action: str, payload: Dict[str, Any]) -> None:
        """
        POST {"action": action, **payload}. Sent as text/plain so the script endpoint
        accepts it without a CORS preflight. Raises requests.RequestException on failure.
        """
        url = self.url
        if not url:
            logger.debug("No sync endpoint configured, dropping %s.", action)
            return
        body = json.dumps({"action": action, **payload}, ensure_ascii=False)
        response = self.session.post(
            url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "text/plain"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        logger.info("Pushed %s to sync endpoint.", action)
