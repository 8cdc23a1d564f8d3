import logging
import mimetypes
import os
from typing import Any, Dict, List, Optional

import requests

from picmenu.core.catalog import DEFAULT_CATEGORY, DEFAULT_MODEL
from picmenu.samples import sample_menu

logger = logging.getLogger(__name__)

USER_ERROR_MESSAGE = "Failed to process menu image. Please try again."


class MenuClientError(RuntimeError):
    """Raised when the service cannot turn a menu photo into dishes."""


def filter_menu(items: List[Dict[str, Any]], term: str) -> List[Dict[str, Any]]:
    """Case-insensitive search over dish names; an empty term keeps everything."""
    needle = term.lower()
    return [item for item in items if needle in item.get("name", "").lower()]


class MenuClient:
    def __init__(self, base_url: str = "http://localhost:8000", session: Optional[requests.Session] = None,
                 timeout: float = 90.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _post(self, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.session.post(f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", path, exc)
            raise MenuClientError(USER_ERROR_MESSAGE) from exc

        if not response.ok:
            logger.error("API error: %s %s", response.status_code, response.reason)
            raise MenuClientError(USER_ERROR_MESSAGE)
        try:
            body = response.json()
        except ValueError as exc:
            logger.error("Response from %s is not JSON", path)
            raise MenuClientError(USER_ERROR_MESSAGE) from exc
        if not isinstance(body, dict):
            logger.error("Unexpected response shape from %s: %s", path, type(body).__name__)
            raise MenuClientError(USER_ERROR_MESSAGE)
        if body.get("error"):
            logger.error("Processing error: %s", body["error"])
            raise MenuClientError(USER_ERROR_MESSAGE)
        return body

    def upload(self, path: str) -> str:
        content_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
        with open(path, "rb") as fh:
            body = self._post("/api/upload", files={"file": (os.path.basename(path), fh, content_type)})
        return body["url"]

    def parse_menu(self, menu_url: str, category: str = DEFAULT_CATEGORY.value, model: str = DEFAULT_MODEL.value) -> List[Dict[str, Any]]:
        body = self._post("/api/parseMenu", json={"menuUrl": menu_url, "category": category, "model": model})
        return body.get("menu") or []

    def visualize(self, path: str, category: str = DEFAULT_CATEGORY.value, model: str = DEFAULT_MODEL.value) -> List[Dict[str, Any]]:
        """Upload a menu photo and return its dishes with generated pictures."""
        url = self.upload(path)
        logger.info("Uploaded %s to %s", path, url)
        return self.parse_menu(url, category=category, model=model)

    def sample(self) -> List[Dict[str, Any]]:
        """The built-in pre-parsed sample menu; no upload and no model calls."""
        return sample_menu()
