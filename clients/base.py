import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class BaseClient:
    """Base class for outbound JSON API clients."""

    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    TIMEOUT_SECONDS = 10.0

    def __init__(self, timeout: Optional[float] = None):
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": self.USER_AGENT,
            "Accept": "application/json",
        })
        self.timeout = timeout if timeout is not None else self.TIMEOUT_SECONDS

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """Make a single request; non-2xx responses raise requests.HTTPError."""
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response

    def get(self, url: str, **kwargs) -> requests.Response:
        return self._request("GET", url, **kwargs)

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        """GET a JSON document, returning None on any transport, status or decode failure."""
        try:
            response = self.get(url, params=params)
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {self._redact(str(e))}")
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
        return None

    def _redact(self, message: str) -> str:
        """Strip credentials from a message before it is logged."""
        return message

    def close(self) -> None:
        self.session.close()
