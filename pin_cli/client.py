"""HTTP client for the pinboard.in v1 API."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .errors import APIError, NetworkError
from .tags import Tag, parse_tags

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.pinboard.in/v1"
DEFAULT_TIMEOUT = 20.0

_REDACTED = "REDACTED"


class PinboardClient:
    """Issues authenticated GET requests against the pinboard.in API."""

    def __init__(
        self,
        token: str,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PinboardClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """GET ``path`` and return the response body.

        The auth token and ``format=json`` are added to the query.

        Raises:
            NetworkError: If no usable response was received
            APIError: If the status is not 200; the message is the body
        """
        query: Dict[str, Any] = {"auth_token": self.token}
        query.update(params or {})
        query["format"] = "json"

        url = self._loggable_url(path, query)
        logger.debug("GET %s...", url)
        try:
            resp = self._client.get(path, params=query)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e
        logger.debug("GET %s...done(%d).", url, resp.status_code)

        body = resp.text
        if resp.status_code != httpx.codes.OK:
            raise APIError(body, status_code=resp.status_code)
        return body

    def _loggable_url(self, path: str, query: Dict[str, Any]) -> str:
        redacted = dict(query, auth_token=_REDACTED)
        return str(httpx.URL(f"{self.base_url}{path}", params=redacted))

    def get_tags(self) -> List[Tag]:
        """Fetch every tag with its use count.

        Raises:
            NetworkError, APIError: See ``_get``
            TagParseError: If the listing cannot be deserialized
        """
        return parse_tags(self._get("/tags/get"))

    def rename_tag(self, old: str, new: str) -> str:
        """Rename ``old`` to ``new``, merging it if ``new`` already exists.

        Returns:
            The raw response body
        """
        return self._get("/tags/rename", params={"old": old, "new": new})
