"""Async HTTP client shared by the LeetCode API calls."""

from typing import Any, Optional

import httpx
from loguru import logger

from leetcode_daily.domain.exceptions import RemoteQueryError

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/96.0.4664.110 Safari/537.36"
)

DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
}


class AsyncHTTPClient:
    """Thin wrapper over ``httpx.AsyncClient`` that maps failures to RemoteQueryError."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Per-request timeout in seconds
            transport: Optional transport override (used by tests)
        """
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers=DEFAULT_HEADERS,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def get_text(self, url: str, headers: Optional[dict[str, str]] = None) -> str:
        """GET a page and return its body as text."""
        response = await self._request("GET", url, headers=headers)
        return response.text

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """POST a JSON body and decode the JSON response."""
        response = await self._request("POST", url, headers=headers, json=payload)
        try:
            return response.json()
        except ValueError as e:
            raise RemoteQueryError(f"Invalid JSON from {url}: {e}", response.status_code) from e

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{method} {url}")
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise RemoteQueryError(f"{method} {url} returned HTTP {status}", status) from e
        except httpx.TimeoutException as e:
            raise RemoteQueryError(f"{method} {url} timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise RemoteQueryError(f"{method} {url} failed: {e}") from e
        return response
