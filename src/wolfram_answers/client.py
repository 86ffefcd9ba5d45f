"""HTTP clients for the Wolfram|Alpha Full Results and Spoken Results APIs.

`WolframClient` is synchronous; `AsyncWolframClient` offers the same surface
with coroutines. Both take a `FrozenConfig` once at construction and never
consult the environment afterwards.
"""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any, Self

import httpx

from .config import FrozenConfig, resolve_config
from .constants import FULL_RESULTS_URL, SPOKEN_RESULTS_URL
from .core import Document, decode_document
from .exceptions import InvalidFormatError, MissingKeyError, NetworkError

log = logging.getLogger(__name__)


def _full_results_params(query: str, app_id: str) -> dict[str, str]:
    return {
        "input": query,
        "format": "plaintext",
        "output": "JSON",
        "appid": app_id,
    }


def _spoken_params(query: str, app_id: str) -> dict[str, str]:
    return {"i": query, "appid": app_id}


def _ensure_json(body: bytes) -> bytes:
    try:
        json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidFormatError(f"Received JSON was invalid: {e}") from e
    return body


class _BaseClient:
    """Shared configuration handling for the sync and async clients."""

    def __init__(self, cfg: FrozenConfig | None = None) -> None:
        self.config = cfg or resolve_config().to_frozen()

    def _app_id(self) -> str:
        if not self.config.app_id:
            raise MissingKeyError(
                "No Wolfram|Alpha app id configured. Set WOLFRAM_APP_ID or pass "
                "FrozenConfig(app_id=...)."
            )
        return self.config.app_id

    def _network_error(self, url: str, e: Exception) -> NetworkError:
        if isinstance(e, httpx.TimeoutException):
            return NetworkError(f"Request timeout: {url}")
        if isinstance(e, httpx.HTTPStatusError):
            return NetworkError(f"HTTP error {e.response.status_code}: {url}")
        return NetworkError(f"Failed to fetch {url}: {e}")


class WolframClient(_BaseClient):
    """Synchronous Wolfram|Alpha client.

    Example:
        with WolframClient() as client:
            document = client.query("speed of light")
            print(document.remove_input_interpretation().get_answer())
    """

    def __init__(
        self,
        cfg: FrozenConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            cfg: Frozen configuration; resolved from the environment if omitted.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        """
        super().__init__(cfg)
        self._http = httpx.Client(timeout=self.config.timeout, transport=transport)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _get(self, url: str, params: dict[str, Any]) -> httpx.Response:
        """Make a GET request with centralized error handling."""
        log.debug("GET %s input=%r", url, params.get("input", params.get("i")))
        try:
            response = self._http.get(url, params=params, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._network_error(url, e) from e
        return response

    def query_json(self, query: str) -> bytes:
        """Return the raw Full Results JSON body for `query`.

        Raises:
            MissingKeyError: If no app id is configured.
            NetworkError: If the request fails.
            InvalidFormatError: If the body is not valid JSON.
        """
        params = _full_results_params(query, self._app_id())
        return _ensure_json(self._get(FULL_RESULTS_URL, params).content)

    def query(self, query: str) -> Document:
        """Return the decoded Full Results document for `query`."""
        return decode_document(self.query_json(query))

    def query_spoken(self, query: str) -> str:
        """Return the Spoken Results API sentence for `query`."""
        params = _spoken_params(query, self._app_id())
        return self._get(SPOKEN_RESULTS_URL, params).text


class AsyncWolframClient(_BaseClient):
    """Asynchronous Wolfram|Alpha client.

    Every coroutine delivers exactly one value or raises; failures are never
    turned into empty sentinel values.
    """

    def __init__(
        self,
        cfg: FrozenConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(cfg)
        self._http = httpx.AsyncClient(
            timeout=self.config.timeout, transport=transport
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get(self, url: str, params: dict[str, Any]) -> httpx.Response:
        log.debug("GET %s input=%r", url, params.get("input", params.get("i")))
        try:
            response = await self._http.get(url, params=params, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._network_error(url, e) from e
        return response

    async def query_json(self, query: str) -> bytes:
        params = _full_results_params(query, self._app_id())
        response = await self._get(FULL_RESULTS_URL, params)
        return _ensure_json(response.content)

    async def query(self, query: str) -> Document:
        return decode_document(await self.query_json(query))

    async def query_spoken(self, query: str) -> str:
        params = _spoken_params(query, self._app_id())
        response = await self._get(SPOKEN_RESULTS_URL, params)
        return response.text
