"""HTTP client for the fixed data endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp
from pydantic import ValidationError

from fetchview._redact import redact_headers, truncate_for_log
from fetchview.config import FetchViewConfig
from fetchview.exceptions import FetchFailedError, FetchViewError, FetchViewTransportError
from fetchview.models.payload import ApiPayload
from fetchview.models.result import FetchFailure, FetchResult, FetchSuccess

_logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """Structural client interface used by the orchestrator.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`AiohttpClient`) concrete.
    """

    async def get(self) -> FetchResult:
        ...


class AiohttpClient:
    """Performs a single GET against ``config.url`` per call.

    Usage::

        async with AiohttpClient(config) as client:
            result = await client.get()
    """

    def __init__(
        self,
        config: FetchViewConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> AiohttpClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the owned HTTP session (borrowed sessions are left open)."""
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
        self._http_session = None

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def _require_session(self) -> aiohttp.ClientSession:
        if self._http_session is None:
            raise FetchViewError("Client not initialized. Use 'async with AiohttpClient(...) as client:'")
        return self._http_session

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if self._config.auth_token:
            headers["authorization"] = f"Bearer {self._config.auth_token}"
        return headers

    async def _get_json(self) -> tuple[int, dict[str, Any]]:
        """GET the endpoint and decode its JSON object body.

        Raises :class:`FetchViewTransportError` on network failure, timeout,
        non-2xx status, invalid JSON, or a body that is not an object.
        """
        http = self._require_session()
        endpoint = self._config.endpoint
        url = self._config.url
        headers = self._build_headers()

        _logger.debug("GET %s headers=%s", url, redact_headers(headers))

        status = 0
        try:
            async with http.get(
                url,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self._config.timeout),
            ) as resp:
                status = resp.status
                text = await resp.text()
        except aiohttp.ClientError as exc:
            raise FetchViewTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except TimeoutError as exc:
            raise FetchViewTransportError(
                f"Request to {endpoint} timed out after {self._config.timeout}s",
                endpoint=endpoint,
            ) from exc
        except UnicodeDecodeError as exc:
            raise FetchViewTransportError(
                f"Undecodable body from {endpoint}: {exc.reason}",
                status_code=status,
                endpoint=endpoint,
            ) from exc

        if not 200 <= status < 300:
            raise FetchViewTransportError(
                f"HTTP {status} from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            )

        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FetchViewTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            ) from exc

        if not isinstance(body, dict):
            raise FetchViewTransportError(
                f"Expected a JSON object from {endpoint}, got {type(body).__name__}",
                status_code=status,
                endpoint=endpoint,
            )

        _logger.debug("Response %s from %s: %s", status, endpoint, truncate_for_log(text))
        return status, body

    async def get(self) -> FetchResult:
        """Fetch the resource and collapse every failure mode into :class:`FetchFailure`."""
        self._require_session()
        status: int | None = None
        try:
            status, body = await self._get_json()
            try:
                payload = ApiPayload.from_response(body)
            except ValidationError as exc:
                raise FetchFailedError(
                    f"Unexpected payload shape from {self._config.endpoint}: {exc.error_count()} error(s)",
                    endpoint=self._config.endpoint,
                ) from exc
        except FetchViewError as exc:
            status_code = exc.status_code if isinstance(exc, FetchViewTransportError) else status
            return FetchFailure(reason=str(exc), status_code=status_code)
        return FetchSuccess(payload=payload, status_code=status)
