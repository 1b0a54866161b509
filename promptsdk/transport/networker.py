"""HTTP transport for the prompt service.

``Networker.fetch`` never raises for network or HTTP failures: it returns an
``Err`` holding a ``NetworkError`` subclass, and callers branch on it.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from promptsdk.core.errors import (
    UNAUTHORIZED_HINT,
    BadInput,
    BadRequest,
    Forbidden,
    NetworkError,
    NotFound,
    Unauthorized,
)
from promptsdk.endpoints.base import FetchMethod
from promptsdk.result import Outcome, err, ok

logger = logging.getLogger(__name__)

_NO_BODY = object()


class Networker:
    """Make HTTP calls and map failures to error values."""

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 30.0) -> None:
        """Create a networker.

        Args:
            client: Optional injected httpx client for testing / connection reuse.
            timeout: Per-request timeout in seconds.
        """
        self._client = client
        self._timeout = timeout

    async def fetch(
        self,
        url: httpx.URL | str,
        method: FetchMethod,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Outcome[Any]:
        """Fetch ``url`` and return its decoded JSON body.

        Args:
            url: The URL to query.
            method: HTTP method.
            body: Optional JSON-serializable request body.
            headers: Optional request headers.
        """
        try:
            if self._client is not None:
                resp = await self._send(self._client, url, method, body, headers)
            else:
                async with httpx.AsyncClient() as client:
                    resp = await self._send(client, url, method, body, headers)
        except httpx.HTTPError as exc:
            logger.debug('Request to %s failed: %r', url, exc)
            return err(NetworkError(message=f'Network Error on {url}', url=str(url)))

        return _to_outcome(resp)

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: httpx.URL | str,
        method: FetchMethod,
        body: Any | None,
        headers: dict[str, str] | None,
    ) -> httpx.Response:
        return await client.request(
            method.upper(),
            url,
            json=body,
            headers=headers,
            timeout=self._timeout,
        )


def _to_outcome(resp: httpx.Response) -> Outcome[Any]:
    url = str(resp.request.url)
    status = resp.status_code
    payload = _json_or_missing(resp)
    message = _error_message(payload)

    if status == 400:
        return err(BadRequest(message=f'Bad Request: {message}', url=url, status_code=status))
    if status == 401:
        return err(Unauthorized(message=f'Unauthorized: "{message}".{UNAUTHORIZED_HINT}', url=url, status_code=status))
    if status == 403:
        return err(Forbidden(message=f'Forbidden: {message}', url=url, status_code=status))
    if status == 404:
        return err(NotFound(message=f'Not found: "{message}"', url=url, status_code=status))
    if status == 422:
        return err(BadInput(
            message=f'Bad Input: {message}',
            url=url,
            status_code=status,
            details=_error_details(payload),
        ))
    if 400 <= status < 500:
        return err(NetworkError(message='Invalid Request', url=url, status_code=status))
    if status >= 500:
        return err(NetworkError(message='Server Error', url=url, status_code=status))

    if payload is _NO_BODY:
        return err(NetworkError(message='Server Error', url=url, status_code=status))
    return ok(payload)


def _json_or_missing(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return _NO_BODY


def _error_message(payload: Any) -> str:
    if isinstance(payload, dict) and isinstance(payload.get('error'), str):
        return payload['error']
    return ''


def _error_details(payload: Any) -> dict[str, list[str]]:
    details = payload.get('details') if isinstance(payload, dict) else None
    if not isinstance(details, dict):
        return {}
    return {
        str(key): [str(m) for m in value] if isinstance(value, list) else [str(value)]
        for key, value in details.items()
    }
