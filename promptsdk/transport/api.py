"""Invoke prompt service endpoints.

``Api.invoke`` glues an endpoint to the network:
prepare request -> build URL + headers -> fetch -> decode.
Each call is wrapped in a span and logged as an ``api.request`` event.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

import httpx

from promptsdk.endpoints.base import Endpoint, FetchMethod
from promptsdk.observability.tracing import Span
from promptsdk.result import Err, Outcome

T = TypeVar('T')


class SupportsFetch(Protocol):
    async def fetch(
        self,
        url: httpx.URL,
        method: FetchMethod,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Outcome[Any]:
        ...


class Api:
    """Helper for calling the prompt service through ``Endpoint`` objects."""

    def __init__(
        self,
        root: str | httpx.URL,
        network: SupportsFetch,
        api_key: str,
        sdk_version: str = '',
        sdk_type: str = '',
    ) -> None:
        self._root = httpx.URL(str(root))
        self._network = network
        self._api_key = api_key
        self._sdk_version = sdk_version
        self._sdk_type = sdk_type

    async def invoke(self, endpoint: Endpoint[Any, T], dto: Any = None) -> Outcome[T]:
        """Invoke an endpoint.

        Args:
            endpoint: The endpoint to invoke.
            dto: Input for ``endpoint.prepare_request``.

        Returns:
            The decoded response, or the network / decoding error.
        """
        request_info = endpoint.prepare_request(dto)
        url = self.build_url(request_info.path, request_info.query)

        with Span('promptsdk.api.request', event='api.request') as span:
            span.set_attribute('http.method', request_info.method.upper())
            span.set_attribute('http.url', str(url))
            span.set_attribute('sdk.version', self._sdk_version)
            span.set_attribute('sdk.type', self._sdk_type)

            fetched = await self._network.fetch(
                url,
                request_info.method,
                request_info.body,
                self.build_headers(),
            )
            if isinstance(fetched, Err):
                span.record_error(
                    type(fetched.error).__name__,
                    str(fetched.error),
                    getattr(fetched.error, 'status_code', None),
                )
                return fetched

            decoded = endpoint.decode_response(fetched.value)
            if isinstance(decoded, Err):
                span.record_error('DecodeError', str(decoded.error))
            else:
                span.set_attribute('request.success', True)
            return decoded

    def build_url(self, path: str, query: dict[str, str | None] | None = None) -> httpx.URL:
        """Join ``path`` onto the root URL and append non-None query params."""
        params = {key: value for key, value in (query or {}).items() if value is not None}
        return self._root.copy_with(path='/' + path.lstrip('/'), params=params)

    def build_headers(self) -> dict[str, str]:
        return {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self._api_key}',
            'X-BASALT-SDK-VERSION': self._sdk_version,
            'X-BASALT-SDK-TYPE': self._sdk_type,
        }
