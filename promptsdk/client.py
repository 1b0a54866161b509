"""Client facade: wires transport, API and prompt SDK together."""

from __future__ import annotations

import httpx

from promptsdk.config import Settings, get_settings
from promptsdk.core.errors import ConfigurationError
from promptsdk.sdk.prompt_sdk import PromptSDK
from promptsdk.transport.api import Api
from promptsdk.transport.networker import Networker


class PromptClient:
    """Entry point of the SDK.

    Examples:
        >>> async with PromptClient(api_key="sk-...") as client:
        ...     result = await client.prompt.get("welcome-email", variables={"name": "Ada"})
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = 'https://api.getbasalt.ai',
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        sdk_version: str = '',
        sdk_type: str = 'python',
    ) -> None:
        """Create a client.

        Args:
            api_key: Prompt service API key.
            base_url: Root URL of the prompt service.
            timeout: Per-request timeout in seconds.
            http_client: Optional injected httpx client. The caller keeps
                ownership and must close it.
            sdk_version: Value of the X-BASALT-SDK-VERSION header.
            sdk_type: Value of the X-BASALT-SDK-TYPE header.
        """
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient()
        self._api = Api(
            base_url,
            Networker(self._http, timeout=timeout),
            api_key,
            sdk_version=sdk_version,
            sdk_type=sdk_type,
        )
        self._prompt = PromptSDK(self._api)

    @staticmethod
    def from_env(
            *,
            settings: Settings | None = None,
            http_client: httpx.AsyncClient | None = None,
    ) -> 'PromptClient':
        settings = settings or get_settings()
        api_key = settings.api_key.strip()
        if not api_key:
            raise ConfigurationError('PROMPTSDK_API_KEY is required to use PromptClient.')
        return PromptClient(
            api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            http_client=http_client,
            sdk_version=settings.sdk_version,
            sdk_type=settings.sdk_type,
        )

    @property
    def prompt(self) -> PromptSDK:
        return self._prompt

    @property
    def api(self) -> Api:
        return self._api

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> 'PromptClient':
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
