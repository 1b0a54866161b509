"""Prompt SDK: fetch, list and describe managed prompts.

Every method returns an Outcome. Nothing here raises for a failed request,
a malformed response or missing variables.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from promptsdk.endpoints import DescribePromptEndpoint, GetPromptEndpoint, ListPromptsEndpoint
from promptsdk.entities import (
    DescribePromptInput,
    GetPromptInput,
    ListPromptsInput,
    PromptRecord,
    PromptResponse,
)
from promptsdk.result import Err, Outcome, ok
from promptsdk.runtime.renderer import PromptRenderer
from promptsdk.runtime.template import extract_variable_names, pick_variables
from promptsdk.transport.api import Api

logger = logging.getLogger(__name__)


class PromptSDK:
    """Interact with prompts stored in the prompt service.

    Examples:
        >>> result = await client.prompt.get('welcome-email', tag='production', variables={'name': 'Ada'})
        >>> if result.error:
        ...     print(result.error.message)
        ... else:
        ...     print(result.value.text)
    """

    def __init__(self, api: Api, renderer: PromptRenderer | None = None) -> None:
        self._api = api
        self._renderer = renderer or PromptRenderer()

    async def get(
        self,
        slug: str,
        *,
        version: str | None = None,
        tag: str | None = None,
        variables: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> Outcome[PromptResponse]:
        """Get a prompt, with its variables filled in.

        Args:
            slug: Prompt slug.
            version: Optional prompt version.
            tag: Optional deployment tag (e.g. "production").
            variables: Values for the prompt's ``{{variables}}``. Missing
                ones are logged and left in place.
            strict: Fail with ``MissingVariable`` instead when any variable
                of the prompt text or system text is missing.

        Returns:
            The rendered prompt, or the network / decoding error.
        """
        result = await self._api.invoke(GetPromptEndpoint, GetPromptInput(slug=slug, version=version, tag=tag))
        if isinstance(result, Err):
            return result

        self._log_warning(result.value.warning)
        prompt = result.value.prompt

        if strict:
            required = extract_variable_names(prompt.text)
            if prompt.system_text is not None:
                required += extract_variable_names(prompt.system_text)
            picked = pick_variables(required, variables or {})
            if isinstance(picked, Err):
                return picked

        return ok(self._insert_variables(prompt, variables or {}))

    async def list(self, *, feature_slug: str | None = None) -> Outcome[list[Any] | dict[str, Any]]:
        """List prompts, optionally restricted to one feature."""
        result = await self._api.invoke(ListPromptsEndpoint, ListPromptsInput(feature_slug=feature_slug))
        if isinstance(result, Err):
            return result

        self._log_warning(result.value.warning)
        return ok(result.value.prompts)

    async def describe(
        self,
        slug: str,
        *,
        version: str | None = None,
        tag: str | None = None,
    ) -> Outcome[dict[str, Any]]:
        """Describe a prompt: versions, tags and declared variables."""
        result = await self._api.invoke(
            DescribePromptEndpoint,
            DescribePromptInput(slug=slug, version=version, tag=tag),
        )
        if isinstance(result, Err):
            return result

        self._log_warning(result.value.warning)
        return ok(result.value.prompt)

    def _insert_variables(self, prompt: PromptRecord, variables: Mapping[str, Any]) -> PromptResponse:
        # Values are inserted in one pass, so a value that itself looks like
        # "{{something}}" is plain text and not a prompt variable.
        text = self._renderer.render_partial(prompt.text, variables)
        system_text = (
            self._renderer.render_partial(prompt.system_text, variables)
            if prompt.system_text is not None
            else None
        )
        return PromptResponse(
            text=text,
            system_text=system_text,
            model=prompt.model,
            version=prompt.version,
        )

    @staticmethod
    def _log_warning(warning: str | None) -> None:
        if warning:
            logger.warning('Prompt service warning: "%s"', warning)
