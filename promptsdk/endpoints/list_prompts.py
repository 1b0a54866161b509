from __future__ import annotations

from typing import Any

from promptsdk.endpoints.base import RequestInfo
from promptsdk.endpoints.decoding import expect_field, expect_object, optional_string
from promptsdk.entities import ListPromptsInput, ListPromptsPayload
from promptsdk.result import Err, Outcome, ok

OPERATION = 'List Prompts'


class ListPromptsEndpoint:
    """``GET /prompts``. Entries are passed through as the service sends them."""

    @staticmethod
    def prepare_request(dto: ListPromptsInput | None = None) -> RequestInfo:
        feature_slug = dto.feature_slug if dto is not None else None
        return RequestInfo(
            path='/prompts',
            method='get',
            query={'featureSlug': feature_slug},
        )

    @staticmethod
    def decode_response(body: Any) -> Outcome[ListPromptsPayload]:
        checked = expect_object(body, operation=OPERATION)
        if isinstance(checked, Err):
            return checked
        root = checked.value

        prompts = expect_field(root, 'prompts', (list, dict), operation=OPERATION)
        if isinstance(prompts, Err):
            return prompts

        return ok(ListPromptsPayload(
            prompts=prompts.value,
            warning=optional_string(root, 'warning'),
        ))
