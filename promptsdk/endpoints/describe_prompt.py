from __future__ import annotations

from typing import Any

from promptsdk.endpoints.base import RequestInfo
from promptsdk.endpoints.decoding import expect_field, expect_object, optional_string
from promptsdk.entities import DescribePromptInput, DescribePromptPayload
from promptsdk.result import Err, Outcome, ok

OPERATION = 'Describe Prompt'


class DescribePromptEndpoint:
    """``GET /prompts/{slug}/describe``: metadata, versions, tags, variables."""

    @staticmethod
    def prepare_request(dto: DescribePromptInput) -> RequestInfo:
        return RequestInfo(
            path=f'/prompts/{dto.slug}/describe',
            method='get',
            query={'version': dto.version, 'tag': dto.tag},
        )

    @staticmethod
    def decode_response(body: Any) -> Outcome[DescribePromptPayload]:
        checked = expect_object(body, operation=OPERATION)
        if isinstance(checked, Err):
            return checked
        root = checked.value

        prompt = expect_field(root, 'prompt', dict, operation=OPERATION)
        if isinstance(prompt, Err):
            return prompt

        return ok(DescribePromptPayload(
            prompt=prompt.value,
            warning=optional_string(root, 'warning'),
        ))
