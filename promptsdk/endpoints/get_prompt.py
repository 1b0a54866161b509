from __future__ import annotations

from typing import Any

from promptsdk.endpoints.base import RequestInfo
from promptsdk.endpoints.decoding import expect_field, expect_object, optional_string
from promptsdk.entities import GetPromptInput, GetPromptPayload, PromptRecord
from promptsdk.result import Err, Outcome, ok

OPERATION = 'Get Prompt'


class GetPromptEndpoint:
    """``GET /prompts/{slug}``: one prompt, raw text included."""

    @staticmethod
    def prepare_request(dto: GetPromptInput) -> RequestInfo:
        return RequestInfo(
            path=f'/prompts/{dto.slug}',
            method='get',
            query={'version': dto.version, 'tag': dto.tag},
        )

    @staticmethod
    def decode_response(body: Any) -> Outcome[GetPromptPayload]:
        checked = expect_object(body, operation=OPERATION)
        if isinstance(checked, Err):
            return checked
        root = checked.value

        prompt = expect_field(root, 'prompt', dict, operation=OPERATION)
        if isinstance(prompt, Err):
            return prompt
        raw = prompt.value

        text = expect_field(raw, 'text', str, operation=OPERATION, path='prompt.text')
        if isinstance(text, Err):
            return text

        version = expect_field(raw, 'version', str, operation=OPERATION, path='prompt.version')
        if isinstance(version, Err):
            return version

        system_text = expect_field(
            raw, 'systemText', str, operation=OPERATION, path='prompt.systemText', nullable=True,
        )
        if isinstance(system_text, Err):
            return system_text

        model = expect_field(raw, 'model', dict, operation=OPERATION, path='prompt.model')
        if isinstance(model, Err):
            return model

        return ok(GetPromptPayload(
            prompt=PromptRecord(
                text=text.value,
                system_text=system_text.value,
                model=model.value,
                version=version.value,
            ),
            warning=optional_string(root, 'warning'),
        ))
