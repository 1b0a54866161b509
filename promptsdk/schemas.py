"""Typed views over the prompt service's model configuration.

The decoders treat ``prompt.model`` as an opaque object. Code that needs to
read it (e.g. to pick a provider client) validates it here with Pydantic:
- unknown extra keys are kept, so new service fields do not break clients
- a bad block comes back as Err(MalformedResponse), never as an exception
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from promptsdk.core.errors import MalformedResponse
from promptsdk.result import Outcome, err, ok

PromptModelProvider = Literal[
    'anthropic',
    'open-ai',
    'mistral',
    'gemini',
    'deepseek',
    'xai',
    'cerebras',
]

ResponseFormat = Literal['json', 'text', 'json-object', 'tools']
ReasoningEffort = Literal['none', 'minimal', 'low', 'medium', 'high', 'reasoning']
Verbosity = Literal['low', 'medium', 'high']


class ModelParameters(BaseModel):
    """Sampling parameters configured for the prompt."""

    model_config = ConfigDict(populate_by_name=True, extra='allow')

    temperature: float | None = None
    top_p: float | None = Field(default=None, alias='topP')
    frequency_penalty: float | None = Field(default=None, alias='frequencyPenalty')
    presence_penalty: float | None = Field(default=None, alias='presencePenalty')
    top_k: float | None = Field(default=None, alias='topK')
    max_length: int | None = Field(default=None, alias='maxLength')
    response_format: ResponseFormat | None = Field(default=None, alias='responseFormat')
    json_object: dict[str, Any] | None = Field(default=None, alias='jsonObject')
    reasoning_effort: ReasoningEffort | None = Field(default=None, alias='reasoningEffort')
    verbosity: Verbosity | None = None


class PromptModel(BaseModel):
    """Provider and model a prompt was designed for.

    Examples:
        >>> PromptModel.model_validate({"provider": "open-ai", "model": "gpt-4o"})
        PromptModel(provider='open-ai', model='gpt-4o', version='latest', parameters=ModelParameters(...))
    """

    model_config = ConfigDict(extra='allow')

    provider: PromptModelProvider
    model: str
    version: str = 'latest'
    parameters: ModelParameters = Field(default_factory=ModelParameters)


class ChatMessage(BaseModel):
    """Provider-agnostic chat message."""

    role: Literal['system', 'user', 'assistant']
    content: str


def parse_prompt_model(raw: Any) -> Outcome[PromptModel]:
    """Validate a raw ``prompt.model`` block.

    Args:
        raw: The model object from a decoded prompt record.

    Returns:
        The validated model, or ``Err(MalformedResponse)`` naming the first
        invalid field.
    """
    try:
        return ok(PromptModel.model_validate(raw))
    except ValidationError as exc:
        first = exc.errors()[0]
        location = '.'.join(str(part) for part in first['loc'])
        path = f'prompt.model.{location}' if location else 'prompt.model'
        return err(MalformedResponse(
            message=f'Invalid prompt model ({path}: {first["msg"]})',
            field=path,
        ))
