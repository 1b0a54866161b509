# ============================================================
# Prompt records and endpoint inputs
# ============================================================
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

# The model block is owned by the prompt service; the decoders only check
# that it is an object. See promptsdk.schemas.PromptModel for a typed view.
RawPromptModel = dict[str, Any]


@dataclass(frozen=True)
class GetPromptInput:
    slug: str
    version: Optional[str] = None
    tag: Optional[str] = None


@dataclass(frozen=True)
class DescribePromptInput:
    slug: str
    version: Optional[str] = None
    tag: Optional[str] = None


@dataclass(frozen=True)
class ListPromptsInput:
    feature_slug: Optional[str] = None


@dataclass(frozen=True)
class PromptRecord:
    """
    A prompt as returned by the service.

    Attributes:
        text: Raw prompt text, still holding its ``{{variables}}``.
        system_text: Raw system prompt, or None when the prompt has none.
        model: Provider/model configuration block.
        version: Prompt version that was served.
    """

    text: str
    system_text: str | None
    model: RawPromptModel
    version: str


@dataclass(frozen=True)
class GetPromptPayload:
    prompt: PromptRecord
    warning: str | None = None


@dataclass(frozen=True)
class ListPromptsPayload:
    prompts: list[Any] | dict[str, Any]
    warning: str | None = None


@dataclass(frozen=True)
class DescribePromptPayload:
    prompt: dict[str, Any]
    warning: str | None = None


@dataclass(frozen=True)
class PromptResponse:
    """A prompt ready to send to a model, variables filled where supplied."""

    text: str
    system_text: str | None
    model: RawPromptModel
    version: str
