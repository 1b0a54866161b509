"""Helpers for handing a fetched prompt to a model provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from promptsdk.schemas import ChatMessage, PromptModel, PromptModelProvider

DEFAULT_MODEL = 'gpt-4o'


@dataclass(frozen=True)
class ProviderModel:
    provider: PromptModelProvider
    model: str


def resolve_provider_model(
    model: PromptModel,
    defaults: Mapping[str, str] | None = None,
) -> ProviderModel:
    """Resolve the provider and model name of a prompt.

    A blank model name falls back to ``defaults[provider]``, then to
    ``DEFAULT_MODEL``.
    """
    if model.model.strip():
        return ProviderModel(provider=model.provider, model=model.model)

    fallback = (defaults or {}).get(model.provider)
    return ProviderModel(provider=model.provider, model=fallback or DEFAULT_MODEL)


def build_chat_messages(text: str | None, system_text: str | None = None) -> list[ChatMessage]:
    """Build ``[system?, user?]`` messages; blank parts are dropped."""
    messages: list[ChatMessage] = []

    system = (system_text or '').strip()
    if system:
        messages.append(ChatMessage(role='system', content=system))

    user = (text or '').strip()
    if user:
        messages.append(ChatMessage(role='user', content=user))

    return messages
