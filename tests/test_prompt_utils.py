from __future__ import annotations

from promptsdk.prompts import build_chat_messages, resolve_provider_model
from promptsdk.schemas import ChatMessage, PromptModel


def _model(provider: str, model: str) -> PromptModel:
    return PromptModel.model_validate({
        "provider": provider,
        "model": model,
        "version": "latest",
        "parameters": {"temperature": 0.7, "topP": 1, "maxLength": 1024, "responseFormat": "text"},
    })


def test_resolve_provider_model_returns_prompt_model() -> None:
    resolved = resolve_provider_model(_model("open-ai", "gpt-4o"))

    assert (resolved.provider, resolved.model) == ("open-ai", "gpt-4o")


def test_resolve_provider_model_uses_per_provider_default() -> None:
    resolved = resolve_provider_model(_model("anthropic", ""), defaults={"anthropic": "3.5-sonnet"})

    assert (resolved.provider, resolved.model) == ("anthropic", "3.5-sonnet")


def test_resolve_provider_model_falls_back_to_global_default() -> None:
    resolved = resolve_provider_model(_model("mistral", "  "))

    assert (resolved.provider, resolved.model) == ("mistral", "gpt-4o")


def test_build_chat_messages_system_and_user() -> None:
    messages = build_chat_messages("Hello", "Be helpful")

    assert messages == [
        ChatMessage(role="system", content="Be helpful"),
        ChatMessage(role="user", content="Hello"),
    ]


def test_build_chat_messages_drops_blank_system_text() -> None:
    assert build_chat_messages("Hi", "   ") == [ChatMessage(role="user", content="Hi")]
    assert build_chat_messages("Hi", None) == [ChatMessage(role="user", content="Hi")]


def test_build_chat_messages_drops_blank_user_text() -> None:
    assert build_chat_messages("   ", "You are a bot") == [ChatMessage(role="system", content="You are a bot")]
