from .utils import DEFAULT_MODEL, ProviderModel, build_chat_messages, resolve_provider_model
