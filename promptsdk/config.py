from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from promptsdk import __version__


class Settings(BaseSettings):
    # Prompt service
    api_key: str = ""
    base_url: str = "https://api.getbasalt.ai"
    timeout: float = 30.0

    # Sent as X-BASALT-SDK-* headers
    sdk_version: str = __version__
    sdk_type: str = "python"

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PROMPTSDK_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
