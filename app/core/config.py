"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB (listings, profiles, applications, saved items, notifications)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "internship_portal"
    mongodb_timeout_ms: int = 3000

    # Ranking service (OpenAI-compatible chat completions)
    ai_api_key: str = ""
    ai_base_url: str = "https://api.openai.com/v1"
    ai_model: str = "gpt-3.5-turbo"
    ai_timeout_seconds: float = 5.0
    ai_temperature: float = 0.7
    ai_max_tokens: int = 1500
    ai_top_n: int = 5

    # Tokens are issued by the external auth provider, we only verify them
    auth_secret_key: str = "change-this-secret"
    auth_algorithm: str = "HS256"

    # App
    log_level: str = "INFO"
    debug: bool = False

    @property
    def ai_enabled(self) -> bool:
        """Primary ranking is only attempted when a credential is configured."""
        return bool(self.ai_api_key.strip())

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
