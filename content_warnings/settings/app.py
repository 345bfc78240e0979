"""Application settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    dtdd_api_key: str | None = Field(default=None, validation_alias="DTDD_API_KEY")

    def api_key_header(self) -> dict[str, str]:
        """Return the DoesTheDogDie API key header, if a key is configured."""
        if self.dtdd_api_key and self.dtdd_api_key.strip():
            return {"X-API-KEY": self.dtdd_api_key.strip()}
        return {}


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
