"""Configuration management using Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPC_HISTORY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    log_level: str = "INFO"

    # Wire Configuration
    json_indent: int | None = None  # compact output when unset

    @field_validator("json_indent", mode="before")
    @classmethod
    def convert_empty_string_to_none(cls, v):
        """Treat an empty OPC_HISTORY_JSON_INDENT as unset."""
        if isinstance(v, str) and v.strip() == "":
            return None
        return v


# Global settings instance
settings = Settings()
