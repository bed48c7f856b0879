import json
from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # API keys
    gemini_api_key: str | None = Field(None, validation_alias="GEMINI_API_KEY")

    # Model
    gemini_model: str = Field("gemini-2.5-flash", validation_alias="GEMINI_MODEL")
    ai_timeout_seconds: float = Field(120.0, validation_alias="AI_TIMEOUT_SECONDS", gt=0)
    ai_temperature: float = Field(0.0, validation_alias="AI_TEMPERATURE")

    # Uploads
    max_upload_bytes: int = Field(8 * 1024 * 1024, validation_alias="MAX_UPLOAD_BYTES", gt=0)

    # Server
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(3000, validation_alias="PORT")
    cors_origins: Annotated[List[str], NoDecode] = Field(["*"], validation_alias="CORS_ORIGINS")
    static_dir: str = Field("public", validation_alias="STATIC_DIR")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # App environment
    env: str = Field("production", validation_alias="ENV")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, value):
        """Accept a JSON list or a comma-separated string such as "http://a,http://b"."""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """
    Process-wide settings, read once.
    Routes receive them through Depends so tests can override them.
    """
    return Settings()
