"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Reported in place of any Azure OpenAI value that is missing from the environment
NOT_SET = "NOT_SET"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = Field(default="Azure OpenAI Chat Proxy", alias="APP_NAME")
    environment: str = Field(default="local", alias="SYSTEM_ENVIRONMENT")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # Azure OpenAI settings
    azure_openai_endpoint: str = Field(default=NOT_SET, alias="AZURE_OPENAI_ENDPOINT")
    azure_openai_deployment_name: str = Field(
        default=NOT_SET, alias="AZURE_OPENAI_DEPLOYMENT_NAME"
    )
    azure_openai_api_key: str = Field(default=NOT_SET, alias="AZURE_OPENAI_API_KEY")
    azure_openai_api_version: str = Field(
        default="2024-10-21", alias="AZURE_OPENAI_API_VERSION"
    )
    azure_openai_temperature: Optional[float] = Field(
        default=None, ge=0.0, le=2.0, alias="AZURE_OPENAI_TEMPERATURE"
    )
    azure_openai_timeout_seconds: float = Field(
        default=30.0, gt=0, alias="AZURE_OPENAI_TIMEOUT_SECONDS"
    )
    azure_openai_max_retries: int = Field(default=2, ge=0, alias="AZURE_OPENAI_MAX_RETRIES")

    # CORS settings
    allowed_origins: List[str] = Field(default=["*"], alias="ALLOWED_ORIGINS")

    # Logging settings
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    enable_request_logging: bool = Field(default=True, alias="ENABLE_REQUEST_LOGGING")

    @field_validator(
        "azure_openai_endpoint",
        "azure_openai_deployment_name",
        "azure_openai_api_key",
        mode="before",
    )
    @classmethod
    def _blank_is_not_set(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return NOT_SET
        return value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_chat_configured(self) -> bool:
        """Check that every value the chat client needs has been provided."""
        return NOT_SET not in (
            self.azure_openai_endpoint,
            self.azure_openai_deployment_name,
            self.azure_openai_api_key,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
