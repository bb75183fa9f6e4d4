"""
Configuration management for the pile-driving log bot.
Loads settings from environment variables with validation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Telegram
    telegram_bot_token: str = Field(..., description="Telegram Bot API token")

    # Backend web service
    backend_url: str = Field(
        default="https://localhost:8080", description="Pile log web service URL"
    )
    backend_timeout: float = Field(
        default=30.0, description="Backend request timeout in seconds"
    )
    backend_verify_ssl: bool = Field(
        default=True, description="Verify backend TLS certificates"
    )

    # Deployment
    project_id: int = Field(default=1, description="Project the bot records piles for")
    pile_field_id: int = Field(default=0, description="Pile field sent with every record")

    # Pile selection menu
    group_count: int = Field(
        default=6, ge=2, description="Maximum buttons in a pile selection menu"
    )

    # Debug
    debug: bool = Field(default=False, description="Debug mode")


# Global settings instance
settings = Settings()
