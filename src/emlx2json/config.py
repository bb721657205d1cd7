"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Processing limits
    max_message_size_mb: int = 25
    allowed_extensions: str = ".emlx,.eml"  # Comma-separated

    # Summaries
    summary_preview_chars: int = 280

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def extension_list(self) -> List[str]:
        """Allowed message file suffixes, lowercased."""
        return [ext.strip().lower() for ext in self.allowed_extensions.split(",") if ext.strip()]


# Global settings instance
settings = Settings()
