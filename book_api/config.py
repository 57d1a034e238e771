"""
API configuration settings.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class APIConfig(BaseSettings):
    """API configuration settings."""

    # API Settings
    api_title: str = "Book Catalog API"
    api_version: str = "1.0.0"
    api_description: str = "An in-memory catalog of books with create, read, update and delete endpoints"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    shutdown_grace_period: int = 5  # seconds

    # API Key Settings
    api_key: str = "secret-key"
    api_key_header: str = "X-API-Key"

    # Store Settings
    seed_default_books: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"  # Ignore extra fields from .env
    }

    @field_validator('shutdown_grace_period')
    @classmethod
    def validate_grace_period(cls, v):
        """Ensure the shutdown grace period is reasonable."""
        if v <= 0 or v > 300:
            raise ValueError('shutdown_grace_period must be between 0 and 300 seconds')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ['json', 'console']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of: {valid_formats}')
        return v.lower()


# Global config instance
config = APIConfig()
