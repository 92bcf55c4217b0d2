"""
Settings for the Vibera Viber bot client.

Simple, reliable environment variable configuration focused on the bot API client.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")

DEFAULT_API_URL = "https://chatapi.viber.com/pa"


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                    version = pyproject_data.get("project", {}).get("version")
                    if version:
                        return version
            except (OSError, tomllib.TOMLDecodeError):
                # If we can't read the file, continue searching
                continue

    return "0.1.0"


class Settings:
    """Application settings with environment-based configuration."""

    def __init__(self):
        # ================================================================
        # Version
        # ================================================================
        self.version: str = _get_version_from_pyproject()

        # ================================================================
        # Environment & General Configuration
        # ================================================================
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # Viber Configuration
        # ================================================================
        self.api_url: str = os.getenv("VIBER_API_URL", DEFAULT_API_URL)
        self.auth_token: str | None = os.getenv("VIBER_AUTH_TOKEN")
        self.bot_name: str | None = os.getenv("VIBER_BOT_NAME")
        self.bot_avatar: str | None = os.getenv("VIBER_BOT_AVATAR")
        self.webhook_url: str | None = os.getenv("VIBER_WEBHOOK_URL")

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "DEV"  # Default fallback
        self.environment = self.environment.upper()

        self.api_url = self.api_url.rstrip("/")

    def require_bot_credentials(self) -> None:
        """Validate required Viber bot credentials.

        Not called at import time: the client library is usable without
        environment credentials when the bot identity is passed explicitly.
        """
        if not self.auth_token:
            raise ValueError("VIBER_AUTH_TOKEN is required")
        if not self.bot_name:
            raise ValueError("VIBER_BOT_NAME is required")

    def bot_configuration(self):
        """Build the bot identity from environment credentials."""
        from vibera.messaging.viber.models.basic_models import BotConfiguration

        self.require_bot_credentials()
        return BotConfiguration(
            name=self.bot_name,
            avatar=self.bot_avatar,
            auth_token=self.auth_token,
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "PROD"


# Global settings instance
settings = Settings()
