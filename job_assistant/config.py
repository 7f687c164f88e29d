"""
Configuration module for the Job Opening Assistant.

Loads environment variables (optionally from a .env file) into an explicit
Settings value. Settings are built once at startup and handed to the
components that need them; components never read the environment directly.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv

from job_assistant.exceptions import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # MongoDB
    MONGODB_URI: str = ""
    DB_NAME: str = ""
    COLLECTION_NAME: str = ""

    # Google Gemini API
    GOOGLE_API_KEY: str = ""

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        load_dotenv_file: bool = True,
    ) -> "Settings":
        """
        Build settings from the process environment.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            load_dotenv_file: Load a .env file into os.environ first

        Returns:
            A populated Settings instance (not yet validated).
        """
        if load_dotenv_file:
            load_dotenv()

        env = os.environ if environ is None else environ

        return cls(
            MONGODB_URI=env.get("MONGODB_URI", "").strip(),
            DB_NAME=env.get("DB_NAME", "").strip(),
            COLLECTION_NAME=env.get("COLLECTION_NAME", "").strip(),
            GOOGLE_API_KEY=env.get("GOOGLE_API_KEY", "").strip(),
            ENVIRONMENT=env.get("ENVIRONMENT", "development"),
            LOG_LEVEL=env.get("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ConfigurationError: If any required setting is missing.
        """
        required_settings = {
            "MONGODB_URI": self.MONGODB_URI,
            "DB_NAME": self.DB_NAME,
            "COLLECTION_NAME": self.COLLECTION_NAME,
            "GOOGLE_API_KEY": self.GOOGLE_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process (used by the HTTP layer)."""
    return Settings.from_env()
