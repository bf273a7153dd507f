"""
Configuration module for the OpenAI Chat Relay application.
Handles environment variables and application settings.
"""
import os
from dataclasses import dataclass
from urllib.parse import quote
from dotenv import load_dotenv

from errors import ConfigurationError
from utils.constants import DEFAULT_PERSONA_PROMPT
from utils.logger import app_logger

load_dotenv()

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean toggle from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


@dataclass
class Config:
    """Application configuration, built once at startup and passed to the app."""

    # API Keys
    OPENAI_API_KEY: str = ""
    AIRTABLE_API_KEY: str = ""

    # API Configuration
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    AIRTABLE_API_URL: str = "https://api.airtable.com/v0"
    AIRTABLE_BASE_ID: str = ""
    AIRTABLE_TABLE_NAME: str = ""

    # Variant toggles
    PERSONA_ENABLED: bool = False
    PERSONA_PROMPT: str = DEFAULT_PERSONA_PROMPT
    ERROR_LABEL_ENABLED: bool = False
    INTERACTION_LOGGING_ENABLED: bool = False

    # Application Settings
    APP_TITLE: str = "OpenAI Chat Relay"
    STATIC_DIR: str = "public"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Timeouts (in seconds)
    REQUEST_TIMEOUT: float = 60.0

    # Logging
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a configuration from environment variables (and .env)."""
        return cls(
            OPENAI_API_KEY=os.getenv("OPENAI_API_KEY", ""),
            AIRTABLE_API_KEY=os.getenv("AIRTABLE_API_KEY", ""),
            OPENAI_MODEL=os.getenv("OPENAI_MODEL") or cls.OPENAI_MODEL,
            OPENAI_API_URL=os.getenv("OPENAI_API_URL") or cls.OPENAI_API_URL,
            AIRTABLE_BASE_ID=os.getenv("AIRTABLE_BASE_ID", ""),
            AIRTABLE_TABLE_NAME=os.getenv("AIRTABLE_TABLE_NAME", ""),
            PERSONA_ENABLED=_env_flag("PERSONA_ENABLED"),
            PERSONA_PROMPT=os.getenv("PERSONA_PROMPT") or cls.PERSONA_PROMPT,
            ERROR_LABEL_ENABLED=_env_flag("ERROR_LABEL_ENABLED"),
            INTERACTION_LOGGING_ENABLED=_env_flag("INTERACTION_LOGGING_ENABLED"),
            STATIC_DIR=os.getenv("STATIC_DIR") or cls.STATIC_DIR,
            HOST=os.getenv("HOST") or cls.HOST,
            PORT=int(os.getenv("PORT") or cls.PORT),
            REQUEST_TIMEOUT=float(os.getenv("REQUEST_TIMEOUT") or cls.REQUEST_TIMEOUT),
            LOG_LEVEL=os.getenv("LOG_LEVEL") or cls.LOG_LEVEL,
        )

    @property
    def airtable_table_url(self) -> str:
        """Record-creation endpoint for the configured base and table."""
        return f"{self.AIRTABLE_API_URL}/{self.AIRTABLE_BASE_ID}/{quote(self.AIRTABLE_TABLE_NAME, safe='')}"

    def validate(self) -> None:
        """
        Validate configuration.

        Logs a warning for a missing OpenAI key. Raises ConfigurationError when
        interaction logging is enabled without its Airtable credentials.
        """
        app_logger.info(f"OpenAI API key: {'present' if self.OPENAI_API_KEY else 'not found'}")
        app_logger.info(f"Using OpenAI model: {self.OPENAI_MODEL}")

        if not self.OPENAI_API_KEY:
            app_logger.warning("OPENAI_API_KEY not found in environment or .env file")
            app_logger.warning("Chat requests will be rejected by the completion API until it is set")

        if self.INTERACTION_LOGGING_ENABLED:
            missing = [
                name for name in ("AIRTABLE_API_KEY", "AIRTABLE_BASE_ID", "AIRTABLE_TABLE_NAME")
                if not getattr(self, name)
            ]
            if missing:
                raise ConfigurationError(
                    f"Interaction logging is enabled but {', '.join(missing)} is not set"
                )
