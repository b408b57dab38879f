"""Configuration management for the AI chef service.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()

SAFETY_THRESHOLDS = (
    "BLOCK_LOW_AND_ABOVE",
    "BLOCK_MEDIUM_AND_ABOVE",
    "BLOCK_ONLY_HIGH",
    "BLOCK_NONE",
)


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Provider credential. Checked when a model handle is requested, not here.
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
        # Chat Model: light model for conversational replies
        self.CHAT_MODEL: str = os.getenv("CHAT_MODEL", "gemini-3-flash-preview")
        # Recipe Model: heavier model for structured recipe generation
        self.RECIPE_MODEL: str = os.getenv("RECIPE_MODEL", "gemini-3-pro-preview")
        # Harm-block threshold applied to every harm category on every request
        self.SAFETY_THRESHOLD: str = os.getenv("SAFETY_THRESHOLD", "BLOCK_MEDIUM_AND_ABOVE").upper()
        # Server bind address
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "7777"))
        # Base URL used by the client stores and the integration tests
        self.API_BASE_URL: str = os.getenv("API_BASE_URL", f"http://localhost:{self.PORT}")
        # Client-side HTTP timeout in seconds. Recipe generation on the heavy model is slow.
        self.HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "60"))
        # Persona selected when a store is created or reset
        self.DEFAULT_PRESET_ID: str = os.getenv("DEFAULT_PRESET_ID", "korean_grandma")

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a value is outside its allowed range.
        """
        if self.SAFETY_THRESHOLD not in SAFETY_THRESHOLDS:
            raise ValueError(
                f"SAFETY_THRESHOLD must be one of {', '.join(SAFETY_THRESHOLDS)}, got: {self.SAFETY_THRESHOLD}"
            )
        if not (1 <= self.PORT <= 65535):
            raise ValueError(f"PORT must be between 1 and 65535, got: {self.PORT}")
        if self.HTTP_TIMEOUT <= 0:
            raise ValueError(f"HTTP_TIMEOUT must be positive, got: {self.HTTP_TIMEOUT}")
        if not self.CHAT_MODEL or not self.RECIPE_MODEL:
            raise ValueError("CHAT_MODEL and RECIPE_MODEL must not be empty")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
