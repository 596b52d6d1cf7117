"""
Application configuration using pydantic-settings with nested structure
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional


# ============================================================================
# NESTED CONFIGURATION MODELS
# ============================================================================

# Get absolute path to .env file (project directory)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BASE_DIR / ".env"


class StorageConfig(BaseSettings):
    """Location of the JSON stores.

    STOCK_TRACKER_CONFIGURATION_DIRECTORY overrides the home-relative
    default. An empty value counts as unset. Not held on ``Settings``:
    binding reads it on every call so environment changes apply per
    invocation.
    """
    configuration_directory: str = ""
    default_directory_name: str = ".stock_tracker"
    model_config = SettingsConfigDict(env_prefix="STOCK_TRACKER_", extra="ignore")


class LoggerConfig(BaseSettings):
    """Logger configuration settings."""
    default_level: str = "INFO"
    console_level: str = "ERROR"
    file_enabled: bool = True
    file_name: str = "stock_tracker.log"
    rotation: str = "1 MB"
    retention: str = "10 days"
    model_config = SettingsConfigDict(env_prefix="LOGGER__", extra="ignore")


# ============================================================================
# MAIN SETTINGS CLASS
# ============================================================================

class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Configuration is organized into nested sections.
    Use double underscore (__) in env vars to access nested configs.

    Example:
        LOGGER__DEFAULT_LEVEL=DEBUG
        LOGGER__FILE_ENABLED=false
        STOCK_TRACKER_CONFIGURATION_DIRECTORY=/tmp/stocks
    """

    # Application metadata
    APP_NAME: str = "Stock Tracker"
    APP_VERSION: str = "1.0.0"

    # Nested configuration sections (manually construct from environment)
    LOGGER: Optional[LoggerConfig] = None

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Manually construct nested configs AFTER environment is loaded
        self.LOGGER = LoggerConfig()

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_nested_delimiter="__",
        env_prefix=""
    )


# Global settings instance
from dotenv import load_dotenv

# Load .env file into environment variables
if _ENV_FILE.exists():
    load_dotenv(str(_ENV_FILE), override=False)

settings = Settings()
