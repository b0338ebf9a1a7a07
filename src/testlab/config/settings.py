from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, to_language_code

class Settings(BaseSettings):
    """
    Application settings loaded from environment.

    Every field has a default: running the demonstrations with an empty environment
    reproduces the stock console output (Indonesian narration, nothing but narration on stdout).
    """

    # Environment
    ENV: Literal["development", "testing", "production"] = "development"

    # Narration / classification labels
    DEMO_LOCALE: Literal["id", "en"] = "id"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("logs")
    LOG_MAX_BYTES: int = 1_000_000  # 1 MB
    LOG_BACKUP_COUNT: int = 3

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_LEVEL environment variable value to uppercase.

        This validator runs before any other validation (mode="before") on the LOG_LEVEL field,
        so `LOG_LEVEL=debug` is accepted and stored as "DEBUG", the spelling `logging` expects.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_FORMAT environment variable value to lowercase.
        """
        return to_lowercase(v)

    @field_validator("DEMO_LOCALE", mode="before")
    def normalize_locale(cls, v: str | None) -> str | None:
        """
        Accept full locale names such as "en_US.UTF-8" and keep only the language code.
        """
        return to_language_code(v)

    # --- SettingsConfigDict settings ---
    model_config = SettingsConfigDict(
        # Load environment variables from a .env file in the current working directory.
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# get_settings() takes no arguments and always returns the same settings from the environment,
# so it is cached. Tests that change the environment call get_settings.cache_clear().
@lru_cache()
def get_settings() -> Settings:
    return Settings()
