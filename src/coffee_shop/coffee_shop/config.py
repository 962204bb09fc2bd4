"""Application configuration via pydantic-settings.

Reads from COFFEE_SHOP_* environment variables and an optional .env file at
the project root. Every field has a default, so no configuration is needed.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root is 4 levels up from this file:
# src/coffee_shop/coffee_shop/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="COFFEE_SHOP_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Shop ---
    shop_name: str = "Coffee Shop"

    # --- Menu ---
    # Unset means the built-in Latte / Espresso / Cappuccino catalog.
    menu_json_path: str | None = None

    # --- Logging ---
    log_level: str = "WARNING"
    log_file: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
