"""Runtime configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILE = _BACKEND_DIR / ".env"


class Settings(BaseSettings):
    # ===== Core =====
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # ===== Defaults used by callers that do not pass a key =====
    DEFAULT_THEME: str = "Light"
    DEFAULT_COMPUTER: str = "Gaming"
    DEFAULT_PAYMENT_PROCESSOR: str = "ProcessorA"
    DEFAULT_RENDERER: str = "Web"
    DEFAULT_NOTIFIER: str = "Email"

    # ===== Demo runner =====
    DEMO_ORDER_AMOUNT: float = 150.0
    DEMO_CHARACTER_NAMES: dict[str, str] = {"Warrior": "Aragorn", "Mage": "Gendalf"}
    DEMO_CUSTOMER: str = "test@gmail.com"

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE, env_prefix="PATTERNKIT_", extra="ignore"
    )

    @field_validator("DEMO_ORDER_AMOUNT")
    @classmethod
    def _positive_amount(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("DEMO_ORDER_AMOUNT must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
