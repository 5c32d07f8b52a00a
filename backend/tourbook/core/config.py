from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    card_number_min_length: int = Field(13, alias="CARD_NUMBER_MIN_LENGTH")
    card_number_max_length: int = Field(19, alias="CARD_NUMBER_MAX_LENGTH")
    popular_destinations_limit: int = Field(3, alias="POPULAR_DESTINATIONS_LIMIT")
    default_price_min: float = Field(0, alias="DEFAULT_PRICE_MIN")
    default_price_max: float = Field(10000, alias="DEFAULT_PRICE_MAX")
    default_duration_min: int = Field(1, alias="DEFAULT_DURATION_MIN")
    default_duration_max: int = Field(30, alias="DEFAULT_DURATION_MAX")

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
