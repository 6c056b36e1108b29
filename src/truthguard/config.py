import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Configuration sourced from environment variables."""

    log_level: str = "INFO"
    profiles_dir: str | None = None
    fallback_language: str = "en"
    min_detection_length: int = Field(default=10, ge=0)
    detection_min_probability: float = Field(default=0.90, ge=0.0, le=1.0)
    detection_seed: int = 0
    base_rate: float = Field(default=0.3, ge=0.0, le=1.0)
    score_steepness: float = Field(default=2.0, gt=0.0)
    score_spread: float = Field(default=1.4, gt=0.0)
    keyword_limit: int = Field(default=5, ge=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TRUTHGUARD_",
        "case_sensitive": False,
    }


@lru_cache(1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
