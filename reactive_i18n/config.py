import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="I18N_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Locales
    default_language: str = "en"
    locales_dir: Path = Path("locales")

    # Logging
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for applications embedding the store."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
