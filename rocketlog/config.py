import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.logging import RichHandler


class Settings(BaseSettings):
    """
    Runtime settings loaded from ROCKETLOG_* environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROCKETLOG_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Logging
    LOG_LEVEL: str = "DEBUG"
    STYLED: bool = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    if settings.STYLED:
        # Timestamps are part of every lifecycle message already
        handler: logging.Handler = RichHandler(
            markup=True, show_time=False, show_path=False
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), handlers=[handler], force=True)
