import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    STRICT: bool = False
    LOG_LEVEL: str = "WARNING"

    model_config = {
        "env_prefix": "BUCKETIZE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()


def configure_logging(level: str | int | None = None) -> None:
    """Set the package logger level. Handlers are left to the host application."""
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("bucketize").setLevel(level)
