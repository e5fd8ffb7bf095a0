from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings


class ConfigErrorMode(str, Enum):
    """What the walker does when a rule declaration turns out to be broken."""
    COLLECT = "collect"
    ABORT = "abort"


class Settings(BaseSettings):
    # Validation
    TAG_NAME: str = "valid"
    FIELDS_REQUIRED_BY_DEFAULT: bool = False
    CONFIG_ERROR_MODE: ConfigErrorMode = ConfigErrorMode.COLLECT

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    @property
    def aborts_on_config_error(self) -> bool:
        return self.CONFIG_ERROR_MODE == ConfigErrorMode.ABORT

    class Config:
        env_prefix = "TAGVALIDATOR_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
