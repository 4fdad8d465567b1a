from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator

from order_core.settings.base import OrderCoreBaseSettings


DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class AppSettings(OrderCoreBaseSettings):
    """
    Settings for the Order core.
    Loaded from the environment (or .env) with exact variable name matching.
    """

    app_name: str = Field("order-core", alias="ORDER_CORE_APP_NAME")
    environment: str = Field("development", alias="ORDER_CORE_ENVIRONMENT")
    log_level: str = Field("INFO", alias="ORDER_CORE_LOG_LEVEL")
    log_format: str = Field(DEFAULT_LOG_FORMAT, alias="ORDER_CORE_LOG_FORMAT")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached settings for the whole package."""
    return AppSettings()
