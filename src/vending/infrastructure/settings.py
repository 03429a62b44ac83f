"""Runtime configuration loaded from the environment.

Recognised variables (also read from a local ``.env`` file):

- ``VENDING_CHANGE_STRATEGY``: strategy used when a command does not pick
  one (``high``, ``low``, ``alternating`` or ``backtrack``)
- ``VENDING_LOG_LEVEL``: logging level name, logs go to stderr
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vending.domain.exceptions import ValidationError
from vending.domain.service.change_strategies import strategy_for


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    change_strategy: str = Field(default="high", alias="VENDING_CHANGE_STRATEGY")
    log_level: str = Field(default="WARNING", alias="VENDING_LOG_LEVEL")

    @field_validator("change_strategy")
    @classmethod
    def _known_strategy(cls, value: str) -> str:
        try:
            return strategy_for(value).name
        except ValidationError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level
