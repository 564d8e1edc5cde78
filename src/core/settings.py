"""
Engine settings.

Defaults reproduce the classic setup: the engine plays Black and looks 3 plies ahead after its own candidate move.
Values can be overridden through environment variables (handy when running the API).
"""

import os
from typing import Mapping, Optional, Self

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.exceptions import ConfigurationError
from src.core.shared_types import Color

ENV_PREFIX = "CHESS_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EngineSettings(BaseModel):
    search_depth: int = Field(default=3, ge=0)
    automated_color: Color = Color.BLACK
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}")
        return level

    @property
    def human_color(self) -> Color:
        return Color.WHITE if self.automated_color == Color.BLACK else Color.BLACK

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Read CHESS_SEARCH_DEPTH, CHESS_AUTOMATED_COLOR and CHESS_LOG_LEVEL (missing ones keep their default)."""
        environ = os.environ if environ is None else environ
        values = {
            field_name: environ[f"{ENV_PREFIX}{field_name.upper()}"]
            for field_name in cls.model_fields
            if f"{ENV_PREFIX}{field_name.upper()}" in environ
        }
        if "automated_color" in values:
            values["automated_color"] = values["automated_color"].strip().lower()
        try:
            return cls.model_validate(values)
        except ValidationError as error:
            raise ConfigurationError(f"Invalid engine settings: {error}") from error
