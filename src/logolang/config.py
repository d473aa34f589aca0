"""
Logolang Configuration.

Settings are read from ``LOGOLANG_*`` environment variables and an optional
``.env`` file:

    LOGOLANG_LEVEL=info
    LOGOLANG_COLOR=false
    LOGOLANG_FORMAT="%hh%:%mm%:%ss% %LEVEL% %MESSAGE%"
    LOGOLANG_DIAGNOSTICS_LEVEL=DEBUG
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import Level
from .template import DEFAULT_FORMAT


class DiagnosticsLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogolangSettings(BaseSettings):
    """Logger configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOGOLANG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: Level = Field(default=Level.ERROR, description="Most verbose level emitted (0-4 or name)")
    color: bool = Field(default=True, description="Colorize level names")
    format: str = Field(default=DEFAULT_FORMAT, description="Line format (empty means default)")
    diagnostics_level: DiagnosticsLevel = Field(
        default=DiagnosticsLevel.WARNING,
        description="Minimum level of logolang's own diagnostic output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        # InvalidLevelError is a ValueError, so pydantic reports it as a ValidationError
        return Level.parse(value)

    @field_validator("diagnostics_level", mode="before")
    @classmethod
    def _upper_diagnostics_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("format")
    @classmethod
    def _default_format(cls, value: str) -> str:
        return value or DEFAULT_FORMAT
