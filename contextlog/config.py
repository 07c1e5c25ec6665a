# contextlog/config.py
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_LOG_FORMAT, ENV_PREFIX
from .enums import LogLevel
from .serialization import SerializerSettings, default_serializer_settings


class Settings(BaseSettings):
    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO, description="Minimum level written by the console sink"
    )
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT, description="loguru format for the console sink"
    )
    colorize: Optional[bool] = Field(
        default=None, description="Force colors on or off (None lets loguru decide)"
    )
    serialize: bool = Field(
        default=False, description="Write records as JSON instead of formatted text"
    )

    # Context data serialization
    serializer_indent: Optional[int] = Field(
        default=None, ge=0, description="JSON indentation for context data"
    )
    serializer_sort_keys: bool = Field(
        default=False, description="Sort keys in context data JSON"
    )
    serializer_max_depth: Optional[int] = Field(
        default=None, ge=1, description="Maximum nesting depth of context data"
    )
    use_datetime_types: bool = Field(
        default=False, description="Register date/time converters at startup"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> LogLevel:
        """Validate log level is one of the allowed values"""
        if isinstance(v, LogLevel):
            return v
        allowed_levels = LogLevel.__members__.keys()
        v_upper = str(v).upper()
        if v_upper not in allowed_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(allowed_levels)}"
            )
        return LogLevel[v_upper]

    def to_serializer_settings(self) -> SerializerSettings:
        """Build serializer settings from the baseline plus configured overrides."""
        serializer_settings = default_serializer_settings()
        serializer_settings.indent = self.serializer_indent
        serializer_settings.sort_keys = self.serializer_sort_keys
        serializer_settings.max_depth = self.serializer_max_depth
        return serializer_settings

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
