"""
Configuration module for the portfolio server.
Loads settings from environment variables, overridable from the command line.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings

from portfolio.exceptions import ConfigurationError

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Listening transport (exactly one)
    port: Optional[int] = Field(default=None, ge=0, le=65535, alias="PORTFOLIO_PORT")
    socket_path: Optional[Path] = Field(default=None, alias="PORTFOLIO_SOCKET_PATH")

    # Paths
    static_dir: Path = Field(default=Path("static"), alias="PORTFOLIO_STATIC_DIR")

    # Logging
    log_level: str = Field(default="info", alias="PORTFOLIO_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return value

    @model_validator(mode="after")
    def check_single_transport(self) -> "Settings":
        if self.port is None and self.socket_path is None:
            raise ValueError("either a port or a socket path is required")
        if self.port is not None and self.socket_path is not None:
            raise ValueError("a port and a socket path are mutually exclusive")
        return self

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Maps keyword overrides to the aliases the settings are declared with
_ALIASES = {
    name: field.alias for name, field in Settings.model_fields.items()
}


def load_settings(**overrides: Any) -> Settings:
    """
    Build settings from the environment plus explicit overrides.

    Overrides whose value is None are ignored so that the environment can
    still supply them. Any validation problem is raised as ConfigurationError.
    """
    values = {
        _ALIASES[name]: value
        for name, value in overrides.items()
        if value is not None
    }
    try:
        return Settings(**values)
    except ValidationError as e:
        messages = "; ".join(
            err["msg"].removeprefix("Value error, ") for err in e.errors()
        )
        raise ConfigurationError(messages) from e
