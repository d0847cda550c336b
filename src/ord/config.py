"""Process configuration for ord using Pydantic Settings."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    TEXT = "text"


class OrdConfig(BaseSettings):
    """ord process configuration loaded from environment variables.

    Index and Bitcoin Core settings come from the command line, see
    ``ord.options.Options``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Observability
    log_level: str = Field(default="INFO", alias="ORD_LOG_LEVEL")
    log_format: LogFormat = Field(default=LogFormat.TEXT, alias="ORD_LOG_FORMAT")
