"""Runtime configuration loaded from environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from argtoken.logger import get_logger

logger = get_logger("config")

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ArgTokenConfig(BaseModel):
    """Configuration for logging and CLI defaults."""

    log_level: str = Field(default="INFO", description="loguru level name")
    log_file: Optional[str] = Field(None, description="Log file path; no file sink when unset")
    console_output: bool = Field(default=False, description="Also log to stderr")
    expand_clusters: bool = Field(default=False, description="Expand '-abc' into '-a -b -c' before parsing")

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def load_config() -> ArgTokenConfig:
    """Load configuration from environment variables (and a .env file, if present).

    Variables:
        ARGTOKEN_LOG_LEVEL: logging level (default INFO)
        ARGTOKEN_LOG_FILE: path of the log file (default: no file logging)
        ARGTOKEN_CONSOLE_LOG: log to stderr (default false)
        ARGTOKEN_EXPAND_CLUSTERS: expand abbreviation clusters in the CLI (default false)
    """
    load_dotenv()

    config = ArgTokenConfig(
        log_level=os.getenv("ARGTOKEN_LOG_LEVEL", "INFO"),
        log_file=os.getenv("ARGTOKEN_LOG_FILE") or None,
        console_output=_env_flag("ARGTOKEN_CONSOLE_LOG"),
        expand_clusters=_env_flag("ARGTOKEN_EXPAND_CLUSTERS"),
    )
    logger.debug(f"Loaded config: {config}")
    return config
