"""Logger configuration and cached accessor."""

import codecs
import os
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class LoggerConfig(BaseModel):
    """Logger configuration from environment variables."""

    # Values read from the environment go through the validators too
    model_config = ConfigDict(validate_default=True)

    log_file_path: str = Field(
        default_factory=lambda: os.getenv(
            "SINGLELOG_FILE", os.path.join(os.getcwd(), "app.log")
        ),
        description="Path of the append-only log file",
    )

    encoding: str = Field(
        default_factory=lambda: os.getenv("SINGLELOG_ENCODING", "utf-8"),
        description="Text encoding of the log file",
    )

    echo_to_console: bool = Field(
        default_factory=lambda: os.getenv("SINGLELOG_ECHO", "false").lower() == "true",
        description="Also print every entry to stdout when it is logged",
    )

    write_retries: int = Field(
        default_factory=lambda: int(os.getenv("SINGLELOG_WRITE_RETRIES", "0")),
        description="Extra attempts for a failed write (0 = best effort, no retry)",
    )

    retry_wait_seconds: float = Field(
        default_factory=lambda: float(os.getenv("SINGLELOG_RETRY_WAIT", "0.1")),
        description="Initial backoff between write retries in seconds",
    )

    shutdown_timeout_seconds: float = Field(
        default_factory=lambda: float(os.getenv("SINGLELOG_SHUTDOWN_TIMEOUT", "5.0")),
        description="Maximum seconds to wait for the worker to drain on shutdown",
    )

    queue_name: str = Field(
        default="log-pipeline",
        description="Worker thread name",
    )

    @field_validator("log_file_path")
    @classmethod
    def validate_log_file_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SINGLELOG_FILE must not be empty")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v

    @field_validator("write_retries")
    @classmethod
    def validate_write_retries(cls, v: int) -> int:
        """Validate retry count is within reasonable range."""
        if not 0 <= v <= 10:
            raise ValueError("Write retries must be between 0 and 10")
        return v

    @field_validator("retry_wait_seconds")
    @classmethod
    def validate_retry_wait(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Retry wait must not be negative")
        return v

    @field_validator("shutdown_timeout_seconds")
    @classmethod
    def validate_shutdown_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Shutdown timeout must be positive")
        return v


# Global config instance
_config: Optional[LoggerConfig] = None


def get_logger_config() -> LoggerConfig:
    """Get logger configuration."""
    global _config
    if _config is None:
        _config = LoggerConfig()
        logger.debug(f"Logger config loaded: file={_config.log_file_path}")
    return _config


def set_logger_config(config: LoggerConfig) -> None:
    """Install an explicit configuration, used in place of the environment."""
    global _config
    _config = config


def reset_logger_config() -> None:
    """Reset cached configuration (for testing)."""
    global _config
    _config = None
