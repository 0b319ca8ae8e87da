"""Configuration management for KNoT Cloud clients.

This module provides the validated settings a client needs to reach the
cloud, loadable from a mapping or from ``KNOT_CLOUD_*`` environment
variables (optionally seeded from a ``.env`` file).
"""

import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .error import ConfigError


ENV_PREFIX = "KNOT_CLOUD_"
DEFAULT_PORT = 3000


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ClientConfig(BaseModel):
    """Connection settings for a KNoT Cloud client."""

    hostname: str = Field(description="Cloud host name or address")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Cloud port")
    uuid: str = Field(description="Identity used for the handshake")
    token: str = Field(repr=False, description="Secret paired with the identity")

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    @field_validator('hostname', 'uuid', 'token')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only credentials and host names."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Validate and normalize log level."""
        if isinstance(v, str):
            return v.upper()
        return v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Create configuration from dictionary.

        Raises:
            ConfigError: If the data does not validate
        """
        try:
            return cls(**dict(data))
        except ValidationError as e:
            raise ConfigError.invalid_config(str(e), cause=e)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ClientConfig":
        """Create configuration from ``KNOT_CLOUD_*`` environment variables.

        A ``.env`` file is loaded first when present; variables already set in
        the environment take precedence over it.

        Raises:
            ConfigError: If a required variable is missing or invalid
        """
        load_dotenv(dotenv_path)

        data: Dict[str, Any] = {}
        for key in ("hostname", "uuid", "token"):
            value = get_env_var(ENV_PREFIX + key.upper())
            if value is None:
                raise ConfigError.missing_env_var(ENV_PREFIX + key.upper())
            data[key] = value

        port = get_env_var(ENV_PREFIX + "PORT")
        if port is not None:
            data["port"] = port

        log_level = get_env_var(ENV_PREFIX + "LOG_LEVEL")
        if log_level is not None:
            data["log_level"] = log_level

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(mode="json")


def get_env_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value
