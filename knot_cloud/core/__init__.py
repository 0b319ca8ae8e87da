"""Core KNoT Cloud SDK components.

This module provides the fundamental building blocks shared by the client:
- Error handling and exceptions
- Configuration management
- Logging setup

The session manager lives in :mod:`knot_cloud.core.session`.
"""

from .error import (
    KnotCloudError,
    AuthorizationError,
    NotConnectedError,
    NotFoundError,
    UnsupportedValueTypeError,
    TransportError,
    ConfigError,
)
from .logging import init_module, register_secret_for_redaction, redact_secrets
from .config import ClientConfig, LogLevel

__all__ = [
    # Error handling
    "KnotCloudError",
    "AuthorizationError",
    "NotConnectedError",
    "NotFoundError",
    "UnsupportedValueTypeError",
    "TransportError",
    "ConfigError",
    # Logging
    "init_module",
    "register_secret_for_redaction",
    "redact_secrets",
    # Configuration
    "ClientConfig",
    "LogLevel",
]
