"""KNoT Cloud SDK for Python.

Manage an authenticated session with a KNoT Cloud, discover the devices
registered in it and exchange sensor data with them.
"""

from .client import Client
from .core import (
    KnotCloudError,
    AuthorizationError,
    NotConnectedError,
    NotFoundError,
    UnsupportedValueTypeError,
    TransportError,
    ConfigError,
    ClientConfig,
    LogLevel,
    init_module,
)
from .core.session import SessionManager, SessionState
from .communication import ConnectionFactory, ConnectionHandle
from .data import SensorValue, ValueType, coerce
from .services import DataChannel, DeviceDirectory, DeviceInfo

__version__ = "0.1.0"

__all__ = [
    "Client",
    # Errors
    "KnotCloudError",
    "AuthorizationError",
    "NotConnectedError",
    "NotFoundError",
    "UnsupportedValueTypeError",
    "TransportError",
    "ConfigError",
    # Configuration and logging
    "ClientConfig",
    "LogLevel",
    "init_module",
    # Session and services
    "SessionManager",
    "SessionState",
    "ConnectionFactory",
    "ConnectionHandle",
    "DeviceDirectory",
    "DeviceInfo",
    "DataChannel",
    # Values
    "SensorValue",
    "ValueType",
    "coerce",
]
