"""Communication with the cloud connection object."""

from .bridge import SingleShot, call
from .transport import (
    ALL_GATEWAYS_FILTER,
    NOT_READY_EVENT,
    READY_EVENT,
    ConnectionFactory,
    ConnectionHandle,
    raise_for_error,
)

__all__ = [
    "SingleShot",
    "call",
    "ALL_GATEWAYS_FILTER",
    "NOT_READY_EVENT",
    "READY_EVENT",
    "ConnectionFactory",
    "ConnectionHandle",
    "raise_for_error",
]
