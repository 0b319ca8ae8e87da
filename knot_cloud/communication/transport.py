"""Contract of the underlying cloud connection.

The SDK does not open sockets itself. It drives a connection object created
by an injected factory, which must look like the Meshblu connection: it
authenticates on creation, emits ``ready``/``notReady`` and exposes
callback-style RPCs. These protocols describe exactly what the SDK calls.
"""

from typing import Any, Callable, Dict, List, Mapping, Protocol, Union

from ..core.error import TransportError


READY_EVENT = "ready"
NOT_READY_EVENT = "notReady"

# Every device registered under any gateway
ALL_GATEWAYS_FILTER: Dict[str, Any] = {"gateways": ["*"]}

Callback = Callable[..., Any]
RawDevice = Dict[str, Any]
DevicesResult = Union[List[RawDevice], Mapping[str, Any], Exception]


class ConnectionHandle(Protocol):
    """A live, authenticated connection to the cloud."""

    def on(self, event: str, handler: Callable[..., Any]) -> Any:
        ...

    def close(self, callback: Callback) -> Any:
        ...

    def devices(self, query: Mapping[str, Any], callback: Callable[[DevicesResult], Any]) -> Any:
        ...

    def update(self, payload: Mapping[str, Any], callback: Callback) -> Any:
        ...

    def subscribe(self, payload: Mapping[str, Any], callback: Callback) -> Any:
        ...


class ConnectionFactory(Protocol):
    """Creates a connection and starts its handshake."""

    def __call__(self, *, server: str, port: int, uuid: str, token: str) -> ConnectionHandle:
        ...


def error_of(result: Any) -> Any:
    """Return the error carried by an acknowledgment, or None."""
    if isinstance(result, Exception):
        return result
    if isinstance(result, Mapping):
        return result.get("error") or None
    return None


def raise_for_error(result: Any) -> None:
    """Raise TransportError if an acknowledgment carries an error."""
    error = error_of(result)
    if error is not None:
        raise TransportError(error)
