"""Session management for KNoT Cloud clients.

This module owns the single authenticated connection a client uses. There is
no automatic reconnection: a rejected or dropped session stays closed until
``connect`` is called again.
"""

import asyncio
import logging
from enum import Enum
from typing import Optional

from ..communication.bridge import SingleShot
from ..communication.transport import (
    NOT_READY_EVENT,
    READY_EVENT,
    ConnectionFactory,
    ConnectionHandle,
)
from .error import AuthorizationError, NotConnectedError, TransportError

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Current state of a session."""
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class SessionManager:
    """Holds at most one live connection to the cloud.

    The connection slot is only written by :meth:`connect` (on ``ready``) and
    :meth:`close`.

    Examples:
        ```python
        session = SessionManager(meshblu_connection_factory)
        await session.connect("knot-cloud.local", 3000, uuid, token)
        session.connection.on("config", on_config)
        await session.close()
        ```
    """

    def __init__(self, connection_factory: Optional[ConnectionFactory]) -> None:
        """Initialize the session manager.

        Args:
            connection_factory: Creates a connection and starts its handshake
        """
        self.connection_factory = connection_factory
        self._connection: Optional[ConnectionHandle] = None
        self._lock = asyncio.Lock()

    @property
    def state(self) -> SessionState:
        if self._connection is None:
            return SessionState.DISCONNECTED
        return SessionState.CONNECTED

    @property
    def is_connected(self) -> bool:
        """Check if a live connection is held."""
        return self._connection is not None

    @property
    def connection(self) -> ConnectionHandle:
        """The live connection.

        Raises:
            NotConnectedError: If there is no session
        """
        if self._connection is None:
            raise NotConnectedError()
        return self._connection

    async def connect(self, hostname: str, port: int, identity: str, secret: str) -> None:
        """Open and authenticate a connection, unless one is already live.

        Raises:
            AuthorizationError: If the cloud answers ``notReady``
            TransportError: If the connection factory fails
        """
        async with self._lock:
            if self._connection is not None:
                logger.debug("Already connected to %s:%s", hostname, port)
                return

            logger.info("Connecting to %s:%s as %s", hostname, port, identity)
            handshake = SingleShot()
            try:
                connection = self.connection_factory(
                    server=hostname, port=port, uuid=identity, token=secret
                )
                connection.on(READY_EVENT, lambda *args: handshake.set(True))
                connection.on(NOT_READY_EVENT, lambda *args: handshake.set(False))
            except Exception as e:
                raise TransportError(e) from e

            if not await handshake:
                logger.warning("Connection to %s:%s not authorized", hostname, port)
                self._discard(connection)
                raise AuthorizationError()

            self._connection = connection
            logger.info("Connected to %s:%s", hostname, port)

    async def close(self) -> None:
        """Close the connection, if it exists.

        Close failures are logged and otherwise ignored; the slot is always
        cleared.
        """
        async with self._lock:
            if self._connection is None:
                return

            connection = self._connection
            done = SingleShot()
            try:
                connection.close(done.callback)
            except Exception:
                logger.warning("Error closing connection", exc_info=True)
                done.set()
            await done

            self._connection = None
            logger.info("Connection closed")

    @staticmethod
    def _discard(connection: ConnectionHandle) -> None:
        # best-effort teardown of a rejected handshake
        try:
            connection.close(lambda *args: None)
        except Exception:
            logger.debug("Ignoring error closing unauthorized connection", exc_info=True)
