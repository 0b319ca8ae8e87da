"""KNoT Cloud client.

This module provides :class:`Client`, the single object applications use to
talk to the cloud. It composes the session, the device directory and the
data channel; each client owns its own session.
"""

import logging
from typing import Any, Callable, List, Optional

from .communication.transport import ConnectionFactory
from .core.config import ClientConfig
from .core.error import ConfigError
from .core.logging import init_module, register_secret_for_redaction
from .core.session import SessionManager
from .services.data_channel import DataChannel
from .services.device_directory import DeviceDirectory, DeviceInfo

logger = logging.getLogger(__name__)


class Client:
    """Client for a KNoT Cloud account.

    Every operation except :meth:`connect` and :meth:`close` requires a live
    session and raises ``NotConnectedError`` otherwise; nothing is queued.

    Examples:
        ```python
        async with Client("knot-cloud.local", 3000, uuid, token,
                          connection_factory=meshblu_factory) as client:
            for device in await client.list_devices():
                print(device.id, device.name)
            await client.set_data("3a9c1f0e27b4d855", 1, "true")
        ```
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        uuid: str,
        token: str,
        connection_factory: Optional[ConnectionFactory] = None,
    ) -> None:
        """Initialize the client.

        Args:
            hostname: Cloud host name or address
            port: Cloud port
            uuid: Identity used for the handshake
            token: Secret paired with the identity
            connection_factory: Creates the underlying cloud connection
        """
        self.hostname = hostname
        self.port = port
        self.uuid = uuid
        self.token = token
        register_secret_for_redaction(token)

        self.session = SessionManager(connection_factory)
        self.directory = DeviceDirectory(self.session)
        self.channel = DataChannel(self.directory)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        connection_factory: Optional[ConnectionFactory] = None,
        configure_logging: bool = False,
    ) -> 'Client':
        """Create a client from validated configuration.

        Args:
            config: Connection settings, e.g. from ``ClientConfig.from_env()``
            connection_factory: Creates the underlying cloud connection
            configure_logging: Also call :func:`init_module` with
                ``config.log_level``; meant for application entry points
        """
        if configure_logging:
            init_module(config.log_level.value)
        return cls(
            config.hostname,
            config.port,
            config.uuid,
            config.token,
            connection_factory=connection_factory,
        )

    @property
    def is_connected(self) -> bool:
        return self.session.is_connected

    async def connect(self) -> None:
        """Authenticate with the cloud. Does nothing if already connected.

        Raises:
            AuthorizationError: If the credentials are rejected
            ConfigError: If no connection factory was given
        """
        if self.session.connection_factory is None:
            raise ConfigError("no connection factory configured")
        await self.session.connect(self.hostname, self.port, self.uuid, self.token)

    async def close(self) -> None:
        """Close the session. Does nothing if not connected."""
        await self.session.close()

    async def list_devices(self) -> List[DeviceInfo]:
        """List every device registered in the cloud."""
        return await self.directory.list_devices()

    get_devices = list_devices

    async def get_device(self, id: str) -> DeviceInfo:
        """Get one device by id.

        Raises:
            NotFoundError: If no device has that id
        """
        return await self.directory.get_device(id)

    async def set_data(self, id: str, sensor_id: Any, value: str) -> None:
        """Write a raw value (number, ``true``/``false`` or Base64) to a sensor."""
        await self.channel.set_data(id, sensor_id, value)

    async def request_data(self, id: str, sensor_id: Any) -> None:
        """Ask a device to publish a sensor value; it arrives as an event."""
        await self.channel.request_data(id, sensor_id)

    async def subscribe(self, id: str, type: str) -> None:
        """Subscribe to one type of message from a device."""
        await self.channel.subscribe(id, type)

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        """Register a handler for raw connection events.

        Raises:
            NotConnectedError: If called before :meth:`connect`
        """
        self.session.connection.on(event, handler)

    async def __aenter__(self) -> 'Client':
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
