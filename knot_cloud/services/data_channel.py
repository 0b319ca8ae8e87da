"""
Sensor data exchange with registered devices.

Writes and read requests travel as ``update`` messages addressed to the
device's internal uuid. The cloud acknowledges them without saying whether
the device applied them, so an acknowledgment is treated as success. Data
requested with ``get_data`` arrives later as an event on the connection.
"""

import logging
from typing import Any, Dict

from ..communication.bridge import call
from ..communication.transport import raise_for_error
from ..data.value import coerce
from .device_directory import DeviceDirectory

logger = logging.getLogger(__name__)


class DataChannel:
    """Typed read/write/subscribe operations against resolved devices."""

    def __init__(self, directory: DeviceDirectory):
        self.directory = directory

    async def set_data(self, external_id: str, sensor_id: Any, raw_value: str) -> None:
        """Write a value to one sensor of a device.

        The value is typed before anything is sent, so an invalid value never
        costs a directory query.

        Raises:
            UnsupportedValueTypeError: If ``raw_value`` cannot be typed
            NotFoundError: If the device is not registered
        """
        value = coerce(raw_value)
        uuid = await self.directory.resolve_uuid(external_id)
        payload: Dict[str, Any] = {
            "uuid": uuid,
            "set_data": [{
                "sensor_id": sensor_id,
                "value": value.to_wire(),
            }],
        }
        logger.debug("set_data %s sensor %s (%s)", external_id, sensor_id, value.type.value)
        await call(self.directory.session.connection.update, payload)

    async def request_data(self, external_id: str, sensor_id: Any) -> None:
        """Ask a device to publish the current value of one sensor."""
        uuid = await self.directory.resolve_uuid(external_id)
        payload = {
            "uuid": uuid,
            "get_data": [{"sensor_id": sensor_id}],
        }
        logger.debug("get_data %s sensor %s", external_id, sensor_id)
        await call(self.directory.session.connection.update, payload)

    async def subscribe(self, external_id: str, channel_type: str) -> None:
        """Subscribe to one type of message sent by a device.

        Raises:
            NotFoundError: If the device is not registered
            TransportError: If the cloud rejects the subscription
        """
        uuid = await self.directory.resolve_uuid(external_id)
        result = await call(
            self.directory.session.connection.subscribe,
            {"uuid": uuid, "type": [channel_type]},
        )
        raise_for_error(result)
        logger.info("Subscribed to %s messages from %s", channel_type, external_id)
