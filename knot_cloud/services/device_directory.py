"""
Device directory for KNoT Cloud clients.

This module lists the devices registered in the cloud and resolves the ids
applications use into the cloud's internal uuids. Every call queries the
cloud again; nothing is cached between calls.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..communication.bridge import call
from ..communication.transport import ALL_GATEWAYS_FILTER, RawDevice, raise_for_error
from ..core.error import NotFoundError, TransportError
from ..core.session import SessionManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceInfo:
    """Public view of a registered device."""
    id: str
    name: Optional[str] = None
    status: Optional[Any] = None
    schema: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "schema": self.schema,
        }


@dataclass(frozen=True)
class DeviceRecord:
    """A device as found in one directory snapshot."""
    external_id: str
    name: Optional[str]
    status: Optional[Any]
    schema: Optional[Any]
    platform_uuid: Optional[str]

    @classmethod
    def from_dict(cls, data: RawDevice) -> 'DeviceRecord':
        """Create from a raw device returned by the connection."""
        return cls(
            external_id=data.get("id"),
            name=data.get("name"),
            status=data.get("status"),
            schema=data.get("schema"),
            platform_uuid=data.get("uuid"),
        )

    def public(self) -> DeviceInfo:
        return DeviceInfo(
            id=self.external_id,
            name=self.name,
            status=self.status,
            schema=self.schema,
        )


class DeviceDirectory:
    """Resolves device ids against the cloud's device listing."""

    def __init__(self, session: SessionManager):
        self.session = session

    async def snapshot(self) -> List[DeviceRecord]:
        """Fetch every device under every gateway, in cloud order.

        Raises:
            NotConnectedError: If there is no session
            TransportError: If the cloud reports an error
        """
        connection = self.session.connection
        result = await call(connection.devices, ALL_GATEWAYS_FILTER)
        raise_for_error(result)
        if result is None:
            return []
        if not isinstance(result, (list, tuple)):
            raise TransportError(f"unexpected devices result: {result!r}")

        logger.debug("Directory snapshot has %d devices", len(result))
        return [DeviceRecord.from_dict(device) for device in result]

    async def list_devices(self) -> List[DeviceInfo]:
        """List registered devices without their internal uuids."""
        return [record.public() for record in await self.snapshot()]

    async def find(self, external_id: str) -> DeviceRecord:
        """Find the first device with the given id in a fresh snapshot.

        Raises:
            NotFoundError: If no device has that id
        """
        for record in await self.snapshot():
            if record.external_id == external_id:
                return record
        raise NotFoundError(external_id)

    async def resolve_uuid(self, external_id: str) -> str:
        """Translate a device id into the cloud's internal uuid."""
        record = await self.find(external_id)
        logger.debug("Resolved device %s to %s", external_id, record.platform_uuid)
        return record.platform_uuid

    async def get_device(self, external_id: str) -> DeviceInfo:
        """Get one device by id."""
        return (await self.find(external_id)).public()
