"""Tests for sensor data requests and subscriptions."""

import pytest

from knot_cloud.core.error import (
    NotConnectedError,
    NotFoundError,
    TransportError,
    UnsupportedValueTypeError,
)
from knot_cloud.core.session import SessionManager
from knot_cloud.services.data_channel import DataChannel
from knot_cloud.services.device_directory import DeviceDirectory

from conftest import FakeFactory


async def connected_channel(**connection_kwargs):
    factory = FakeFactory(**connection_kwargs)
    session = SessionManager(factory)
    await session.connect("knot-cloud.local", 3000, "user-uuid", "user-token")
    return DataChannel(DeviceDirectory(session)), factory.connection


class TestSetData:

    @pytest.mark.asyncio
    async def test_number(self):
        channel, connection = await connected_channel()

        await channel.set_data("3a9c1f0e27b4d855", 1, "42")

        assert connection.requests("update") == [{
            "uuid": "uuid-thermostat",
            "set_data": [{"sensor_id": 1, "value": 42}],
        }]

    @pytest.mark.asyncio
    async def test_resolves_before_update(self):
        channel, connection = await connected_channel()

        await channel.set_data("3a9c1f0e27b4d855", 1, "42")

        assert [name for name, _ in connection.calls] == ["devices", "update"]

    @pytest.mark.asyncio
    async def test_boolean_and_base64(self):
        channel, connection = await connected_channel()

        await channel.set_data("7bd20e4a91c35f66", 1, "true")
        await channel.set_data("7bd20e4a91c35f66", 2, "aGVsbG8=")

        values = [p["set_data"][0]["value"] for p in connection.requests("update")]
        assert values == [True, "aGVsbG8="]

    @pytest.mark.asyncio
    async def test_invalid_value_sends_nothing(self):
        channel, connection = await connected_channel()

        with pytest.raises(UnsupportedValueTypeError):
            await channel.set_data("3a9c1f0e27b4d855", 1, "not-base64-@@@")

        assert connection.calls == []

    @pytest.mark.asyncio
    async def test_unknown_device_sends_no_update(self):
        channel, connection = await connected_channel()

        with pytest.raises(NotFoundError):
            await channel.set_data("ffffffffffffffff", 1, "42")

        assert connection.requests("update") == []

    @pytest.mark.asyncio
    async def test_ack_payload_is_ignored(self):
        """Acknowledgments count as success whatever they carry."""
        channel, connection = await connected_channel(update_ack={"error": "ignored"})

        await channel.set_data("3a9c1f0e27b4d855", 1, "1")

        assert len(connection.requests("update")) == 1

    @pytest.mark.asyncio
    async def test_not_connected(self):
        channel = DataChannel(DeviceDirectory(SessionManager(FakeFactory())))
        with pytest.raises(NotConnectedError):
            await channel.set_data("3a9c1f0e27b4d855", 1, "42")


class TestRequestData:

    @pytest.mark.asyncio
    async def test_get_data_payload(self):
        channel, connection = await connected_channel()

        await channel.request_data("7bd20e4a91c35f66", 3)

        assert connection.requests("update") == [{
            "uuid": "uuid-lamp",
            "get_data": [{"sensor_id": 3}],
        }]

    @pytest.mark.asyncio
    async def test_unknown_device(self):
        channel, connection = await connected_channel()

        with pytest.raises(NotFoundError):
            await channel.request_data("ffffffffffffffff", 3)

        assert connection.requests("update") == []


class TestSubscribe:

    @pytest.mark.asyncio
    async def test_subscribe_payload(self):
        channel, connection = await connected_channel()

        await channel.subscribe("3a9c1f0e27b4d855", "broadcast")

        assert connection.requests("subscribe") == [{
            "uuid": "uuid-thermostat",
            "type": ["broadcast"],
        }]

    @pytest.mark.asyncio
    async def test_subscribe_error(self):
        channel, _ = await connected_channel(subscribe_ack={"error": "Unauthorized"})

        with pytest.raises(TransportError) as exc_info:
            await channel.subscribe("3a9c1f0e27b4d855", "broadcast")

        assert exc_info.value.detail == "Unauthorized"

    @pytest.mark.asyncio
    async def test_subscribe_unknown_device(self):
        channel, connection = await connected_channel()

        with pytest.raises(NotFoundError):
            await channel.subscribe("ffffffffffffffff", "broadcast")

        assert connection.requests("subscribe") == []
