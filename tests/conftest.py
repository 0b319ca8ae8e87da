"""Shared fixtures: an in-memory stand-in for the cloud connection."""

import asyncio
from collections import defaultdict

import pytest

from knot_cloud import Client


DEVICES = [
    {"id": "3a9c1f0e27b4d855", "name": "Thermostat", "status": "online",
     "schema": [{"sensor_id": 1, "value_type": 2}], "uuid": "uuid-thermostat",
     "token": "device-token"},
    {"id": "7bd20e4a91c35f66", "name": "Lamp", "status": "offline",
     "schema": [{"sensor_id": 1, "value_type": 3}], "uuid": "uuid-lamp"},
]


class FakeConnection:
    """Records every request and acknowledges it synchronously."""

    def __init__(self, devices=None, update_ack=None, subscribe_ack=None):
        self.handlers = defaultdict(list)
        self.calls = []
        self.devices_result = list(DEVICES) if devices is None else devices
        self.update_ack = update_ack
        self.subscribe_ack = {} if subscribe_ack is None else subscribe_ack
        self.closed = False
        self.close_error = None

    def on(self, event, handler):
        self.handlers[event].append(handler)

    def emit(self, event, *args):
        for handler in list(self.handlers[event]):
            handler(*args)

    def close(self, callback):
        self.calls.append(("close", None))
        if self.close_error is not None:
            raise self.close_error
        self.closed = True
        callback()

    def devices(self, query, callback):
        self.calls.append(("devices", query))
        callback(self.devices_result)

    def update(self, payload, callback):
        self.calls.append(("update", payload))
        if self.update_ack is None:
            callback()
        else:
            callback(self.update_ack)

    def subscribe(self, payload, callback):
        self.calls.append(("subscribe", payload))
        callback(self.subscribe_ack)

    def requests(self, kind):
        return [payload for name, payload in self.calls if name == kind]


class FakeFactory:
    """Connection factory that answers the handshake on the next loop turn."""

    def __init__(self, authorized=True, **connection_kwargs):
        self.authorized = authorized
        self.connection_kwargs = connection_kwargs
        self.calls = []
        self.connections = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        connection = FakeConnection(**self.connection_kwargs)
        self.connections.append(connection)
        event = "ready" if self.authorized else "notReady"
        asyncio.get_running_loop().call_soon(connection.emit, event)
        return connection

    @property
    def connection(self):
        return self.connections[-1]


@pytest.fixture
def factory():
    return FakeFactory()


@pytest.fixture
def make_client(factory):
    """Build a client bound to the fake factory (call inside the test loop)."""
    def _make(**overrides):
        params = {
            "hostname": "knot-cloud.local",
            "port": 3000,
            "uuid": "user-uuid",
            "token": "user-token-5e1f",
            "connection_factory": factory,
        }
        params.update(overrides)
        return Client(**params)
    return _make
