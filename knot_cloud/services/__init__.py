"""
Services built on top of a KNoT Cloud session.

This package provides:
- Device directory listing and id resolution
- Sensor data exchange and subscriptions
"""

from .device_directory import DeviceDirectory, DeviceInfo, DeviceRecord
from .data_channel import DataChannel

__all__ = [
    "DeviceDirectory",
    "DeviceInfo",
    "DeviceRecord",
    "DataChannel",
]
