"""
smart-house: an in-memory smart house registry.

This library provides:
- A house registry of rooms and the device names they contain
- Device models that describe their own state
- Device info providers that translate (room, device) pairs into status lines
- A report generator that walks the registry through a provider
"""

from smart_house.core.errors import SmartHouseError, RoomNotFound, DeviceNotFound
from smart_house.core.house import Room, SmartHouse
from smart_house.core.report import DeviceInfoProvider, ReportConfig, create_report
from smart_house.devices import Device, SmartSocket, SmartThermometer
from smart_house.providers import (
    DeviceLookupProvider,
    OwningDeviceInfoProvider,
    BorrowingDeviceInfoProvider,
)

__version__ = "0.1.0"

__all__ = [
    "SmartHouseError",
    "RoomNotFound",
    "DeviceNotFound",
    "Room",
    "SmartHouse",
    "DeviceInfoProvider",
    "ReportConfig",
    "create_report",
    "Device",
    "SmartSocket",
    "SmartThermometer",
    "DeviceLookupProvider",
    "OwningDeviceInfoProvider",
    "BorrowingDeviceInfoProvider",
]
