"""
Core components of the smart-house registry.

This package contains:
- errors: RoomNotFound / DeviceNotFound taxonomy
- house: SmartHouse registry and Room dataclass
- report: DeviceInfoProvider interface and report generation
"""

from smart_house.core.errors import SmartHouseError, RoomNotFound, DeviceNotFound
from smart_house.core.house import Room, SmartHouse
from smart_house.core.report import DeviceInfoProvider, ReportConfig, create_report

__all__ = [
    "SmartHouseError",
    "RoomNotFound",
    "DeviceNotFound",
    "Room",
    "SmartHouse",
    "DeviceInfoProvider",
    "ReportConfig",
    "create_report",
]
