"""
Device info providers.

Providers translate a (room, device) pair into a status line by matching the
device name against the devices they hold.
"""

from .base import DeviceLookupProvider
from .owning import OwningDeviceInfoProvider
from .borrowing import BorrowingDeviceInfoProvider

__all__ = [
    "DeviceLookupProvider",
    "OwningDeviceInfoProvider",
    "BorrowingDeviceInfoProvider",
]
