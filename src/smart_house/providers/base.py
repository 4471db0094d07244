"""
Name-based device lookup shared by the concrete providers.
"""

from abc import abstractmethod
from typing import Iterable, Optional
import logging

from smart_house.core.report import DeviceInfoProvider
from smart_house.devices import Device

logger = logging.getLogger(__name__)


class DeviceLookupProvider(DeviceInfoProvider):
    """
    Provider that resolves device names against the devices it holds.

    The house's own containment data is never consulted: a device the
    provider doesn't hold is reported as not found, even if the house
    lists it.
    """

    @abstractmethod
    def devices(self) -> Iterable[Device]:
        """Devices this provider can describe."""
        pass

    def find_device(self, name: str) -> Optional[Device]:
        """
        Find a held device by name.

        Args:
            name: The device name

        Returns:
            First matching Device or None if not held
        """
        for device in self.devices():
            if device.name == name:
                return device
        return None

    def get_device_info(self, room: str, device: str) -> str:
        """Describe a held device; the not-found line names the requested device."""
        found = self.find_device(device)
        if found is None:
            logger.debug(f"No device '{device}' held for room '{room}'")
            return f"room: {room}, device: {device}, not found"
        return found.describe(room)
