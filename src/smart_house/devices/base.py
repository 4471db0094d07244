"""
Base class for smart-house devices.
"""

from abc import ABC, abstractmethod


class Device(ABC):
    """
    Base class for devices.

    A device:
    - Has a name, matched against the device names stored in a house
    - Holds its own runtime state
    - Renders that state as a single status line for a given room
    """

    name: str

    @abstractmethod
    def describe(self, room: str) -> str:
        """
        Describe this device's state.

        Args:
            room: The room the device is reported in

        Returns:
            Status line for the report
        """
        pass

    @abstractmethod
    def to_dict(self) -> dict:
        """Serialize to dict."""
        pass
