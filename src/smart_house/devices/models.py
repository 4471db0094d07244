"""
Data models for concrete devices.
"""

from dataclasses import dataclass

from .base import Device


@dataclass
class SmartSocket(Device):
    """A power socket with a free-form state ("working", "broken", ...)."""

    name: str
    state: str

    def describe(self, room: str) -> str:
        return f"room: {room}, device: {self.name}, state: {self.state}"

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "name": self.name,
            "state": self.state,
        }


@dataclass
class SmartThermometer(Device):
    """A thermometer reporting temperature in degrees Celsius."""

    name: str
    temperature: float

    def describe(self, room: str) -> str:
        # Whole degrees render without a decimal part: 21°C, 25.4°C
        t = self.temperature
        value = int(t) if float(t).is_integer() else t
        return f"room: {room}, device: {self.name}, state: {value}°C"

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "name": self.name,
            "temperature": self.temperature,
        }
