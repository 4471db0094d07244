"""
Device models for smart-house.

Each device holds its own name and state and knows how to describe
itself within a room.
"""

from .base import Device
from .models import SmartSocket, SmartThermometer

__all__ = [
    "Device",
    "SmartSocket",
    "SmartThermometer",
]
