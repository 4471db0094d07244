"""
Errors raised by the house registry.

Both are lookup failures: the caller asked for a room or device that the
house does not contain. They are recoverable and never leave the house in a
partially mutated state.
"""


class SmartHouseError(LookupError):
    """Base class for registry lookup failures."""


class RoomNotFound(SmartHouseError):
    """The target room is not present in the house."""

    def __init__(self, room: str) -> None:
        self.room = room
        super().__init__(f"Room '{room}' not found")


class DeviceNotFound(SmartHouseError):
    """The target device is not present in an existing room."""

    def __init__(self, room: str, device: str) -> None:
        self.room = room
        self.device = device
        super().__init__(f"Device '{device}' not found in room '{room}'")
