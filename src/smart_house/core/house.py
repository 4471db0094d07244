"""
SmartHouse registry and Room dataclass.

The SmartHouse owns the room/device structure, not the device state.
Device state lives with a DeviceInfoProvider supplied at report time.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple
import logging

from smart_house.core.errors import DeviceNotFound, RoomNotFound
from smart_house.core.report import DeviceInfoProvider, ReportConfig, create_report

logger = logging.getLogger(__name__)


@dataclass
class Room:
    """
    A named room in the house.

    Attributes:
        name: Room name, unique within its house
        devices: Names of the devices placed in this room
    """

    name: str
    devices: Set[str] = field(default_factory=set)


class SmartHouse:
    """
    Registry of rooms and the device names they contain.

    Responsibilities:
    - Create and remove rooms (removal cascades to devices)
    - Add and remove device names within an existing room
    - Answer room and device queries
    - Generate a text report through a DeviceInfoProvider

    Iteration order of rooms and devices is unspecified.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty house.

        Args:
            name: Human-readable house name
        """
        self.name = name
        self._rooms: Dict[str, Room] = {}

    def __repr__(self) -> str:
        return f"SmartHouse(name={self.name!r}, rooms={len(self._rooms)})"

    def add_room(self, name: str) -> None:
        """
        Add a room to the house.

        Adding a room that already exists is a no-op.

        Args:
            name: The room name
        """
        if name in self._rooms:
            logger.debug(f"Room '{name}' already exists in {self.name}")
            return

        self._rooms[name] = Room(name=name)
        logger.info(f"Added room: {name} ({self.name})")

    def remove_room(self, name: str) -> bool:
        """
        Remove a room and all of its devices.

        Removing a room that doesn't exist is a no-op.

        Args:
            name: The room name

        Returns:
            True if a room was removed
        """
        room = self._rooms.pop(name, None)
        if room is None:
            logger.debug(f"Room '{name}' not present in {self.name}; nothing removed")
            return False

        logger.info(f"Removed room: {name} ({len(room.devices)} devices)")
        return True

    def has_room(self, name: str) -> bool:
        """Return True if the room exists."""
        return name in self._rooms

    def get_rooms(self) -> List[str]:
        """
        Get the names of all rooms.

        Returns:
            Snapshot list of room names (unordered)
        """
        return list(self._rooms)

    def add_device(self, room: str, device: str) -> None:
        """
        Add a device to an existing room.

        Adding a device that is already in the room is a no-op.

        Args:
            room: The room name
            device: The device name

        Raises:
            RoomNotFound: If the room doesn't exist
        """
        target = self._get_room(room)
        if device in target.devices:
            logger.debug(f"Device '{device}' already in room '{room}'")
            return

        target.devices.add(device)
        logger.debug(f"Added device {device} to room {room}")

    def remove_device(self, room: str, device: str) -> None:
        """
        Remove a device from a room.

        Args:
            room: The room name
            device: The device name

        Raises:
            RoomNotFound: If the room doesn't exist
            DeviceNotFound: If the device isn't in the room
        """
        target = self._get_room(room)
        if device not in target.devices:
            raise DeviceNotFound(room, device)

        target.devices.remove(device)
        logger.debug(f"Removed device {device} from room {room}")

    def get_devices(self, room: str) -> List[str]:
        """
        Get the device names in a room.

        Args:
            room: The room name

        Returns:
            Snapshot list of device names (unordered)

        Raises:
            RoomNotFound: If the room doesn't exist
        """
        return list(self._get_room(room).devices)

    def iter_devices(self) -> Iterator[Tuple[str, str]]:
        """Yield every (room, device) pair in the house."""
        for room in self._rooms.values():
            for device in room.devices:
                yield room.name, device

    def create_report(
        self,
        provider: DeviceInfoProvider,
        config: Optional[ReportConfig] = None,
    ) -> str:
        """
        Render a text report of every device in the house.

        Args:
            provider: Translates (room, device) pairs into status lines
            config: Report formatting (defaults to ReportConfig())

        Returns:
            The report text
        """
        return create_report(self, provider, config)

    def _get_room(self, name: str) -> Room:
        room = self._rooms.get(name)
        if room is None:
            raise RoomNotFound(name)
        return room
