"""
Comprehensive tests for SmartHouse with extensive logging.

These tests verify:
- Room creation and removal
- Device add/remove within rooms
- Room and device queries
- Error handling and edge cases
"""

import logging
import pytest
from smart_house import SmartHouse, SmartHouseError, RoomNotFound, DeviceNotFound

# Configure logging for verbose test output
logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@pytest.fixture
def house():
    """House with one empty room."""
    h = SmartHouse("My house")
    h.add_room("Room A")
    return h


class TestRooms:
    """Test suite for room management."""

    def test_new_house_is_empty(self):
        """Test a new house has no rooms."""
        house = SmartHouse("My house")
        logger.info(f"Created {house!r}")

        assert house.name == "My house"
        assert house.get_rooms() == []

    def test_add_room(self, house):
        """Test adding a room."""
        assert house.get_rooms() == ["Room A"]
        assert house.has_room("Room A")
        assert not house.has_room("Room B")

    def test_add_room_is_idempotent(self, house):
        """Test repeated add_room keeps a single entry."""
        logger.info("Adding 'Room A' three more times")
        for _ in range(3):
            house.add_room("Room A")

        rooms = house.get_rooms()
        logger.debug(f"  rooms: {rooms}")
        assert rooms.count("Room A") == 1

    def test_add_room_keeps_devices(self, house):
        """Test re-adding a room doesn't clear its devices."""
        house.add_device("Room A", "Socket 1")
        house.add_room("Room A")
        assert house.get_devices("Room A") == ["Socket 1"]

    def test_multiple_rooms(self, house):
        """Test several rooms are all listed."""
        house.add_room("Room B")
        house.add_room("Kitchen")
        assert sorted(house.get_rooms()) == ["Kitchen", "Room A", "Room B"]

    def test_remove_room(self, house):
        """Test removing a room."""
        assert house.remove_room("Room A") is True
        assert house.get_rooms() == []

    def test_remove_room_cascades_to_devices(self, house):
        """Test removing a room removes its devices."""
        house.add_device("Room A", "Socket 1")
        house.remove_room("Room A")

        with pytest.raises(RoomNotFound):
            house.get_devices("Room A")

        # Re-created room starts empty
        house.add_room("Room A")
        assert house.get_devices("Room A") == []

    def test_remove_missing_room_is_noop(self, house):
        """Test removing a missing room changes nothing."""
        assert house.remove_room("Room B") is False
        assert house.get_rooms() == ["Room A"]

    def test_get_rooms_is_snapshot(self, house):
        """Test mutating the returned list doesn't affect the house."""
        rooms = house.get_rooms()
        rooms.append("Room Z")
        assert house.get_rooms() == ["Room A"]


class TestDevices:
    """Test suite for device management."""

    def test_add_device(self, house):
        """Test adding a device to an existing room."""
        house.add_device("Room A", "Socket 1")
        assert house.get_devices("Room A") == ["Socket 1"]

    def test_add_device_is_idempotent(self, house):
        """Test repeated add_device keeps a single entry."""
        house.add_device("Room A", "Socket 1")
        house.add_device("Room A", "Socket 1")
        assert house.get_devices("Room A").count("Socket 1") == 1

    def test_add_device_missing_room(self, house):
        """Test adding to a missing room fails without creating it."""
        with pytest.raises(RoomNotFound) as exc_info:
            house.add_device("Room B", "Socket 1")

        logger.info(f"✓ Correctly raised RoomNotFound: {exc_info.value}")
        assert exc_info.value.room == "Room B"
        assert house.get_rooms() == ["Room A"]
        assert house.get_devices("Room A") == []

    def test_same_device_name_in_two_rooms(self, house):
        """Test device names are scoped to their room."""
        house.add_room("Room B")
        house.add_device("Room A", "Socket 1")
        house.add_device("Room B", "Socket 1")

        house.remove_device("Room A", "Socket 1")

        assert house.get_devices("Room A") == []
        assert house.get_devices("Room B") == ["Socket 1"]

    def test_get_devices(self, house):
        """Test listing devices in a room."""
        house.add_device("Room A", "Socket 1")
        house.add_device("Room A", "Thermometer 1")

        devices = house.get_devices("Room A")
        assert sorted(devices) == ["Socket 1", "Thermometer 1"]

    def test_get_devices_missing_room(self, house):
        """Test get_devices on a room never added."""
        for name in ["Room B", "", "room a"]:
            with pytest.raises(RoomNotFound):
                house.get_devices(name)

    def test_remove_device(self, house):
        """Test add then remove leaves the device absent."""
        house.add_device("Room A", "Socket 1")
        house.add_device("Room A", "Socket 2")
        house.remove_device("Room A", "Socket 1")

        assert house.get_devices("Room A") == ["Socket 2"]

    def test_remove_device_missing_room(self, house):
        """Test removing from a missing room."""
        house.add_device("Room A", "Socket 1")
        with pytest.raises(RoomNotFound):
            house.remove_device("Room B", "Socket 1")
        assert house.get_devices("Room A") == ["Socket 1"]

    def test_remove_device_missing_device(self, house):
        """Test removing a device the room doesn't contain."""
        house.add_device("Room A", "Socket 1")
        with pytest.raises(DeviceNotFound) as exc_info:
            house.remove_device("Room A", "Socket 2")

        assert exc_info.value.room == "Room A"
        assert exc_info.value.device == "Socket 2"
        assert house.get_devices("Room A") == ["Socket 1"]

    def test_remove_device_twice(self, house):
        """Test a second removal fails."""
        house.add_device("Room A", "Socket 1")
        house.remove_device("Room A", "Socket 1")
        with pytest.raises(DeviceNotFound):
            house.remove_device("Room A", "Socket 1")

    def test_iter_devices(self, house):
        """Test iterating every (room, device) pair."""
        house.add_room("Room B")
        house.add_room("Empty")
        house.add_device("Room A", "Socket 1")
        house.add_device("Room B", "Socket 2")
        house.add_device("Room B", "Thermometer 1")

        pairs = set(house.iter_devices())
        assert pairs == {
            ("Room A", "Socket 1"),
            ("Room B", "Socket 2"),
            ("Room B", "Thermometer 1"),
        }


class TestErrors:
    """Test suite for the error taxonomy."""

    def test_error_hierarchy(self):
        """Test both errors share a lookup base."""
        assert issubclass(RoomNotFound, SmartHouseError)
        assert issubclass(DeviceNotFound, SmartHouseError)
        assert issubclass(SmartHouseError, LookupError)

    def test_error_messages(self):
        """Test error messages name the missing target."""
        assert str(RoomNotFound("Room B")) == "Room 'Room B' not found"
        assert (
            str(DeviceNotFound("Room A", "Socket 2"))
            == "Device 'Socket 2' not found in room 'Room A'"
        )

    def test_catch_by_base_class(self, house):
        """Test callers can catch either error through the base class."""
        with pytest.raises(SmartHouseError):
            house.get_devices("Room B")
        with pytest.raises(SmartHouseError):
            house.remove_device("Room A", "Socket 1")
