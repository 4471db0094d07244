"""
End-to-end driver routines for both provider styles.

Each routine builds a house, queries it (including one lookup of a missing
room, which is logged and skipped), and returns the generated report.
"""

from typing import Dict
import logging

from smart_house.core.errors import RoomNotFound
from smart_house.core.house import SmartHouse
from smart_house.devices import SmartSocket, SmartThermometer
from smart_house.providers import (
    BorrowingDeviceInfoProvider,
    DeviceLookupProvider,
    OwningDeviceInfoProvider,
)

logger = logging.getLogger(__name__)

HOUSE_NAME = "My house"

NAME_DEV_1 = "Socket 1"
NAME_DEV_2 = "Socket 2"
NAME_DEV_3 = "Thermometer 1"


def build_owning_house() -> SmartHouse:
    """House with "Room A" holding "Socket 1"."""
    house = SmartHouse(HOUSE_NAME)
    house.add_room("Room A")
    house.add_device("Room A", NAME_DEV_1)
    return house


def build_borrowing_house() -> SmartHouse:
    """House with "Room B" holding "Socket 2" and "Thermometer 1"."""
    house = SmartHouse(HOUSE_NAME)
    house.add_room("Room B")
    house.add_device("Room B", NAME_DEV_2)
    house.add_device("Room B", NAME_DEV_3)
    return house


def _log_devices(house: SmartHouse, room: str) -> None:
    try:
        devices = house.get_devices(room)
    except RoomNotFound as e:
        logger.warning(f"{house.name}: {e}")
        return
    logger.info(f"{house.name} {room} devices: {devices}")


def _log_provider(provider: DeviceLookupProvider) -> None:
    for device in provider.devices():
        logger.debug(f"Provider holds: {device.to_dict()}")


def run_owning_provider() -> str:
    """
    Run the owning-provider scenario.

    Returns:
        The report text
    """
    house = build_owning_house()
    provider = OwningDeviceInfoProvider.with_default_socket()
    _log_provider(provider)

    logger.info(f"{house.name} rooms: {house.get_rooms()}")
    _log_devices(house, "Room A")
    _log_devices(house, "Room B")

    report = house.create_report(provider)
    logger.info(f"Report #1: {report}")
    return report


def run_borrowing_provider() -> str:
    """
    Run the borrowing-provider scenario.

    The socket and thermometer are owned here and only referenced by the
    provider for the duration of the report.

    Returns:
        The report text
    """
    socket = SmartSocket(name=NAME_DEV_2, state="broken")
    thermometer = SmartThermometer(name=NAME_DEV_3, temperature=25.4)

    house = build_borrowing_house()
    provider = BorrowingDeviceInfoProvider(socket, thermometer)
    _log_provider(provider)

    logger.info(f"{house.name} rooms: {house.get_rooms()}")
    _log_devices(house, "Room B")
    _log_devices(house, "Room A")

    report = house.create_report(provider)
    logger.info(f"Report #2: {report}")
    return report


def run_all() -> Dict[str, str]:
    """Run both scenarios and return their reports."""
    return {
        "owning": run_owning_provider(),
        "borrowing": run_borrowing_provider(),
    }
