"""
Provider that borrows caller-owned devices.
"""

from typing import List

from smart_house.devices import Device, SmartSocket, SmartThermometer
from .base import DeviceLookupProvider


class BorrowingDeviceInfoProvider(DeviceLookupProvider):
    """
    Provider referencing a socket and a thermometer owned by the caller.

    The caller keeps ownership: state changes it makes after constructing
    the provider show up in subsequent reports.
    """

    def __init__(self, socket: SmartSocket, thermometer: SmartThermometer) -> None:
        self.socket = socket
        self.thermometer = thermometer

    def devices(self) -> List[Device]:
        return [self.socket, self.thermometer]
