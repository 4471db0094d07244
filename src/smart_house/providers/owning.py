"""
Provider that owns its device.
"""

from dataclasses import replace
from typing import List

from smart_house.devices import Device, SmartSocket
from .base import DeviceLookupProvider


class OwningDeviceInfoProvider(DeviceLookupProvider):
    """
    Provider holding an exclusively owned socket.

    The socket passed in is copied; later changes to the caller's object
    are not seen by the provider. Use the ``socket`` property to change
    the owned state.
    """

    def __init__(self, socket: SmartSocket) -> None:
        self._socket = replace(socket)

    @classmethod
    def with_default_socket(cls) -> "OwningDeviceInfoProvider":
        """Provider owning "Socket 1" in the "working" state."""
        return cls(SmartSocket(name="Socket 1", state="working"))

    @property
    def socket(self) -> SmartSocket:
        """The owned socket."""
        return self._socket

    def devices(self) -> List[Device]:
        return [self._socket]
