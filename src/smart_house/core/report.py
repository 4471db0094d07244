"""
Report generation.

A report is a header line followed by one status line per (room, device)
pair. Status lines come from a DeviceInfoProvider; the house never knows
anything about device state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
import logging

if TYPE_CHECKING:
    from smart_house.core.house import SmartHouse

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "Report: "


class DeviceInfoProvider(ABC):
    """
    Capability that describes a device in a room.

    Providers are supplied per report and are not stored by the house.
    """

    @abstractmethod
    def get_device_info(self, room: str, device: str) -> str:
        """
        Describe a device.

        Args:
            room: The room the device is in
            device: The device name

        Returns:
            A single status line
        """
        pass


@dataclass
class ReportConfig:
    """Formatting options for generated reports."""

    header: str = DEFAULT_HEADER
    line_separator: str = "\n"

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "header": self.header,
            "line_separator": self.line_separator,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReportConfig":
        """Deserialize from dict."""
        return cls(
            header=data.get("header", DEFAULT_HEADER),
            line_separator=data.get("line_separator", "\n"),
        )


def create_report(
    house: "SmartHouse",
    provider: DeviceInfoProvider,
    config: Optional[ReportConfig] = None,
) -> str:
    """
    Build a text report for every device in a house.

    Line order follows the house's iteration order, which is unspecified.

    Args:
        house: The house to report on
        provider: Translates (room, device) pairs into status lines
        config: Report formatting (defaults to ReportConfig())

    Returns:
        The report text
    """
    config = config or ReportConfig()
    sep = config.line_separator

    parts = [config.header, sep]
    count = 0
    for room, device in house.iter_devices():
        parts.append(provider.get_device_info(room, device))
        parts.append(sep)
        count += 1

    logger.debug(f"Created report for {house.name}: {count} devices")
    return "".join(parts)
