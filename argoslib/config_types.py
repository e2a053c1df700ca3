"""Robot instance and CAN addressing types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class RobotInstance(enum.Enum):
    """Distinguishes the competition robot from the practice robot."""

    COMPETITION = enum.auto()
    PRACTICE = enum.auto()


@dataclass(frozen=True)
class CANAddress:
    """A device address on a named CAN bus."""

    address: int
    bus_name: str = "rio"


def get_can_addr(
    comp_address: CANAddress, practice_address: CANAddress, instance: RobotInstance
) -> int:
    """Integer address for the given robot instance."""
    chosen = comp_address if instance is RobotInstance.COMPETITION else practice_address
    return chosen.address


def get_can_bus(
    comp_address: CANAddress, practice_address: CANAddress, instance: RobotInstance
) -> str:
    """Bus name for the given robot instance."""
    chosen = comp_address if instance is RobotInstance.COMPETITION else practice_address
    return chosen.bus_name