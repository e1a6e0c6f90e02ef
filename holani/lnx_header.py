"""Header information carried by a Lynx cartridge image."""

from dataclasses import dataclass
from enum import IntEnum


class LNXRotation(IntEnum):
    """Screen rotation requested by a cartridge."""

    NONE = 0
    ROTATE_270 = 1
    ROTATE_90 = 2


@dataclass
class LNXHeader:
    """Metadata of a cartridge: layout, naming and spare flag bytes."""

    rotation: LNXRotation = LNXRotation.NONE
    manufacturer: str = "unknown"
    title: str = "unknown"
    version: int = 0
    bank0_size: int = 0
    bank1_size: int = 0
    spare: bytes = b""

    def eeprom(self) -> int:
        """The EEPROM descriptor byte, kept in the second spare byte."""
        return self.spare[1]