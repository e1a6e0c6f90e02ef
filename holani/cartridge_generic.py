"""A plain ROM cartridge addressed through block and ripple-counter pins."""

import logging
from collections.abc import Iterable

from .consts import (
    CART_PIN_A0,
    CART_PIN_A1,
    CART_PIN_A2,
    CART_PIN_A3,
    CART_PIN_A4,
    CART_PIN_A5,
    CART_PIN_A6,
    CART_PIN_A7,
    CART_PIN_A8,
    CART_PIN_A9,
    CART_PIN_A10,
    CART_PIN_A12,
    CART_PIN_A13,
    CART_PIN_A14,
    CART_PIN_A15,
    CART_PIN_A16,
    CART_PIN_A17,
    CART_PIN_A18,
    CART_PIN_A19,
    CART_PIN_AUDIN,
    CART_PIN_CE,
    CART_PIN_WE,
)
from .pins import DATA_PINS, read_pins, write_data_pins

_log = logging.getLogger(__name__)

_LOW_ADDRESS = (
    CART_PIN_A0, CART_PIN_A1, CART_PIN_A2, CART_PIN_A3, CART_PIN_A4,
    CART_PIN_A5, CART_PIN_A6, CART_PIN_A7, CART_PIN_A8,
)

PINS_128K = _LOW_ADDRESS + (0,) * 7
PINS_256K = _LOW_ADDRESS + (CART_PIN_A9,) + (0,) * 6
PINS_512K = _LOW_ADDRESS + (CART_PIN_A9, CART_PIN_A10) + (0,) * 5
PINS_1024K_AUDIN = _LOW_ADDRESS + (CART_PIN_A9, CART_PIN_A10, CART_PIN_AUDIN) + (0,) * 4
BLOCK_PINS = (
    CART_PIN_A12, CART_PIN_A13, CART_PIN_A14, CART_PIN_A15,
    CART_PIN_A16, CART_PIN_A17, CART_PIN_A18, CART_PIN_A19,
)


class CartridgeGeneric:
    """Cartridge memory selected by a block number and an offset in the block."""

    def __init__(self, bank_size: int, addr_pins: Iterable[int]) -> None:
        self.bank_size = bank_size
        self.addr_pins = tuple(addr_pins)
        self.block_pins = BLOCK_PINS
        self.pins = 0
        self.data = bytearray()

    def _data_address(self, pins: int) -> int:
        block = read_pins(pins, self.block_pins)
        offset = read_pins(pins, self.addr_pins)
        return block * self.bank_size + offset

    def _read(self, pins: int) -> int:
        addr = self._data_address(pins)
        value = self.data[addr] if addr < len(self.data) else 0xFF
        _log.debug("read 0x%06x data:0x%02x", addr, value)
        return write_data_pins(pins, value)

    def _write(self, pins: int) -> int:
        addr = self._data_address(pins)
        value = read_pins(pins, DATA_PINS)
        self.data[addr] = value
        _log.debug("write 0x%06x data:0x%02x", addr, value)
        return pins

    def load(self, file_content: bytes) -> None:
        """Replace the cartridge contents."""
        self.data = bytearray(file_content)

    def set_pins(self, pins: int) -> None:
        """Drive the connector; a rising strobe reads or writes a byte."""
        if self.pins & CART_PIN_CE == 0 and pins & CART_PIN_CE != 0:
            pins = self._read(pins)
        elif self.pins & CART_PIN_WE == 0 and pins & CART_PIN_WE != 0:
            pins = self._write(pins)
        self.pins = pins

    def copy_from(self, other: "CartridgeGeneric") -> None:
        """Take a copy of another cartridge's contents."""
        self.data = bytearray(other.data)