"""Cartridge slot: image format detection, bus timing and connector wiring."""

import logging
from dataclasses import replace

from .bus import Bus, BusStatus
from .cartridge_generic import (
    PINS_128K,
    PINS_256K,
    PINS_512K,
    PINS_1024K_AUDIN,
    CartridgeGeneric,
)
from .consts import (
    CART_PIN_AUDIN,
    CART_PIN_CE,
    CART_READ_TICKS,
    CART_WRITE_TICKS,
    SYSCTL1_POWER,
)
from .eeprom import Eeprom, EepromType
from .lnx_header import LNXHeader, LNXRotation
from .no_intro import check_no_intro
from .pins import DATA_PINS, RIPPLE_PINS, SHIFTER_PINS, read_pins, write_pins

_log = logging.getLogger(__name__)

LNX_HEADER_LENGTH = 64
BS93_HEADER_LENGTH = 10

SIZE_128K = 1 << 17
SIZE_256K = SIZE_128K * 2
SIZE_512K = SIZE_256K * 2
SIZE_1024K = SIZE_512K * 2

# Boot loader placed in front of BS93 homebrew images.
BLL_LOADER = bytes.fromhex(
    "ff4a37b2b30def6156abd3c35d4bdeb8"
    "38179259fa40b158c48fb66dbebb208e"
    "8a69866c18120c7c50cdaa63413fd389"
    "adab371401adc50249ff85f1adc60249"
    "ff85f0adc30285f385f5adc40285f285"
    "f4a2c09aa029b92d0299c00188d0f7a2"
    "03809fcad009e600a5002000fea204ad"
    "b2fc92f2e6f2d002e6f3e6f0d007e6f1"
    "d0036cf400c8d0e780d9"
).ljust(246, b"\x00")

_BANK_PINS = {
    512: PINS_128K,
    1024: PINS_256K,
    2048: PINS_512K,
    4096: PINS_1024K_AUDIN,
}

_EEPROM_TYPES = {
    0x01: EepromType.EE93C46X8,
    0x02: EepromType.EE93C56X8,
    0x03: EepromType.EE93C66X8,
    0x04: EepromType.EE93C76X8,
    0x05: EepromType.EE93C86X8,
    0x81: EepromType.EE93C46X16,
    0x82: EepromType.EE93C56X16,
    0x83: EepromType.EE93C66X16,
    0x84: EepromType.EE93C76X16,
    0x85: EepromType.EE93C86X16,
}

_CART0 = {BusStatus.PEEK_CART0, BusStatus.POKE_CART0}
_CART1 = {BusStatus.PEEK_CART1, BusStatus.POKE_CART1}


class CartridgeFormatError(ValueError):
    """Raised when a cartridge image cannot be recognised."""


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "little")


def _text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return "Error"


class Cartridge:
    """A cartridge plugged into the slot, with its optional EEPROM."""

    def __init__(self) -> None:
        self.header = LNXHeader()
        self.generic: CartridgeGeneric | None = None
        self.eeprom: Eeprom | None = None
        self.healthy = False
        self.cart0_inactive = False
        self.cart1_inactive = False
        self._ticks_to_done = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "Cartridge":
        """Build a cartridge from an LNX, BS93 or known headerless image."""
        data = bytes(data)
        cart = cls()
        if len(data) > LNX_HEADER_LENGTH and data[0:4] == b"LYNX":
            cart._load_lnx(data)
        elif len(data) > BS93_HEADER_LENGTH and data[6:10] == b"BS93":
            cart._load_bs93(data)
        else:
            try:
                title, rotation = check_no_intro(data)
            except LookupError:
                raise CartridgeFormatError(
                    "Couldn't identify cart file format."
                ) from None
            cart._load_no_intro(data, title, rotation)
        return cart

    def _load_bs93(self, data: bytes) -> None:
        fill = SIZE_256K - len(BLL_LOADER) - len(data)
        if fill < 0:
            raise CartridgeFormatError("BS93 image too large.")
        cart = CartridgeGeneric(1024, PINS_256K)
        cart.load(BLL_LOADER + data + bytes(fill))
        self.generic = cart
        self.healthy = True

    def _load_no_intro(self, data: bytes, title: str, rotation: LNXRotation) -> None:
        size = len(data)
        if size <= SIZE_128K:
            cart = CartridgeGeneric(512, PINS_128K)
        elif size <= SIZE_256K:
            cart = CartridgeGeneric(1024, PINS_256K)
        elif size <= SIZE_512K:
            cart = CartridgeGeneric(2048, PINS_512K)
        elif size <= SIZE_1024K:
            cart = CartridgeGeneric(4096, PINS_1024K_AUDIN)
        else:
            raise CartridgeFormatError("Not a No-Intro image.")
        cart.load(data)
        self.generic = cart
        self.header.title = title
        self.header.rotation = rotation
        self.healthy = True

    def _load_lnx(self, data: bytes) -> None:
        rotation = {1: LNXRotation.ROTATE_270, 2: LNXRotation.ROTATE_90}.get(
            data[58], LNXRotation.NONE
        )
        self.header = LNXHeader(
            rotation=rotation,
            manufacturer=_text(data[42:59]),
            title=_text(data[10:42]),
            version=_u16(data, 8),
            bank0_size=_u16(data, 4),
            bank1_size=_u16(data, 6),
            spare=data[59:64],
        )

        bank_size = self.header.bank0_size
        pins = _BANK_PINS.get(bank_size)
        if pins is None:
            _log.error("Unknown cart bank size: %d", bank_size)
        else:
            cart = CartridgeGeneric(bank_size, pins)
            cart.load(data[LNX_HEADER_LENGTH:])
            self.generic = cart
            self.healthy = True

        kind = _EEPROM_TYPES.get(self.header.eeprom() & 0b1000_0111)
        self.eeprom = Eeprom(kind) if kind is not None else None

    def _cart(self) -> CartridgeGeneric:
        if self.generic is None:
            raise RuntimeError("No cartridge inserted.")
        return self.generic

    def _cart_pins(self) -> int:
        return self._cart().pins

    def _set_cart_pins(self, pins: int) -> None:
        self._cart().set_pins(pins)
        if self.eeprom is not None:
            self.eeprom.tick(pins)

    def _set_pin(self, pin: int) -> None:
        self._set_cart_pins(self._cart_pins() | pin)

    def _clear_pin(self, pin: int) -> None:
        self._set_cart_pins(self._cart_pins() & ~pin)

    def reset(self) -> None:
        """Release every connector pin and abort any access in progress."""
        self._set_cart_pins(0)
        self._ticks_to_done = 0

    def write_address_to_pins(self, shifter: int, ripple: int, audin: int) -> None:
        """Drive the block shifter, ripple counter and AUDIN lines."""
        pins = self._cart_pins()
        pins = write_pins(pins, shifter & 0xFF, SHIFTER_PINS)
        pins = write_pins(pins, ripple, RIPPLE_PINS)
        pins = write_pins(pins, audin, (CART_PIN_AUDIN,))
        self._set_cart_pins(pins)

    def audin(self) -> bool:
        """The EEPROM's data output, or False when there is no EEPROM."""
        return self.eeprom.audin() if self.eeprom is not None else False

    def rotation(self) -> LNXRotation:
        return self.header.rotation

    def _set_inactive(self, status: BusStatus, inactive: bool) -> None:
        if status in _CART0:
            self.cart0_inactive = inactive
        elif status in _CART1:
            self.cart1_inactive = inactive

    def tick(self, bus: Bus, sysctl1: int) -> None:
        """Advance a cartridge access by one tick; SYSCTL1 gates cart power."""
        status = bus.status
        if self._ticks_to_done == 0:
            if status in (BusStatus.PEEK_CART0, BusStatus.PEEK_CART1):
                self._ticks_to_done = CART_READ_TICKS
                self._set_inactive(status, False)
            elif status in (BusStatus.POKE_CART0, BusStatus.POKE_CART1):
                self._ticks_to_done = CART_WRITE_TICKS
                self._set_inactive(status, False)
        elif self._ticks_to_done == 1:
            if status is BusStatus.PEEK_CART0:
                if sysctl1 & SYSCTL1_POWER:
                    self._set_pin(CART_PIN_CE)
                    bus.data = read_pins(self._cart_pins(), DATA_PINS)
                    self._clear_pin(CART_PIN_CE)
                else:
                    bus.data = 0xFF
                bus.status = BusStatus.PEEK_INC_CART_RIPPLE
            elif status is BusStatus.PEEK_CART1:
                bus.data = 0xFF
                bus.status = BusStatus.PEEK_INC_CART_RIPPLE
            elif status in (BusStatus.POKE_CART0, BusStatus.POKE_CART1):
                bus.status = BusStatus.POKE_INC_CART_RIPPLE
            self._set_inactive(status, True)
            self._ticks_to_done = 0
        else:
            self._ticks_to_done -= 1

    def copy_from(self, other: "Cartridge") -> None:
        """Take the header and memory contents of another cartridge."""
        self.header = replace(other.header)
        source = other.generic
        if source is None:
            raise RuntimeError("No cartridge to copy from.")
        self._cart().copy_from(source)