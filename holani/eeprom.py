"""Serial 93Cxx EEPROMs wired to a cartridge's address and AUDIN lines."""

import logging
from enum import Enum, IntFlag

from .consts import CART_PIN_A1, CART_PIN_A7, CART_PIN_AUDIN

_log = logging.getLogger(__name__)

_CMD_ERASE = 0b11
_CMD_READ = 0b10
_CMD_WRITE = 0b01

_ADR_WRAL = 0b01
_ADR_ERAL = 0b10
_ADR_EWDS = 0b00
_ADR_EWEN = 0b11

_CLK_MASK = 1 << (CART_PIN_A1 - 1)
_CS_MASK = 1 << (CART_PIN_A7 - 1)
_DI_MASK = 1 << (CART_PIN_AUDIN - 1)


class Ee93cxxType(Enum):
    """Chip variant: (words, address bits, bits per word)."""

    C46X8 = (128, 6, 8)
    C56X8 = (256, 8, 8)
    C66X8 = (512, 8, 8)
    C76X8 = (1024, 10, 8)
    C86X8 = (2048, 10, 8)
    C46X16 = (64, 5, 16)
    C56X16 = (128, 7, 16)
    C66X16 = (256, 7, 16)
    C76X16 = (512, 9, 16)
    C86X16 = (1024, 9, 16)

    @property
    def size(self) -> int:
        return self.value[0]

    @property
    def address_bits(self) -> int:
        return self.value[1]

    @property
    def data_len(self) -> int:
        return self.value[2]

    @property
    def address_mask(self) -> int:
        return (1 << self.address_bits) - 1

    @property
    def command_len(self) -> int:
        return self.address_bits + 2


class Ee93cxxState(Enum):
    WAIT_FOR_START_BIT = "WaitForStartBit"
    WAIT_FOR_COMMAND = "WaitForCommand"
    SENDING_DATA = "SendingData"
    WAIT_FOR_WRITE = "WaitForWrite"
    WAIT_FOR_WRITE_ALL = "WaitForWriteAll"


class Ee93cxxPins(IntFlag):
    DO = 0b00001000
    DI = 0b00000100
    CLK = 0b00000010
    CS = 0b00000001


def _chip_pins(cart_pins: int) -> Ee93cxxPins:
    pins = Ee93cxxPins(0)
    if cart_pins & _CLK_MASK:
        pins |= Ee93cxxPins.CLK
    if cart_pins & _CS_MASK:
        pins |= Ee93cxxPins.CS
    if cart_pins & _DI_MASK:
        pins |= Ee93cxxPins.DI
    return pins


class Ee93cxx:
    """A 93Cxx serial EEPROM clocked from the cartridge pins."""

    def __init__(self, kind: Ee93cxxType) -> None:
        self.kind = kind
        self.data = [0xFF] * kind.size
        self.state = Ee93cxxState.WAIT_FOR_START_BIT
        self.cart_pins = 0
        self._prev_clk = False
        self._shifter = 0
        self._shifter_in = 0
        self._data_buffer = 0
        self._data_buffer_in = 0
        self._write_disabled = True
        self._last_output = False

    def tick(self, cart_pins: int) -> None:
        """Sample the cartridge pins; act on a rising clock while selected."""
        self.cart_pins = cart_pins
        pins = _chip_pins(cart_pins)
        clk = Ee93cxxPins.CLK in pins
        if Ee93cxxPins.CS in pins:
            if not self._prev_clk and clk:
                self._clock(Ee93cxxPins.DI in pins)
        else:
            self._reset()
        self._prev_clk = clk

    def audin(self) -> bool:
        """The level the chip drives on its data output."""
        return self._last_output

    def _clock(self, di: bool) -> None:
        state = self.state
        if state is Ee93cxxState.WAIT_FOR_START_BIT:
            if di:
                self.state = Ee93cxxState.WAIT_FOR_COMMAND
        elif state is Ee93cxxState.WAIT_FOR_COMMAND:
            self._shifter = ((self._shifter << 1) | int(di)) & 0xFFFF
            self._shifter_in += 1
            if self._shifter_in == self.kind.command_len:
                self._dispatch()
        elif state is Ee93cxxState.SENDING_DATA:
            self._last_output = bool(self._data_buffer & (1 << self._data_buffer_in))
            if self._data_buffer_in == 0:
                self._reset()
            else:
                self._data_buffer_in -= 1
        else:
            if self._data_buffer_in == self.kind.data_len:
                if state is Ee93cxxState.WAIT_FOR_WRITE:
                    self._write()
                else:
                    self._write_all()
            else:
                self._data_buffer = (self._data_buffer | int(di)) << 1
                self._data_buffer_in += 1

    def _dispatch(self) -> None:
        bits = self.kind.address_bits
        opcode = (self._shifter >> bits) & 0b11
        _log.debug("command %02b %016b", opcode, self._shifter)
        if opcode == 0:
            sub = (self._shifter >> (bits - 2)) & 0b11
            if sub == _ADR_ERAL:
                self._erase_all()
            elif sub == _ADR_EWDS:
                self._write_disabled = True
                self._reset()
            elif sub == _ADR_EWEN:
                self._write_disabled = False
                self._reset()
            else:
                self.state = Ee93cxxState.WAIT_FOR_WRITE_ALL
        elif opcode == _CMD_ERASE:
            self._erase()
        elif opcode == _CMD_READ:
            self._read()
        else:
            self.state = Ee93cxxState.WAIT_FOR_WRITE

    def _address(self) -> int:
        return self._shifter & self.kind.address_mask

    def _finish_programming(self) -> None:
        self._last_output = True
        self._reset()

    def _write(self) -> None:
        if not self._write_disabled:
            self.data[self._address()] = self._data_buffer & 0xFFFF
        self._finish_programming()

    def _write_all(self) -> None:
        if not self._write_disabled:
            self.data = [self._data_buffer & 0xFFFF] * len(self.data)
        self._finish_programming()

    def _erase(self) -> None:
        if not self._write_disabled:
            self.data[self._address()] = 0xFFFF
        self._finish_programming()

    def _erase_all(self) -> None:
        if not self._write_disabled:
            self.data = [0xFFFF] * len(self.data)
        self._finish_programming()

    def _read(self) -> None:
        self._data_buffer = self.data[self._address()]
        self._data_buffer_in = self.kind.data_len - 1
        self.state = Ee93cxxState.SENDING_DATA

    def _reset(self) -> None:
        self._shifter = 0
        self._shifter_in = 0
        self._data_buffer = 0
        self._data_buffer_in = 0
        self.state = Ee93cxxState.WAIT_FOR_START_BIT


class EepromType(Enum):
    """EEPROM kinds a cartridge header can declare."""

    EE93C46X8 = Ee93cxxType.C46X8
    EE93C56X8 = Ee93cxxType.C56X8
    EE93C66X8 = Ee93cxxType.C66X8
    EE93C76X8 = Ee93cxxType.C76X8
    EE93C86X8 = Ee93cxxType.C86X8
    EE93C46X16 = Ee93cxxType.C46X16
    EE93C56X16 = Ee93cxxType.C56X16
    EE93C66X16 = Ee93cxxType.C66X16
    EE93C76X16 = Ee93cxxType.C76X16
    EE93C86X16 = Ee93cxxType.C86X16


class Eeprom:
    """The save-game EEPROM fitted to a cartridge."""

    def __init__(self, kind: EepromType) -> None:
        self.chip = Ee93cxx(kind.value)

    def tick(self, cart_pins: int) -> None:
        self.chip.tick(cart_pins)

    def audin(self) -> bool:
        return self.chip.audin()