import pytest

from holani.consts import CART_PIN_A1, CART_PIN_A7, CART_PIN_AUDIN
from holani.eeprom import (
    Ee93cxx,
    Ee93cxxState,
    Ee93cxxType,
    Eeprom,
    EepromType,
)

CS = 1 << (CART_PIN_A7 - 1)
CLK = 1 << (CART_PIN_A1 - 1)
DI = 1 << (CART_PIN_AUDIN - 1)


def clock(chip, bit):
    level = CS | (DI if bit else 0)
    chip.tick(level)
    chip.tick(level | CLK)
    return chip.audin()


def send(chip, bits):
    for bit in bits:
        clock(chip, bit)


def bits_of(value, width):
    return [(value >> i) & 1 for i in reversed(range(width))]


def special(kind, sub):
    return [1, 0, 0] + bits_of(sub, 2) + [0] * (kind.address_bits - 2)


def read_word(chip, kind, addr):
    send(chip, [1, 1, 0] + bits_of(addr, kind.address_bits))
    out = [clock(chip, 0) for _ in range(kind.data_len)]
    return sum(1 << i for i, b in enumerate(reversed(out)) if b)


def write_word(chip, kind, addr, value):
    send(chip, [1, 0, 1] + bits_of(addr, kind.address_bits))
    send(chip, bits_of(value, kind.data_len) + [0])


KIND = Ee93cxxType.C46X16


@pytest.fixture
def chip():
    return Ee93cxx(KIND)


def enable(chip):
    send(chip, special(KIND, 0b11))


@pytest.mark.parametrize("kind", list(Ee93cxxType))
def test_fresh_chip_reads_ff(kind):
    fresh = Ee93cxx(kind)
    assert len(fresh.data) == kind.size
    assert read_word(fresh, kind, 0) == 0xFF
    assert fresh.state is Ee93cxxState.WAIT_FOR_START_BIT


def test_chip_geometry():
    big = Ee93cxx(Ee93cxxType.C86X8)
    assert len(big.data) == 2048
    assert big.kind.address_bits == 10
    small = Ee93cxx(Ee93cxxType.C46X16)
    assert len(small.data) == 64
    enable(small)
    send(small, special(KIND, 0b10))
    assert read_word(small, KIND, 0) == 0xFFFF


def test_write_ignored_while_disabled(chip):
    write_word(chip, KIND, 3, 0)
    assert chip.audin() is True
    assert read_word(chip, KIND, 3) == 0xFF


def test_write_after_enable(chip):
    enable(chip)
    write_word(chip, KIND, 3, 0)
    assert chip.data[3] == 0
    assert read_word(chip, KIND, 3) == 0
    assert read_word(chip, KIND, 4) == 0xFF


def test_erase_all(chip):
    enable(chip)
    send(chip, special(KIND, 0b10))
    assert set(chip.data) == {0xFFFF}
    assert read_word(chip, KIND, 9) == 0xFFFF


def test_write_all_and_erase_one(chip):
    enable(chip)
    send(chip, special(KIND, 0b01) + [0] * KIND.data_len + [0])
    assert set(chip.data) == {0}
    send(chip, [1, 1, 1] + bits_of(5, KIND.address_bits))
    assert chip.data[5] == 0xFFFF
    assert chip.data[4] == 0
    assert chip.audin() is True


def test_disable_blocks_erase_all(chip):
    enable(chip)
    send(chip, special(KIND, 0b00))
    send(chip, special(KIND, 0b10))
    assert set(chip.data) == {0xFF}


def test_deselect_resets_command(chip):
    send(chip, [1, 1, 1, 0])
    assert chip.state is Ee93cxxState.WAIT_FOR_COMMAND
    chip.tick(0)
    assert chip.state is Ee93cxxState.WAIT_FOR_START_BIT
    assert read_word(chip, KIND, 1) == 0xFF


def test_eeprom_wrapper_delegates():
    eeprom = Eeprom(EepromType.EE93C46X16)
    assert eeprom.chip.kind is Ee93cxxType.C46X16
    send(eeprom, special(KIND, 0b11))
    write_word(eeprom, KIND, 2, 0)
    assert eeprom.audin() is True
    assert read_word(eeprom, KIND, 2) == 0