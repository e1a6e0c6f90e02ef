import pytest

from holani.bus import Bus, BusStatus
from holani.cartridge import (
    BLL_LOADER,
    SIZE_256K,
    Cartridge,
    CartridgeFormatError,
)
from holani.consts import CART_READ_TICKS, CART_WRITE_TICKS, SYSCTL1_POWER
from holani.eeprom import Ee93cxxType
from holani.lnx_header import LNXRotation


def make_lnx(bank=1024, rotation=0, eeprom=0, payload=None):
    header = bytearray(64)
    header[0:4] = b"LYNX"
    header[4:6] = bank.to_bytes(2, "little")
    header[6:8] = (0).to_bytes(2, "little")
    header[8:10] = (1).to_bytes(2, "little")
    title = b"Demo".ljust(32, b"\x00")
    header[10:42] = title
    header[58] = rotation
    header[60] = eeprom
    if payload is None:
        payload = bytes(i & 0xFF for i in range(4 * bank))
    return bytes(header) + payload


def peek(cart, shifter, ripple, status=BusStatus.PEEK_CART0, sysctl1=SYSCTL1_POWER):
    cart.write_address_to_pins(shifter, ripple, 0)
    bus = Bus(status=status)
    for _ in range(CART_READ_TICKS + 1):
        cart.tick(bus, sysctl1)
    return bus


def test_unknown_format_raises():
    with pytest.raises(CartridgeFormatError):
        Cartridge.from_bytes(b"not a cartridge at all")


def test_lnx_header_fields():
    cart = Cartridge.from_bytes(make_lnx(rotation=1))
    assert cart.header.bank0_size == 1024
    assert cart.header.version == 1
    assert cart.header.title.startswith("Demo")
    assert cart.rotation() is LNXRotation.ROTATE_270
    assert cart.healthy is True
    assert cart.eeprom is None
    assert cart.audin() is False


def test_lnx_rotation_90():
    cart = Cartridge.from_bytes(make_lnx(rotation=2))
    assert cart.rotation() is LNXRotation.ROTATE_90


def test_lnx_read_through_bus():
    payload = bytes((i * 7) & 0xFF for i in range(4096))
    cart = Cartridge.from_bytes(make_lnx(payload=payload))
    bus = peek(cart, 0, 5)
    assert bus.data == payload[5]
    assert bus.status is BusStatus.PEEK_INC_CART_RIPPLE
    assert cart.cart0_inactive is True


def test_lnx_block_addressing():
    payload = bytes((i * 13 + 1) & 0xFF for i in range(4096))
    cart = Cartridge.from_bytes(make_lnx(payload=payload))
    bus = peek(cart, 2, 3)
    assert bus.data == payload[2 * 1024 + 3]


def test_read_in_progress_keeps_status():
    cart = Cartridge.from_bytes(make_lnx())
    bus = Bus(status=BusStatus.PEEK_CART0)
    for _ in range(CART_READ_TICKS):
        cart.tick(bus, SYSCTL1_POWER)
    assert bus.status is BusStatus.PEEK_CART0
    assert cart.cart0_inactive is False


def test_power_off_reads_ff():
    cart = Cartridge.from_bytes(make_lnx(payload=bytes(4096)))
    bus = peek(cart, 0, 1, sysctl1=0)
    assert bus.data == 0xFF


def test_cart1_reads_ff():
    cart = Cartridge.from_bytes(make_lnx(payload=bytes(4096)))
    bus = peek(cart, 0, 1, status=BusStatus.PEEK_CART1)
    assert bus.data == 0xFF
    assert bus.status is BusStatus.PEEK_INC_CART_RIPPLE
    assert cart.cart1_inactive is True


def test_poke_completes():
    cart = Cartridge.from_bytes(make_lnx())
    bus = Bus(status=BusStatus.POKE_CART0)
    for _ in range(CART_WRITE_TICKS + 1):
        cart.tick(bus, SYSCTL1_POWER)
    assert bus.status is BusStatus.POKE_INC_CART_RIPPLE


def test_eeprom_descriptor():
    cart = Cartridge.from_bytes(make_lnx(eeprom=0x81))
    assert cart.eeprom is not None
    assert cart.eeprom.chip.kind is Ee93cxxType.C46X16
    cart8 = Cartridge.from_bytes(make_lnx(eeprom=0x01))
    assert cart8.eeprom.chip.kind is Ee93cxxType.C46X8


def test_unknown_bank_size_leaves_no_cart():
    cart = Cartridge.from_bytes(make_lnx(bank=300, payload=bytes(100)))
    assert cart.healthy is False
    with pytest.raises(RuntimeError):
        cart.reset()


def test_bs93_prepends_loader():
    image = bytes(6) + b"BS93" + b"xyz"
    cart = Cartridge.from_bytes(image)
    assert cart.healthy is True
    assert len(cart.generic.data) == SIZE_256K
    assert bytes(cart.generic.data[: len(BLL_LOADER)]) == BLL_LOADER
    bus = peek(cart, 0, len(BLL_LOADER))
    assert bus.data == image[0]
    bus = peek(cart, 0, 0)
    assert bus.data == BLL_LOADER[0]


def test_bs93_too_large():
    image = bytes(6) + b"BS93" + bytes(SIZE_256K)
    with pytest.raises(CartridgeFormatError):
        Cartridge.from_bytes(image)


def test_empty_slot_raises():
    cart = Cartridge()
    assert cart.rotation() is LNXRotation.NONE
    with pytest.raises(RuntimeError):
        cart.write_address_to_pins(0, 0, 0)


def test_reset_clears_pins():
    cart = Cartridge.from_bytes(make_lnx())
    cart.write_address_to_pins(3, 7, 1)
    assert cart.generic.pins != 0
    cart.reset()
    assert cart.generic.pins == 0


def test_copy_from():
    source = Cartridge.from_bytes(make_lnx(rotation=2, payload=bytes([9]) * 4096))
    target = Cartridge.from_bytes(make_lnx(payload=bytes(4096)))
    target.copy_from(source)
    assert target.rotation() is LNXRotation.ROTATE_90
    assert bytes(target.generic.data) == bytes(source.generic.data)
    with pytest.raises(RuntimeError):
        target.copy_from(Cartridge())