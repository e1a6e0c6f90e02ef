import pytest

from holani.lnx_header import LNXHeader, LNXRotation


def test_rotation_values_match_header_encoding():
    assert LNXRotation(0) is LNXRotation.NONE
    assert LNXRotation(1) is LNXRotation.ROTATE_270
    assert LNXRotation(2) is LNXRotation.ROTATE_90


def test_unknown_rotation_value_is_rejected():
    with pytest.raises(ValueError):
        LNXRotation(3)


def test_default_header():
    header = LNXHeader()
    assert header.rotation is LNXRotation.NONE
    assert header.manufacturer == "unknown"
    assert header.title == "unknown"
    assert header.version == 0
    assert header.bank0_size == 0
    assert header.bank1_size == 0
    assert header.spare == b""


def test_fields_can_be_updated():
    header = LNXHeader()
    header.title = "Demo"
    header.bank0_size = 1024
    header.rotation = LNXRotation.ROTATE_90
    assert header.title == "Demo"
    assert header.bank0_size == 1024
    assert header.rotation is LNXRotation.ROTATE_90


def test_eeprom_is_second_spare_byte():
    header = LNXHeader(spare=bytes([0x00, 0x81, 0x00, 0x00, 0x00]))
    assert header.eeprom() == 0x81


def test_eeprom_without_spare_bytes_raises():
    with pytest.raises(IndexError):
        LNXHeader().eeprom()