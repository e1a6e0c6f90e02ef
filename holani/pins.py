"""Packing and unpacking of values on the cartridge connector pins.

A pin list maps bit ``n`` of a value to a connector pin number; pin numbers
start at 1 and a pin number of 0 ends the list.
"""

from collections.abc import Iterable, Iterator
from itertools import takewhile

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
    CART_PIN_D0,
    CART_PIN_D1,
    CART_PIN_D2,
    CART_PIN_D3,
    CART_PIN_D4,
    CART_PIN_D5,
    CART_PIN_D6,
    CART_PIN_D7,
)

DATA_PINS = (
    CART_PIN_D0, CART_PIN_D1, CART_PIN_D2, CART_PIN_D3,
    CART_PIN_D4, CART_PIN_D5, CART_PIN_D6, CART_PIN_D7,
)
RIPPLE_PINS = (
    CART_PIN_A0, CART_PIN_A1, CART_PIN_A2, CART_PIN_A3, CART_PIN_A4, CART_PIN_A5,
    CART_PIN_A6, CART_PIN_A7, CART_PIN_A8, CART_PIN_A9, CART_PIN_A10,
)
SHIFTER_PINS = (
    CART_PIN_A12, CART_PIN_A13, CART_PIN_A14, CART_PIN_A15,
    CART_PIN_A16, CART_PIN_A17, CART_PIN_A18, CART_PIN_A19,
)


def _active(data_pins: Iterable[int]) -> Iterator[int]:
    return takewhile(lambda pin: pin != 0, data_pins)


def write_pins(pins: int, data: int, data_pins: Iterable[int]) -> int:
    """Return ``pins`` with the listed pins set to the bits of ``data``."""
    data &= 0xFFFF
    for bit, pin in enumerate(_active(data_pins)):
        mask = 1 << (pin - 1)
        if (data >> bit) & 1:
            pins |= mask
        else:
            pins &= ~mask
    return pins


def write_data_pins(pins: int, data: int) -> int:
    """Return ``pins`` with the data byte placed on D0..D7."""
    return write_pins(pins, data & 0xFF, DATA_PINS)


def read_pins(pins: int, data_pins: Iterable[int]) -> int:
    """Gather the value carried by the listed pins."""
    return sum(
        1 << bit
        for bit, pin in enumerate(_active(data_pins))
        if pins & (1 << (pin - 1))
    )