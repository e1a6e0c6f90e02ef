"""Cartridge, EEPROM and bus components of an Atari Lynx emulator core."""

__version__ = "0.1.0"

__all__ = [
    "bus",
    "cartridge",
    "cartridge_generic",
    "consts",
    "eeprom",
    "lnx_header",
    "no_intro",
    "pins",
]