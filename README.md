# holani

Cartridge, EEPROM and bus components of an Atari Lynx emulator core, in pure
Python with no dependencies.

## Modules

- `holani.consts` – memory map, Mikey and Suzy register addresses, cartridge
  connector pin numbers, register bit masks and timing constants.
- `holani.bus` – `Bus`, a dataclass holding `data`, `addr`, `status`,
  `request` and `grant` (a new bus is idle, status `BusStatus.NONE`, with
  `grant` set), and the `BusStatus` enumeration.
- `holani.lnx_header` – `LNXHeader` (rotation, manufacturer, title, version,
  bank sizes and spare bytes; `eeprom()` returns the second spare byte) and
  `LNXRotation` (`NONE`, `ROTATE_270`, `ROTATE_90`).
- `holani.no_intro` – `check_no_intro(data)` looks up a headerless dump by its
  MD5 digest and returns `(title, rotation)`, raising `LookupError` for an
  unknown dump.
- `holani.pins` – `write_pins`, `write_data_pins` and `read_pins` place an
  integer onto, or gather it from, the cartridge connector's pin mask; the pin
  lists `DATA_PINS`, `RIPPLE_PINS` and `SHIFTER_PINS`.
- `holani.cartridge_generic` – `CartridgeGeneric`, cartridge memory selected by
  a block number and an offset; a rising CE reads a byte onto the data pins, a
  rising WE writes one.
- `holani.eeprom` – the 93Cxx serial EEPROM family: `Ee93cxx` with its
  `Ee93cxxType`, `Ee93cxxState` and `Ee93cxxPins`, and the `Eeprom` wrapper
  chosen by `EepromType`. It handles read, write, erase, write-all, erase-all
  and the write enable/disable commands.
- `holani.cartridge` – `Cartridge`, which loads `.lnx`, BS93 and known
  headerless images through `Cartridge.from_bytes`, and steps cartridge reads
  and writes from the bus tick by tick.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from holani.bus import Bus, BusStatus
from holani.cartridge import Cartridge, CartridgeFormatError

with open("game.lnx", "rb") as fh:
    try:
        cart = Cartridge.from_bytes(fh.read())
    except CartridgeFormatError as exc:
        raise SystemExit(str(exc))

print(cart.header.title, cart.rotation())

bus = Bus()
bus.status = BusStatus.PEEK_CART0
cart.write_address_to_pins(0, 0, 0)
sysctl1 = 0b10  # cartridge power on
while bus.status is BusStatus.PEEK_CART0:
    cart.tick(bus, sysctl1)
print(hex(bus.data))
```

A cartridge read takes `CART_READ_TICKS` ticks and a write
`CART_WRITE_TICKS`. When a read is done the bus status moves on to
`BusStatus.PEEK_INC_CART_RIPPLE` and `bus.data` holds the byte read (0xFF when
cartridge power is off in `sysctl1`, or for bank 1); a finished write moves it
on to `BusStatus.POKE_INC_CART_RIPPLE`. While an access runs,
`cart.cart0_inactive` or `cart.cart1_inactive` is cleared, and set again when
it ends.

Image recognition follows these rules:

- `.lnx`: more than 64 bytes starting with `LYNX`. The header is parsed, the
  bank size picks the address wiring (512, 1024, 2048 or 4096 bytes; any other
  size is logged as an error and leaves no memory loaded), and the EEPROM byte
  fits an `Eeprom` when it names one.
- BS93: more than 10 bytes with `BS93` at offset 6. A boot loader is put in
  front and the image is padded to 256 KiB; a larger image raises
  `CartridgeFormatError`.
- Headerless: an image whose MD5 is in the `holani.no_intro` catalogue, up to
  1 MiB.

Anything else raises `CartridgeFormatError`. Driving the pins of a cartridge
with no memory loaded raises `RuntimeError`.

## What it does not do

This package covers the cartridge slot and the shared bus only. It has no CPU,
RAM, boot ROM, Mikey (timers, audio, video, serial port) or Suzy (sprites,
maths, joystick) emulation, so it cannot run a game, draw a screen or play
sound. It does not save or restore emulator state, and it has no command-line
program.