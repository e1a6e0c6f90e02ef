"""The shared system bus: address, data, transfer status and arbitration."""

from dataclasses import dataclass
from enum import Enum


class BusStatus(Enum):
    """What the bus is currently doing."""

    NONE = "None"
    PEEK_CART0 = "PeekCart0"
    PEEK_CART1 = "PeekCart1"
    POKE_CART0 = "PokeCart0"
    POKE_CART1 = "PokeCart1"
    PEEK_INC_CART_RIPPLE = "PeekIncCartRipple"
    POKE_INC_CART_RIPPLE = "PokeIncCartRipple"
    PEEK_CORE = "PeekCore"
    POKE_CORE = "PokeCore"
    PEEK = "Peek"
    POKE = "Poke"
    PEEK_RAM = "PeekRAM"
    PEEK_DONE = "PeekDone"
    POKE_DONE = "PokeDone"


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class Bus:
    """State of the bus; a fresh bus is idle with the grant held."""

    data: int = 0
    addr: int = 0
    status: BusStatus = BusStatus.NONE
    request: bool = False
    grant: bool = True

    def __repr__(self) -> str:
        return (
            f"{{ addr:{self.addr:04x} data:{self.data:04x} "
            f"status:{self.status.value} request:{_flag(self.request)} "
            f"grant:{_flag(self.grant)} }}"
        )