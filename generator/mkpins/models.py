from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

MAX_PINS = 256
NUM_FIELDS = 14

# register array sizes for the LPC17xx GPIO block
NUM_PORTS = 5
NUM_PAIR_REGS = 11  # PINSEL/PINMODE: two 2-bit-per-pin registers per port

DIR_OUT = "output"
DIR_IN = "input"

# value written into the generated C record for an unset column
UNSET = 0xFF


@dataclass(frozen=True)
class PinEntry:
    sequence: int
    physical_pin: int
    port: int
    bit: int
    signal_name: str
    alt_function_1: str = ""
    alt_function_2: str = ""
    alt_function_3: str = ""
    function_select: Optional[int] = None
    direction: Optional[str] = None  # DIR_OUT | DIR_IN | None
    mode: int = 0
    open_drain: bool = False
    default_state: bool = False
    active_polarity: bool = True  # True = active high


@dataclass
class PinTable:
    capacity: int = MAX_PINS
    entries: List[PinEntry] = field(default_factory=list)
    lines: int = 0

    @property
    def full(self) -> bool:
        return len(self.entries) >= self.capacity

    @property
    def pins(self) -> Tuple[PinEntry, ...]:
        return tuple(self.entries)

    def add(self, **kw) -> PinEntry:
        if self.full:
            raise OverflowError(f"pin table is full ({self.capacity} entries)")
        pe = PinEntry(sequence=len(self.entries), **kw)
        self.entries.append(pe)
        return pe

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PinEntry]:
        return iter(self.entries)


@dataclass(frozen=True)
class RegisterImages:
    pinsel: Tuple[int, ...]
    pinmode: Tuple[int, ...]
    pinmode_od: Tuple[int, ...]
    fiodir: Tuple[int, ...]
    fiopin: Tuple[int, ...]
    fiomask: Tuple[int, ...]
