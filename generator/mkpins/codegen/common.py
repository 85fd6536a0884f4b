from typing import List, Optional, Sequence

from ..models import DIR_IN, DIR_OUT, UNSET, PinEntry, RegisterImages

GPIO = "LPC_GPIO"
MACRO_W = 25
DEFINE_W = 32


def out_names(prefix: str):
    return f"{prefix}_gpio.c", f"{prefix}_gpio.h"


def pin_sym(P: str, pe: PinEntry) -> str:
    return f"{P}_{pe.signal_name}"


def pindef_type(P: str) -> str:
    return f"{P}_PINDEF"


def include_guard(fname_h: str) -> str:
    g = "".join(ch.upper() if ch.isalnum() else "_" for ch in fname_h)
    return ("F_" + g) if g[:1].isdigit() else g


def c_opt(v: Optional[int]) -> int:
    return UNSET if v is None else v


def c_dir(d: Optional[str]) -> int:
    return {DIR_OUT: 0, DIR_IN: 1}.get(d, UNSET)


def reg_defines(P: str, name: str, regs: Sequence[int]) -> List[str]:
    return [f"#define {P}_{name}{i}_INIT (0x{v & 0xFFFFFFFF:08x})" for i, v in enumerate(regs)] + [""]


def register_blocks(P: str, regs: RegisterImages) -> List[str]:
    L: List[str] = []
    L += reg_defines(P, "PINSEL", regs.pinsel)
    L += reg_defines(P, "PINMODE", regs.pinmode)
    L += reg_defines(P, "PINMODE_OD", regs.pinmode_od)
    L += reg_defines(P, "FIODIR", regs.fiodir)
    L += reg_defines(P, "FIOPIN", regs.fiopin)
    L += reg_defines(P, "FIOMASK", regs.fiomask)
    return L
