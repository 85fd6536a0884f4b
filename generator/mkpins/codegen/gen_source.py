from typing import Dict, List, Sequence

from ..banner import banner
from ..models import PinEntry
from .common import c_dir, c_opt, pin_sym, pindef_type

WRAP_COL = 80
INDENT = "    "


def pindef_body(P: str, pe: PinEntry) -> str:
    vals = [
        str(pe.sequence), str(pe.physical_pin), str(pe.port), str(pe.bit),
        f'"{pe.alt_function_1}"', f'"{pe.alt_function_2}"', f'"{pe.alt_function_3}"', f'"{pe.signal_name}"',
        str(c_opt(pe.function_select)), str(c_dir(pe.direction)), str(pe.mode),
        str(int(pe.open_drain)), str(int(pe.default_state)), str(int(pe.active_polarity)),
    ]
    return f"const {pindef_type(P)} {pin_sym(P, pe)} = {{ {', '.join(vals)} }};"


def pin_array(P: str, pins: Sequence[PinEntry]) -> List[str]:
    L = [f"const {pindef_type(P)}* {P}_PINS[NUM_PINDEFS] = {{"]
    cur = INDENT
    col = len(INDENT)
    for pe in pins:
        ref = f"&{pin_sym(P, pe)},"
        cur += ref + " "
        col += len(ref)
        if col > WRAP_COL:
            L.append(cur.rstrip())
            cur = INDENT
            col = len(INDENT)
    if cur.strip():
        L.append(cur.rstrip())
    L.append("};")
    return L


def gen_source_c(P: str, pins: Sequence[PinEntry], info: Dict[str, str]) -> str:
    L = banner(info)
    L += [f'#include "{info["out_h"]}"', ""]
    for pe in pins:
        L.append(pindef_body(P, pe))
    L.append("")
    L += pin_array(P, pins)
    L.append("")
    return "\n".join(L)
