from typing import Dict, List, Sequence

from ..banner import RULE, banner
from ..models import PinEntry, RegisterImages
from .common import DEFINE_W, GPIO, MACRO_W, include_guard, pin_sym, pindef_type, register_blocks

PINDEF_FIELDS = (
    ("int", "seq"),
    ("int", "pinnum"),
    ("int", "port"),
    ("int", "bit"),
    ("char *", "altfunc1"),
    ("char *", "altfunc2"),
    ("char *", "altfunc3"),
    ("char *", "signame"),
    ("int", "func"),
    ("int", "inout"),
    ("int", "mode"),
    ("int", "odrain"),
    ("int", "def"),
    ("int", "active"),
)


def pindef_typedef(P: str) -> List[str]:
    L = [f"typedef struct tag{P}_PINDEF {{"]
    for t, n in PINDEF_FIELDS:
        L.append(f"  {t}{'' if t.endswith('*') else ' '}{n};")
    L += [f"}} {pindef_type(P)};", ""]
    return L


def bit_defines(P: str, pins: Sequence[PinEntry]) -> List[str]:
    L = []
    for pe in pins:
        L.append(f"#define {pin_sym(P, pe) + '_PORT':<{DEFINE_W}}    ({pe.port})")
        L.append(f"#define {pin_sym(P, pe) + '_BIT':<{DEFINE_W}}    ({pe.bit})")
    L.append("")
    return L


def bit_macros(P: str, pins: Sequence[PinEntry]) -> List[str]:
    L = []
    for pe in pins:
        s, n, b = pe.signal_name, pe.port, pe.bit
        setb = f"({GPIO}{n}->FIOSET = (1<<{b}))"
        clrb = f"({GPIO}{n}->FIOCLR = (1<<{b}))"
        getb = f"(({GPIO}{n}->FIOPIN & (1<<{b})) >> {b})"
        L.append(f"#define {P}_GET_{s:<{MACRO_W}}   {getb}")
        if pe.open_drain:
            L.append(f"#define {P}_OPEN_{s:<{MACRO_W}}    {setb}")
            L.append(f"#define {P}_SINK_{s:<{MACRO_W}}    {clrb}")
            continue
        L.append(f"#define {P}_SET_{s:<{MACRO_W}}    {setb}")
        L.append(f"#define {P}_CLR_{s:<{MACRO_W}}    {clrb}")
        if pe.active_polarity:
            L.append(f"#define {P}_ON_{s:<{MACRO_W}}    {setb}")
            L.append(f"#define {P}_OFF_{s:<{MACRO_W}}    {clrb}")
            L.append(f"#define {P}_QON_{s:<{MACRO_W}}   {getb}")
        else:
            L.append(f"#define {P}_ON_{s:<{MACRO_W}}     {clrb}")
            L.append(f"#define {P}_OFF_{s:<{MACRO_W}}    {setb}")
            L.append(f"#define {P}_QON_{s:<{MACRO_W}}  ({getb}^1)")
    L.append("")
    return L


def reference_block(fname_in: str, lines: Sequence[str]) -> List[str]:
    L = [RULE, f"//***  Input Pin Info CSV file {fname_in}, printed below for reference:", RULE]
    for i, line in enumerate(lines, 1):
        L.append(f"//{i:04d}: {line}")
    L += [RULE, f"//***  END OF FILE {fname_in}", RULE]
    return L


def gen_header_h(
    P: str,
    pins: Sequence[PinEntry],
    regs: RegisterImages,
    src_lines: Sequence[str],
    info: Dict[str, str],
) -> str:
    guard = include_guard(info["out_h"])
    L = banner(info)
    L += [f"#ifndef {guard}", f"#define {guard}", ""]
    L += pindef_typedef(P)
    for pe in pins:
        L.append(f"extern const {pindef_type(P)} {pin_sym(P, pe)};")
    L.append(f"#define NUM_PINDEFS ({len(pins)})")
    L.append(f"extern const {pindef_type(P)}* {P}_PINS[NUM_PINDEFS];")
    L.append("")
    L += register_blocks(P, regs)
    L += bit_defines(P, pins)
    L += bit_macros(P, pins)
    L += reference_block(info["input"], src_lines)
    L += ["", f"#endif   // {guard}", ""]
    return "\n".join(L)
