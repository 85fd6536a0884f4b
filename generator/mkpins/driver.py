import os
import sys
from typing import Dict, Optional, Tuple

from .banner import gen_stamp
from .codegen.common import out_names
from .codegen.gen_header import gen_header_h
from .codegen.gen_source import gen_source_c
from .errors import SpecError
from .excel import is_workbook, read_xlsx
from .models import MAX_PINS
from .parser import read_csv
from .registers import accumulate
from .utils import is_valid_prefix


def info(msg: str):
    print(f"[INFO] {msg}", file=sys.stderr)


def check_prefix(raw: str) -> Tuple[str, str]:
    if not is_valid_prefix(raw):
        raise SpecError("F103", {"prefix": repr(raw)})
    return raw.lower(), raw.upper()


def write_text(path: str, text: str):
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise SpecError("F102", {"path": path, "reason": e.strerror or e})
    info(f"wrote {path}")


def run_generate(
    in_path: str,
    raw_prefix: str,
    outdir: str = ".",
    sheet: Optional[str] = None,
    stamp: Optional[str] = None,
    capacity: int = MAX_PINS,
) -> Tuple[int, str, str]:
    prefix, P = check_prefix(raw_prefix)
    info(f"prefix: {prefix}  PREFIX: {P}")

    if is_workbook(in_path):
        src_lines, table = read_xlsx(in_path, sheet, capacity)
    else:
        src_lines, table = read_csv(in_path, capacity)
    info(f"read input file: {in_path}")
    info(f"processed {len(table)} entries in {table.lines} lines")

    pins = table.pins
    regs = accumulate(pins)

    fname_c, fname_h = out_names(prefix)
    hdr: Dict[str, str] = {
        "stamp": stamp or gen_stamp(),
        "input": os.path.basename(in_path),
        "prefix": P,
        "out_c": fname_c,
        "out_h": fname_h,
    }
    text_h = gen_header_h(P, pins, regs, src_lines, hdr)
    text_c = gen_source_c(P, pins, hdr)

    try:
        os.makedirs(outdir, exist_ok=True)
    except OSError as e:
        raise SpecError("F102", {"path": outdir, "reason": e.strerror or e})
    out_c = os.path.join(outdir, fname_c)
    out_h = os.path.join(outdir, fname_h)
    write_text(out_c, text_c)
    write_text(out_h, text_h)
    return len(table), out_c, out_h
