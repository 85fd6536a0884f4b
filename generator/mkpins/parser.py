from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import SpecError
from .models import DIR_IN, DIR_OUT, MAX_PINS, NUM_FIELDS, PinTable
from .utils import fit_fields, scan_flag, scan_int, strip_quotes, trim_bom, trim_eol

END_MARK = "END"
NA_MARK = "N/A"

# column order of the pin sheet
F_ITEM, F_PIN, F_PORT, F_BIT = 0, 1, 2, 3
F_ALT1, F_ALT2, F_ALT3, F_SIG = 4, 5, 6, 7
F_FUNC, F_INOUT, F_MODE, F_OD, F_DEF, F_ACT = 8, 9, 10, 11, 12, 13

Row = Tuple[int, List[str]]


def split_fields(line: str) -> List[str]:
    parts = trim_eol(line).split(",")
    return fit_fields(parts, NUM_FIELDS)


def _required_int(fields: List[str], i: int, lineno: int) -> int:
    v = scan_int(fields[i])
    if v is None:
        raise SpecError("F201", {"line": lineno, "field": i, "text": fields[i]})
    return v


def _text(s: str) -> str:
    return s if len(s) > 1 else ""


def parse_record(fields: List[str], lineno: int) -> Optional[Dict[str, Any]]:
    """Turn one row of 14 fields into PinTable.add() keywords.

    Returns None when the row does not describe a used signal on this
    package (N/A or zero pin, blank signal name). Raises SpecError F201
    when item, pin, port or bit is present but not a number.
    """
    # presence is decided on the raw text, before edge quotes are stripped
    raw = fit_fields(fields, NUM_FIELDS)
    f = [strip_quotes(x) for x in raw]

    if raw[F_ITEM]:
        _required_int(f, F_ITEM, lineno)
    if f[F_PIN].startswith(NA_MARK):
        return None
    pin = _required_int(f, F_PIN, lineno) if raw[F_PIN] else 0
    port = _required_int(f, F_PORT, lineno) if raw[F_PORT] else 0
    bit = _required_int(f, F_BIT, lineno) if raw[F_BIT] else 0

    inout = scan_int(f[F_INOUT])
    mode = scan_int(f[F_MODE])
    rec = {
        "physical_pin": pin,
        "port": port,
        "bit": bit,
        "alt_function_1": _text(f[F_ALT1]),
        "alt_function_2": _text(f[F_ALT2]),
        "alt_function_3": _text(f[F_ALT3]),
        "signal_name": _text(f[F_SIG]),
        "function_select": scan_int(f[F_FUNC]),
        "direction": {0: DIR_OUT, 1: DIR_IN}.get(inout),
        "mode": 0 if mode is None else mode,
        "open_drain": scan_flag(f[F_OD], False),
        "default_state": scan_flag(f[F_DEF], False),
        "active_polarity": scan_flag(f[F_ACT], True),
    }
    if rec["physical_pin"] == 0 or not rec["signal_name"]:
        return None
    return rec


def csv_rows(lines: Iterable[str]) -> Iterator[Row]:
    for lineno, line in enumerate(lines, 1):
        if lineno == 1:
            continue
        if line.startswith(END_MARK):
            break
        yield lineno, split_fields(line)


def build_pin_table(rows: Iterable[Row], capacity: int = MAX_PINS) -> PinTable:
    table = PinTable(capacity=capacity, lines=1)
    for lineno, fields in rows:
        if table.full:
            break
        table.lines = lineno
        rec = parse_record(fields, lineno)
        if rec is not None:
            table.add(**rec)
    return table


def read_lines(path: str) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = [trim_eol(x) for x in f]
    except OSError as e:
        raise SpecError("F101", {"path": path, "reason": e.strerror or e})
    if lines:
        lines[0] = trim_bom(lines[0])
    return lines


def read_csv(path: str, capacity: int = MAX_PINS) -> Tuple[List[str], PinTable]:
    lines = read_lines(path)
    return lines, build_pin_table(csv_rows(lines), capacity)
