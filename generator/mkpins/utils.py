import re
from typing import Any, List, Optional

INT_RE = re.compile(r"\s*([+-]?\d+)")


def norm(x: Any) -> str:
    return "" if x is None else str(x).strip()


def strip_quotes(s: str) -> str:
    # only a quote sitting on either edge is removed, interior quotes stay
    if s[:1] == '"':
        s = s[1:]
    if s[-1:] == '"':
        s = s[:-1]
    return s


def scan_int(s: str) -> Optional[int]:
    """Leading integer of `s` (sscanf "%d" rules), or None."""
    m = INT_RE.match(s or "")
    return int(m.group(1)) if m else None


def scan_flag(s: str, default: bool) -> bool:
    v = scan_int(s)
    if v == 0:
        return False
    if v == 1:
        return True
    return default


def trim_bom(s: str) -> str:
    i = 0
    while i < len(s) and not s[i].isascii():
        i += 1
    return s[i:]


def trim_eol(s: str) -> str:
    return s.rstrip("\r\n")


def is_valid_prefix(s: str) -> bool:
    return all(ch.isascii() and ch.isprintable() for ch in s)


def cell_text(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def fit_fields(fields: List[str], n: int) -> List[str]:
    return (list(fields) + [""] * n)[:n]
