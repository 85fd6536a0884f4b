from datetime import datetime
from typing import Dict, List, Optional

TOOL = "MKPINS"
STAMP_FMT = "%a %d-%b-%Y %H:%M:%S"
RULE = "//" + "*" * 72

FIELDS = (
    ("stamp", "Processing Date/Time:"),
    ("input", "Input Pin Info CSV file:"),
    ("prefix", "Project Name Prefix:"),
    ("out_c", "Output C-File:"),
    ("out_h", "Output H-File:"),
)


def gen_stamp(when: Optional[datetime] = None) -> str:
    return (when or datetime.now()).strftime(STAMP_FMT)


def banner(info: Dict[str, str]) -> List[str]:
    w = max(len(label) for _, label in FIELDS)
    L = [RULE, RULE, "//***", f"//***  NOTE:  This file was automatically generated by {TOOL}"]
    for key, label in FIELDS:
        L.append(f"//***  {label.ljust(w)}  {info.get(key, '')}")
    L += ["//***", RULE, RULE, ""]
    return L
