from typing import Any, Dict, Optional

EXIT_FATAL = 99

EID = {
    "U101":"Usage: mkpins <input.csv|input.xlsx> <project-prefix>  (e.g. mkpins pinout.csv zebra)",
    "F101":"Error opening input file",
    "F102":"Error opening output file",
    "F103":"Error with project prefix (must be printable ASCII)",
    "F104":"Worksheet not found in workbook",
    "F201":"Field parse error",
    "R301":"Port/bit outside the GPIO register map (port 0..4, bit 0..31)",
    "U901":"Unexpected error",
}


class SpecError(Exception):
    def __init__(self, eid: str, ctx: Optional[Dict[str, Any]] = None):
        super().__init__(f"[{eid}] {EID.get(eid, eid)}")
        self.eid = eid
        self.ctx = ctx or {}

    def pretty(self) -> str:
        c = " ".join(f"{k}={v}" for k, v in self.ctx.items())
        return f"[{self.eid}] {EID.get(self.eid, self.eid)}" + (f" | {c}" if c else "")
