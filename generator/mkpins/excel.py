import sys
import zipfile
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import EXIT_FATAL, SpecError
from .models import MAX_PINS, NUM_FIELDS, PinTable
from .parser import END_MARK, Row, build_pin_table
from .utils import cell_text, fit_fields, norm, trim_bom

XLSX_EXT = (".xlsx", ".xlsm")


def is_workbook(path: str) -> bool:
    return path.lower().endswith(XLSX_EXT)


def load_rows(ws) -> List[List[str]]:
    R, C = ws.max_row, ws.max_column
    g = [[ws.cell(r, c).value for c in range(1, C + 1)] for r in range(1, R + 1)]
    for rng in ws.merged_cells.ranges:
        r0, c0, r1, c1 = rng.min_row, rng.min_col, rng.max_row, rng.max_col
        v = ws.cell(r0, c0).value
        for r in range(r0, r1 + 1):
            for c in range(c0, c1 + 1):
                g[r - 1][c - 1] = v
    rows = [[cell_text(v) for v in row] for row in g]
    if rows and rows[0]:
        rows[0][0] = trim_bom(rows[0][0])
    return rows


def xlsx_rows(grid: Iterable[List[str]]) -> Iterator[Row]:
    for r, row in enumerate(grid, 1):
        if r == 1:
            continue
        if norm(row[0] if row else "").startswith(END_MARK):
            break
        yield r, [norm(v) for v in fit_fields(row, NUM_FIELDS)]


def render_lines(grid: Iterable[List[str]]) -> List[str]:
    # trailing empty cells are dropped so the reference block stays readable
    out = []
    for row in grid:
        cells = list(row)
        while cells and cells[-1] == "":
            cells.pop()
        out.append(",".join(cells))
    return out


def open_sheet(path: str, sheet: Optional[str] = None):
    try:
        import openpyxl
        from openpyxl.utils.exceptions import InvalidFileException
    except Exception:
        print("[U901] openpyxl import failed. Please `pip install openpyxl`.", file=sys.stderr)
        sys.exit(EXIT_FATAL)

    try:
        wb = openpyxl.load_workbook(path, data_only=True)
    except OSError as e:
        raise SpecError("F101", {"path": path, "reason": e.strerror or e})
    except (zipfile.BadZipFile, InvalidFileException) as e:
        raise SpecError("F101", {"path": path, "reason": e})
    if sheet:
        if sheet not in wb.sheetnames:
            raise SpecError("F104", {"sheet": sheet, "sheets": ",".join(wb.sheetnames)})
        return wb[sheet]
    return wb.worksheets[0]


def read_xlsx(path: str, sheet: Optional[str] = None, capacity: int = MAX_PINS) -> Tuple[List[str], PinTable]:
    grid = load_rows(open_sheet(path, sheet))
    return render_lines(grid), build_pin_table(xlsx_rows(grid), capacity)
