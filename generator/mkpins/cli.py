import argparse
import sys

from .driver import run_generate
from .errors import EXIT_FATAL, SpecError


class _ArgParser(argparse.ArgumentParser):
    def error(self, message):
        raise SpecError("U101", {"reason": message})


def main(argv=None):
    ap = _ArgParser(prog="mkpins", description="GPIO pin table generator (CSV/XLSX -> C source + header)")
    ap.add_argument("input", help="pin table exported from the spreadsheet (.csv) or the workbook (.xlsx)")
    ap.add_argument("prefix", help="short project name used to namespace generated symbols")
    ap.add_argument("-o", "--outdir", default=".")
    ap.add_argument("--sheet")
    args = ap.parse_args(argv)

    n, out_c, out_h = run_generate(args.input, args.prefix, args.outdir, sheet=args.sheet)
    print(f"[OK] entries={n} c={out_c} h={out_h}")


def run(argv=None) -> int:
    try:
        main(argv)
    except SpecError as e:
        print(e.pretty(), file=sys.stderr)
        return EXIT_FATAL
    except Exception as e:
        print(f"[U901] {e}", file=sys.stderr)
        return EXIT_FATAL
    return 0
