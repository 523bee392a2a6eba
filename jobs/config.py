# jobs/config.py

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from jobs.job_errors import UsageError

PROG = "batch-print"

EPILOG = f"""\
example:
  {PROG} -p MyPrinter -s A4 report.pdf slides.pdf
  {PROG} -p MyPrinter -s Letter -f files.txt cover.pdf
"""


@dataclass(frozen=True)
class BatchPrintConfig:
    """Everything one run needs, passed explicitly to each stage."""

    printer: str
    paper_size: str
    file_list: Optional[str] = None
    files: Tuple[str, ...] = ()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Merge files into a single PDF and print it as one job.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p",
        dest="printer",
        metavar="PRINTER",
        default="",
        help="Printer name (see 'lpstat -p' for available printers).",
    )
    parser.add_argument(
        "-s",
        dest="paper_size",
        metavar="PAPER_SIZE",
        default="",
        help="Paper size (e.g. Letter, Legal, A4, A3, Tabloid).",
    )
    parser.add_argument(
        "-f",
        dest="file_list",
        metavar="FILE_LIST",
        default=None,
        help="File with one path per line; blank lines and lines starting with '#' are ignored.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files to print, after any entries from the file list.",
    )
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> BatchPrintConfig:
    """
    Parse `argv` into a BatchPrintConfig.

    argparse handles -h (exit 0) and malformed options (exit 2) itself.
    Raises UsageError if the printer or paper size is missing or empty.
    """
    args = build_parser().parse_args(argv)

    if not args.printer or not args.paper_size:
        raise UsageError("Both -p (printer) and -s (paper size) are required.")

    return BatchPrintConfig(
        printer=args.printer,
        paper_size=args.paper_size,
        file_list=args.file_list,
        files=tuple(args.files),
    )
