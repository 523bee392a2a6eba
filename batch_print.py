#!/usr/bin/env python
"""Command-line entry point: merge files into one PDF and print it as a single job."""

import sys

from jobs.config import build_parser, parse_arguments
from jobs.job_errors import BatchPrintError, PrinterNotFoundError, UsageError
from jobs.pipeline import run_batch
from merging.combine_pages_merger import CombinePagesMerger
from merging.ghostscript_merger import GhostscriptMerger
from merging.merger_base import MergeError
from spooler.cups_printer import CupsPrinter
from spooler.printer_base import Printer, PrinterError


def default_mergers():
    # priority order: first available wins
    return [CombinePagesMerger(), GhostscriptMerger()]


def report_error(e: BatchPrintError) -> None:
    print(f"Error: {e}", file=sys.stderr)
    if isinstance(e, PrinterNotFoundError):
        for name in e.available:
            print(f"  {name}", file=sys.stderr)
    if isinstance(e, UsageError):
        build_parser().print_help(sys.stderr)


def main(argv=None, printer: Printer | None = None, mergers=None) -> int:
    try:
        config = parse_arguments(argv)
        run_batch(
            config,
            printer if printer is not None else CupsPrinter(),
            mergers if mergers is not None else default_mergers(),
        )
    except BatchPrintError as e:
        report_error(e)
        return e.exit_code
    except MergeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.returncode
    except PrinterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.returncode if e.returncode else 1
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
