"""
Batch print pipeline.

Stages run strictly in order and each one is terminal on failure:

    expand file list -> require files -> check printer -> drop missing files
    -> require files again -> merge into a temp PDF -> submit one job -> clean up

Collaborators are injected so the pipeline never touches CUPS or a merge tool
directly.
"""

from pathlib import Path
from typing import List

from jobs.config import BatchPrintConfig
from jobs.file_list import expand_file_list, filter_existing
from jobs.job_errors import NoValidFilesError, PrinterNotFoundError, UsageError
from merging.merged_document import exit_on_signals, merged_document
from merging.merger_base import Merger, select_merger
from spooler.printer_base import Printer


def validate_printer(printer: Printer, printer_name: str) -> None:
    if not printer.has_printer(printer_name):
        raise PrinterNotFoundError(printer_name, printer.list_printers())


def job_title(file_count: int) -> str:
    return f"batch-print ({file_count} file(s))"


def run_batch(config: BatchPrintConfig, printer: Printer, mergers: List[Merger]) -> Path:
    """
    Run one batch and return the temporary path that was used for the merged
    document. The file itself no longer exists when this returns.
    """
    candidates = expand_file_list(config.file_list, config.files)
    if not candidates:
        raise UsageError("No files specified.")

    validate_printer(printer, config.printer)

    valid_files = filter_existing(candidates)
    if not valid_files:
        raise NoValidFilesError("No valid files to print.")

    merger = select_merger(mergers)
    printer.preflight()

    with exit_on_signals(), merged_document() as merged_path:
        merger.merge([Path(f) for f in valid_files], merged_path)

        print(f"Printing {len(valid_files)} file(s) to '{config.printer}' on {config.paper_size} paper...")
        printer.print_file(
            merged_path,
            config.printer,
            media=config.paper_size,
            job_name=job_title(len(valid_files)),
        )

    return merged_path
