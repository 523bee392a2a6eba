# tests/fakes/fake_printer.py

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from spooler.printer_base import Printer, PrinterError


@dataclass
class SubmittedJob:
    file_path: Path
    printer_name: str
    media: str
    job_name: str
    content: bytes


class FakePrinter(Printer):
    def __init__(self, printers: List[str], fail_with: Optional[int] = None):
        self.printers = list(printers)
        self.fail_with = fail_with
        self.jobs: List[SubmittedJob] = []
        self.preflight_calls = 0

    def preflight(self) -> None:
        self.preflight_calls += 1

    def list_printers(self) -> List[str]:
        return list(self.printers)

    def print_file(self, file_path, printer_name, *, media, job_name) -> None:
        if self.fail_with is not None:
            raise PrinterError(f"lp failed (rc={self.fail_with}): boom", returncode=self.fail_with)

        # Capture the content now: the merged file is deleted once the batch ends.
        self.jobs.append(
            SubmittedJob(
                file_path=file_path,
                printer_name=printer_name,
                media=media,
                job_name=job_name,
                content=file_path.read_bytes(),
            )
        )
