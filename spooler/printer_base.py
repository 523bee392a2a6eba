# spooler/printer_base.py

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class PrinterError(RuntimeError):
    """Raised when the spooler cannot accept a print request."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class Printer(ABC):
    """
    Abstract print-system interface.

    The batch pipeline owns validation and error reporting. Concrete implementations
    talk to a real spooler (CUPS) and only answer queries or submit jobs.
    """

    def preflight(self) -> None:
        """Raise PrinterError if the spooler cannot be used at all."""

    @abstractmethod
    def list_printers(self) -> List[str]:
        """Return the names of every printer the spooler knows about."""
        raise NotImplementedError

    def has_printer(self, printer_name: str) -> bool:
        return printer_name in self.list_printers()

    @abstractmethod
    def print_file(
            self,
            file_path: Path,
            printer_name: str,
            *,
            media: str,
            job_name: str,
    ) -> None:
        """
        Submit `file_path` to `printer_name` as a single job.

        - `media` is passed to the spooler as the paper size option.
        - `job_name` is the title shown in the queue.
        - Implementations should raise PrinterError on failure.
        """
        raise NotImplementedError
