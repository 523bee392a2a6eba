# spooler/cups_printer.py

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List

import cups

from spooler.printer_base import Printer, PrinterError


class CupsPrinter(Printer):
    """
    CUPS-backed print system.

    Printer lookup goes through the CUPS API (pycups); submission uses the `lp`
    command so the job looks exactly like one queued from a shell.

    Fire-and-forget submission only, one job per call. The caller runs
    `preflight()` once before submitting.
    """

    def __init__(self, lp_path: str = "lp") -> None:
        self._lp_path = lp_path

    def preflight(self) -> None:
        if shutil.which(self._lp_path) is None:
            raise PrinterError(f"CUPS not available: '{self._lp_path}' not found in PATH")

    def list_printers(self) -> List[str]:
        try:
            conn = cups.Connection()
            return list(conn.getPrinters())
        except (RuntimeError, cups.IPPError) as e:
            raise PrinterError(f"CUPS query failed: {e}") from e

    def print_file(
            self,
            file_path: Path,
            printer_name: str,
            *,
            media: str,
            job_name: str,
    ) -> None:
        cmd = [
            self._lp_path,
            "-d", printer_name,
            "-o", f"media={media}",
            "-t", job_name,
            str(file_path),
        ]

        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )
        if proc.returncode != 0:
            out = (proc.stdout or "") + (proc.stderr or "")
            raise PrinterError(
                f"lp failed (rc={proc.returncode}): {out.strip()}",
                returncode=proc.returncode,
            )
