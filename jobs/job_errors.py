from typing import List


class BatchPrintError(RuntimeError):
    """Fatal condition that stops a batch run before anything is submitted."""

    exit_code = 1


class UsageError(BatchPrintError):
    pass


class FileListNotFoundError(BatchPrintError):
    def __init__(self, path: str):
        super().__init__(f"File list not found: {path}")
        self.path = path


class PrinterNotFoundError(BatchPrintError):
    def __init__(self, printer_name: str, available: List[str]):
        super().__init__(f"Printer '{printer_name}' not found. Available printers:")
        self.printer_name = printer_name
        self.available = available


class NoValidFilesError(BatchPrintError):
    pass
