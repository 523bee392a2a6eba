from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence


class MergeError(RuntimeError):
    def __init__(self, message: str, returncode: int = 1) -> None:
        super().__init__(message)
        self.returncode = returncode


class MergeBackendUnavailableError(MergeError):
    pass


class Merger(ABC):
    """
    Abstract PDF merge backend.

    Backends never read or write PDF content themselves; they delegate to an
    external tool and only report whether that tool is installed.
    """

    name = "merger"

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the backing tool is installed and runnable."""
        pass

    @abstractmethod
    def merge(self, input_paths: Sequence[Path], output_path: Path) -> None:
        """Combine `input_paths`, in order, into `output_path`."""
        pass


def select_merger(mergers: List[Merger]) -> Merger:
    """Return the first available backend, in priority order."""
    for merger in mergers:
        if merger.is_available():
            return merger

    raise MergeBackendUnavailableError(
        "No PDF merge tool found. Install Ghostscript "
        "(e.g. 'brew install ghostscript' or 'apt install ghostscript')."
    )
