# merging/merged_document.py

from __future__ import annotations

import os
import signal
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

TEMP_PREFIX = "batch_print_"

# Signals that would otherwise kill the process without unwinding the stack.
CLEANUP_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name)
)


def _raise_exit(signum, _frame):
    raise SystemExit(128 + signum)


@contextmanager
def exit_on_signals() -> Iterator[None]:
    """
    Turn SIGTERM/SIGHUP into SystemExit while the block runs, so `finally`
    clauses (temp file removal) still execute. SIGINT already raises
    KeyboardInterrupt.
    """
    previous = {}
    for signum in CLEANUP_SIGNALS:
        previous[signum] = signal.signal(signum, _raise_exit)
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


@contextmanager
def merged_document(tmp_dir: str | None = None) -> Iterator[Path]:
    """
    Reserve a uniquely named temporary PDF path and delete it on exit,
    whether the block succeeds, raises, or is interrupted.
    """
    fd, name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=".pdf", dir=tmp_dir)
    os.close(fd)
    path = Path(name)
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)
