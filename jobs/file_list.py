import sys
from pathlib import Path
from typing import List, Optional, Sequence

from jobs.job_errors import FileListNotFoundError


def read_file_list(path: str) -> List[str]:
    """
    Return the paths listed in `path`, one per line.

    Empty lines and lines whose first character is '#' are skipped. Nothing else
    is stripped: an indented '#' line is treated as a path.
    """
    list_path = Path(path)
    if not list_path.is_file():
        raise FileListNotFoundError(path)

    entries = []
    with list_path.open(encoding="utf-8", newline="\n") as fh:
        for line in fh:
            line = line.rstrip("\r\n")
            if not line or line.startswith("#"):
                continue
            entries.append(line)
    return entries


def expand_file_list(file_list: Optional[str], files: Sequence[str]) -> List[str]:
    if file_list is None:
        return list(files)
    return read_file_list(file_list) + list(files)


def filter_existing(files: Sequence[str]) -> List[str]:
    """Keep files that exist as regular files, warning about each one that doesn't."""
    valid = []
    for file in files:
        if not Path(file).is_file():
            print(f"Warning: '{file}' not found, skipping.", file=sys.stderr)
            continue
        valid.append(file)
    return valid
