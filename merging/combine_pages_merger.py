import os
import subprocess
from pathlib import Path
from typing import Sequence

from merging.merger_base import Merger, MergeError

JOIN_PATH = "/System/Library/Automator/Combine PDF Pages.action/Contents/Resources/join.py"


class CombinePagesMerger(Merger):
    """macOS Automator "Combine PDF Pages" action, run as a script."""

    name = "join.py"

    def __init__(self, join_path: str = JOIN_PATH):
        self.join_path = join_path

    def is_available(self) -> bool:
        return os.path.isfile(self.join_path) and os.access(self.join_path, os.X_OK)

    def merge(self, input_paths: Sequence[Path], output_path: Path) -> None:
        cmd = [
            self.join_path,
            "-o",
            str(output_path),
            *[str(p) for p in input_paths],
        ]

        try:
            subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except subprocess.CalledProcessError as e:
            raise MergeError(
                f"join.py failed (rc={e.returncode}): {(e.stderr or b'').decode(errors='ignore').strip()}",
                returncode=e.returncode,
            ) from e
