import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from merging.merger_base import Merger, MergeError


class GhostscriptMerger(Merger):
    name = "ghostscript"

    def __init__(self, gs_path: str = "gs"):
        self.gs_path = gs_path

    def is_available(self) -> bool:
        return shutil.which(self.gs_path) is not None

    def merge(self, input_paths: Sequence[Path], output_path: Path) -> None:
        cmd = [
            self.gs_path,
            "-dBATCH",
            "-dNOPAUSE",
            "-q",
            "-sDEVICE=pdfwrite",
            f"-sOutputFile={output_path}",
            *[str(p) for p in input_paths],
        ]

        proc = subprocess.run(cmd, capture_output=True, text=True)
        if proc.returncode != 0:
            out = (proc.stdout or "") + (proc.stderr or "")
            raise MergeError(
                f"Ghostscript merge failed (rc={proc.returncode}): {out.strip()}",
                returncode=proc.returncode,
            )
