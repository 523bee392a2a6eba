from pathlib import Path
from typing import List


def make_files(root: Path, *names: str) -> List[str]:
    """
    Create small files under `root` whose content is their own name.

    Returns the paths as strings, in the order given.
    """
    paths = []
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(name.encode())
        paths.append(str(path))
    return paths
