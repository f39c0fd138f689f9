"""
Utility file with helpers for turning sample files into sample names.
"""

# ---------------- Packages --------------------
from pathlib import Path
from typing import List, Optional, Union

from snapshot_config.config import Settings

# ---------------- Helper functions --------------------
def sample_name_for_path(path: Union[str, Path], samples_root: Union[str, Path]) -> str:
    """
    Sample name for a file under 'samples_root': the relative path without extension,
    always with '/' separators (e.g. 'Nonanimating/FirstText').
    """
    path, samples_root = Path(path), Path(samples_root)
    try:
        rel = path.relative_to(samples_root)
    except ValueError as e:
        raise ValueError(f"{path} is not inside samples root {samples_root}.") from e
    return rel.with_suffix("").as_posix()

def iter_sample_files(samples_root: Union[str, Path], extension: Optional[str] = None) -> List[Path]:
    """All sample files under 'samples_root' with the given extension, sorted."""
    root = Path(samples_root)
    if not root.is_dir():
        raise FileNotFoundError(f"Samples directory not found: {root}")
    ext = extension or Settings().SAMPLE_EXTENSION
    return sorted(p for p in root.rglob(f"*{ext}") if p.is_file())
