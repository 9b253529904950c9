"""
Path helpers for writing parser output next to user-supplied statement names.
"""
import re
from pathlib import Path
from typing import Union


def validate_path_for_write(path: Union[str, Path], base_dir: Union[str, Path]) -> Path:
    """Resolve a path that may not exist yet; it must stay within base_dir."""
    resolved = Path(path).resolve()
    base_resolved = Path(base_dir).resolve()
    if not resolved.is_relative_to(base_resolved):
        raise ValueError(f"Path traversal detected: {path}")
    return resolved


def sanitize_filename(filename: str, max_length: int = 255) -> str:
    """
    Strip directories and characters that are unsafe in file names.

    'sub/../выписка:март?.pdf' -> 'выпискамарт.pdf'
    """
    filename = Path(filename).name
    filename = re.sub(r'[<>:"|?*\x00-\x1f]', '', filename)
    filename = filename.strip('. ')[:max_length]
    return filename or "statement"
