"""
scanner.py - Directory listing
Single responsibility: name the immediate subdirectories of a path.
"""
import os

from flash.errors import StorageError


def list_subdirectories(path: str) -> list[str]:
    """Return names of direct child directories. Order is unspecified."""
    try:
        with os.scandir(path) as entries:
            return [e.name for e in entries if e.is_dir()]
    except OSError as e:
        raise StorageError(f"Cannot list {path}: {e}") from e
