"""
File permission probes.

Thin wrappers around os.access that never raise: a path that is missing
or cannot be queried is reported as not accessible.
"""

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def _access(path: PathLike, mode: int) -> bool:
    try:
        return os.access(os.fspath(path), mode)
    except (OSError, TypeError, ValueError):
        return False


def is_readable(path: PathLike) -> bool:
    """
    Check whether the current user can read a file or directory.

    Args:
        path: File or directory path

    Returns:
        True if the path exists and is readable
    """
    return _access(path, os.R_OK)


def is_writable(path: PathLike) -> bool:
    """
    Check whether the current user can write a file or directory.

    Args:
        path: File or directory path

    Returns:
        True if the path exists and is writable
    """
    return _access(path, os.W_OK)
