# app_deploy/utils/file_utils.py
"""File operation utilities"""

import re
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from typing import Optional, Type
from urllib.parse import urlsplit, unquote

_WINDOWS_PATH = re.compile(r"^[A-Za-z]:[\\/]|\\")


def is_url(reference: str) -> bool:
    """Check whether an artifact reference is an http(s) URL"""
    return urlsplit(reference).scheme.lower() in ("http", "https")


def filename_from_url(url: str) -> str:
    """
    Derive a file name from a URL

    The path component is URL-decoded first and the last segment is taken,
    with both ``/`` and ``\\`` as separators; query string and fragment
    are dropped.

    Args:
        url: Source URL

    Returns:
        File name

    Raises:
        ValueError: If the URL path has no usable basename
    """
    path = unquote(urlsplit(url).path)
    name = re.split(r"[\\/]", path)[-1]
    if name in ("", ".", ".."):
        raise ValueError(f"Cannot derive a file name from URL: {url}")
    return name


def target_path_flavour(path: str) -> Type[PurePath]:
    """Pick Windows or POSIX semantics for a path inside a target"""
    return PureWindowsPath if _WINDOWS_PATH.search(path) else PurePosixPath


def join_target_path(base: str, *parts: str) -> str:
    """Join path parts using the separator style of ``base``"""
    flavour = target_path_flavour(base)
    return str(flavour(base, *parts))


def relative_to(path: Path, folder: Path) -> Optional[PurePath]:
    """Return ``path`` relative to ``folder`` or None if outside it"""
    try:
        return path.relative_to(folder)
    except ValueError:
        return None


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"
