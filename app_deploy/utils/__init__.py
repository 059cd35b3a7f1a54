# app_deploy/utils/__init__.py
"""Utility functions for app-deploy"""

from .async_utils import run_async
from .file_utils import (
    is_url,
    filename_from_url,
    target_path_flavour,
    join_target_path,
    relative_to,
    format_size,
)

__all__ = [
    "run_async",
    "is_url",
    "filename_from_url",
    "target_path_flavour",
    "join_target_path",
    "relative_to",
    "format_size",
]
