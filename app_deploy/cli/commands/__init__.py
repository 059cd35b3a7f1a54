# app_deploy/cli/commands/__init__.py
"""CLI commands"""

from . import deploy
from . import targets

__all__ = [
    "deploy",
    "targets",
]
