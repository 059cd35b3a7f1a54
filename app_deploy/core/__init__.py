# app_deploy/core/__init__.py
"""Core staging logic for app-deploy"""

from .artifact_resolver import ArtifactResolver, default_temp_root

__all__ = [
    "ArtifactResolver",
    "default_temp_root",
]
