# app_deploy/services/__init__.py
"""Business logic services for app-deploy"""

from .config_service import ConfigService, find_config_file

__all__ = [
    "ConfigService",
    "find_config_file",
]
