# app_deploy/api/__init__.py
"""API layer for app-deploy"""

from .exceptions import (
    AppDeployError,
    ValidationError,
    ConfigError,
    TargetNotFoundError,
    StagingError,
    TransportSelectionError,
    ChannelError,
    HTTPPublishError,
    RemoteStageError,
    RemotePublishError,
    RemoteSyncError,
    RemoteInstallError,
    CleanupWarning,
)
from .deployer import Deployer, deploy

__all__ = [
    # Main classes
    "Deployer",

    # Convenience functions
    "deploy",

    # Exceptions
    "AppDeployError",
    "ValidationError",
    "ConfigError",
    "TargetNotFoundError",
    "StagingError",
    "TransportSelectionError",
    "ChannelError",
    "HTTPPublishError",
    "RemoteStageError",
    "RemotePublishError",
    "RemoteSyncError",
    "RemoteInstallError",
    "CleanupWarning",
]
