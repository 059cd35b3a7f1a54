"""App Deploy - publish, synchronize and install application packages.

Stages a local or downloaded package for a target server and drives the
target's publish, synchronize and install operations, either through a
remote invocation channel or the server's HTTP development endpoint.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Exceptions
from .api.exceptions import (
    AppDeployError,
    ValidationError,
    ConfigError,
    StagingError,
    TransportSelectionError,
    HTTPPublishError,
    RemotePublishError,
    RemoteSyncError,
    RemoteInstallError,
)

# Core API
from .api.deployer import Deployer, deploy

# Data models
from .models import DeploymentRequest, StagedArtifact, SequenceOutcome, DeployResult
from .constants import SyncMode, PackageType, Scope, TransportPreference

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Deployer",
    "deploy",

    # Data models
    "DeploymentRequest",
    "StagedArtifact",
    "SequenceOutcome",
    "DeployResult",
    "SyncMode",
    "PackageType",
    "Scope",
    "TransportPreference",

    # Exceptions
    "AppDeployError",
    "ValidationError",
    "ConfigError",
    "StagingError",
    "TransportSelectionError",
    "HTTPPublishError",
    "RemotePublishError",
    "RemoteSyncError",
    "RemoteInstallError",
]
