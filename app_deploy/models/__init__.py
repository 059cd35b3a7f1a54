# app_deploy/models/__init__.py
"""Data models for app-deploy"""

from .request import DeploymentRequest
from .artifact import StagedArtifact, ArtifactMetadata
from .target import TargetConfig, TargetEndpointInfo
from .operation import OperationDescriptor, InvocationResult, PublishOptions, InstallOptions
from .result import SequenceOutcome, DeployResult
from .config import Config, TargetSettings

__all__ = [
    # Request models
    "DeploymentRequest",

    # Artifact models
    "StagedArtifact",
    "ArtifactMetadata",

    # Target models
    "TargetConfig",
    "TargetEndpointInfo",

    # Remote operation models
    "OperationDescriptor",
    "InvocationResult",
    "PublishOptions",
    "InstallOptions",

    # Result models
    "SequenceOutcome",
    "DeployResult",

    # Config models
    "Config",
    "TargetSettings",
]
