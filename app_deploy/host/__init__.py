# app_deploy/host/__init__.py
"""Target host collaborators for app-deploy"""

from .base import (
    TargetHost,
    TargetConfigProvider,
    PathMapper,
    FileCopyIn,
    CredentialStore,
    RemoteInvocationChannel,
    ArtifactMetadataReader,
)
from .container import ContainerHost
from .channel import CommandChannel, ChannelMetadataReader

__all__ = [
    'TargetHost',
    'TargetConfigProvider',
    'PathMapper',
    'FileCopyIn',
    'CredentialStore',
    'RemoteInvocationChannel',
    'ArtifactMetadataReader',
    'ContainerHost',
    'CommandChannel',
    'ChannelMetadataReader',
]
