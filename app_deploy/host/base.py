# app_deploy/host/base.py
"""Collaborator interfaces consumed by the orchestrator"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from ..models import (
    ArtifactMetadata,
    InvocationResult,
    OperationDescriptor,
    TargetConfig,
)


class TargetConfigProvider(ABC):
    """Supplies target settings"""

    @abstractmethod
    def get_target_config(self, target: str) -> TargetConfig:
        """
        Get configuration of a target

        Args:
            target: Target host identifier

        Returns:
            Target configuration

        Raises:
            TargetNotFoundError: If the target is unknown
        """
        pass


class PathMapper(ABC):
    """Translates host paths into paths inside the target"""

    @abstractmethod
    def map_path(self, target: str, local_path: Path) -> str:
        """
        Map a local path

        Args:
            target: Target host identifier
            local_path: Path on the orchestrating host

        Returns:
            Path valid inside the target, or "" when no mapping exists
        """
        pass


class FileCopyIn(ABC):
    """Moves files into and out of the target filesystem"""

    @abstractmethod
    async def copy_in(self, target: str, local_path: Path, target_path: str) -> None:
        """
        Copy a local file to a path inside the target

        Raises:
            OSError: On any copy failure
        """
        pass

    @abstractmethod
    async def remove_file(self, target: str, target_path: str) -> None:
        """Delete a file inside the target"""
        pass


class CredentialStore(ABC):
    """Stored credentials for password-based targets"""

    @abstractmethod
    def get_credentials(self, target: str) -> Tuple[str, str]:
        """Return (username, password)"""
        pass


class RemoteInvocationChannel(ABC):
    """Runs operation descriptors inside the target's server context"""

    @abstractmethod
    async def invoke(self, target: str, descriptor: OperationDescriptor) -> InvocationResult:
        """
        Execute one operation and wait for it to finish

        Args:
            target: Target host identifier
            descriptor: Operation name and arguments

        Returns:
            Invocation result; faults are reported, not raised
        """
        pass


class ArtifactMetadataReader(ABC):
    """Reads the manifest embedded in a staged package"""

    @abstractmethod
    async def read_metadata(self, target: str, staged_path: str) -> ArtifactMetadata:
        pass


class TargetHost(TargetConfigProvider, PathMapper, FileCopyIn, CredentialStore, ABC):
    """Everything the orchestrator needs from the machine hosting a target"""

    @abstractmethod
    def get_staging_dir(self, target: str) -> str:
        """Fixed staging directory inside the target"""
        pass
