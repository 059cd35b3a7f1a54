"""Deployer API for deployment operations"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from ..constants import (
    TransportPreference,
    MSG_STAGING,
    MSG_STAGED,
    MSG_TRANSPORT_START,
    MSG_TRANSPORT_DONE,
    MSG_DEPLOY_SUCCESS,
    MSG_DEPLOY_FAILED,
)
from ..core import ArtifactResolver
from ..host import (
    TargetHost,
    RemoteInvocationChannel,
    ArtifactMetadataReader,
    ContainerHost,
    CommandChannel,
    ChannelMetadataReader,
)
from ..models import DeploymentRequest, DeployResult, SequenceOutcome, StagedArtifact
from ..services.config_service import ConfigService
from ..transports import (
    Transport,
    DirectHttpTransport,
    RemoteExecutionTransport,
    TransportSelector,
)
from ..utils.async_utils import run_async
from .exceptions import AppDeployError

logger = logging.getLogger(__name__)


class Deployer:
    """Deployer class for deployment operations

    Stages the artifact, selects one transport, runs it and removes any
    staged copy afterwards. Failures are raised to the caller.
    """

    def __init__(self,
                 host: TargetHost,
                 channel: RemoteInvocationChannel,
                 metadata_reader: Optional[ArtifactMetadataReader] = None,
                 resolver: Optional[ArtifactResolver] = None,
                 selector: Optional[TransportSelector] = None,
                 status_callback: Optional[Callable[[str], None]] = None):
        """
        Initialize deployer

        Args:
            host: Target host collaborator
            channel: Remote invocation channel
            metadata_reader: Package manifest reader (default: via channel)
            resolver: Artifact resolver (default: built from host)
            selector: Transport selector (default: remote and direct HTTP)
            status_callback: Receives human-readable status lines
        """
        self.host = host
        self.channel = channel
        self.metadata_reader = metadata_reader or ChannelMetadataReader(channel)
        self.resolver = resolver or ArtifactResolver(host)
        self.selector = selector or TransportSelector({
            TransportPreference.REMOTE: RemoteExecutionTransport(channel, self.metadata_reader),
            TransportPreference.DIRECT_HTTP: DirectHttpTransport(host, host),
        })
        self.status_callback = status_callback

    @classmethod
    def from_config(cls,
                    config_path: Optional[Path] = None,
                    status_callback: Optional[Callable[[str], None]] = None) -> 'Deployer':
        """Create a deployer for the container targets of a project file"""
        config_service = ConfigService(config_path)
        temp_dir = config_service.config.temp_dir
        host = ContainerHost(config_service)

        return cls(
            host=host,
            channel=CommandChannel(config_service),
            resolver=ArtifactResolver(host, temp_root=Path(temp_dir) if temp_dir else None),
            status_callback=status_callback,
        )

    def deploy(self, request: DeploymentRequest) -> DeployResult:
        """
        Deploy an artifact

        Args:
            request: Deployment request

        Returns:
            DeployResult: Deployment result

        Raises:
            AppDeployError: If any step fails
        """
        return run_async(self.deploy_async(request))

    async def deploy_async(self, request: DeploymentRequest) -> DeployResult:
        """Async implementation of deploy"""
        start_time = time.time()
        target = request.target_host
        messages: List[str] = []

        try:
            self._status(messages, MSG_STAGING.format(reference=request.artifact_reference, target=target))
            staged = await self.resolver.resolve(request.artifact_reference, target)
            self._status(messages, MSG_STAGED.format(
                reference=request.artifact_reference,
                path=staged.resolved_target_path,
            ))

            try:
                transport = self.selector.select(request)
                outcome = await self._execute(transport, request, staged, messages)
            finally:
                await self.resolver.release(staged, target)

        except AppDeployError as e:
            self._status(messages, MSG_DEPLOY_FAILED.format(target=target, error=e), logging.ERROR)
            raise

        self._status(messages, MSG_DEPLOY_SUCCESS.format(artifact=staged.filename, target=target))

        return DeployResult(
            request=request,
            transport=transport.name,
            outcome=outcome,
            staged=staged,
            duration=time.time() - start_time,
            messages=messages,
        )

    async def _execute(self,
                       transport: Transport,
                       request: DeploymentRequest,
                       staged: StagedArtifact,
                       messages: List[str]) -> SequenceOutcome:
        target = request.target_host
        self._status(messages, MSG_TRANSPORT_START.format(transport=transport.name, target=target))
        outcome = await transport.execute(request, staged)
        self._status(messages, MSG_TRANSPORT_DONE.format(transport=transport.name, target=target))
        return outcome

    def _status(self, messages: List[str], message: str, level: int = logging.INFO) -> None:
        messages.append(message)
        logger.log(level, message)
        if self.status_callback:
            self.status_callback(message)


def deploy(artifact: str,
           target: str,
           config_path: Optional[Path] = None,
           **options) -> DeployResult:
    """
    Deploy an artifact to a configured target

    This is a convenience function that creates a Deployer from the
    project configuration and performs the deployment.

    Args:
        artifact: Local path or URL of the package
        target: Target name from the configuration
        config_path: Configuration file (searched for when omitted)
        **options: Remaining DeploymentRequest fields

    Returns:
        DeployResult: Deployment result

    Raises:
        AppDeployError: If deployment fails
    """
    request = DeploymentRequest(artifact_reference=artifact, target_host=target, **options)
    return Deployer.from_config(config_path).deploy(request)
