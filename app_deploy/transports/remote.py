# app_deploy/transports/remote.py
"""Publish, synchronize and install through the remote invocation channel"""

import logging
from typing import Type

from .base import Transport
from ..api.exceptions import (
    AppDeployError,
    RemoteStageError,
    RemotePublishError,
    RemoteSyncError,
    RemoteInstallError,
)
from ..host.base import RemoteInvocationChannel, ArtifactMetadataReader
from ..models import (
    ArtifactMetadata,
    DeploymentRequest,
    InstallOptions,
    OperationDescriptor,
    PublishOptions,
    SequenceOutcome,
    StagedArtifact,
)
from ..models.operation import (
    publish_descriptor,
    sync_tenant_descriptor,
    sync_app_descriptor,
    install_descriptor,
)

logger = logging.getLogger(__name__)


class RemoteExecutionTransport(Transport):
    """Runs the staged artifact through the target's own server operations

    Stages run in order and the first failure ends the sequence. Install
    does not require sync in the same run.
    """

    name = "remote"

    def __init__(self,
                 channel: RemoteInvocationChannel,
                 metadata_reader: ArtifactMetadataReader):
        self.channel = channel
        self.metadata_reader = metadata_reader

    async def execute(self,
                      request: DeploymentRequest,
                      staged: StagedArtifact) -> SequenceOutcome:
        outcome = SequenceOutcome()
        target = request.target_host

        await self._publish(request, staged, outcome)

        metadata = None
        if request.sync or request.install:
            metadata = await self._read_metadata(target, staged, outcome,
                                                 RemoteSyncError if request.sync else RemoteInstallError)

        if request.sync:
            await self._synchronize(request, metadata, outcome)

        if request.install:
            await self._install(request, metadata, outcome)

        return outcome

    async def _publish(self,
                       request: DeploymentRequest,
                       staged: StagedArtifact,
                       outcome: SequenceOutcome) -> None:
        options = PublishOptions(scope=request.scope, tenant=request.tenant)
        descriptor = publish_descriptor(
            staged.resolved_target_path,
            request.skip_verification,
            request.package_type,
            options,
        )

        logger.info("Publishing %s", staged.resolved_target_path)
        await self._run(request.target_host, descriptor, outcome, RemotePublishError)
        outcome.published = True

    async def _synchronize(self,
                           request: DeploymentRequest,
                           metadata: ArtifactMetadata,
                           outcome: SequenceOutcome) -> None:
        target = request.target_host

        logger.info("Synchronizing tenant %s", request.tenant)
        await self._run(target, sync_tenant_descriptor(request.tenant), outcome, RemoteSyncError)

        descriptor = sync_app_descriptor(metadata.name, metadata.version, request.tenant, request.sync_mode)
        logger.info("Synchronizing %s (%s)", metadata, descriptor.args[-1].value)
        await self._run(target, descriptor, outcome, RemoteSyncError)
        outcome.synchronized = True

    async def _install(self,
                       request: DeploymentRequest,
                       metadata: ArtifactMetadata,
                       outcome: SequenceOutcome) -> None:
        options = InstallOptions(language=request.install_language)
        descriptor = install_descriptor(metadata.name, metadata.version, request.tenant, options)

        logger.info("Installing %s on tenant %s", metadata, request.tenant)
        await self._run(request.target_host, descriptor, outcome, RemoteInstallError)
        outcome.installed = True

    async def _read_metadata(self,
                             target: str,
                             staged: StagedArtifact,
                             outcome: SequenceOutcome,
                             error_cls: Type[RemoteStageError]) -> ArtifactMetadata:
        try:
            return await self.metadata_reader.read_metadata(target, staged.resolved_target_path)
        except AppDeployError as e:
            raise self._fail(error_cls, str(e), outcome)

    async def _run(self,
                   target: str,
                   descriptor: OperationDescriptor,
                   outcome: SequenceOutcome,
                   error_cls: Type[RemoteStageError]) -> None:
        try:
            result = await self.channel.invoke(target, descriptor)
        except AppDeployError as e:
            raise self._fail(error_cls, str(e), outcome)

        for warning in result.warnings:
            logger.warning("%s: %s", descriptor.name, warning)

        if not result.success:
            raise self._fail(error_cls, result.fault or f"{descriptor.name} failed", outcome)

    @staticmethod
    def _fail(error_cls: Type[RemoteStageError],
              fault: str,
              outcome: SequenceOutcome) -> RemoteStageError:
        error = error_cls(fault, outcome)
        outcome.error = str(error)
        return error
