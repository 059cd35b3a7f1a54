# app_deploy/host/channel.py
"""Remote invocation through a runner process inside the container"""

import asyncio
import json
import logging
import subprocess
from typing import Optional

from .base import RemoteInvocationChannel, ArtifactMetadataReader
from ..api.exceptions import ChannelError, ValidationError
from ..constants import OP_READ_APP_INFO
from ..models import (
    ArtifactMetadata,
    InvocationResult,
    OperationDescriptor,
)
from ..services.config_service import ConfigService

logger = logging.getLogger(__name__)


class CommandChannel(RemoteInvocationChannel):
    """Sends each descriptor as JSON on stdin of the target's runner

    The runner executes the operation with the server context of the
    target and prints a JSON object ``{"success", "fault", "warnings",
    "value"}`` as its last line of output.
    """

    def __init__(self, config_service: Optional[ConfigService] = None):
        self.config_service = config_service or ConfigService()

    async def invoke(self, target: str, descriptor: OperationDescriptor) -> InvocationResult:
        settings = self.config_service.get_target(target)
        command = [
            settings.docker_command, "exec", "-i", settings.container,
            *settings.runner_command,
        ]
        payload = json.dumps(descriptor.to_dict())

        logger.debug("Invoking %s on %s", descriptor.name, target)

        def _execute():
            return subprocess.run(command, input=payload, capture_output=True, text=True)

        try:
            result = await asyncio.get_event_loop().run_in_executor(None, _execute)
        except OSError as e:
            raise ChannelError(f"Cannot start runner for {target}: {e}")

        return self._parse(descriptor, result)

    @staticmethod
    def _parse(descriptor: OperationDescriptor,
               result: subprocess.CompletedProcess) -> InvocationResult:
        lines = [line for line in (result.stdout or "").splitlines() if line.strip()]

        if lines:
            try:
                data = json.loads(lines[-1])
            except json.JSONDecodeError:
                data = None
            if isinstance(data, dict):
                return InvocationResult.from_dict(data)

        # Runner died before reporting
        fault = (result.stderr or result.stdout or "").strip() or f"exit code {result.returncode}"
        return InvocationResult(success=False, fault=f"{descriptor.name}: {fault}")


class ChannelMetadataReader(ArtifactMetadataReader):
    """Reads the package manifest by asking the target to inspect the file"""

    def __init__(self, channel: RemoteInvocationChannel):
        self.channel = channel

    async def read_metadata(self, target: str, staged_path: str) -> ArtifactMetadata:
        descriptor = OperationDescriptor(name=OP_READ_APP_INFO, args=(staged_path,))
        result = await self.channel.invoke(target, descriptor)

        if not result.success:
            raise ChannelError(f"Cannot read app info from {staged_path}: {result.fault}")

        value = result.value or {}
        if not isinstance(value, dict):
            raise ValidationError(f"Unexpected app info for {staged_path}: {value!r}")

        return ArtifactMetadata(
            name=value.get("name", ""),
            version=str(value.get("version", "")),
            publisher=value.get("publisher"),
        )
