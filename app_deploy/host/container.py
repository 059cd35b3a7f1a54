# app_deploy/host/container.py
"""Target host backed by a local container engine"""

import asyncio
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from .base import TargetHost
from ..constants import DEFAULT_REMOVE_COMMAND
from ..models import TargetConfig
from ..models.config import TargetSettings
from ..services.config_service import ConfigService
from ..utils.file_utils import join_target_path, relative_to

logger = logging.getLogger(__name__)


class ContainerHost(TargetHost):
    """Targets are containers described in the project configuration

    Path mapping follows the configured shared folders; files that are not
    shared are copied in and removed with the container engine CLI.
    """

    def __init__(self, config_service: Optional[ConfigService] = None):
        """
        Initialize container host

        Args:
            config_service: Configuration source (default: project config)
        """
        self.config_service = config_service or ConfigService()

    def settings(self, target: str) -> TargetSettings:
        return self.config_service.get_target(target)

    def get_target_config(self, target: str) -> TargetConfig:
        return self.settings(target).to_target_config()

    def get_staging_dir(self, target: str) -> str:
        return self.settings(target).staging_dir

    def get_credentials(self, target: str) -> Tuple[str, str]:
        settings = self.settings(target)
        return settings.username or "", settings.password or ""

    def map_path(self, target: str, local_path: Path) -> str:
        local_path = Path(local_path).resolve()

        for host_folder, target_folder in self.settings(target).shared_folders.items():
            relative = relative_to(local_path, Path(host_folder).expanduser().resolve())
            if relative is not None:
                return join_target_path(target_folder, *relative.parts)

        return ""

    async def copy_in(self, target: str, local_path: Path, target_path: str) -> None:
        settings = self.settings(target)
        command = [
            settings.docker_command, "cp",
            str(local_path),
            f"{settings.container}:{target_path}",
        ]
        await self._run(command)

    async def remove_file(self, target: str, target_path: str) -> None:
        settings = self.settings(target)
        command = [
            settings.docker_command, "exec", settings.container,
            *DEFAULT_REMOVE_COMMAND, target_path,
        ]
        await self._run(command)

    async def _run(self, command: List[str]) -> str:
        """Run a container engine command in an executor

        Raises:
            OSError: If the command cannot be started or exits non-zero
        """
        logger.debug("Running: %s", " ".join(command))

        def _execute():
            return subprocess.run(command, capture_output=True, text=True)

        result = await asyncio.get_event_loop().run_in_executor(None, _execute)

        if result.returncode != 0:
            message = (result.stderr or result.stdout or "").strip()
            raise OSError(f"{command[0]} {command[1]} failed ({result.returncode}): {message}")

        return result.stdout
