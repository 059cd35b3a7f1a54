# app_deploy/core/artifact_resolver.py
"""Artifact staging: download, path mapping and copy-in"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Callable, List, Optional

import aiofiles
import httpx

from ..api.exceptions import StagingError, CleanupWarning
from ..constants import DEFAULT_CHUNK_SIZE, DEFAULT_TEMP_DIR_NAME, ENV_TEMP_DIR
from ..host.base import TargetHost
from ..models import StagedArtifact
from ..utils.file_utils import is_url, filename_from_url, join_target_path, relative_to, format_size

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def default_temp_root() -> Path:
    """Host temp area used for downloads"""
    base = os.environ.get(ENV_TEMP_DIR) or tempfile.gettempdir()
    return Path(base) / DEFAULT_TEMP_DIR_NAME


class ArtifactResolver:
    """Turns an artifact reference into a path readable inside the target"""

    def __init__(self,
                 host: TargetHost,
                 temp_root: Optional[Path] = None,
                 client_factory: Callable[..., httpx.AsyncClient] = httpx.AsyncClient):
        """
        Initialize resolver

        Args:
            host: Target host collaborator (path mapping and copy-in)
            temp_root: Host directory for downloads
            client_factory: Factory for the download HTTP client
        """
        self.host = host
        self.temp_root = Path(temp_root) if temp_root else default_temp_root()
        self.client_factory = client_factory

    def download_path(self, url: str, target: str) -> Path:
        """
        Deterministic download location for a URL and target

        Raises:
            ValueError: If the URL has no usable file name or the location
                would fall outside the target's temp folder
        """
        folder_name = _UNSAFE_CHARS.sub("_", target).strip(".") or "_"
        folder = self.temp_root / folder_name
        path = folder / filename_from_url(url)

        if relative_to(path.resolve(), folder.resolve()) is None:
            raise ValueError(f"Download location {path} is outside {folder}")
        return path

    async def resolve(self, reference: str, target: str) -> StagedArtifact:
        """
        Stage an artifact for a target

        Args:
            reference: Local path or http(s) URL
            target: Target host identifier

        Returns:
            Staged artifact

        Raises:
            StagingError: If the download or copy fails
        """
        if is_url(reference):
            local_file = await self._download(reference, target)
            try:
                return await self._place(reference, local_file, target, downloaded=True)
            except StagingError:
                self._unlink(local_file)
                raise

        local_file = Path(reference).expanduser()
        if not local_file.is_file():
            raise StagingError(f"Artifact not found: {reference}")

        return await self._place(reference, local_file, target, downloaded=False)

    async def release(self, staged: StagedArtifact, target: str) -> List[CleanupWarning]:
        """
        Remove staged copies

        Failures are logged and returned, never raised.

        Args:
            staged: Artifact returned by resolve()
            target: Target host identifier

        Returns:
            Cleanup warnings
        """
        warnings = []
        if not staged.was_copied:
            return warnings

        if staged.copied_into_target:
            try:
                await self.host.remove_file(target, staged.resolved_target_path)
                logger.debug("Removed staged copy %s", staged.resolved_target_path)
            except OSError as e:
                warnings.append(CleanupWarning(
                    f"Could not remove {staged.resolved_target_path} from {target}: {e}"
                ))

        if staged.local_copy is not None:
            warning = self._unlink(staged.local_copy)
            if warning:
                warnings.append(warning)

        for warning in warnings:
            logger.warning("%s", warning)

        return warnings

    async def _download(self, url: str, target: str) -> Path:
        try:
            destination = self.download_path(url, target)
        except ValueError as e:
            raise StagingError(str(e))

        logger.info("Downloading %s", url)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)

            async with self.client_factory(follow_redirects=True, timeout=None) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    async with aiofiles.open(destination, 'wb') as f:
                        async for chunk in response.aiter_bytes(DEFAULT_CHUNK_SIZE):
                            await f.write(chunk)

        except (httpx.HTTPError, OSError) as e:
            self._unlink(destination)
            raise StagingError(f"Download of {url} failed: {e}")

        logger.debug("Downloaded %s (%s) to %s", url, format_size(destination.stat().st_size), destination)
        return destination

    async def _place(self,
                     reference: str,
                     local_file: Path,
                     target: str,
                     downloaded: bool) -> StagedArtifact:
        local_copy = local_file if downloaded else None

        mapped = self.host.map_path(target, local_file)
        if mapped:
            return StagedArtifact(
                original_reference=reference,
                resolved_target_path=mapped,
                was_copied=downloaded,
                local_copy=local_copy,
            )

        target_path = join_target_path(self.host.get_staging_dir(target), local_file.name)
        logger.info("Copying %s into %s", local_file.name, target)

        try:
            await self.host.copy_in(target, local_file, target_path)
        except OSError as e:
            raise StagingError(f"Copy of {local_file} to {target}:{target_path} failed: {e}")

        return StagedArtifact(
            original_reference=reference,
            resolved_target_path=target_path,
            was_copied=True,
            local_copy=local_copy,
            copied_into_target=True,
        )

    @staticmethod
    def _unlink(path: Path) -> Optional[CleanupWarning]:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            return CleanupWarning(f"Could not remove {path}: {e}")
        return None
