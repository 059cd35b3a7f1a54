"""Artifact models"""

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional

from packaging.version import Version, InvalidVersion

from ..api.exceptions import ValidationError


@dataclass(frozen=True)
class StagedArtifact:
    """An artifact placed where the target can read it"""

    original_reference: str
    resolved_target_path: str
    was_copied: bool

    # Host-side download, removed during cleanup
    local_copy: Optional[Path] = None

    # True when the file was copied into the target's staging directory
    copied_into_target: bool = False

    @property
    def filename(self) -> str:
        return PurePath(self.resolved_target_path.replace("\\", "/")).name

    @property
    def host_path(self) -> Path:
        """The artifact as a file on the orchestrating host"""
        if self.local_copy is not None:
            return self.local_copy
        return Path(self.original_reference).expanduser()


@dataclass(frozen=True)
class ArtifactMetadata:
    """Name and version declared in a package manifest"""

    name: str
    version: str
    publisher: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValidationError("Artifact manifest has no name")
        try:
            Version(self.version)
        except (InvalidVersion, TypeError):
            raise ValidationError(f"Invalid artifact version: {self.version!r}")

    def __str__(self) -> str:
        return f"{self.name} {self.version}"
