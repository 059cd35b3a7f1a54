"""Result models for operations"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .artifact import StagedArtifact
from .request import DeploymentRequest


@dataclass
class SequenceOutcome:
    """Progress of the publish, synchronize and install stages"""

    published: bool = False
    synchronized: bool = False
    installed: bool = False
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.published and self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "published": self.published,
            "synchronized": self.synchronized,
            "installed": self.installed,
        }
        if self.error:
            data["error"] = self.error
        return data


@dataclass
class DeployResult:
    """Deployment operation result"""

    request: DeploymentRequest
    transport: str
    outcome: SequenceOutcome
    staged: Optional[StagedArtifact] = None
    duration: float = 0.0
    messages: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.outcome.success

    @property
    def target(self) -> str:
        return self.request.target_host

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "success": self.success,
            "target": self.target,
            "transport": self.transport,
            "outcome": self.outcome.to_dict(),
            "duration": self.duration,
        }
        if self.staged:
            data["staged_path"] = self.staged.resolved_target_path
            data["was_copied"] = self.staged.was_copied
        return data
