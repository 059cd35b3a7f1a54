# app_deploy/transports/base.py
"""Transport abstract base class"""

from abc import ABC, abstractmethod

from ..models import DeploymentRequest, StagedArtifact, SequenceOutcome


class Transport(ABC):
    """Delivers a staged artifact to a target and runs the requested stages"""

    name = "transport"

    @abstractmethod
    async def execute(self,
                      request: DeploymentRequest,
                      staged: StagedArtifact) -> SequenceOutcome:
        """
        Run the deployment

        Args:
            request: Deployment request
            staged: Artifact placed by the resolver

        Returns:
            Outcome of the stages that ran

        Raises:
            AppDeployError: On any stage failure
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"
