"""Exception definitions for app-deploy API"""

from typing import Optional, TYPE_CHECKING

from ..constants import ErrorCode

if TYPE_CHECKING:
    from ..models.result import SequenceOutcome


class AppDeployError(Exception):
    """Base exception for app-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ValidationError(AppDeployError):
    """Validation error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_FAILED)


class ConfigError(AppDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class TargetNotFoundError(ConfigError):
    """Target missing from configuration"""

    def __init__(self, target: str):
        super().__init__(f"Target not configured: {target}")
        self.error_code = ErrorCode.TARGET_NOT_FOUND
        self.target = target


class StagingError(AppDeployError):
    """Download or copy of the artifact failed"""

    def __init__(self, message: str):
        super().__init__(f"Staging failed: {message}", ErrorCode.STAGING_FAILED)


class TransportSelectionError(AppDeployError):
    """No transport can satisfy the request"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.TRANSPORT_SELECTION_FAILED)


class ChannelError(AppDeployError):
    """Remote invocation channel could not run an operation"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CHANNEL_FAILED)


class HTTPPublishError(AppDeployError):
    """Development endpoint rejected the upload"""

    def __init__(self, status_code: Optional[int], reason: str, detail: Optional[str] = None):
        if status_code is None:
            message = f"HTTP publish failed: {reason}"
        else:
            message = f"HTTP publish failed: {status_code} {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, ErrorCode.HTTP_PUBLISH_FAILED)
        self.status_code = status_code
        self.reason = reason
        self.detail = detail


class RemoteStageError(AppDeployError):
    """Base class for faults raised by a remote stage"""

    stage = "remote"
    code = None

    def __init__(self, fault: str, outcome: Optional["SequenceOutcome"] = None):
        super().__init__(f"{self.stage.capitalize()} stage failed: {fault}", self.code)
        self.fault = fault
        self.outcome = outcome


class RemotePublishError(RemoteStageError):
    stage = "publish"
    code = ErrorCode.REMOTE_PUBLISH_FAILED


class RemoteSyncError(RemoteStageError):
    stage = "synchronize"
    code = ErrorCode.REMOTE_SYNC_FAILED


class RemoteInstallError(RemoteStageError):
    stage = "install"
    code = ErrorCode.REMOTE_INSTALL_FAILED


class CleanupWarning(UserWarning):
    """Failure to delete a staged copy; reported, never raised"""
    pass
