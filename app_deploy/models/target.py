"""Target host models"""

from dataclasses import dataclass
from typing import Optional, Union

from ..constants import (
    CredentialMode,
    DEFAULT_DEV_SERVICES_PORT,
    DEFAULT_SERVER_INSTANCE,
)


@dataclass(frozen=True)
class TargetConfig:
    """Settings reported by the target configuration provider"""

    name: str
    credential_mode: Union[CredentialMode, str] = CredentialMode.USER_PASSWORD
    developer_services_tls: bool = False
    developer_services_port: int = DEFAULT_DEV_SERVICES_PORT
    server_instance: str = DEFAULT_SERVER_INSTANCE
    network_address: Optional[str] = None

    # Keep standard certificate validation for https endpoints
    validate_certificate: bool = False

    def __post_init__(self):
        if not isinstance(self.credential_mode, CredentialMode):
            object.__setattr__(self, "credential_mode", CredentialMode(self.credential_mode))
        object.__setattr__(self, "developer_services_port", int(self.developer_services_port))


@dataclass(frozen=True)
class TargetEndpointInfo:
    """Resolved development endpoint of a target"""

    base_url: str
    tls_enabled: bool
    credential_mode: CredentialMode

    @property
    def scheme(self) -> str:
        return "https" if self.tls_enabled else "http"
