"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from ..constants import (
    CONFIG_VERSION,
    CredentialMode,
    DEFAULT_DEV_SERVICES_PORT,
    DEFAULT_SERVER_INSTANCE,
    DEFAULT_TARGET_STAGING_DIR,
    DEFAULT_DOCKER_COMMAND,
    DEFAULT_RUNNER_COMMAND,
)
from .target import TargetConfig


@dataclass
class TargetSettings:
    """Configuration for a deployment target"""

    name: str
    description: Optional[str] = None

    # Container running the target server, defaults to the target name
    container: Optional[str] = None

    # Authentication
    credential_mode: str = CredentialMode.USER_PASSWORD.value
    username: Optional[str] = None
    password: Optional[str] = None

    # Developer services endpoint
    developer_services_tls: bool = False
    developer_services_port: int = DEFAULT_DEV_SERVICES_PORT
    server_instance: str = DEFAULT_SERVER_INSTANCE
    network_address: Optional[str] = None
    validate_certificate: bool = False

    # Host folder -> path inside the target
    shared_folders: Dict[str, str] = field(default_factory=dict)
    staging_dir: str = DEFAULT_TARGET_STAGING_DIR

    # Remote execution
    docker_command: str = DEFAULT_DOCKER_COMMAND
    runner_command: List[str] = field(default_factory=lambda: list(DEFAULT_RUNNER_COMMAND))

    def __post_init__(self):
        """Validate target configuration"""
        try:
            CredentialMode(self.credential_mode)
        except ValueError:
            allowed = ", ".join(m.value for m in CredentialMode)
            raise ValueError(
                f"Target '{self.name}' has invalid credential_mode "
                f"'{self.credential_mode}' (expected one of: {allowed})"
            )

        if CredentialMode(self.credential_mode).is_password_based and not self.username:
            raise ValueError(f"Target '{self.name}' requires 'username' for {self.credential_mode}")

        if not self.container:
            self.container = self.name

    def to_target_config(self) -> TargetConfig:
        """Project the settings the orchestrator reads"""
        return TargetConfig(
            name=self.name,
            credential_mode=CredentialMode(self.credential_mode),
            developer_services_tls=self.developer_services_tls,
            developer_services_port=self.developer_services_port,
            server_instance=self.server_instance,
            network_address=self.network_address,
            validate_certificate=self.validate_certificate,
        )

    def get_display_info(self) -> str:
        """Get display information for the target"""
        scheme = "https" if self.developer_services_tls else "http"
        host = self.network_address or self.name
        return f"{self.container} ({scheme}://{host}:{self.developer_services_port}/{self.server_instance})"

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> 'TargetSettings':
        """Create from dictionary"""
        data = data or {}
        runner = data.get("runner_command", DEFAULT_RUNNER_COMMAND)
        if isinstance(runner, str):
            runner = runner.split()

        return cls(
            name=name,
            description=data.get("description"),
            container=data.get("container"),
            credential_mode=data.get("credential_mode", CredentialMode.USER_PASSWORD.value),
            username=data.get("username"),
            password=data.get("password"),
            developer_services_tls=bool(data.get("developer_services_tls", False)),
            developer_services_port=int(data.get("developer_services_port", DEFAULT_DEV_SERVICES_PORT)),
            server_instance=data.get("server_instance", DEFAULT_SERVER_INSTANCE),
            network_address=data.get("network_address"),
            validate_certificate=bool(data.get("validate_certificate", False)),
            shared_folders=dict(data.get("shared_folders") or {}),
            staging_dir=data.get("staging_dir", DEFAULT_TARGET_STAGING_DIR),
            docker_command=data.get("docker_command", DEFAULT_DOCKER_COMMAND),
            runner_command=list(runner),
        )


@dataclass
class Config:
    """Project configuration"""

    version: str = CONFIG_VERSION
    temp_dir: Optional[str] = None
    targets: Dict[str, TargetSettings] = field(default_factory=dict)

    def get_target(self, name: str) -> Optional[TargetSettings]:
        """Get target by name"""
        return self.targets.get(name)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Config':
        """Create from dictionary"""
        data = data or {}
        targets = {
            name: TargetSettings.from_dict(name, target_data)
            for name, target_data in (data.get("targets") or {}).items()
        }
        return cls(
            version=str(data.get("version", CONFIG_VERSION)),
            temp_dir=data.get("temp_dir"),
            targets=targets,
        )
