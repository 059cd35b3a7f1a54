"""Deployment request model"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, Union, Any

from ..api.exceptions import ValidationError
from ..constants import (
    SyncMode,
    PackageType,
    Scope,
    TransportPreference,
    DEFAULT_TENANT,
)


def _coerce_enum(enum_cls: Type[Enum], value: Any, field_name: str) -> Enum:
    """Accept an enum member or its value (case-insensitive)"""
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        for member in enum_cls:
            if member.value.lower() == value.lower() or member.name.lower() == value.lower():
                return member

    allowed = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"Invalid {field_name}: {value!r} (expected one of: {allowed})")


@dataclass(frozen=True)
class DeploymentRequest:
    """Immutable description of one deployment"""

    artifact_reference: str
    target_host: str
    skip_verification: bool = False
    sync: bool = False
    sync_mode: Optional[Union[SyncMode, str]] = None
    install: bool = False
    tenant: str = DEFAULT_TENANT
    package_type: Union[PackageType, str] = PackageType.EXTENSION
    scope: Optional[Union[Scope, str]] = None
    transport: Union[TransportPreference, str] = TransportPreference.REMOTE
    install_language: Optional[str] = None

    def __post_init__(self):
        """Validate and normalize fields"""
        if not self.artifact_reference or not str(self.artifact_reference).strip():
            raise ValidationError("Artifact reference is required")
        if not self.target_host or not self.target_host.strip():
            raise ValidationError("Target host is required")
        if not self.tenant or not self.tenant.strip():
            raise ValidationError("Tenant must not be empty")

        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "artifact_reference", str(self.artifact_reference))
        object.__setattr__(
            self, "package_type", _coerce_enum(PackageType, self.package_type, "package type")
        )
        object.__setattr__(
            self, "transport", _coerce_enum(TransportPreference, self.transport, "transport")
        )
        if self.sync_mode is not None:
            object.__setattr__(self, "sync_mode", _coerce_enum(SyncMode, self.sync_mode, "sync mode"))
        if self.scope is not None:
            object.__setattr__(self, "scope", _coerce_enum(Scope, self.scope, "scope"))
        if self.install_language is not None and not self.install_language.strip():
            object.__setattr__(self, "install_language", None)

    @property
    def uses_direct_endpoint(self) -> bool:
        return self.transport == TransportPreference.DIRECT_HTTP

    @property
    def is_tenant_scoped(self) -> bool:
        return self.scope == Scope.TENANT

    def to_dict(self):
        """Convert to dictionary"""
        return {
            "artifact_reference": self.artifact_reference,
            "target_host": self.target_host,
            "skip_verification": self.skip_verification,
            "sync": self.sync,
            "sync_mode": self.sync_mode.value if self.sync_mode else None,
            "install": self.install,
            "tenant": self.tenant,
            "package_type": self.package_type.value,
            "scope": self.scope.value if self.scope else None,
            "transport": self.transport.value,
            "install_language": self.install_language,
        }
