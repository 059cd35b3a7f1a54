"""Remote operation messages"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..constants import (
    PackageType,
    Scope,
    SyncMode,
    DEFAULT_SYNC_MODE,
    OP_PUBLISH_APP,
    OP_SYNC_TENANT,
    OP_SYNC_APP,
    OP_INSTALL_APP,
)


@dataclass(frozen=True)
class OperationDescriptor:
    """A named unit of work plus its ordered arguments"""

    name: str
    args: Tuple[Any, ...] = ()
    options: Tuple[Tuple[str, Any], ...] = ()

    @property
    def options_dict(self) -> Dict[str, Any]:
        return dict(self.options)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the channel (enum members become their values)"""
        return {
            "operation": self.name,
            "args": [_plain(a) for a in self.args],
            "options": {k: _plain(v) for k, v in self.options},
        }


@dataclass
class InvocationResult:
    """What the channel reports back for one descriptor"""

    success: bool
    fault: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    value: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InvocationResult":
        return cls(
            success=bool(data.get("success", False)),
            fault=data.get("fault") or data.get("error"),
            warnings=list(data.get("warnings") or []),
            value=data.get("value"),
        )


@dataclass(frozen=True)
class PublishOptions:
    """Optional publish arguments"""

    scope: Optional[Scope] = None
    tenant: Optional[str] = None

    def to_arguments(self) -> Tuple[Tuple[str, Any], ...]:
        # scope first, tenant only for tenant-scoped publishing
        options = []
        if self.scope is not None:
            options.append(("scope", self.scope))
            if self.scope == Scope.TENANT and self.tenant:
                options.append(("tenant", self.tenant))
        return tuple(options)


@dataclass(frozen=True)
class InstallOptions:
    """Optional install arguments"""

    language: Optional[str] = None

    def to_arguments(self) -> Tuple[Tuple[str, Any], ...]:
        if self.language:
            return (("language", self.language),)
        return ()


def publish_descriptor(path: str,
                       skip_verification: bool,
                       package_type: PackageType,
                       options: PublishOptions) -> OperationDescriptor:
    return OperationDescriptor(
        name=OP_PUBLISH_APP,
        args=(path, skip_verification, package_type),
        options=options.to_arguments(),
    )


def sync_tenant_descriptor(tenant: str) -> OperationDescriptor:
    return OperationDescriptor(name=OP_SYNC_TENANT, args=(tenant,), options=(("force", True),))


def sync_app_descriptor(name: str,
                        version: str,
                        tenant: str,
                        mode: Optional[SyncMode] = None) -> OperationDescriptor:
    return OperationDescriptor(
        name=OP_SYNC_APP,
        args=(name, version, tenant, mode or DEFAULT_SYNC_MODE),
    )


def install_descriptor(name: str,
                       version: str,
                       tenant: str,
                       options: InstallOptions) -> OperationDescriptor:
    return OperationDescriptor(
        name=OP_INSTALL_APP,
        args=(name, version, tenant),
        options=options.to_arguments(),
    )


def _plain(value: Any) -> Any:
    return getattr(value, "value", value)
