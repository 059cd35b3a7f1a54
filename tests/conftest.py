"""Shared fixtures and collaborator stubs"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import httpx
import pytest

from app_deploy.core import ArtifactResolver
from app_deploy.host.base import TargetHost, RemoteInvocationChannel
from app_deploy.host.channel import ChannelMetadataReader
from app_deploy.models import InvocationResult, OperationDescriptor, TargetConfig

STAGING_DIR = "/run/my/apps"


class StubHost(TargetHost):
    """In-memory target host"""

    def __init__(self,
                 configs: Optional[Dict[str, TargetConfig]] = None,
                 mappings: Optional[Dict[str, str]] = None,
                 credentials: Tuple[str, str] = ("admin", "P@ssw0rd"),
                 fail_copy: bool = False,
                 fail_remove: bool = False):
        self.configs = configs or {"bcserver": TargetConfig(name="bcserver")}
        self.mappings = mappings or {}
        self.credentials = credentials
        self.fail_copy = fail_copy
        self.fail_remove = fail_remove
        self.copied: List[Tuple[Path, str]] = []
        self.removed: List[str] = []

    def get_target_config(self, target: str) -> TargetConfig:
        return self.configs[target]

    def get_staging_dir(self, target: str) -> str:
        return STAGING_DIR

    def get_credentials(self, target: str) -> Tuple[str, str]:
        return self.credentials

    def map_path(self, target: str, local_path: Path) -> str:
        return self.mappings.get(str(local_path), "")

    async def copy_in(self, target: str, local_path: Path, target_path: str) -> None:
        if self.fail_copy:
            raise OSError("container not running")
        assert Path(local_path).is_file()
        self.copied.append((Path(local_path), target_path))

    async def remove_file(self, target: str, target_path: str) -> None:
        if self.fail_remove:
            raise OSError("access denied")
        self.removed.append(target_path)


class StubChannel(RemoteInvocationChannel):
    """Records descriptors; results can be overridden per operation name"""

    def __init__(self,
                 results: Optional[Dict[str, InvocationResult]] = None,
                 app_info: Optional[dict] = None):
        self.results = results or {}
        self.app_info = app_info or {"name": "MyApp", "version": "1.0.0.0", "publisher": "Contoso"}
        self.calls: List[OperationDescriptor] = []

    async def invoke(self, target: str, descriptor: OperationDescriptor) -> InvocationResult:
        self.calls.append(descriptor)
        if descriptor.name in self.results:
            return self.results[descriptor.name]
        if descriptor.name == "read_app_info":
            return InvocationResult(success=True, value=dict(self.app_info))
        return InvocationResult(success=True)

    @property
    def operations(self) -> List[str]:
        return [c.name for c in self.calls if c.name != "read_app_info"]

    def call(self, name: str) -> OperationDescriptor:
        return next(c for c in self.calls if c.name == name)


class MockClientFactory:
    """httpx.AsyncClient factory routed to a MockTransport handler"""

    def __init__(self, handler):
        self.handler = handler
        self.calls: List[dict] = []
        self.clients: List[httpx.AsyncClient] = []

    def __call__(self, **kwargs) -> httpx.AsyncClient:
        self.calls.append(dict(kwargs))
        kwargs.pop("verify", None)
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler), **kwargs)
        self.clients.append(client)
        return client


@pytest.fixture
def host():
    return StubHost()


@pytest.fixture
def channel():
    return StubChannel()


@pytest.fixture
def metadata_reader(channel):
    return ChannelMetadataReader(channel)


@pytest.fixture
def app_file(tmp_path):
    path = tmp_path / "src" / "MyApp_1.0.0.0.app"
    path.parent.mkdir()
    path.write_bytes(b"NAVX\x00app-bytes")
    return path


@pytest.fixture
def download_factory():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"downloaded-app")

    return MockClientFactory(handler)


@pytest.fixture
def resolver(host, tmp_path, download_factory):
    return ArtifactResolver(host, temp_root=tmp_path / "temp", client_factory=download_factory)
