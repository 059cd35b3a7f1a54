# app_deploy/transports/http.py
"""Publishing through the target's HTTP development endpoint"""

import base64
import logging
import socket
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict
from urllib.parse import quote

import aiofiles
import httpx

from .base import Transport
from ..api.exceptions import HTTPPublishError, StagingError
from ..constants import DEV_APPS_ENDPOINT, SCHEMA_UPDATE_MODE
from ..host.base import TargetConfigProvider, CredentialStore
from ..models import (
    DeploymentRequest,
    StagedArtifact,
    SequenceOutcome,
    TargetConfig,
    TargetEndpointInfo,
)

logger = logging.getLogger(__name__)


def is_resolvable(address: str) -> bool:
    """Check whether a network address resolves"""
    try:
        socket.getaddrinfo(address, None)
        return True
    except (socket.gaierror, UnicodeError, OSError):
        return False


def resolve_endpoint(config: TargetConfig,
                     resolver: Callable[[str], bool] = is_resolvable) -> TargetEndpointInfo:
    """
    Build the developer services base URL of a target

    Args:
        config: Target configuration
        resolver: Predicate telling whether an address resolves

    Returns:
        Endpoint information
    """
    scheme = "https" if config.developer_services_tls else "http"

    host = config.name
    if config.network_address and resolver(config.network_address):
        host = config.network_address

    base_url = f"{scheme}://{host}:{config.developer_services_port}/{config.server_instance.strip('/')}"
    return TargetEndpointInfo(
        base_url=base_url,
        tls_enabled=config.developer_services_tls,
        credential_mode=config.credential_mode,
    )


def publish_url(endpoint: TargetEndpointInfo, request: DeploymentRequest) -> str:
    """Upload URL; the tenant is only named for tenant-scoped publishing"""
    url = f"{endpoint.base_url}/{DEV_APPS_ENDPOINT}?SchemaUpdateMode={SCHEMA_UPDATE_MODE}"
    if request.is_tenant_scoped:
        url += f"&tenant={quote(request.tenant, safe='')}"
    return url


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class DirectHttpTransport(Transport):
    """Uploads the artifact to the dev endpoint

    The endpoint publishes and synchronizes in one server-side action, so
    the sync and install flags of a request have no effect here.
    """

    name = "direct-http"

    def __init__(self,
                 config_provider: TargetConfigProvider,
                 credentials: CredentialStore,
                 client_factory: Callable[..., httpx.AsyncClient] = httpx.AsyncClient,
                 resolver: Callable[[str], bool] = is_resolvable):
        """
        Initialize transport

        Args:
            config_provider: Source of target configuration
            credentials: Stored credentials for password-based targets
            client_factory: Factory for the per-request HTTP client
            resolver: Network address resolution check
        """
        self.config_provider = config_provider
        self.credentials = credentials
        self.client_factory = client_factory
        self.resolver = resolver

    async def execute(self,
                      request: DeploymentRequest,
                      staged: StagedArtifact) -> SequenceOutcome:
        config = self.config_provider.get_target_config(request.target_host)
        endpoint = resolve_endpoint(config, self.resolver)
        url = publish_url(endpoint, request)

        if request.sync or request.install:
            logger.info("Sync and install flags are ignored by the %s transport", self.name)

        filename = staged.host_path.name
        try:
            async with aiofiles.open(staged.host_path, 'rb') as f:
                content = await f.read()
        except OSError as e:
            raise StagingError(f"Cannot read {staged.host_path}: {e}")

        headers = self._auth_headers(request.target_host, endpoint)
        files = {filename: (filename, content, "application/octet-stream")}

        verify = config.validate_certificate or not endpoint.tls_enabled
        logger.info("Uploading %s to %s", filename, url)

        async with self.upload_client(verify) as client:
            try:
                response = await client.post(url, headers=headers, files=files)
            except httpx.HTTPError as e:
                raise HTTPPublishError(None, f"{type(e).__name__}: {e}")

        if not 200 <= response.status_code < 300:
            raise HTTPPublishError(
                response.status_code,
                response.reason_phrase,
                detail=response.text.strip() or None,
            )

        logger.info("%s published to %s", filename, request.target_host)
        return SequenceOutcome(published=True)

    @asynccontextmanager
    async def upload_client(self, verify: bool) -> AsyncIterator[httpx.AsyncClient]:
        """Per-request client; a relaxed certificate check never outlives it"""
        if not verify:
            logger.debug("Disabling certificate validation for this upload")

        client = self.client_factory(verify=verify, timeout=None)
        try:
            yield client
        finally:
            await client.aclose()
            if not verify:
                logger.debug("Restoring certificate validation")

    def _auth_headers(self, target: str, endpoint: TargetEndpointInfo) -> Dict[str, str]:
        if not endpoint.credential_mode.is_password_based:
            # Windows: the caller's default identity, no explicit header
            return {}

        username, password = self.credentials.get_credentials(target)
        return {"Authorization": basic_auth_header(username, password)}
