# app_deploy/transports/factory.py
"""Transport selection"""

from typing import Dict, Iterable

from .base import Transport
from ..api.exceptions import TransportSelectionError
from ..constants import TransportPreference
from ..models import DeploymentRequest


class TransportSelector:
    """Picks exactly one transport for a request"""

    def __init__(self, transports: Dict[TransportPreference, Transport]):
        """
        Initialize selector

        Args:
            transports: Registry of available transports
        """
        self._transports = dict(transports)

    def select(self, request: DeploymentRequest) -> Transport:
        """
        Select the transport for a request

        DIRECT_HTTP selects the HTTP transport; every other preference uses
        remote execution.

        Raises:
            TransportSelectionError: If the chosen transport is not registered
        """
        if request.transport == TransportPreference.DIRECT_HTTP:
            preference = TransportPreference.DIRECT_HTTP
        else:
            preference = TransportPreference.REMOTE

        transport = self._transports.get(preference)
        if transport is None:
            raise TransportSelectionError(
                f"No transport registered for '{preference.value}' "
                f"(available: {', '.join(self.get_supported_types()) or 'none'})"
            )
        return transport

    def get_supported_types(self) -> Iterable[str]:
        """Names of registered transport preferences"""
        return [p.value for p in self._transports]
