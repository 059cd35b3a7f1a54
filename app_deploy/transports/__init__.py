# app_deploy/transports/__init__.py
"""Deployment transports for app-deploy"""

from .base import Transport
from .http import DirectHttpTransport, resolve_endpoint, publish_url
from .remote import RemoteExecutionTransport
from .factory import TransportSelector

__all__ = [
    'Transport',
    'DirectHttpTransport',
    'RemoteExecutionTransport',
    'TransportSelector',
    'resolve_endpoint',
    'publish_url',
]
