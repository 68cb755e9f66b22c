"""
Transport Module - Black Box Interface

Purpose: Turn (method, path, body) into exactly one HTTP exchange
Interface: RequestExecutor.execute(), pods_path(), pod_path(), services_path()
Hidden: requests session, TLS and auth headers, URL resolution

Can be replaced with any HTTP client that returns the real status and body.
"""

from .executor import (
    SUPPORTED_METHODS,
    RequestExecutor,
    TransportRequest,
    TransportResponse,
)
from .paths import namespace_path, pod_path, pods_path, services_path

__all__ = [
    "SUPPORTED_METHODS",
    "RequestExecutor",
    "TransportRequest",
    "TransportResponse",
    "namespace_path",
    "pod_path",
    "pods_path",
    "services_path",
]
