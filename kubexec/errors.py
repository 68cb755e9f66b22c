"""
Kubexec error taxonomy.

Every public operation either returns normally or raises one of these.
Nothing is retried and nothing is swallowed; retry policy belongs to the caller.
"""

from typing import Any, Optional


class ProvisionerError(Exception):
    """Base class for all kubexec failures."""


class CallerInputError(ProvisionerError):
    """
    Caller supplied something the platform will not accept.

    Raised locally for names that break Kubernetes naming rules and for
    unsupported HTTP methods, or after the round-trip when the API server
    rejects the request as invalid (HTTP 400/422). In the latter case the
    server's message is surfaced verbatim and status/value are set.
    """

    def __init__(self, message: str, status: Optional[int] = None, value: Any = None):
        super().__init__(message)
        self.status = status
        self.value = value


class TransportError(ProvisionerError):
    """Network, DNS, TLS or timeout failure while talking to the control plane."""

    def __init__(self, message: str, kind: str = "transport"):
        super().__init__(message)
        self.kind = kind


class UnexpectedVariantError(ProvisionerError):
    """The control plane answered with a well-formed response of the wrong shape."""

    def __init__(self, status: int, value: Any = None):
        super().__init__(f"expected success but got {status} {value!r}")
        self.status = status
        self.value = value


class MalformedResponseError(ProvisionerError):
    """The response body could not be decoded at all."""

    def __init__(self, status: int, diagnostic: str):
        super().__init__(f"malformed response ({status}): {diagnostic}")
        self.status = status
        self.diagnostic = diagnostic


class IncompleteResponseError(ProvisionerError):
    """The decoder still wanted bytes after the transport delivered the whole body."""

    def __init__(self, status: int, received: int):
        super().__init__(
            f"response with status {status} ended after {received} bytes before it could be decoded"
        )
        self.status = status
        self.received = received


class PartialExecutorError(ProvisionerError):
    """
    Service creation failed after the workload was created.

    The workload named here is still live; no rollback is attempted.
    Callers that need compensation should delete it themselves.
    """

    def __init__(self, namespace: str, name: str, cause: ProvisionerError):
        super().__init__(
            f"workload {namespace}/{name} was created but its service was not: {cause}"
        )
        self.namespace = namespace
        self.name = name
        self.cause = cause
