"""
Request executor - the only place a kubexec request becomes network traffic.

One call to execute() is exactly one HTTP exchange against the configured
API server. The executor never retries and never looks inside the body:
the real status code and the raw bytes go back to the caller for decoding.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from kubexec.config.provider import ControlPlaneConfig
from kubexec.errors import CallerInputError, TransportError

SUPPORTED_METHODS = ("GET", "POST", "DELETE")


@dataclass(frozen=True)
class TransportRequest:
    """Method, absolute API path and serialized body for one exchange."""

    method: str
    path: str
    body: bytes = b""


@dataclass(frozen=True)
class TransportResponse:
    """Status code and full body exactly as the API server sent them."""

    status: int
    body: bytes


def _preview(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")


class RequestExecutor:
    """Dispatches TransportRequests to the Kubernetes API server."""

    def __init__(
        self,
        config: ControlPlaneConfig,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize request executor.

        Args:
            config: API server address, TLS and timeout settings
            session: Session to send requests with (a new one by default)
            logger: Logger receiving request/response events
        """
        self.config = config
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger("kubexec.transport")

        if not config.uses_tls and config.token:
            self.logger.warning(
                "Sending a bearer token over plain HTTP - this should only be used for local development!"
            )

    def _headers(self, request: TransportRequest) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if request.body:
            headers["Content-Type"] = "application/json"
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def resolve(self, path: str) -> str:
        """Resolve an absolute API path against the configured base address."""
        if not path.startswith("/"):
            raise CallerInputError(f"API path must be absolute, got {path!r}")
        return f"{self.config.base_url.rstrip('/')}{path}"

    def execute(self, request: TransportRequest) -> TransportResponse:
        """
        Perform one HTTP exchange.

        Args:
            request: Method, path and body to send

        Returns:
            TransportResponse with the real status code and body bytes

        Raises:
            CallerInputError: method is not GET, POST or DELETE, or path is relative
            TransportError: connection, DNS, TLS or timeout failure
        """
        method = request.method.upper()
        if method not in SUPPORTED_METHODS:
            raise CallerInputError(
                f"Unsupported method {request.method!r}, expected one of {', '.join(SUPPORTED_METHODS)}"
            )
        url = self.resolve(request.path)

        self.logger.info(
            f"{method} {url}",
            extra={"event": "request", "method": method, "url": url},
        )
        if request.body:
            self.logger.debug(
                f"Request body: {_preview(request.body)}",
                extra={"event": "request_body", "method": method, "url": url, "body": request.body},
            )

        try:
            response = self.session.request(
                method,
                url,
                data=request.body or None,
                headers=self._headers(request),
                timeout=self.config.timeout_seconds,
                verify=self.config.verify,
            )
            body = response.content
        except requests.exceptions.Timeout as e:
            raise TransportError(f"{method} {url} timed out: {e}", kind="timeout") from e
        except requests.exceptions.SSLError as e:
            raise TransportError(f"TLS failure for {method} {url}: {e}", kind="tls") from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Could not connect for {method} {url}: {e}", kind="connection") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", kind="transport") from e

        status = response.status_code
        self.logger.info(
            f"Response: {status} for {method} {url}",
            extra={"event": "response", "method": method, "url": url, "status": status},
        )
        self.logger.debug(
            f"Response body: {_preview(body)}",
            extra={"event": "response_body", "method": method, "url": url, "status": status, "body": body},
        )

        return TransportResponse(status=status, body=body)
