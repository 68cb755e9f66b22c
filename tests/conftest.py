"""
Shared pytest fixtures for Kubexec tests.

This module provides common fixtures including:
- ControlPlaneStub: Stand-in for the Kubernetes API server with canned responses
- Config, executor and provisioner fixtures wired to the stub
"""

import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Pattern, Union
from unittest.mock import MagicMock
from urllib.parse import urlsplit

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kubexec.config.provider import ControlPlaneConfig
from kubexec.modules.provisioner import ExecutorProvisioner
from kubexec.modules.transport import RequestExecutor

STUB_BASE_URL = "https://kube.test:6443"


# =============================================================================
# Control Plane Stub Infrastructure
# =============================================================================

@dataclass
class StubResponse:
    """Represents a canned API server response."""
    status: int = 200
    body: Union[bytes, str, Dict[str, Any], List[Any], None] = None

    @property
    def body_bytes(self) -> bytes:
        if self.body is None:
            return b""
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return json.dumps(self.body).encode("utf-8")

    def to_response(self) -> MagicMock:
        """Convert to a requests.Response-like mock."""
        response = MagicMock()
        response.status_code = self.status
        response.content = self.body_bytes
        return response


@dataclass
class StubCall:
    """Record of a request made against the stub."""
    method: str
    url: str
    path: str
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Any = None
    verify: Any = None
    matched_pattern: Optional[str] = None
    response: Optional[StubResponse] = None

    @property
    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


class ControlPlaneStub:
    """
    Stub Kubernetes API server matched on method and path.

    The stub's session is handed to a RequestExecutor, so every request the
    code under test sends is answered here instead of on the network.

    Usage:
        def test_list(control_plane, provisioner):
            control_plane.register("GET", "/namespaces/default/pods", StubResponse(
                body={"kind": "PodList", "items": [...]}
            ))

            names = provisioner.list_workloads("default")

            assert control_plane.was_called_with("GET", "/namespaces/default/pods")
    """

    def __init__(self):
        self._responses: List[tuple] = []
        self._call_history: List[StubCall] = []
        self._default_response = StubResponse(
            status=404,
            body={"kind": "Status", "status": "Failure", "reason": "NotFound",
                  "message": "stub not configured for this request", "code": 404},
        )
        self.session = MagicMock()
        self.session.request.side_effect = self.mock_request

    def register(
        self,
        method: str,
        pattern: Union[str, Pattern],
        response: Union[StubResponse, Exception],
        priority: int = 0
    ) -> "ControlPlaneStub":
        """
        Register a response for requests matching method and path pattern.

        Args:
            method: HTTP method to match
            pattern: String (path substring match) or compiled regex
            response: StubResponse to return, or an exception to raise
            priority: Higher priority patterns are checked first

        Returns:
            self for chaining
        """
        self._responses.append((method.upper(), pattern, response, priority))
        # Sort by priority (highest first)
        self._responses.sort(key=lambda x: x[3], reverse=True)
        return self

    def register_scenario(self, scenario_name: str) -> "ControlPlaneStub":
        """Register all responses for a named scenario."""
        from fixtures.control_plane_responses import SCENARIOS

        if scenario_name not in SCENARIOS:
            raise ValueError(
                f"Unknown scenario: {scenario_name}. "
                f"Available: {list(SCENARIOS.keys())}"
            )

        for (method, pattern), response in SCENARIOS[scenario_name].items():
            self.register(method, pattern, response)

        return self

    def set_default_response(self, response: StubResponse) -> "ControlPlaneStub":
        """Set the default response for unmatched requests."""
        self._default_response = response
        return self

    def mock_request(
        self,
        method: str,
        url: str,
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Any = None,
        verify: Any = None,
        **kwargs
    ) -> MagicMock:
        """Mock implementation of requests.Session.request."""
        path = urlsplit(url).path
        matched_pattern = None
        response = self._default_response

        for registered_method, pattern, resp, _ in self._responses:
            if registered_method != method.upper():
                continue
            if isinstance(pattern, str):
                if pattern in path:
                    matched_pattern = pattern
                    response = resp
                    break
            else:  # Compiled regex
                if pattern.search(path):
                    matched_pattern = pattern.pattern
                    response = resp
                    break

        self._call_history.append(StubCall(
            method=method,
            url=url,
            path=path,
            body=data or b"",
            headers=dict(headers or {}),
            timeout=timeout,
            verify=verify,
            matched_pattern=matched_pattern,
            response=response if isinstance(response, StubResponse) else None,
        ))

        if isinstance(response, Exception):
            raise response
        return response.to_response()

    @property
    def calls(self) -> List[StubCall]:
        """Get all requests made during the test."""
        return self._call_history

    @property
    def call_count(self) -> int:
        return len(self._call_history)

    def was_called_with(self, method: str, pattern: str) -> bool:
        """Check if any request used the method and had the pattern in its path."""
        return any(
            call.method == method.upper() and pattern in call.path
            for call in self._call_history
        )

    def get_calls_matching(self, method: str, pattern: str) -> List[StubCall]:
        return [
            c for c in self._call_history
            if c.method == method.upper() and pattern in c.path
        ]

    def reset(self):
        """Clear call history (but keep registered responses)."""
        self._call_history = []

    def clear(self):
        """Clear both responses and call history."""
        self._responses = []
        self._call_history = []


# =============================================================================
# Wiring Fixtures
# =============================================================================

@pytest.fixture
def control_plane_config():
    """ControlPlaneConfig pointing at the stub address."""
    return ControlPlaneConfig(
        base_url=STUB_BASE_URL,
        timeout_seconds=5.0,
        verify_ssl=True,
        ca_cert_path=None,
        token="test-token",
    )


@pytest.fixture
def control_plane():
    """ControlPlaneStub with an unconfigured route table."""
    return ControlPlaneStub()


@pytest.fixture
def request_executor(control_plane_config, control_plane):
    """RequestExecutor sending through the stub's session."""
    return RequestExecutor(control_plane_config, session=control_plane.session)


@pytest.fixture
def provisioner(request_executor):
    """ExecutorProvisioner wired to the stub."""
    return ExecutorProvisioner(request_executor)


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "control_plane_stub: Tests using a stubbed Kubernetes API server"
    )
