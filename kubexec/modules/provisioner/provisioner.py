"""
Executor provisioner.

Each public operation is one linear pass: build the descriptor, send it
through the RequestExecutor, decode the response against the operation's
grammar, and turn the outcome into a return value or an exception.
"""

import logging
from typing import Any, List, Optional

from kubexec.config.provider import ConfigProvider, EnvConfigProvider
from kubexec.errors import (
    CallerInputError,
    IncompleteResponseError,
    MalformedResponseError,
    PartialExecutorError,
    ProvisionerError,
    UnexpectedVariantError,
)
from kubexec.modules.decoder import (
    MalformedResponse,
    NeedMoreData,
    Operation,
    ResponseDecoder,
    Success,
    UnexpectedVariant,
)
from kubexec.modules.descriptors import build_service_descriptor, build_workload_descriptor
from kubexec.modules.transport import (
    RequestExecutor,
    TransportRequest,
    pod_path,
    pods_path,
    services_path,
)

logger = logging.getLogger("kubexec.provisioner")

# Statuses the API server uses to reject the request itself (BadRequest, Invalid)
CALLER_INPUT_STATUSES = (400, 422)


def _rejection_message(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        message = value.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class ExecutorProvisioner:
    def __init__(self, executor: RequestExecutor):
        """
        Initialize provisioner.

        Args:
            executor: Request executor bound to the target API server
        """
        self.executor = executor

    def _call(self, operation: Operation, request: TransportRequest) -> Success:
        """
        Send one request and decode its response.

        Raises:
            CallerInputError: API server rejected the input (400/422)
            UnexpectedVariantError: any other well-formed non-success response
            MalformedResponseError: body could not be decoded
            IncompleteResponseError: body ended before it could be decoded
            TransportError: propagated from the executor
        """
        response = self.executor.execute(request)

        decoder = ResponseDecoder(operation, response.status)
        decoder.append(response.body)
        outcome = decoder.parse()

        if isinstance(outcome, Success):
            return outcome

        if isinstance(outcome, UnexpectedVariant):
            if outcome.status in CALLER_INPUT_STATUSES:
                message = _rejection_message(outcome.value) or f"request rejected with status {outcome.status}"
                raise CallerInputError(message, status=outcome.status, value=outcome.value)
            raise UnexpectedVariantError(outcome.status, outcome.value)

        if isinstance(outcome, MalformedResponse):
            raise MalformedResponseError(outcome.status, outcome.diagnostic)

        if isinstance(outcome, NeedMoreData):
            raise IncompleteResponseError(response.status, decoder.received)

        raise TypeError(f"Unknown decode outcome: {outcome!r}")

    def create_workload(self, namespace: str, name: str, image: str) -> None:
        """Create the executor pod."""
        descriptor = build_workload_descriptor(namespace, name, image)
        outcome = self._call(
            Operation.CREATE_WORKLOAD,
            TransportRequest("POST", pods_path(namespace), descriptor.serialize()),
        )
        logger.info(f"Created pod {namespace}/{outcome.payload.name} ({outcome.variant})")

    def create_service(self, namespace: str, name: str) -> None:
        """Create the executor's ClusterIP service."""
        descriptor = build_service_descriptor(namespace, name)
        outcome = self._call(
            Operation.CREATE_SERVICE,
            TransportRequest("POST", services_path(namespace), descriptor.serialize()),
        )
        logger.info(f"Created service {namespace}/{outcome.payload.name} ({outcome.variant})")

    def create_executor(self, namespace: str, name: str, image: str) -> None:
        """
        Create an executor: its pod first, then its service.

        The service is only attempted once the pod exists. The two steps are
        not a transaction: if the service step fails the pod stays live and
        PartialExecutorError is raised so the caller can compensate (for
        example with delete_workload).

        Raises:
            PartialExecutorError: pod created, service failed
            ProvisionerError: pod step failed, nothing was created
        """
        self.create_workload(namespace, name, image)
        try:
            self.create_service(namespace, name)
        except ProvisionerError as e:
            logger.error(f"Service for executor {namespace}/{name} failed, pod left running: {e}")
            raise PartialExecutorError(namespace, name, e) from e

    def delete_workload(self, namespace: str, name: str) -> None:
        """Delete the executor pod. Immediate and accepted-for-later deletion both succeed."""
        outcome = self._call(
            Operation.DELETE_WORKLOAD,
            TransportRequest("DELETE", pod_path(namespace, name)),
        )
        logger.info(f"Deleted pod {namespace}/{name} ({outcome.variant})")

    def list_workloads(self, namespace: str) -> List[str]:
        """
        List pod names in a namespace.

        Returns:
            Pod names in the order the API server returned them
        """
        outcome = self._call(
            Operation.LIST_WORKLOADS,
            TransportRequest("GET", pods_path(namespace)),
        )
        names: List[str] = outcome.payload
        logger.debug(f"Listed {len(names)} pods in {namespace}")
        return names


def provisioner_from_env(config_provider: Optional[ConfigProvider] = None) -> ExecutorProvisioner:
    """Build a provisioner for the API server described by the environment."""
    provider = config_provider or EnvConfigProvider()
    return ExecutorProvisioner(RequestExecutor(provider.get_control_plane_config()))
