from pydantic import ValidationError

from kubexec.errors import CallerInputError

from .models import ServiceDescriptor, WorkloadDescriptor


def _caller_input_error(kind: str, exc: ValidationError) -> CallerInputError:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return CallerInputError(f"invalid {kind} descriptor: {problems}")


def build_workload_descriptor(namespace: str, name: str, image: str) -> WorkloadDescriptor:
    """
    Build the pod descriptor for an executor.

    Args:
        namespace: Target namespace
        name: Pod name, also used as the container name
        image: Container image reference

    Returns:
        WorkloadDescriptor with the fixed port and pull policy

    Raises:
        CallerInputError: if an input breaks Kubernetes naming rules
    """
    try:
        return WorkloadDescriptor(namespace=namespace, name=name, image=image)
    except ValidationError as e:
        raise _caller_input_error("workload", e) from e


def build_service_descriptor(namespace: str, name: str) -> ServiceDescriptor:
    """
    Build the ClusterIP service descriptor for an executor.

    The port (50051) and port name ("grpc") are not configurable: an
    executor speaks exactly one protocol.

    Raises:
        CallerInputError: if an input breaks Kubernetes naming rules
    """
    try:
        return ServiceDescriptor(namespace=namespace, name=name)
    except ValidationError as e:
        raise _caller_input_error("service", e) from e
