"""
Descriptors Module - Black Box Interface

Purpose: Build Pod and Service manifests for an executor
Interface: build_workload_descriptor(), build_service_descriptor()
Hidden: Manifest layout, fixed executor policy, naming rules

Pure and deterministic: no I/O, identical inputs give identical bytes.
"""

from .builder import build_service_descriptor, build_workload_descriptor
from .models import (
    EXECUTOR_PORT,
    EXECUTOR_PORT_NAME,
    IMAGE_PULL_POLICY,
    SERVICE_TYPE,
    ServiceDescriptor,
    WorkloadDescriptor,
)

__all__ = [
    "EXECUTOR_PORT",
    "EXECUTOR_PORT_NAME",
    "IMAGE_PULL_POLICY",
    "SERVICE_TYPE",
    "ServiceDescriptor",
    "WorkloadDescriptor",
    "build_service_descriptor",
    "build_workload_descriptor",
]
