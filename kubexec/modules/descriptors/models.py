"""
Kubexec resource descriptors.

These models hold the few caller inputs an executor needs and render
them into the Pod and Service manifests the API server expects. Every
other field of those manifests is fixed policy.
"""

import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

# Fixed executor policy

EXECUTOR_PORT = 50051
EXECUTOR_PORT_NAME = "grpc"
SERVICE_TYPE = "ClusterIP"
# TODO: take the pull policy from ControlPlaneConfig once callers need IfNotPresent for pinned tags
IMAGE_PULL_POLICY = "Always"
EXECUTOR_LABEL = "kubexec.io/executor"

# Kubernetes naming rules

DNS1123_LABEL = r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$"
DNS1035_LABEL = r"^[a-z]([-a-z0-9]*[a-z0-9])?$"
IMAGE_REFERENCE = r"^\S+$"


def serialize_manifest(manifest: Dict[str, Any]) -> bytes:
    """Render a manifest as compact JSON with sorted keys."""
    return json.dumps(manifest, sort_keys=True, separators=(",", ":")).encode("utf-8")


class WorkloadDescriptor(BaseModel):
    """A single-container pod running the executor image."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(
        ..., description="Target namespace", min_length=1, max_length=63, pattern=DNS1123_LABEL
    )
    # The container is named after the pod, so the pod name must also be a valid label
    name: str = Field(
        ..., description="Pod and container name", min_length=1, max_length=63, pattern=DNS1123_LABEL
    )
    image: str = Field(..., description="Container image reference", min_length=1, pattern=IMAGE_REFERENCE)
    container_port: int = Field(default=EXECUTOR_PORT)
    image_pull_policy: str = Field(default=IMAGE_PULL_POLICY)

    def to_manifest(self) -> Dict[str, Any]:
        """Render as a v1 Pod."""
        return {
            "apiVersion": "v1",
            "kind": "Pod",
            "metadata": {
                "name": self.name,
                "labels": {EXECUTOR_LABEL: self.name},
            },
            "spec": {
                "containers": [
                    {
                        "name": self.name,
                        "image": self.image,
                        "imagePullPolicy": self.image_pull_policy,
                        "ports": [{"containerPort": self.container_port}],
                    }
                ]
            },
        }

    def serialize(self) -> bytes:
        return serialize_manifest(self.to_manifest())


class ServiceDescriptor(BaseModel):
    """A cluster-internal service exposing the executor's gRPC port."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(
        ..., description="Target namespace", min_length=1, max_length=63, pattern=DNS1123_LABEL
    )
    name: str = Field(
        ..., description="Service name", min_length=1, max_length=63, pattern=DNS1035_LABEL
    )
    service_type: str = Field(default=SERVICE_TYPE)
    port_name: str = Field(default=EXECUTOR_PORT_NAME)
    port: int = Field(default=EXECUTOR_PORT)
    target_port: int = Field(default=EXECUTOR_PORT)

    def to_manifest(self) -> Dict[str, Any]:
        """Render as a v1 Service selecting the executor pod of the same name."""
        return {
            "apiVersion": "v1",
            "kind": "Service",
            "metadata": {"name": self.name},
            "spec": {
                "type": self.service_type,
                "selector": {EXECUTOR_LABEL: self.name},
                "ports": [
                    {
                        "name": self.port_name,
                        "port": self.port,
                        "targetPort": self.target_port,
                    }
                ],
            },
        }

    def serialize(self) -> bytes:
        return serialize_manifest(self.to_manifest())
