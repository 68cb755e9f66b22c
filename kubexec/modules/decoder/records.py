"""
Kubernetes API objects as returned by the API server.

Only the fields kubexec reads are declared; everything else the server
sends is kept as extra data so nothing is lost when a record is reported.

KIND is the kind a top-level response must declare. It is checked by the
response grammars, not here, because PodList items omit kind and apiVersion.
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ObjectMeta(BaseModel):
    """meta/v1 ObjectMeta."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Optional[str] = None
    namespace: Optional[str] = None
    uid: Optional[str] = None
    resource_version: Optional[str] = Field(None, alias="resourceVersion")
    labels: Optional[Dict[str, str]] = None


class KubeObject(BaseModel):
    """Common envelope of a namespaced API object."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: Optional[str] = Field(None, alias="apiVersion")
    kind: Optional[str] = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    @property
    def name(self) -> Optional[str]:
        return self.metadata.name


class WorkloadRecord(KubeObject):
    """core/v1 Pod."""

    KIND: ClassVar[str] = "Pod"

    spec: Optional[Dict[str, Any]] = None
    status: Optional[Dict[str, Any]] = None


class ServiceRecord(KubeObject):
    """core/v1 Service."""

    KIND: ClassVar[str] = "Service"

    spec: Optional[Dict[str, Any]] = None
    status: Optional[Dict[str, Any]] = None


class StatusRecord(BaseModel):
    """meta/v1 Status, returned for deletions and for errors."""

    KIND: ClassVar[str] = "Status"

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: Optional[str] = Field(None, alias="apiVersion")
    kind: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    code: Optional[int] = None
    details: Optional[Dict[str, Any]] = None


class WorkloadListRecord(BaseModel):
    """core/v1 PodList."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: Optional[str] = Field(None, alias="apiVersion")
    kind: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    items: List[WorkloadRecord] = Field(default_factory=list)
