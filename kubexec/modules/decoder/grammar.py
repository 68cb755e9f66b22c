"""
Per-operation response grammars.

A grammar maps each success status code of an operation to a shape
parser. A shape parser takes the decoded JSON value and returns the
(variant, payload) pair, or raises when the value does not fit the shape.
Any status code not listed falls into the operation's catch-all shape.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Tuple, Type, TypeVar

from .records import KubeObject, ServiceRecord, StatusRecord, WorkloadListRecord, WorkloadRecord

ShapeParser = Callable[[Any], Tuple[str, Any]]
RecordT = TypeVar("RecordT", KubeObject, StatusRecord)


class Operation(str, Enum):
    """Control plane operations kubexec decodes responses for."""

    CREATE_WORKLOAD = "create_workload"
    CREATE_SERVICE = "create_service"
    DELETE_WORKLOAD = "delete_workload"
    LIST_WORKLOADS = "list_workloads"


class ShapeError(ValueError):
    """Decoded JSON does not match the expected payload shape."""


@dataclass(frozen=True)
class ResponseGrammar:
    """Success shapes of one operation, keyed by HTTP status."""

    operation: Operation
    shapes: Mapping[int, ShapeParser]

    @property
    def success_statuses(self) -> Tuple[int, ...]:
        return tuple(sorted(self.shapes))


CORE_API_VERSION = "v1"


def _typed(record_type: Type[RecordT], value: Any) -> RecordT:
    """Validate a top-level object and require its declared apiVersion and kind."""
    record = record_type.model_validate(value)
    if record.api_version != CORE_API_VERSION or record.kind != record_type.KIND:
        raise ShapeError(
            f"expected {CORE_API_VERSION}/{record_type.KIND}, "
            f"got {record.api_version}/{record.kind}"
        )
    return record


def _named_record(record_type: Type[KubeObject], variant: str) -> ShapeParser:
    def parse(value: Any) -> Tuple[str, Any]:
        record = _typed(record_type, value)
        if not record.name:
            raise ShapeError(f"{record_type.__name__} has no metadata.name")
        return variant, record

    return parse


def _status(variant: str) -> ShapeParser:
    def parse(value: Any) -> Tuple[str, Any]:
        return variant, _typed(StatusRecord, value)

    return parse


def _deleted(value: Any) -> Tuple[str, Any]:
    # A 200 for DELETE is either a Status or the pod being deleted; anything else is rejected
    if isinstance(value, dict) and value.get("kind") == "Status":
        return "ok_status", _typed(StatusRecord, value)
    return "ok_value", _typed(WorkloadRecord, value)


def _workload_names(value: Any) -> Tuple[str, List[str]]:
    pod_list = WorkloadListRecord.model_validate(value)
    names: List[str] = []
    for index, item in enumerate(pod_list.items):
        if not item.name:
            raise ShapeError(f"items[{index}] has no metadata.name")
        names.append(item.name)
    return "ok", names


GRAMMARS: Dict[Operation, ResponseGrammar] = {
    Operation.CREATE_WORKLOAD: ResponseGrammar(
        Operation.CREATE_WORKLOAD,
        {
            200: _named_record(WorkloadRecord, "ok"),
            201: _named_record(WorkloadRecord, "created"),
        },
    ),
    Operation.CREATE_SERVICE: ResponseGrammar(
        Operation.CREATE_SERVICE,
        {
            200: _named_record(ServiceRecord, "ok"),
            201: _named_record(ServiceRecord, "created"),
        },
    ),
    Operation.DELETE_WORKLOAD: ResponseGrammar(
        Operation.DELETE_WORKLOAD,
        {
            200: _deleted,
            202: _status("accepted"),
        },
    ),
    Operation.LIST_WORKLOADS: ResponseGrammar(
        Operation.LIST_WORKLOADS,
        {
            200: _workload_names,
        },
    ),
}


def grammar_for(operation: Operation) -> ResponseGrammar:
    return GRAMMARS[Operation(operation)]
