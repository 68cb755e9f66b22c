"""Namespaced core/v1 API paths for the resources kubexec manages."""

from urllib.parse import quote

CORE_V1_PREFIX = "/api/v1"


def _segment(value: str) -> str:
    return quote(value, safe="")


def namespace_path(namespace: str) -> str:
    return f"{CORE_V1_PREFIX}/namespaces/{_segment(namespace)}"


def pods_path(namespace: str) -> str:
    return f"{namespace_path(namespace)}/pods"


def pod_path(namespace: str, name: str) -> str:
    return f"{pods_path(namespace)}/{_segment(name)}"


def services_path(namespace: str) -> str:
    return f"{namespace_path(namespace)}/services"
