"""
Kubexec - Kubernetes Executor Provisioning

Stands up and tears down short-lived executors (one pod plus one
ClusterIP service) by talking to the Kubernetes API server directly.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are composed linearly per call: build -> send -> decode
- No module keeps state between calls

Modules:
- descriptors: Pod and Service manifests built from caller inputs
- transport: API paths and the single HTTP exchange per request
- decoder: Incremental, per-operation response decoding
- provisioner: Public create/delete/list operations
"""

__version__ = "1.0.0"
