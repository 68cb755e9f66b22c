"""
Provisioner Module - Black Box Interface

Purpose: Stand up and tear down executors (pod + ClusterIP service)
Interface: create_executor(), create_workload(), create_service(),
           delete_workload(), list_workloads()
Hidden: Descriptor building, transport, response decoding

create_executor() is two explicit steps with no rollback; both steps are
also exposed on their own so callers can compensate.
"""

from .provisioner import ExecutorProvisioner, provisioner_from_env

__all__ = ["ExecutorProvisioner", "provisioner_from_env"]
