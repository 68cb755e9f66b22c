"""
Kubexec command line.

    kubexec create-executor default exec-1 ballista:latest
    kubexec list-workloads default
"""

import dataclasses
from typing import Optional

import click
from dotenv import load_dotenv

from kubexec.config.provider import EnvConfigProvider
from kubexec.errors import PartialExecutorError, ProvisionerError
from kubexec.logging_config import configure_logging
from kubexec.modules.provisioner import ExecutorProvisioner
from kubexec.modules.transport import RequestExecutor


@click.group()
@click.option("--api-url", "api_url", default=None, help="Kubernetes API server base URL (overrides KUBEXEC_API_URL)")
@click.option("--log-level", "log_level", default=None, help="Log level (overrides LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, api_url: Optional[str], log_level: Optional[str]):
    """Provision kubexec executors on a Kubernetes cluster."""
    load_dotenv()
    provider = EnvConfigProvider()
    configure_logging(log_level or provider.get_logging_config().level)

    if ctx.obj is None:
        config = provider.get_control_plane_config()
        if api_url:
            config = dataclasses.replace(config, base_url=api_url.rstrip("/"))
        ctx.obj = ExecutorProvisioner(RequestExecutor(config))


@cli.command("create-executor")
@click.argument("namespace")
@click.argument("name")
@click.argument("image")
@click.pass_obj
def create_executor(provisioner: ExecutorProvisioner, namespace: str, name: str, image: str):
    """Create an executor pod and its service."""
    try:
        provisioner.create_executor(namespace, name, image)
    except PartialExecutorError as e:
        raise click.ClickException(
            f"{e}\nPod {e.namespace}/{e.name} is still running; delete it with: "
            f"kubexec delete-workload {e.namespace} {e.name}"
        )
    except ProvisionerError as e:
        raise click.ClickException(str(e))
    click.echo(f"executor {namespace}/{name} created")


@cli.command("create-workload")
@click.argument("namespace")
@click.argument("name")
@click.argument("image")
@click.pass_obj
def create_workload(provisioner: ExecutorProvisioner, namespace: str, name: str, image: str):
    """Create only the executor pod."""
    try:
        provisioner.create_workload(namespace, name, image)
    except ProvisionerError as e:
        raise click.ClickException(str(e))
    click.echo(f"pod {namespace}/{name} created")


@cli.command("create-service")
@click.argument("namespace")
@click.argument("name")
@click.pass_obj
def create_service(provisioner: ExecutorProvisioner, namespace: str, name: str):
    """Create only the executor service."""
    try:
        provisioner.create_service(namespace, name)
    except ProvisionerError as e:
        raise click.ClickException(str(e))
    click.echo(f"service {namespace}/{name} created")


@cli.command("delete-workload")
@click.argument("namespace")
@click.argument("name")
@click.pass_obj
def delete_workload(provisioner: ExecutorProvisioner, namespace: str, name: str):
    """Delete an executor pod."""
    try:
        provisioner.delete_workload(namespace, name)
    except ProvisionerError as e:
        raise click.ClickException(str(e))
    click.echo(f"pod {namespace}/{name} deleted")


@cli.command("list-workloads")
@click.argument("namespace")
@click.pass_obj
def list_workloads(provisioner: ExecutorProvisioner, namespace: str):
    """List pod names in a namespace, one per line."""
    try:
        names = provisioner.list_workloads(namespace)
    except ProvisionerError as e:
        raise click.ClickException(str(e))
    for name in names:
        click.echo(name)


def main():
    cli()


if __name__ == "__main__":
    main()
