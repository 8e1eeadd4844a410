import argparse

from rich.console import Console
from rich.table import Table

from ..actions import dataproc
from ..clients import endpoint_for
from ..credentials import describe_credentials, load_credentials
from ..models import ClusterSettings, ProvisionResult
from ..schemas.dataproc import DataprocCluster


def _cluster_table(cluster: DataprocCluster) -> Table:
    table = Table(title=f"Cluster {cluster.name}")
    table.add_column("Role", style="cyan")
    table.add_column("Machine Type", style="green")
    table.add_column("Instances", justify="right")

    for role, group in (("master", cluster.master), ("worker", cluster.worker)):
        if group:
            table.add_row(role, group.machine_type, str(group.num_instances))

    table.caption = f"uuid {cluster.uuid} | state {cluster.state}"
    return table


def run_create(
    args: argparse.Namespace, log_console: Console, out_console: Console
) -> ProvisionResult:
    """
    Loads credentials and provisions one cluster.

    Credential and file errors propagate to the caller. Provisioning failures
    come back inside the ProvisionResult.
    """
    settings = ClusterSettings(
        project_id=args.project_id,
        region=args.region,
        cluster_name=args.cluster_name,
        key_file=args.key_file,
        timeout=args.timeout,
    )

    credentials = load_credentials(settings.key_file)
    log_console.print(f"The credentials are: {describe_credentials(credentials)}")

    log_console.print(
        f"Creating cluster [bold cyan]{settings.cluster_name}[/bold cyan] "
        f"on Dataproc via {endpoint_for(settings.region)}"
    )
    with log_console.status("Waiting for the cluster to come up..."):
        result = dataproc.create_cluster(
            settings.project_id,
            settings.region,
            settings.cluster_name,
            credentials,
            timeout=settings.timeout,
        )

    if args.json:
        print(result.model_dump_json(indent=2))
        return result

    if result.ok:
        out_console.print(
            f"[green]Cluster created successfully: {settings.cluster_name}[/green]"
        )
        if result.cluster:
            out_console.print(_cluster_table(result.cluster))
    else:
        out_console.print(
            f"[red]Error creating cluster {settings.cluster_name} "
            f"({result.status.value}): {result.error}[/red]"
        )

    return result
