import concurrent.futures
import uuid
from typing import Any

from google.auth.credentials import Credentials
from google.cloud import dataproc_v1
from tenacity import retry

from ..clients import get_cluster_client
from ..core import (
    DEFAULT_MACHINE_TYPE,
    MASTER_INSTANCES,
    RETRY_CONFIG,
    WORKER_INSTANCES,
)
from ..logger import logger
from ..models import ProvisionResult, ProvisionStatus
from ..schemas.dataproc import ClusterSpec, DataprocCluster, InstanceGroupSpec


def build_cluster_spec(project_id: str, region: str, cluster_name: str) -> ClusterSpec:
    """
    Builds the fixed cluster shape: one master and two workers, all n1-standard-1.
    """
    return ClusterSpec(
        project_id=project_id,
        region=region,
        cluster_name=cluster_name,
        master=InstanceGroupSpec(
            machine_type=DEFAULT_MACHINE_TYPE, num_instances=MASTER_INSTANCES
        ),
        worker=InstanceGroupSpec(
            machine_type=DEFAULT_MACHINE_TYPE, num_instances=WORKER_INSTANCES
        ),
    )


def to_cluster_message(spec: ClusterSpec) -> dataproc_v1.Cluster:
    return dataproc_v1.Cluster(
        project_id=spec.project_id,
        cluster_name=spec.cluster_name,
        config=dataproc_v1.ClusterConfig(
            master_config=dataproc_v1.InstanceGroupConfig(
                machine_type_uri=spec.master.machine_type,
                num_instances=spec.master.num_instances,
            ),
            worker_config=dataproc_v1.InstanceGroupConfig(
                machine_type_uri=spec.worker.machine_type,
                num_instances=spec.worker.num_instances,
            ),
        ),
    )


def _instance_group(config: Any) -> InstanceGroupSpec | None:
    if not config.num_instances:
        return None
    # The service returns a full URL
    # e.g., https://.../zones/us-central1-a/machineTypes/n1-standard-1
    m_type = config.machine_type_uri
    return InstanceGroupSpec(
        machine_type=m_type.split("/")[-1] if m_type else "unknown",
        num_instances=config.num_instances,
    )


def to_dataproc_cluster(cluster: Any) -> DataprocCluster:
    master_config = cluster.config.master_config
    worker_config = cluster.config.worker_config
    return DataprocCluster(
        name=cluster.cluster_name,
        uuid=cluster.cluster_uuid,
        state=str(cluster.status.state.name),
        master=_instance_group(master_config),
        worker=_instance_group(worker_config),
        instance_names=list(master_config.instance_names)
        + list(worker_config.instance_names),
    )


@retry(**RETRY_CONFIG)  # type: ignore[call-overload, untyped-decorator]
def _submit(client: Any, request: dataproc_v1.CreateClusterRequest) -> Any:
    return client.create_cluster(request=request)


def _error_text(e: Exception) -> str:
    return str(e) or type(e).__name__


def create_cluster(
    project_id: str,
    region: str,
    cluster_name: str,
    credentials: Credentials,
    timeout: float | None = None,
) -> ProvisionResult:
    """
    Submits a create request to the regional Dataproc endpoint and blocks until
    the long-running operation finishes.

    Failures are logged with a traceback and reported through the returned
    ProvisionResult; they are never raised. KeyboardInterrupt is not caught.
    timeout=None waits for as long as the operation takes.
    """
    try:
        spec = build_cluster_spec(project_id, region, cluster_name)
        request = dataproc_v1.CreateClusterRequest(
            project_id=spec.project_id,
            region=spec.region,
            cluster=to_cluster_message(spec),
            # Same id on every retry so the service deduplicates resubmissions
            request_id=str(uuid.uuid4()),
        )
    except Exception as e:
        logger.exception(f"Could not prepare cluster request: {e}")
        return ProvisionResult(
            status=ProvisionStatus.SUBMISSION_FAILED,
            cluster_name=cluster_name,
            error=_error_text(e),
        )

    try:
        client = get_cluster_client(region, credentials)
    except Exception as e:
        logger.exception(f"Error creating the cluster controller client: {e}")
        return ProvisionResult(
            status=ProvisionStatus.SUBMISSION_FAILED,
            cluster_name=cluster_name,
            error=_error_text(e),
        )

    with client:
        try:
            operation = _submit(client, request)
        except Exception as e:
            logger.exception(f"Failed to submit cluster {cluster_name}: {e}")
            return ProvisionResult(
                status=ProvisionStatus.SUBMISSION_FAILED,
                cluster_name=cluster_name,
                error=_error_text(e),
            )

        logger.info(f"Waiting for cluster {cluster_name} in {region}...")
        try:
            response = operation.result(timeout=timeout)
        except concurrent.futures.TimeoutError as e:
            logger.error(
                f"Cluster {cluster_name} not ready after {timeout}s; "
                "the operation continues server-side"
            )
            return ProvisionResult(
                status=ProvisionStatus.TIMED_OUT,
                cluster_name=cluster_name,
                error=_error_text(e),
            )
        except Exception as e:
            logger.exception(f"Cluster {cluster_name} failed to provision: {e}")
            return ProvisionResult(
                status=ProvisionStatus.FAILED,
                cluster_name=cluster_name,
                error=_error_text(e),
            )

    logger.info(f"Cluster created: {response.cluster_name}")
    return ProvisionResult(
        status=ProvisionStatus.SUCCEEDED,
        cluster_name=cluster_name,
        cluster=to_dataproc_cluster(response),
    )
