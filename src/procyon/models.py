from enum import Enum

from pydantic import BaseModel, Field

from .core import DEFAULT_CLUSTER_NAME, DEFAULT_REGION
from .schemas.dataproc import DataprocCluster


class ProvisionStatus(str, Enum):
    SUCCEEDED = "SUCCEEDED"
    SUBMISSION_FAILED = "SUBMISSION_FAILED"
    TIMED_OUT = "TIMED_OUT"
    FAILED = "FAILED"


class ProvisionResult(BaseModel):
    status: ProvisionStatus
    cluster_name: str
    cluster: DataprocCluster | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ProvisionStatus.SUCCEEDED


class ClusterSettings(BaseModel):
    """Validated invocation settings (CLI flags or environment)."""

    project_id: str = Field(min_length=1)
    region: str = Field(default=DEFAULT_REGION, min_length=1)
    cluster_name: str = Field(default=DEFAULT_CLUSTER_NAME, min_length=1)
    key_file: str = Field(min_length=1, description="Path to a service account key")
    timeout: float | None = Field(default=None, gt=0)
