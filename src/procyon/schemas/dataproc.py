from pydantic import BaseModel, ConfigDict, Field


class InstanceGroupSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    machine_type: str = Field(
        min_length=1, description="Short machine type (e.g., n1-standard-1)"
    )
    num_instances: int = Field(ge=1)


class ClusterSpec(BaseModel):
    """Desired shape of a cluster, fixed before submission."""

    model_config = ConfigDict(frozen=True)

    project_id: str = Field(min_length=1)
    region: str = Field(min_length=1)
    cluster_name: str = Field(min_length=1)
    master: InstanceGroupSpec
    worker: InstanceGroupSpec


class DataprocCluster(BaseModel):
    name: str
    uuid: str
    state: str
    master: InstanceGroupSpec | None = None
    worker: InstanceGroupSpec | None = None
    instance_names: list[str] = Field(default_factory=list)
