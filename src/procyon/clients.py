from __future__ import annotations

from typing import Any

from google.auth.credentials import Credentials
from google.cloud import dataproc_v1

from .core import ENDPOINT_TEMPLATE


def endpoint_for(region: str) -> str:
    return ENDPOINT_TEMPLATE.format(region=region)


# Not cached: a client lives for one request and is closed by the caller
# (use it as a context manager).


def get_cluster_client(region: str, credentials: Credentials) -> Any:
    return dataproc_v1.ClusterControllerClient(
        credentials=credentials,
        client_options={"api_endpoint": endpoint_for(region)},
    )
