from google.api_core import exceptions
from tenacity import retry_if_exception_type, stop_after_attempt, wait_exponential

# OAuth scope requested for the service account
# cloud-platform covers the Dataproc API.
SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]

# Regional Dataproc endpoint
# e.g. us-central1 -> us-central1-dataproc.googleapis.com:443
ENDPOINT_TEMPLATE = "{region}-dataproc.googleapis.com:443"

DEFAULT_REGION = "us-central1"
DEFAULT_CLUSTER_NAME = "test-cluster"

# Fixed cluster shape
DEFAULT_MACHINE_TYPE = "n1-standard-1"
MASTER_INSTANCES = 1
WORKER_INSTANCES = 2

# Shared retry configuration for the create RPC
# usage: @retry(**RETRY_CONFIG)
# Only transient transport errors are retried; the request carries a request_id
# so a resubmission cannot create a second cluster.
RETRY_CONFIG = {
    "stop": stop_after_attempt(3),
    "wait": wait_exponential(multiplier=1, min=4, max=10),
    "retry": retry_if_exception_type(
        (exceptions.ServiceUnavailable, exceptions.DeadlineExceeded)
    ),
    "reraise": True,
}
