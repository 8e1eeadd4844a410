import sys

from procyon.actions.dataproc import create_cluster
from procyon.credentials import describe_credentials, load_credentials
from procyon.logger import logger

# Edit these before running
# use: gcloud projects list to get the project id
project_id = "<<project_id>>"
region = "us-central1"
cluster_name = "test-cluster"
# service account key path (.json file)
service_key = "<<path_to_service_key>>.json"

print("Creating cluster on Dataproc:")
try:
    credentials = load_credentials(service_key)
except (OSError, ValueError) as e:
    logger.exception(f"Could not load credentials from {service_key}: {e}")
    sys.exit(1)

print(f"The credentials are: {describe_credentials(credentials)}")

result = create_cluster(project_id, region, cluster_name, credentials)
if result.ok:
    print(f"Cluster created successfully: {result.cluster_name}")
else:
    print(f"Error creating the cluster ({result.status.value}): {result.error}")
