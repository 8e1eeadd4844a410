import pytest

from procyon.clients import endpoint_for, get_cluster_client


@pytest.mark.parametrize(
    "region",
    ["us-central1", "europe-west4", "asia-northeast1", "global"],
)
def test_endpoint_for(region):
    assert endpoint_for(region) == region + "-dataproc.googleapis.com:443"


def test_endpoint_for_us_central1():
    assert endpoint_for("us-central1") == "us-central1-dataproc.googleapis.com:443"


def test_get_cluster_client_binds_endpoint(mocker):
    mock_cls = mocker.patch("procyon.clients.dataproc_v1.ClusterControllerClient")
    creds = mocker.Mock()

    client = get_cluster_client("us-west1", creds)

    assert client is mock_cls.return_value
    mock_cls.assert_called_once_with(
        credentials=creds,
        client_options={"api_endpoint": "us-west1-dataproc.googleapis.com:443"},
    )


def test_get_cluster_client_not_shared(mocker):
    mock_cls = mocker.patch("procyon.clients.dataproc_v1.ClusterControllerClient")
    mock_cls.side_effect = lambda **kwargs: mocker.Mock()

    a = get_cluster_client("us-central1", mocker.Mock())
    b = get_cluster_client("us-central1", mocker.Mock())

    assert a is not b
    assert mock_cls.call_count == 2
