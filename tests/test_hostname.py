import pytest

from ddotelmap.attributes.hostname import (
    ATTRIBUTE_DATADOG_HOSTNAME,
    ATTRIBUTE_HOST,
    ATTRIBUTE_K8S_NODE_NAME,
    get_cluster_name,
    hostname_from_attributes,
    k8s_hostname_from_attributes,
    source_from_attrs,
    unsanitized_hostname_from_attributes,
)
from ddotelmap.source import Kind, Source

TEST_LITERAL_HOST = "literal-host"
TEST_HOST_ID = "example-host-id"
TEST_HOST_NAME = "example-host-name"
TEST_CONTAINER_ID = "example-container-id"
TEST_CLUSTER_NAME = "clusterName"
TEST_NODE_NAME = "nodeName"
TEST_CUSTOM_NAME = "example-custom-host-name"
TEST_CLOUD_ACCOUNT = "projectID"
TEST_GCP_HOSTNAME = TEST_HOST_NAME + ".c." + TEST_CLOUD_ACCOUNT + ".internal"
TEST_GCP_INTEGRATION_HOSTNAME = TEST_HOST_NAME + "." + TEST_CLOUD_ACCOUNT


@pytest.mark.parametrize(
    "attrs, expected",
    [
        pytest.param(
            {
                ATTRIBUTE_HOST: TEST_LITERAL_HOST,
                ATTRIBUTE_DATADOG_HOSTNAME: TEST_CUSTOM_NAME,
                ATTRIBUTE_K8S_NODE_NAME: TEST_NODE_NAME,
                "k8s.cluster.name": TEST_CLUSTER_NAME,
                "container.id": TEST_CONTAINER_ID,
                "host.id": TEST_HOST_ID,
                "host.name": TEST_HOST_NAME,
            },
            Source(Kind.HOSTNAME, TEST_LITERAL_HOST),
            id="literal host tag",
        ),
        pytest.param(
            {
                ATTRIBUTE_DATADOG_HOSTNAME: TEST_CUSTOM_NAME,
                ATTRIBUTE_K8S_NODE_NAME: TEST_NODE_NAME,
                "k8s.cluster.name": TEST_CLUSTER_NAME,
                "container.id": TEST_CONTAINER_ID,
                "host.id": TEST_HOST_ID,
                "host.name": TEST_HOST_NAME,
            },
            Source(Kind.HOSTNAME, TEST_CUSTOM_NAME),
            id="custom hostname",
        ),
        pytest.param({"container.id": TEST_CONTAINER_ID}, None, id="container ID"),
        pytest.param(
            {"cloud.provider": "aws", "host.id": TEST_HOST_ID, "host.name": TEST_HOST_NAME},
            Source(Kind.HOSTNAME, TEST_HOST_ID),
            id="AWS EC2",
        ),
        pytest.param(
            {
                "cloud.provider": "aws",
                "cloud.platform": "aws_ecs",
                "aws.ecs.task.arn": "example-task-ARN",
                "aws.ecs.task.family": "example-task-family",
                "aws.ecs.task.revision": "example-task-revision",
                "aws.ecs.launchtype": "fargate",
            },
            Source(Kind.AWS_ECS_FARGATE, "example-task-ARN"),
            id="ECS Fargate",
        ),
        pytest.param(
            {
                "cloud.provider": "gcp",
                "host.id": TEST_HOST_ID,
                "host.name": TEST_GCP_HOSTNAME,
                "cloud.account.id": TEST_CLOUD_ACCOUNT,
            },
            Source(Kind.HOSTNAME, TEST_GCP_INTEGRATION_HOSTNAME),
            id="GCP",
        ),
        pytest.param(
            {"cloud.provider": "gcp", "host.id": TEST_HOST_ID, "host.name": TEST_GCP_HOSTNAME},
            None,
            id="GCP, no account id",
        ),
        pytest.param(
            {"cloud.provider": "azure", "host.id": TEST_HOST_ID, "host.name": TEST_HOST_NAME},
            Source(Kind.HOSTNAME, TEST_HOST_ID),
            id="azure",
        ),
        pytest.param(
            {"host.id": TEST_HOST_ID, "host.name": TEST_HOST_NAME},
            Source(Kind.HOSTNAME, TEST_HOST_ID),
            id="host id v. hostname",
        ),
        pytest.param({}, None, id="no hostname"),
        pytest.param({ATTRIBUTE_DATADOG_HOSTNAME: "127.0.0.1"}, None, id="localhost"),
    ],
)
def test_source_from_attrs(attrs, expected):
    assert source_from_attrs(attrs) == expected


def test_literal_host_non_string():
    assert source_from_attrs({ATTRIBUTE_HOST: 1000}) == Source(Kind.HOSTNAME, "1000")


def test_get_cluster_name_convention():
    assert get_cluster_name({"k8s.cluster.name": TEST_CLUSTER_NAME}) == TEST_CLUSTER_NAME


def test_get_cluster_name_azure():
    attrs = {
        "cloud.provider": "azure",
        "azure.resourcegroup.name": "MC_aks-kenafeh_aks-kenafeh-eu_westeurope",
    }
    assert get_cluster_name(attrs) == "aks-kenafeh-eu"


def test_get_cluster_name_aws():
    attrs = {
        "cloud.provider": "aws",
        "ec2.tag.kubernetes.io/cluster/clustername": "dummy_value",
    }
    assert get_cluster_name(attrs) == "clustername"


def test_get_cluster_name_none():
    assert get_cluster_name({}) is None


def test_hostname_kubernetes_node_and_cluster():
    attrs = {
        ATTRIBUTE_K8S_NODE_NAME: TEST_NODE_NAME,
        "k8s.cluster.name": TEST_CLUSTER_NAME,
        "container.id": TEST_CONTAINER_ID,
        "host.id": TEST_HOST_ID,
        "host.name": TEST_HOST_NAME,
    }
    assert hostname_from_attributes(attrs) == "nodeName-clusterName"


def test_hostname_kubernetes_node_no_cluster():
    attrs = {
        ATTRIBUTE_K8S_NODE_NAME: TEST_NODE_NAME,
        "container.id": TEST_CONTAINER_ID,
        "host.id": TEST_HOST_ID,
        "host.name": TEST_HOST_NAME,
    }
    assert hostname_from_attributes(attrs) == "nodeName"


def test_hostname_kubernetes_node_on_aws_uses_host_id():
    attrs = {
        ATTRIBUTE_K8S_NODE_NAME: TEST_NODE_NAME,
        "container.id": TEST_CONTAINER_ID,
        "host.id": TEST_HOST_ID,
        "host.name": TEST_HOST_NAME,
        "cloud.provider": "aws",
    }
    assert hostname_from_attributes(attrs) == TEST_HOST_ID


def test_hostname_kubernetes_cluster_without_node_falls_back():
    attrs = {
        "k8s.cluster.name": TEST_CLUSTER_NAME,
        "container.id": TEST_CONTAINER_ID,
        "host.id": TEST_HOST_ID,
        "host.name": TEST_HOST_NAME,
    }
    assert hostname_from_attributes(attrs) == TEST_HOST_ID


def test_k8s_hostname_without_node():
    assert k8s_hostname_from_attributes({"k8s.cluster.name": TEST_CLUSTER_NAME}) is None


@pytest.mark.parametrize(
    "host",
    ["0.0.0.0", "localhost", "localhost.localdomain", "localhost6.localdomain6", "ip6-localhost"],
)
def test_invalid_hosts_are_discarded(host):
    attrs = {"host.name": host}
    assert unsanitized_hostname_from_attributes(attrs) == host
    assert hostname_from_attributes(attrs) is None


def test_fargate_without_task_arn_has_no_source():
    attrs = {"aws.ecs.launchtype": "fargate", "host.name": TEST_HOST_NAME}
    assert unsanitized_hostname_from_attributes(attrs) is None
    assert source_from_attrs(attrs) is None


def test_source_tag():
    source = source_from_attrs({"host.name": TEST_HOST_NAME})
    assert source.tag() == "host:example-host-name"