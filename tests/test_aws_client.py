"""Tests for AWSClient"""

import pytest
from unittest.mock import Mock, patch
from botocore.exceptions import ClientError, NoCredentialsError, EndpointConnectionError

from nephele.config.settings import Settings
from nephele.exceptions import (
    AWSCredentialsError,
    AWSConnectionError,
    AWSRegionError,
    AWSServiceError,
)
from nephele.services.aws_client import AWSClient, from_settings, wrap_aws_error


class TestAWSClientInit:
    """Test AWSClient initialization"""

    def test_init_basic(self):
        client = AWSClient(region="us-east-1")

        assert client.region == "us-east-1"
        assert client.profile is None
        assert client.connect_timeout == 10
        assert client.read_timeout == 60
        assert client.max_attempts == 3
        assert client._clients == {}

    def test_init_with_profile_and_timeouts(self):
        client = AWSClient(region="eu-west-1", profile="ops", connect_timeout=5, read_timeout=30, max_attempts=5)

        assert client.profile == "ops"
        assert client.connect_timeout == 5
        assert client.read_timeout == 30
        assert client.max_attempts == 5

    def test_from_settings(self):
        settings = Settings(aws_region="eu-west-1", aws_profile="dev", aws_read_timeout=120)

        client = from_settings(settings)
        assert client.region == "eu-west-1"
        assert client.profile == "dev"
        assert client.read_timeout == 120

        override = from_settings(settings, region="us-west-2", profile="prod")
        assert override.region == "us-west-2"
        assert override.profile == "prod"


class TestSessionCreation:
    """Test boto3 session creation"""

    @patch('nephele.services.aws_client.boto3.Session')
    def test_get_session_without_profile(self, mock_session_class):
        AWSClient(region="us-east-1")._get_session()
        mock_session_class.assert_called_once_with()

    @patch('nephele.services.aws_client.boto3.Session')
    def test_get_session_with_profile(self, mock_session_class):
        AWSClient(region="us-east-1", profile="my-profile")._get_session()
        mock_session_class.assert_called_once_with(profile_name="my-profile")

    @patch('nephele.services.aws_client.boto3.Session')
    def test_session_is_reused(self, mock_session_class):
        client = AWSClient(region="us-east-1")
        client._get_session()
        client._get_session()
        mock_session_class.assert_called_once()


class TestServiceClients:
    """Test lazy service client creation"""

    @patch('nephele.services.aws_client.boto3.Session')
    def test_clients_created_once_per_service(self, mock_session_class):
        session = mock_session_class.return_value
        client = AWSClient(region="eu-central-1")

        ec2_a = client.ec2_client
        ec2_b = client.ec2_client

        assert ec2_a is ec2_b
        assert session.client.call_count == 1
        service, = session.client.call_args.args
        assert service == "ec2"
        assert session.client.call_args.kwargs["region_name"] == "eu-central-1"

    @patch('nephele.services.aws_client.boto3.Session')
    def test_each_service_property(self, mock_session_class):
        session = mock_session_class.return_value
        client = AWSClient(region="us-east-1")

        client.lambda_client
        client.rds_client
        client.s3_client

        services = [c.args[0] for c in session.client.call_args_list]
        assert services == ["lambda", "rds", "s3"]

    @patch('nephele.services.aws_client.boto3.Session')
    def test_config_carries_timeouts(self, mock_session_class):
        session = mock_session_class.return_value
        AWSClient(region="us-east-1", connect_timeout=7, read_timeout=70).ec2_client

        config = session.client.call_args.kwargs["config"]
        assert config.connect_timeout == 7
        assert config.read_timeout == 70

    @patch('nephele.services.aws_client.boto3.Session')
    def test_no_credentials(self, mock_session_class):
        mock_session_class.return_value.client.side_effect = NoCredentialsError()

        with pytest.raises(AWSCredentialsError, match="aws configure"):
            AWSClient(region="us-east-1").ec2_client

    @patch('nephele.services.aws_client.boto3.Session')
    def test_region_error(self, mock_session_class):
        mock_session_class.return_value.client.side_effect = ClientError(
            {"Error": {"Code": "InvalidRegionName", "Message": "bad"}}, "CreateClient"
        )

        with pytest.raises(AWSRegionError, match="Cannot access region"):
            AWSClient(region="us-east-1").s3_client

    @patch('nephele.services.aws_client.boto3.Session')
    def test_botocore_error(self, mock_session_class):
        mock_session_class.return_value.client.side_effect = EndpointConnectionError(endpoint_url="x")

        with pytest.raises(AWSConnectionError, match="Failed to create rds client"):
            AWSClient(region="us-east-1").rds_client


class TestRegions:
    """Test region listing"""

    def test_get_accessible_regions(self):
        client = AWSClient(region="us-east-1")
        client._clients["ec2"] = Mock()
        client._clients["ec2"].describe_regions.return_value = {
            "Regions": [{"RegionName": "us-east-1"}, {"RegionName": "eu-west-1"}]
        }

        assert client.get_accessible_regions() == ["us-east-1", "eu-west-1"]

    def test_get_accessible_regions_no_credentials(self):
        client = AWSClient(region="us-east-1")
        client._clients["ec2"] = Mock()
        client._clients["ec2"].describe_regions.side_effect = NoCredentialsError()

        with pytest.raises(AWSCredentialsError):
            client.get_accessible_regions()



class TestWrapAwsError:
    """Test botocore error translation"""

    def test_client_error(self):
        error = ClientError({"Error": {"Code": "Throttling", "Message": "Rate exceeded"}}, "DescribeInstances")

        wrapped = wrap_aws_error("describe EC2 instances", error)

        assert isinstance(wrapped, AWSServiceError)
        assert wrapped.error_code == "Throttling"
        assert str(wrapped) == "AWS API error (Throttling): Rate exceeded"

    def test_no_credentials(self):
        assert isinstance(wrap_aws_error("x", NoCredentialsError()), AWSCredentialsError)

    def test_connection_error(self):
        wrapped = wrap_aws_error("x", EndpointConnectionError(endpoint_url="https://ec2"))
        assert isinstance(wrapped, AWSConnectionError)
