"""Pytest configuration and fixtures"""

from datetime import datetime, timezone

import pytest
from unittest.mock import Mock
from botocore.exceptions import ClientError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.nephele/config.toml and NEPHELE_* env vars"""
    import os
    for key in list(os.environ):
        if key.startswith("NEPHELE_"):
            monkeypatch.delenv(key, raising=False)
    config_path = tmp_path / "nephele-home" / "config.toml"
    monkeypatch.setattr("nephele.config.settings.get_config_path", lambda: config_path)
    monkeypatch.setattr("nephele.cli.commands.general_commands.get_config_path", lambda: config_path)
    return config_path


def make_client_error(code: str, message: str = "error", operation: str = "Operation") -> ClientError:
    """Build a botocore ClientError with the given error code"""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def instance_data():
    """A DescribeInstances instance entry"""
    return {
        "InstanceId": "i-0a12b345c678de",
        "InstanceType": "t3.micro",
        "State": {"Code": 16, "Name": "running"},
        "PrivateIpAddress": "10.0.0.12",
        "PublicIpAddress": "54.12.34.56",
        "Placement": {"AvailabilityZone": "us-east-1a"},
        "LaunchTime": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "Tags": [
            {"Key": "env", "Value": "prod"},
            {"Key": "Name", "Value": "web-server"},
        ],
    }


@pytest.fixture
def function_data():
    """A ListFunctions function entry"""
    return {
        "FunctionName": "resize-images",
        "Runtime": "python3.12",
        "MemorySize": 256,
        "Timeout": 30,
        "Handler": "app.handler",
        "Role": "arn:aws:iam::123456789012:role/lambda-exec",
        "Version": "$LATEST",
        "Description": "Resize uploaded images",
    }


@pytest.fixture
def db_instance_data():
    """A DescribeDBInstances instance entry"""
    return {
        "DBInstanceIdentifier": "orders-db-primary",
        "DBInstanceStatus": "available",
        "DBInstanceClass": "db.t3.medium",
        "Engine": "postgres",
        "EngineVersion": "15.4",
        "MultiAZ": True,
        "Endpoint": {
            "Address": "orders-db-primary.abc123.us-east-1.rds.amazonaws.com",
            "Port": 5432,
        },
    }


@pytest.fixture
def mock_aws_client():
    """Create a mock AWS client"""
    client = Mock()
    client.region = "us-east-1"
    client.profile = None
    return client


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors"""
    return make_client_error
