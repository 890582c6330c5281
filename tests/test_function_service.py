"""Tests for FunctionService"""

import io
import json

import pytest
from unittest.mock import Mock

from nephele.exceptions import AWSServiceError
from nephele.services.function_service import FunctionService, INVOCATION_TYPE


class TestGetFunctions:
    """Tests for FunctionService.get_functions"""

    def test_get_functions(self, mock_aws_client, function_data):
        mock_aws_client.lambda_client.list_functions.return_value = {"Functions": [function_data]}

        functions = FunctionService(mock_aws_client).get_functions()

        assert len(functions) == 1
        fn = functions[0]
        assert fn.name == "resize-images"
        assert fn.runtime == "python3.12"
        assert fn.memory == 256
        assert fn.timeout == 30
        assert fn.to_row() == [
            "resize-images", "Resize uploaded images", "python3.12", "256", "30",
            "app.handler", "arn:aws:iam::123456789012:role/lambda-exec", "$LATEST",
        ]

    def test_pagination_and_sorting(self, mock_aws_client, function_data):
        later = dict(function_data, FunctionName="zip-logs")
        earlier = dict(function_data, FunctionName="auth-hook")
        mock_aws_client.lambda_client.list_functions.side_effect = [
            {"Functions": [later], "NextMarker": "m1"},
            {"Functions": [earlier]},
        ]

        functions = FunctionService(mock_aws_client).get_functions()

        assert [f.name for f in functions] == ["auth-hook", "zip-logs"]
        calls = mock_aws_client.lambda_client.list_functions.call_args_list
        assert calls[0].kwargs == {}
        assert calls[1].kwargs == {"Marker": "m1"}

    def test_container_image_function_has_package_type_as_runtime(self, mock_aws_client, function_data):
        image_fn = dict(function_data, PackageType="Image")
        del image_fn["Runtime"]
        del image_fn["Handler"]
        mock_aws_client.lambda_client.list_functions.return_value = {"Functions": [image_fn]}

        fn = FunctionService(mock_aws_client).get_functions()[0]

        assert fn.runtime == "Image"
        assert fn.handler == ""

    def test_skips_malformed_function(self, mock_aws_client, function_data):
        mock_aws_client.lambda_client.list_functions.return_value = {
            "Functions": [{"Runtime": "python3.12"}, function_data]
        }

        assert len(FunctionService(mock_aws_client).get_functions()) == 1

    def test_client_error(self, mock_aws_client, client_error):
        mock_aws_client.lambda_client.list_functions.side_effect = client_error("AccessDeniedException")

        with pytest.raises(AWSServiceError, match="AccessDeniedException"):
            FunctionService(mock_aws_client).get_functions()


class TestInvokeFunction:
    """Tests for FunctionService.invoke_function"""

    def test_invoke(self, mock_aws_client):
        mock_aws_client.lambda_client.invoke.return_value = {
            "StatusCode": 200,
            "ExecutedVersion": "$LATEST",
            "Payload": io.BytesIO(json.dumps({"ok": True}).encode()),
        }

        result = FunctionService(mock_aws_client).invoke_function("resize-images")

        assert result.status_code == 200
        assert result.payload == '{"ok": true}'
        assert result.executed_version == "$LATEST"
        assert result.succeeded is True
        mock_aws_client.lambda_client.invoke.assert_called_once_with(
            FunctionName="resize-images",
            InvocationType="RequestResponse",
        )

    def test_invocation_type_is_request_response(self):
        assert INVOCATION_TYPE == "RequestResponse"

    def test_function_error(self, mock_aws_client):
        mock_aws_client.lambda_client.invoke.return_value = {
            "StatusCode": 200,
            "FunctionError": "Unhandled",
            "Payload": io.BytesIO(b'{"errorMessage": "boom"}'),
        }

        result = FunctionService(mock_aws_client).invoke_function("resize-images")

        assert result.function_error == "Unhandled"
        assert result.succeeded is False
        assert result.to_dict()["payload"] == {"errorMessage": "boom"}

    def test_missing_function(self, mock_aws_client, client_error):
        mock_aws_client.lambda_client.invoke.side_effect = client_error(
            "ResourceNotFoundException", "Function not found"
        )

        with pytest.raises(AWSServiceError, match="Function not found"):
            FunctionService(mock_aws_client).invoke_function("nope")
