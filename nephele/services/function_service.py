"""Lambda function service"""

import logging
from typing import List

from botocore.exceptions import ClientError, BotoCoreError

from nephele.models.function import LambdaFunction, InvocationResult
from nephele.services.aws_client import AWSClient, wrap_aws_error
from nephele.validation import ValidationError, validate_function_response

logger = logging.getLogger("nephele")

# Synchronous invocation: wait for the function and return its response
INVOCATION_TYPE = "RequestResponse"


class FunctionService:
    """Service for listing and invoking Lambda functions"""

    def __init__(self, aws_client: AWSClient):
        self.aws_client = aws_client

    def get_functions(self) -> List[LambdaFunction]:
        """
        Fetch all Lambda functions with their configurations

        Returns:
            List of LambdaFunction sorted by name

        Raises:
            AWSServiceError: If the API call fails
        """
        functions = []
        marker = None

        try:
            while True:
                params = {}
                if marker:
                    params["Marker"] = marker

                response = self.aws_client.lambda_client.list_functions(**params)

                for function_data in response.get("Functions", []):
                    try:
                        validate_function_response(function_data)
                    except ValidationError as e:
                        logger.warning(f"Skipping malformed function: {e}")
                        continue
                    functions.append(LambdaFunction.from_aws_response(function_data))

                marker = response.get("NextMarker")
                if not marker:
                    break

        except (ClientError, BotoCoreError) as e:
            raise wrap_aws_error("list Lambda functions", e) from e

        return sorted(functions, key=lambda f: f.name)

    def invoke_function(self, name: str) -> InvocationResult:
        """
        Invoke a function synchronously

        Args:
            name: Function name or ARN

        Returns:
            InvocationResult with status code and decoded payload

        Raises:
            AWSServiceError: If the invocation request itself fails
        """
        try:
            response = self.aws_client.lambda_client.invoke(
                FunctionName=name,
                InvocationType=INVOCATION_TYPE,
            )
            payload_stream = response.get("Payload")
            payload = payload_stream.read().decode("utf-8", errors="replace") if payload_stream else ""
        except (ClientError, BotoCoreError) as e:
            raise wrap_aws_error(f"invoke Lambda function {name}", e) from e

        result = InvocationResult(
            function_name=name,
            status_code=response.get("StatusCode", 0),
            payload=payload,
            function_error=response.get("FunctionError"),
            executed_version=response.get("ExecutedVersion"),
        )
        if result.function_error:
            logger.warning(f"Function {name} returned an error: {result.function_error}")
        return result
