"""API response validators for AWS API data"""

from typing import Any


class ValidationError(Exception):
    """Raised when API response validation fails"""
    pass


def _require_str(data: dict, field: str, context: str) -> str:
    value = data.get(field)
    if not value or not isinstance(value, str):
        raise ValidationError(
            f"Missing or invalid '{field}' field for {context}: {value}"
        )
    return value


def validate_instance_response(data: Any) -> None:
    """
    Validate one instance from an EC2 DescribeInstances response

    Args:
        data: Entry of a reservation's ``Instances`` list

    Raises:
        ValidationError: If required fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid instance entry type: {type(data)}")

    instance_id = _require_str(data, "InstanceId", "instance")
    _require_str(data, "InstanceType", instance_id)

    state = data.get("State")
    if not isinstance(state, dict):
        raise ValidationError(f"Missing or invalid 'State' for {instance_id}")
    _require_str(state, "Name", f"state of {instance_id}")

    tags = data.get("Tags")
    if tags is not None and not isinstance(tags, list):
        raise ValidationError(
            f"Invalid 'Tags' type for {instance_id}: {type(tags)} (expected list)"
        )


def validate_function_response(data: Any) -> None:
    """
    Validate one function configuration from a Lambda ListFunctions response

    Raises:
        ValidationError: If required fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid function entry type: {type(data)}")

    name = _require_str(data, "FunctionName", "function")

    for field in ("MemorySize", "Timeout"):
        value = data.get(field)
        if value is not None and (not isinstance(value, int) or value < 0):
            raise ValidationError(
                f"Invalid '{field}' for {name}: {value} (must be non-negative integer)"
            )


def validate_db_instance_response(data: Any) -> None:
    """
    Validate one instance from an RDS DescribeDBInstances response

    Raises:
        ValidationError: If required fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid DB instance entry type: {type(data)}")

    identifier = _require_str(data, "DBInstanceIdentifier", "DB instance")
    _require_str(data, "DBInstanceStatus", identifier)

    # Endpoint is optional while the instance is being created
    endpoint = data.get("Endpoint")
    if endpoint is not None and not isinstance(endpoint, dict):
        raise ValidationError(
            f"Invalid 'Endpoint' type for {identifier}: {type(endpoint)} (expected dict)"
        )


def validate_bucket_response(data: Any) -> None:
    """Validate one bucket from an S3 ListBuckets response"""
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid bucket entry type: {type(data)}")
    _require_str(data, "Name", "bucket")


def validate_object_response(data: Any) -> None:
    """Validate one object from an S3 ListObjectsV2 response"""
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid object entry type: {type(data)}")

    key = _require_str(data, "Key", "object")

    size = data.get("Size")
    if size is not None and (not isinstance(size, int) or size < 0):
        raise ValidationError(
            f"Invalid 'Size' for {key}: {size} (must be non-negative integer)"
        )
