"""API response validation module"""

from .api_validators import (
    ValidationError,
    validate_instance_response,
    validate_function_response,
    validate_db_instance_response,
    validate_bucket_response,
    validate_object_response,
)

__all__ = [
    "ValidationError",
    "validate_instance_response",
    "validate_function_response",
    "validate_db_instance_response",
    "validate_bucket_response",
    "validate_object_response",
]
