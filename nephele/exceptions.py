"""Custom exceptions for nephele"""


class NepheleError(Exception):
    """Base exception for all nephele errors"""
    pass


class AWSError(NepheleError):
    """Base exception for AWS-related errors"""
    pass


class AWSCredentialsError(AWSError):
    """Raised when AWS credentials are missing or invalid"""
    pass


class AWSConnectionError(AWSError):
    """Raised when unable to connect to AWS"""
    pass


class AWSRegionError(AWSError):
    """Raised when AWS region is invalid or not accessible"""
    pass


class AWSServiceError(AWSError):
    """Raised when an AWS API call returns an error"""

    def __init__(self, message: str, error_code: str = "Unknown"):
        super().__init__(message)
        self.error_code = error_code


class FilterError(NepheleError):
    """Raised when a user-supplied EC2 filter cannot be translated"""
    pass


class StorageError(NepheleError):
    """Raised when an S3 object cannot be written to disk"""
    pass


class ConfigurationError(NepheleError):
    """Raised when configuration is invalid"""
    pass
