"""AWS client wrapper"""

import boto3
import logging
from typing import Optional
from botocore.config import Config
from botocore.exceptions import ClientError, NoCredentialsError, BotoCoreError

from nephele.exceptions import (
    AWSCredentialsError,
    AWSConnectionError,
    AWSRegionError,
    AWSServiceError,
)

logger = logging.getLogger("nephele")

CREDENTIALS_HELP = (
    "AWS credentials not found. Please configure credentials using:\n"
    "  - AWS CLI: aws configure\n"
    "  - Environment variables: AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY\n"
    "  - Or specify a profile with --profile"
)


class AWSClient:
    """Wrapper for the EC2, Lambda, RDS and S3 clients of one region"""

    def __init__(
        self,
        region: str,
        profile: Optional[str] = None,
        connect_timeout: int = 10,
        read_timeout: int = 60,
        max_attempts: int = 3,
    ):
        """
        Initialize AWS client

        Args:
            region: AWS region code
            profile: Optional AWS profile name
            connect_timeout: Connection timeout in seconds
            read_timeout: Read timeout in seconds
            max_attempts: Retry attempts botocore makes per API call
        """
        self.region = region
        self.profile = profile
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.max_attempts = max_attempts
        self._session = None
        self._clients = {}

    def _get_session(self):
        """Get boto3 session"""
        if self._session is None:
            if self.profile:
                self._session = boto3.Session(profile_name=self.profile)
            else:
                self._session = boto3.Session()
        return self._session

    def _get_config(self) -> Config:
        return Config(
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={"max_attempts": self.max_attempts, "mode": "standard"},
        )

    def client(self, service_name: str):
        """Get a boto3 client for a service, creating it if necessary"""
        if service_name not in self._clients:
            try:
                session = self._get_session()
                self._clients[service_name] = session.client(
                    service_name,
                    region_name=self.region,
                    config=self._get_config(),
                )
                logger.debug(f"Created {service_name} client for region {self.region}")
            except NoCredentialsError as e:
                logger.error("AWS credentials not found")
                raise AWSCredentialsError(CREDENTIALS_HELP) from e
            except ClientError as e:
                error_code = e.response.get("Error", {}).get("Code", "Unknown")
                if error_code in ("InvalidRegionName", "UnauthorizedOperation"):
                    logger.error(f"Region '{self.region}' error: {error_code}")
                    raise AWSRegionError(
                        f"Cannot access region '{self.region}'. "
                        f"The region may be invalid or not enabled for your account.\n"
                        f"Use 'nephele regions' to see available regions."
                    ) from e
                logger.error(f"Failed to create {service_name} client: {e}")
                raise AWSConnectionError(f"Failed to create {service_name} client: {str(e)}") from e
            except BotoCoreError as e:
                logger.error(f"Failed to create {service_name} client: {e}")
                raise AWSConnectionError(f"Failed to create {service_name} client: {str(e)}") from e
        return self._clients[service_name]

    @property
    def ec2_client(self):
        """Get EC2 client, creating if necessary"""
        return self.client("ec2")

    @property
    def lambda_client(self):
        """Get Lambda client, creating if necessary"""
        return self.client("lambda")

    @property
    def rds_client(self):
        """Get RDS client, creating if necessary"""
        return self.client("rds")

    @property
    def s3_client(self):
        """Get S3 client, creating if necessary"""
        return self.client("s3")

    def get_accessible_regions(self) -> list[str]:
        """
        Get list of regions that are enabled and accessible to the current AWS account.

        Returns:
            List of region codes that are accessible

        Raises:
            AWSCredentialsError: If credentials are missing or invalid
            AWSConnectionError: If unable to connect to AWS
        """
        try:
            # describe_regions() only returns regions enabled for the account
            response = self.ec2_client.describe_regions()
            accessible_regions = [region["RegionName"] for region in response["Regions"]]
            logger.debug(f"Found {len(accessible_regions)} accessible regions")
            return accessible_regions
        except NoCredentialsError as e:
            logger.error("AWS credentials not found when listing regions")
            raise AWSCredentialsError(CREDENTIALS_HELP) from e
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to get accessible regions: {e}")
            raise AWSConnectionError(f"Failed to get accessible regions: {str(e)}") from e


def from_settings(settings, region: Optional[str] = None, profile: Optional[str] = None) -> AWSClient:
    """Build an AWSClient from Settings, letting CLI values override them"""
    return AWSClient(
        region or settings.aws_region,
        profile or settings.aws_profile,
        connect_timeout=settings.aws_connect_timeout,
        read_timeout=settings.aws_read_timeout,
        max_attempts=settings.aws_max_attempts,
    )


def wrap_aws_error(action: str, error: Exception) -> Exception:
    """Convert a botocore error raised by an API call into a nephele error.

    Args:
        action: What was being attempted, e.g. "describe EC2 instances"
        error: The botocore exception

    Returns:
        Exception to raise (callers use ``raise wrap_aws_error(...) from e``)
    """
    if isinstance(error, NoCredentialsError):
        return AWSCredentialsError(CREDENTIALS_HELP)
    if isinstance(error, ClientError):
        error_code = error.response.get("Error", {}).get("Code", "Unknown")
        error_msg = error.response.get("Error", {}).get("Message", str(error))
        logger.debug(f"Failed to {action}: {error_code}: {error_msg}")
        return AWSServiceError(f"AWS API error ({error_code}): {error_msg}", error_code)
    logger.debug(f"Failed to {action}: {error}")
    return AWSConnectionError(f"AWS connection error: {str(error)}")
