"""S3 storage service"""

import logging
import os
from typing import List, Optional

from botocore.exceptions import ClientError, BotoCoreError

from nephele.exceptions import StorageError
from nephele.models.bucket import Bucket, S3Object, ObjectListing
from nephele.services.aws_client import AWSClient, wrap_aws_error
from nephele.validation import (
    ValidationError,
    validate_bucket_response,
    validate_object_response,
)

logger = logging.getLogger("nephele")


class StorageService:
    """Service for browsing and downloading S3 objects"""

    def __init__(self, aws_client: AWSClient):
        self.aws_client = aws_client

    def get_buckets(self) -> List[Bucket]:
        """Fetch all buckets owned by the account"""
        try:
            response = self.aws_client.s3_client.list_buckets()
        except (ClientError, BotoCoreError) as e:
            raise wrap_aws_error("list S3 buckets", e) from e

        buckets = []
        for bucket_data in response.get("Buckets", []):
            try:
                validate_bucket_response(bucket_data)
            except ValidationError as e:
                logger.warning(f"Skipping malformed bucket: {e}")
                continue
            buckets.append(Bucket.from_aws_response(bucket_data))
        return buckets

    def get_objects(
        self,
        bucket: str,
        max_count: int = 1000,
        prefix: Optional[str] = None,
        continuation_token: Optional[str] = None,
    ) -> ObjectListing:
        """
        Fetch one page of objects from a bucket

        Args:
            bucket: Bucket name
            max_count: Maximum objects to return in this page
            prefix: Only return keys starting with this prefix
            continuation_token: Token from a previous page to continue from

        Returns:
            ObjectListing with the objects and the token for the next page
        """
        params = {"Bucket": bucket, "MaxKeys": max_count}
        if prefix:
            params["Prefix"] = prefix
        if continuation_token:
            params["ContinuationToken"] = continuation_token

        try:
            response = self.aws_client.s3_client.list_objects_v2(**params)
        except (ClientError, BotoCoreError) as e:
            raise wrap_aws_error(f"list objects in {bucket}", e) from e

        objects = []
        for object_data in response.get("Contents", []):
            try:
                validate_object_response(object_data)
            except ValidationError as e:
                logger.warning(f"Skipping malformed object: {e}")
                continue
            objects.append(S3Object.from_aws_response(object_data))

        return ObjectListing(
            bucket=bucket,
            objects=objects,
            next_continuation_token=response.get("NextContinuationToken"),
            is_truncated=bool(response.get("IsTruncated", False)),
        )

    def download_object(self, bucket: str, key: str, file_name: Optional[str] = None) -> int:
        """
        Download a single object to a local file

        Args:
            bucket: Bucket name
            key: Object key
            file_name: Destination path, defaults to the key's base name

        Returns:
            Number of bytes written

        Raises:
            StorageError: If the destination file cannot be written
            AWSServiceError: If the download fails
        """
        file_name = file_name or os.path.basename(key.rstrip("/")) or key
        logger.debug(f"Downloading s3://{bucket}/{key} to {file_name}")

        try:
            with open(file_name, "wb") as f:
                # Managed transfer: parallel ranged GETs land out of order, so the
                # final position is not the size
                self.aws_client.s3_client.download_fileobj(bucket, key, f)
                f.flush()
                return os.fstat(f.fileno()).st_size
        except (ClientError, BotoCoreError) as e:
            _remove_partial(file_name)
            raise wrap_aws_error(f"download s3://{bucket}/{key}", e) from e
        except OSError as e:
            raise StorageError(f"Cannot write to '{file_name}': {e.strerror or e}") from e


def _remove_partial(file_name: str) -> None:
    try:
        os.remove(file_name)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove partial download '{file_name}': {e}")
