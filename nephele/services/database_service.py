"""RDS database instance service"""

import logging
from typing import List

from botocore.exceptions import ClientError, BotoCoreError

from nephele.models.db_instance import DbInstance
from nephele.services.aws_client import AWSClient, wrap_aws_error
from nephele.validation import ValidationError, validate_db_instance_response

logger = logging.getLogger("nephele")


class DatabaseService:
    """Service for listing RDS instances"""

    def __init__(self, aws_client: AWSClient):
        self.aws_client = aws_client

    def get_db_instances(self) -> List[DbInstance]:
        """
        Fetch all RDS instances, skipping terminated ones

        Raises:
            AWSServiceError: If the API call fails
        """
        db_instances = []
        marker = None

        try:
            while True:
                params = {}
                if marker:
                    params["Marker"] = marker

                response = self.aws_client.rds_client.describe_db_instances(**params)

                for instance_data in response.get("DBInstances", []):
                    try:
                        validate_db_instance_response(instance_data)
                    except ValidationError as e:
                        logger.warning(f"Skipping malformed DB instance: {e}")
                        continue

                    db_instance = DbInstance.from_aws_response(instance_data)
                    if db_instance.status == "terminated":
                        continue
                    db_instances.append(db_instance)

                marker = response.get("Marker")
                if not marker:
                    break

        except (ClientError, BotoCoreError) as e:
            raise wrap_aws_error("describe RDS instances", e) from e

        return db_instances
