"""EC2 instance service"""

import logging
from typing import List, Optional

from botocore.exceptions import ClientError, BotoCoreError

from nephele.models.instance import Ec2Instance, StateChange
from nephele.services.aws_client import AWSClient, wrap_aws_error
from nephele.services.filter_service import Ec2Filter
from nephele.validation import ValidationError, validate_instance_response

logger = logging.getLogger("nephele")


class InstanceService:
    """Service for listing, starting and stopping EC2 instances"""

    def __init__(self, aws_client: AWSClient):
        """
        Initialize instance service

        Args:
            aws_client: AWS client wrapper
        """
        self.aws_client = aws_client

    def get_all_instances(self) -> dict:
        """Return the raw DescribeInstances response, unfiltered"""
        try:
            return self.aws_client.ec2_client.describe_instances()
        except (ClientError, BotoCoreError) as e:
            raise wrap_aws_error("describe EC2 instances", e) from e

    def get_instances(self, filters: Optional[List[Ec2Filter]] = None) -> List[Ec2Instance]:
        """
        Fetch instances, skipping terminated ones

        Args:
            filters: Translated EC2 filters (see filter_service)

        Returns:
            One Ec2Instance per non-terminated instance

        Raises:
            AWSServiceError: If the API call fails
        """
        instances = []
        next_token = None

        try:
            while True:
                params = {}
                if filters:
                    params["Filters"] = filters
                if next_token:
                    params["NextToken"] = next_token

                response = self.aws_client.ec2_client.describe_instances(**params)

                for reservation in response.get("Reservations", []):
                    for instance_data in reservation.get("Instances", []):
                        try:
                            validate_instance_response(instance_data)
                        except ValidationError as e:
                            logger.warning(f"Skipping malformed instance: {e}")
                            continue

                        instance = Ec2Instance.from_aws_response(instance_data)
                        if instance.is_terminated:
                            continue
                        instances.append(instance)

                next_token = response.get("NextToken")
                if not next_token:
                    break

        except (ClientError, BotoCoreError) as e:
            raise wrap_aws_error("describe EC2 instances", e) from e

        logger.debug(f"Found {len(instances)} instances in {self.aws_client.region}")
        return instances

    def start_instances(self, instance_ids: List[str], dry_run: bool = False) -> List[StateChange]:
        """Start instances and return their state changes.

        With ``dry_run`` an empty list means AWS accepted the request.
        """
        return self._change_state("start", instance_ids, dry_run)

    def stop_instances(self, instance_ids: List[str], dry_run: bool = False) -> List[StateChange]:
        """Stop instances and return their state changes.

        With ``dry_run`` an empty list means AWS accepted the request.
        """
        return self._change_state("stop", instance_ids, dry_run)

    def _change_state(self, action: str, instance_ids: List[str], dry_run: bool) -> List[StateChange]:
        ec2 = self.aws_client.ec2_client
        call, result_key = {
            "start": (ec2.start_instances, "StartingInstances"),
            "stop": (ec2.stop_instances, "StoppingInstances"),
        }[action]

        try:
            response = call(InstanceIds=list(instance_ids), DryRun=dry_run)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if dry_run and error_code == "DryRunOperation":
                logger.info(f"Dry run: {action} of {', '.join(instance_ids)} would have succeeded")
                return []
            raise wrap_aws_error(f"{action} EC2 instances", e) from e
        except BotoCoreError as e:
            raise wrap_aws_error(f"{action} EC2 instances", e) from e

        return [StateChange.from_aws_response(change) for change in response.get(result_key, [])]
