"""EC2 instance data models"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass
class Ec2Instance:
    """A running or stopped EC2 instance as shown by ``ec2 list``"""
    instance_id: str
    state: str
    instance_type: str
    name: str = ""
    private_ip: str = ""
    public_ip: str = ""
    availability_zone: Optional[str] = None
    launch_time: Optional[datetime] = None

    TABLE_HEADERS = ["Name", "Instance ID", "State", "Private IP", "Public IP", "Instance Type"]

    @property
    def is_terminated(self) -> bool:
        return self.state == "terminated"

    def to_row(self) -> List[str]:
        """Row for terminal table rendering"""
        return [
            self.name,
            self.instance_id,
            self.state,
            self.private_ip,
            self.public_ip,
            self.instance_type,
        ]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "instance_id": self.instance_id,
            "state": self.state,
            "private_ip": self.private_ip,
            "public_ip": self.public_ip,
            "instance_type": self.instance_type,
            "availability_zone": self.availability_zone,
            "launch_time": self.launch_time.isoformat() if self.launch_time else None,
        }

    @classmethod
    def from_aws_response(cls, data: dict) -> "Ec2Instance":
        """Create from a DescribeInstances ``Instances`` entry"""
        placement = data.get("Placement") or {}
        return cls(
            instance_id=data["InstanceId"],
            state=data["State"]["Name"],
            instance_type=data["InstanceType"],
            name=get_instance_name(data.get("Tags")),
            private_ip=data.get("PrivateIpAddress") or "",
            public_ip=data.get("PublicIpAddress") or "",
            availability_zone=placement.get("AvailabilityZone"),
            launch_time=data.get("LaunchTime"),
        )


@dataclass
class StateChange:
    """Result of a start or stop request for one instance"""
    instance_id: str
    previous_state: str
    current_state: str

    @classmethod
    def from_aws_response(cls, data: dict) -> "StateChange":
        return cls(
            instance_id=data["InstanceId"],
            previous_state=data["PreviousState"]["Name"],
            current_state=data["CurrentState"]["Name"],
        )


def get_instance_name(tags: Optional[List[dict]]) -> str:
    """Return the value of the ``Name`` tag, or an empty string."""
    name = ""
    for tag in tags or []:
        if tag.get("Key") == "Name":
            name = tag.get("Value", "")
    return name
