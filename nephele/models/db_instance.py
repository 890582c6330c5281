"""RDS instance data models"""

from dataclasses import dataclass
from typing import List


@dataclass
class DbInstance:
    """RDS database instance"""
    instance_id: str
    status: str
    instance_class: str
    engine: str
    engine_version: str
    multi_az: bool = False
    endpoint: str = ""

    TABLE_HEADERS = ["DB Instance ID", "Status", "Endpoint", "Instance Class", "Engine", "Multi-AZ"]

    @property
    def engine_info(self) -> str:
        return f"{self.engine}/{self.engine_version}"

    def to_row(self) -> List[str]:
        """Row for terminal table rendering

        Identifier and endpoint are wrapped so the table stays narrow.
        """
        return [
            word_wrap(self.instance_id, "-", 2),
            self.status,
            word_wrap(self.endpoint, ".", 2),
            self.instance_class,
            self.engine_info,
            "true" if self.multi_az else "false",
        ]

    def to_dict(self) -> dict:
        return {
            "instance_id": self.instance_id,
            "status": self.status,
            "endpoint": self.endpoint,
            "instance_class": self.instance_class,
            "engine": self.engine,
            "engine_version": self.engine_version,
            "multi_az": self.multi_az,
        }

    @classmethod
    def from_aws_response(cls, data: dict) -> "DbInstance":
        """Create from a DescribeDBInstances ``DBInstances`` entry"""
        # Endpoint is absent while the instance is still being created
        endpoint = (data.get("Endpoint") or {}).get("Address", "")
        return cls(
            instance_id=data["DBInstanceIdentifier"],
            status=data["DBInstanceStatus"],
            instance_class=data.get("DBInstanceClass", ""),
            engine=data.get("Engine", ""),
            engine_version=data.get("EngineVersion", ""),
            multi_az=bool(data.get("MultiAZ", False)),
            endpoint=endpoint,
        )


def word_wrap(text: str, separator: str, every: int) -> str:
    """Break text onto a new line after every Nth separator.

    The separator stays at the end of the wrapped line:

        >>> word_wrap("my-long-db-name", "-", 2)
        'my-long-\\ndb-name'
    """
    if every < 1 or not text:
        return text
    parts = text.split(separator)
    lines = [
        separator.join(parts[i:i + every])
        for i in range(0, len(parts), every)
    ]
    return (separator + "\n").join(lines)
