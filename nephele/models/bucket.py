"""S3 bucket and object data models"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


def _format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


@dataclass
class Bucket:
    """S3 bucket"""
    name: str
    creation_date: Optional[datetime] = None

    TABLE_HEADERS = ["Bucket Name", "Creation Date"]

    def to_row(self) -> List[str]:
        return [self.name, _format_timestamp(self.creation_date)]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "creation_date": self.creation_date.isoformat() if self.creation_date else None,
        }

    @classmethod
    def from_aws_response(cls, data: dict) -> "Bucket":
        return cls(name=data["Name"], creation_date=data.get("CreationDate"))


@dataclass
class S3Object:
    """Object in an S3 bucket"""
    key: str
    size: int = 0
    last_modified: Optional[datetime] = None
    storage_class: str = ""

    TABLE_HEADERS = ["Key", "Size", "Last Modified", "Storage Class"]

    @property
    def size_label(self) -> str:
        """Human readable size"""
        size = float(self.size)
        for unit in ("B", "KB", "MB", "GB", "TB"):
            if size < 1024 or unit == "TB":
                return f"{int(size)} {unit}" if unit == "B" else f"{size:.1f} {unit}"
            size /= 1024

    def to_row(self) -> List[str]:
        return [self.key, self.size_label, _format_timestamp(self.last_modified), self.storage_class]

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "size": self.size,
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
            "storage_class": self.storage_class,
        }

    @classmethod
    def from_aws_response(cls, data: dict) -> "S3Object":
        return cls(
            key=data["Key"],
            size=data.get("Size", 0),
            last_modified=data.get("LastModified"),
            storage_class=data.get("StorageClass", ""),
        )


@dataclass
class ObjectListing:
    """One page of a ListObjectsV2 call"""
    bucket: str
    objects: List[S3Object] = field(default_factory=list)
    next_continuation_token: Optional[str] = None
    is_truncated: bool = False
