"""Lambda function data models"""

import json
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class LambdaFunction:
    """Lambda function configuration"""
    name: str
    runtime: str = ""
    memory: int = 0
    timeout: int = 0
    handler: str = ""
    role: str = ""
    version: str = ""
    description: str = ""

    TABLE_HEADERS = ["Name", "Description", "Runtime", "Memory (MB)", "Timeout (s)", "Handler", "Role", "Version"]

    def to_row(self) -> List[str]:
        return [
            self.name,
            self.description,
            self.runtime,
            str(self.memory),
            str(self.timeout),
            self.handler,
            self.role,
            self.version,
        ]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "runtime": self.runtime,
            "memory": self.memory,
            "timeout": self.timeout,
            "handler": self.handler,
            "role": self.role,
            "version": self.version,
        }

    @classmethod
    def from_aws_response(cls, data: dict) -> "LambdaFunction":
        """Create from a ListFunctions ``Functions`` entry"""
        return cls(
            name=data["FunctionName"],
            # Container image functions have no runtime
            runtime=data.get("Runtime") or data.get("PackageType", ""),
            memory=data.get("MemorySize", 0),
            timeout=data.get("Timeout", 0),
            handler=data.get("Handler", ""),
            role=data.get("Role", ""),
            version=data.get("Version", ""),
            description=data.get("Description", ""),
        )


@dataclass
class InvocationResult:
    """Outcome of a synchronous (RequestResponse) invocation"""
    function_name: str
    status_code: int
    payload: str = ""
    function_error: Optional[str] = None
    executed_version: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.function_error is None and 200 <= self.status_code < 300

    def to_dict(self) -> dict:
        try:
            payload = json.loads(self.payload) if self.payload else None
        except ValueError:
            payload = self.payload
        return {
            "function_name": self.function_name,
            "status_code": self.status_code,
            "function_error": self.function_error,
            "executed_version": self.executed_version,
            "payload": payload,
        }
