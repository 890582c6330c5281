"""Output formatters for CLI commands

Every command renders through one of these so ``--format`` behaves the same
across services.
"""

import csv
import io
import json
from abc import ABC, abstractmethod
from typing import List

from tabulate import tabulate

from nephele.models.bucket import Bucket, ObjectListing, S3Object
from nephele.models.db_instance import DbInstance
from nephele.models.function import InvocationResult, LambdaFunction
from nephele.models.instance import Ec2Instance, StateChange


class OutputFormatter(ABC):
    """Base class for output formatters"""

    @abstractmethod
    def format_instances(self, instances: List[Ec2Instance], region: str) -> str:
        pass

    @abstractmethod
    def format_state_changes(self, changes: List[StateChange]) -> str:
        pass

    @abstractmethod
    def format_dry_run(self, action: str, instance_ids: List[str]) -> str:
        pass

    @abstractmethod
    def format_functions(self, functions: List[LambdaFunction], region: str) -> str:
        pass

    @abstractmethod
    def format_invocation(self, result: InvocationResult) -> str:
        pass

    @abstractmethod
    def format_db_instances(self, db_instances: List[DbInstance], region: str) -> str:
        pass

    @abstractmethod
    def format_buckets(self, buckets: List[Bucket]) -> str:
        pass

    @abstractmethod
    def format_objects(self, listing: ObjectListing) -> str:
        pass

    @abstractmethod
    def format_regions(self, regions: List[dict]) -> str:
        pass


class TableFormatter(OutputFormatter):
    """Human readable tables for the terminal"""

    def _table(self, headers: List[str], rows: List[List[str]]) -> str:
        return tabulate(rows, headers=headers, tablefmt="grid")

    def format_instances(self, instances: List[Ec2Instance], region: str) -> str:
        if not instances:
            return f"No instances found in {region}"
        return self._table(Ec2Instance.TABLE_HEADERS, [i.to_row() for i in instances])

    def format_state_changes(self, changes: List[StateChange]) -> str:
        lines = []
        for change in changes:
            lines.append(f"Previous State({change.instance_id}) : {change.previous_state}")
            lines.append(f"Current State({change.instance_id})  : {change.current_state}")
            lines.append("")
        return "\n".join(lines).rstrip("\n")

    def format_dry_run(self, action: str, instance_ids: List[str]) -> str:
        return f"Dry run succeeded: {action} of {', '.join(instance_ids)} would have been accepted."

    def format_functions(self, functions: List[LambdaFunction], region: str) -> str:
        if not functions:
            return f"No Lambda functions found in {region}"
        return self._table(LambdaFunction.TABLE_HEADERS, [f.to_row() for f in functions])

    def format_invocation(self, result: InvocationResult) -> str:
        lines = [f"Status Code: {result.status_code}"]
        if result.executed_version:
            lines.append(f"Executed Version: {result.executed_version}")
        if result.function_error:
            lines.append(f"Function Error: {result.function_error}")
        if result.payload:
            lines.append(f"Payload: {result.payload}")
        return "\n".join(lines)

    def format_db_instances(self, db_instances: List[DbInstance], region: str) -> str:
        if not db_instances:
            return f"No RDS instances found in {region}"
        return self._table(DbInstance.TABLE_HEADERS, [d.to_row() for d in db_instances])

    def format_buckets(self, buckets: List[Bucket]) -> str:
        if not buckets:
            return "No buckets found"
        return self._table(Bucket.TABLE_HEADERS, [b.to_row() for b in buckets])

    def format_objects(self, listing: ObjectListing) -> str:
        if not listing.objects:
            output = f"No objects found in {listing.bucket}"
        else:
            output = self._table(
                S3Object.TABLE_HEADERS,
                [o.to_row() for o in listing.objects],
            )
        if listing.is_truncated and listing.next_continuation_token:
            output += (
                "\n\nMore objects available. Continue with:\n"
                f"  --continuation-token {listing.next_continuation_token}"
            )
        return output

    def format_regions(self, regions: List[dict]) -> str:
        rows = [[r["code"], r["name"]] for r in regions]
        return self._table(["Region", "Name"], rows)


class JSONFormatter(OutputFormatter):
    """JSON output for scripting"""

    def _dump(self, data) -> str:
        return json.dumps(data, indent=2, default=str)

    def format_instances(self, instances: List[Ec2Instance], region: str) -> str:
        return self._dump({
            "region": region,
            "count": len(instances),
            "instances": [i.to_dict() for i in instances],
        })

    def format_state_changes(self, changes: List[StateChange]) -> str:
        return self._dump([
            {
                "instance_id": c.instance_id,
                "previous_state": c.previous_state,
                "current_state": c.current_state,
            }
            for c in changes
        ])

    def format_dry_run(self, action: str, instance_ids: List[str]) -> str:
        return self._dump({
            "dry_run": True,
            "action": action,
            "instance_ids": list(instance_ids),
            "succeeded": True,
        })

    def format_functions(self, functions: List[LambdaFunction], region: str) -> str:
        return self._dump({
            "region": region,
            "count": len(functions),
            "functions": [f.to_dict() for f in functions],
        })

    def format_invocation(self, result: InvocationResult) -> str:
        return self._dump(result.to_dict())

    def format_db_instances(self, db_instances: List[DbInstance], region: str) -> str:
        return self._dump({
            "region": region,
            "count": len(db_instances),
            "db_instances": [d.to_dict() for d in db_instances],
        })

    def format_buckets(self, buckets: List[Bucket]) -> str:
        return self._dump({
            "count": len(buckets),
            "buckets": [b.to_dict() for b in buckets],
        })

    def format_objects(self, listing: ObjectListing) -> str:
        return self._dump({
            "bucket": listing.bucket,
            "count": len(listing.objects),
            "is_truncated": listing.is_truncated,
            "next_continuation_token": listing.next_continuation_token,
            "objects": [o.to_dict() for o in listing.objects],
        })

    def format_regions(self, regions: List[dict]) -> str:
        return self._dump(regions)


class CSVFormatter(OutputFormatter):
    """CSV output for spreadsheets"""

    def _csv(self, headers: List[str], rows: List[List]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(headers)
        writer.writerows(rows)
        return buffer.getvalue().rstrip("\n")

    def format_instances(self, instances: List[Ec2Instance], region: str) -> str:
        return self._csv(Ec2Instance.TABLE_HEADERS, [i.to_row() for i in instances])

    def format_state_changes(self, changes: List[StateChange]) -> str:
        return self._csv(
            ["Instance ID", "Previous State", "Current State"],
            [[c.instance_id, c.previous_state, c.current_state] for c in changes],
        )

    def format_dry_run(self, action: str, instance_ids: List[str]) -> str:
        return self._csv(
            ["Instance ID", "Action", "Dry Run"],
            [[instance_id, action, "succeeded"] for instance_id in instance_ids],
        )

    def format_functions(self, functions: List[LambdaFunction], region: str) -> str:
        return self._csv(LambdaFunction.TABLE_HEADERS, [f.to_row() for f in functions])

    def format_invocation(self, result: InvocationResult) -> str:
        return self._csv(
            ["Function", "Status Code", "Function Error", "Executed Version", "Payload"],
            [[
                result.function_name,
                result.status_code,
                result.function_error or "",
                result.executed_version or "",
                result.payload,
            ]],
        )

    def format_db_instances(self, db_instances: List[DbInstance], region: str) -> str:
        # No word wrapping in CSV cells
        return self._csv(
            DbInstance.TABLE_HEADERS,
            [
                [d.instance_id, d.status, d.endpoint, d.instance_class, d.engine_info,
                 "true" if d.multi_az else "false"]
                for d in db_instances
            ],
        )

    def format_buckets(self, buckets: List[Bucket]) -> str:
        return self._csv(Bucket.TABLE_HEADERS, [b.to_row() for b in buckets])

    def format_objects(self, listing: ObjectListing) -> str:
        return self._csv(
            S3Object.TABLE_HEADERS,
            [
                [o.key, o.size, o.last_modified.isoformat() if o.last_modified else "", o.storage_class]
                for o in listing.objects
            ],
        )

    def format_regions(self, regions: List[dict]) -> str:
        return self._csv(["Region", "Name"], [[r["code"], r["name"]] for r in regions])


_FORMATTERS = {
    "table": TableFormatter,
    "json": JSONFormatter,
    "csv": CSVFormatter,
}


def get_formatter(format_name: str) -> OutputFormatter:
    """Get formatter by name

    Raises:
        ValueError: If the format is unknown
    """
    try:
        return _FORMATTERS[format_name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown output format '{format_name}'. Choose from: {', '.join(_FORMATTERS)}"
        ) from None
