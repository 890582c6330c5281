"""Command-line argument parser"""

import argparse
from typing import List, Optional

from nephele.models.region import is_valid_region
from nephele.services.filter_service import FILTER_MAP
from nephele.cli.commands import (
    cmd_ec2_list,
    cmd_ec2_start,
    cmd_ec2_stop,
    cmd_lambda_list,
    cmd_lambda_invoke,
    cmd_rds_list,
    cmd_s3_list_buckets,
    cmd_s3_list_objects,
    cmd_s3_download,
    cmd_regions,
    cmd_config_init,
)


def region_type(value: str) -> str:
    """argparse type for --region"""
    if not is_valid_region(value):
        raise argparse.ArgumentTypeError(
            f"invalid region '{value}'. Use 'nephele regions' to see available regions."
        )
    return value


def max_keys_type(value: str) -> int:
    """argparse type for --max-count (S3 caps a page at 1000 keys)"""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count '{value}'") from None
    if not 1 <= count <= 1000:
        raise argparse.ArgumentTypeError("count must be between 1 and 1000")
    return count


def _common_options() -> argparse.ArgumentParser:
    """Options shared by every command that talks to AWS"""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--region", "-r",
        type=region_type,
        default=None,
        help="AWS region (default: from config, else us-east-1)",
    )
    common.add_argument("--profile", "-p", default=None, help="AWS profile name")
    common.add_argument(
        "--format", "-f",
        choices=["table", "json", "csv"],
        default=None,
        help="Output format (default: table)",
    )
    common.add_argument("--output", "-o", default=None, help="Write output to a file instead of stdout")
    common.add_argument("--quiet", "-q", action="store_true", help="Suppress status messages")
    return common


def _add_ec2_commands(subparsers, common) -> None:
    ec2 = subparsers.add_parser("ec2", help="EC2 instances")
    ec2_sub = ec2.add_subparsers(dest="ec2_command", metavar="<command>")
    ec2_sub.required = True

    list_parser = ec2_sub.add_parser(
        "list",
        parents=[common],
        help="List EC2 instances",
        epilog=(
            "filter keys: " + ", ".join(sorted(FILTER_MAP)) + "\n"
            "example: nephele ec2 list --filter name=web --filter state=running"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    list_parser.add_argument(
        "--filter",
        action="append",
        metavar="KEY=VALUE",
        help="Filter instances (repeatable); values match case-insensitively as substrings",
    )
    list_parser.add_argument(
        "--filters-file",
        metavar="FILE.json",
        help='JSON file with filters, e.g. [{"Name": "state", "Values": ["running"]}]',
    )
    list_parser.set_defaults(func=cmd_ec2_list)

    for name, func, verb in (("start", cmd_ec2_start, "Start"), ("stop", cmd_ec2_stop, "Stop")):
        parser = ec2_sub.add_parser(
            name,
            parents=[common],
            help=f"{verb} the specified EC2 instances",
            epilog=f"example: nephele ec2 {name} i-0a12b345c678de",
        )
        parser.add_argument("instance_ids", nargs="+", metavar="INSTANCE_ID", help="Instance ID")
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Perform the operation with dry run enabled",
        )
        parser.set_defaults(func=func)


def _add_lambda_commands(subparsers, common) -> None:
    lambda_parser = subparsers.add_parser("lambda", help="Lambda functions")
    lambda_sub = lambda_parser.add_subparsers(dest="lambda_command", metavar="<command>")
    lambda_sub.required = True

    list_parser = lambda_sub.add_parser("list", parents=[common], help="List Lambda functions")
    list_parser.set_defaults(func=cmd_lambda_list)

    invoke_parser = lambda_sub.add_parser(
        "invoke",
        parents=[common],
        help="Invoke a Lambda function and wait for the result",
    )
    invoke_parser.add_argument("function_name", help="Function name or ARN")
    invoke_parser.set_defaults(func=cmd_lambda_invoke)


def _add_rds_commands(subparsers, common) -> None:
    rds = subparsers.add_parser("rds", help="RDS database instances")
    rds_sub = rds.add_subparsers(dest="rds_command", metavar="<command>")
    rds_sub.required = True

    list_parser = rds_sub.add_parser("list", parents=[common], help="List RDS instances")
    list_parser.set_defaults(func=cmd_rds_list)


def _add_s3_commands(subparsers, common) -> None:
    s3 = subparsers.add_parser("s3", help="S3 buckets and objects")
    s3_sub = s3.add_subparsers(dest="s3_command", metavar="<command>")
    s3_sub.required = True

    buckets_parser = s3_sub.add_parser("list-buckets", parents=[common], help="List buckets")
    buckets_parser.set_defaults(func=cmd_s3_list_buckets)

    objects_parser = s3_sub.add_parser("list-objects", parents=[common], help="List objects in a bucket")
    objects_parser.add_argument("bucket", help="Bucket name")
    objects_parser.add_argument("--prefix", default=None, help="Only list keys starting with this prefix")
    objects_parser.add_argument(
        "--max-count",
        type=max_keys_type,
        default=None,
        help="Maximum objects per page (1-1000)",
    )
    objects_parser.add_argument(
        "--continuation-token",
        default=None,
        help="Token printed by a previous page to fetch the next one",
    )
    objects_parser.set_defaults(func=cmd_s3_list_objects)

    download_parser = s3_sub.add_parser("download", parents=[common], help="Download an object")
    download_parser.add_argument("bucket", help="Bucket name")
    download_parser.add_argument("key", help="Object key")
    download_parser.add_argument(
        "--file-name",
        default=None,
        help="Destination file (default: the key's base name)",
    )
    download_parser.set_defaults(func=cmd_s3_download)


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser"""
    parser = argparse.ArgumentParser(
        prog="nephele",
        description="Command-line client for AWS EC2, Lambda, RDS and S3",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and tracebacks")
    parser.add_argument("--log-file", default=None, help="Also write debug logs to this file")

    common = _common_options()
    subparsers = parser.add_subparsers(dest="command", metavar="<service>")

    _add_ec2_commands(subparsers, common)
    _add_lambda_commands(subparsers, common)
    _add_rds_commands(subparsers, common)
    _add_s3_commands(subparsers, common)

    regions_parser = subparsers.add_parser("regions", parents=[common], help="List accessible AWS regions")
    regions_parser.set_defaults(func=cmd_regions)

    config_parser = subparsers.add_parser("config", help="Manage ~/.nephele/config.toml")
    config_sub = config_parser.add_subparsers(dest="config_command", metavar="<command>")
    config_sub.required = True
    init_parser = config_sub.add_parser("init", help="Write a default config file")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing config file")
    init_parser.add_argument("--quiet", "-q", action="store_true", help="Suppress status messages")
    init_parser.set_defaults(func=cmd_config_init)

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    return create_parser().parse_args(argv)
