"""CLI command handlers

This package organizes CLI commands by service area:
- ec2_commands: List, start and stop EC2 instances
- lambda_commands: List and invoke Lambda functions
- rds_commands: List RDS instances
- s3_commands: Browse buckets and download objects
- general_commands: Regions and config file management
"""

import sys

from .ec2_commands import (
    cmd_ec2_list,
    cmd_ec2_start,
    cmd_ec2_stop,
)
from .lambda_commands import (
    cmd_lambda_list,
    cmd_lambda_invoke,
)
from .rds_commands import (
    cmd_rds_list,
)
from .s3_commands import (
    cmd_s3_list_buckets,
    cmd_s3_list_objects,
    cmd_s3_download,
)
from .general_commands import (
    cmd_regions,
    cmd_config_init,
)
from .base import (
    print_error,
    get_aws_client,
    write_output,
)


def run_cli(args) -> int:
    """Run CLI command based on args"""
    if hasattr(args, 'func'):
        return args.func(args)
    else:
        print("Error: No command specified", file=sys.stderr)
        return 1


__all__ = [
    # EC2 commands
    'cmd_ec2_list',
    'cmd_ec2_start',
    'cmd_ec2_stop',
    # Lambda commands
    'cmd_lambda_list',
    'cmd_lambda_invoke',
    # RDS commands
    'cmd_rds_list',
    # S3 commands
    'cmd_s3_list_buckets',
    'cmd_s3_list_objects',
    'cmd_s3_download',
    # General commands
    'cmd_regions',
    'cmd_config_init',
    # Base utilities
    'print_error',
    'get_aws_client',
    'write_output',
    # Runner
    'run_cli',
]
