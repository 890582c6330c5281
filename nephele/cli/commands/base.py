"""Base utilities for CLI commands"""

import logging
import os
import sys
from typing import Optional

from nephele.config.settings import Settings
from nephele.models.region import is_valid_region, AWS_REGIONS
from nephele.services.aws_client import AWSClient, from_settings

logger = logging.getLogger("nephele")


def status(message: str, quiet: bool = False) -> None:
    """Print status message to stderr unless quiet mode is on.

    Args:
        message: Status message to display
        quiet: Whether to suppress the message
    """
    if not quiet:
        print(message, file=sys.stderr)


def print_error(message: str, debug: bool = False, exception: Exception = None) -> None:
    """Print error message to stderr with consistent formatting.

    Args:
        message: Error message to display
        debug: Whether to print full traceback
        exception: Optional exception for traceback
    """
    print(f"Error: {message}", file=sys.stderr)
    if debug and exception:
        import traceback
        traceback.print_exception(type(exception), exception, exception.__traceback__)


def validate_region(region: str, exit_on_error: bool = True) -> bool:
    """Validate an AWS region code.

    Args:
        region: AWS region code to validate (e.g., 'us-east-1')
        exit_on_error: Whether to exit the program on invalid region

    Returns:
        True if valid, False if invalid (only when exit_on_error=False)
    """
    if is_valid_region(region):
        return True

    # Try to find similar region names
    similar = [r for r in AWS_REGIONS.keys() if region in r or r in region]

    error_msg = f"Invalid region '{region}'."
    if similar:
        error_msg += f" Did you mean: {', '.join(similar[:3])}?"
    error_msg += "\nUse 'nephele regions' to see available regions."

    if exit_on_error:
        print(f"Error: {error_msg}", file=sys.stderr)
        sys.exit(1)
    return False


def apply_settings(args, settings: Settings) -> None:
    """Fill unset common options from settings (env vars / config file)."""
    if getattr(args, "region", None) is None:
        args.region = settings.aws_region
    if getattr(args, "profile", None) is None:
        args.profile = settings.aws_profile
    if getattr(args, "format", None) is None:
        args.format = settings.output_format
    args.settings = settings


def get_aws_client(region: str, profile: Optional[str] = None, settings: Optional[Settings] = None) -> AWSClient:
    """Get AWS client for a validated region"""
    validate_region(region)
    if settings is None:
        return AWSClient(region, profile)
    return from_settings(settings, region, profile)


def client_for(args) -> AWSClient:
    """AWS client for the region/profile/settings carried on parsed args"""
    return get_aws_client(args.region, args.profile, getattr(args, "settings", None))


def safe_write_file(
    file_path: str,
    content: str,
    create_dirs: bool = True
) -> None:
    """Safely write content to a file with error handling.

    Args:
        file_path: Path to file to write
        content: Content to write
        create_dirs: Whether to create parent directories if they don't exist

    Raises:
        IOError: If the file cannot be written
    """
    path = os.path.abspath(file_path)
    parent_dir = os.path.dirname(path)

    try:
        if create_dirs and parent_dir and not os.path.exists(parent_dir):
            os.makedirs(parent_dir, exist_ok=True)

        with open(path, 'w') as f:
            f.write(content)
    except PermissionError:
        raise IOError(f"Permission denied: Cannot write to '{file_path}'")
    except OSError as e:
        raise IOError(f"Failed to write to '{file_path}': {e}")


def write_output(output: str, output_path: Optional[str], quiet: bool = False) -> None:
    """Write output to file or stdout.

    Args:
        output: The output content
        output_path: Optional file path to write to
        quiet: Whether to suppress status messages

    Raises:
        IOError: If the file cannot be written
    """
    if output_path:
        safe_write_file(output_path, output)
        if not quiet:
            print(f"Output written to {output_path}", file=sys.stderr)
    else:
        print(output)
