"""Account-wide and configuration CLI commands"""

from nephele.cli.output import get_formatter
from nephele.config.settings import get_config_path, create_default_config
from nephele.models.region import AWS_REGIONS, get_region_name

from .base import status, print_error, client_for, safe_write_file, write_output


def cmd_regions(args) -> int:
    """List available regions command"""
    formatter = get_formatter(args.format)

    try:
        # Try to get accessible regions
        aws_client = client_for(args)
        accessible_regions = aws_client.get_accessible_regions()

        if accessible_regions:
            regions = [
                {"code": code, "name": get_region_name(code)}
                for code in accessible_regions
            ]
        else:
            # Fall back to all known regions
            regions = [
                {"code": code, "name": name}
                for code, name in AWS_REGIONS.items()
            ]

        regions = sorted(regions, key=lambda x: x["code"])

        output = formatter.format_regions(regions)
        write_output(output, args.output, args.quiet)

        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_config_init(args) -> int:
    """Write a commented default config file"""
    config_path = get_config_path()

    if config_path.exists() and not args.force:
        print_error(f"Config file already exists at {config_path} (use --force to overwrite)")
        return 1

    try:
        safe_write_file(str(config_path), create_default_config())
        status(f"Config file written to {config_path}", args.quiet)
        return 0
    except IOError as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
