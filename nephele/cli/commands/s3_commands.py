"""S3 CLI commands"""

from nephele.cli.output import get_formatter
from nephele.services.storage_service import StorageService

from .base import status, print_error, client_for, write_output


def cmd_s3_list_buckets(args) -> int:
    """List S3 buckets command"""
    formatter = get_formatter(args.format)

    try:
        storage_service = StorageService(client_for(args))
        status("Fetching S3 buckets...", args.quiet)
        buckets = storage_service.get_buckets()

        output = formatter.format_buckets(buckets)
        write_output(output, args.output, args.quiet)

        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_s3_list_objects(args) -> int:
    """List objects in a bucket command"""
    formatter = get_formatter(args.format)
    settings = getattr(args, "settings", None)
    max_count = args.max_count or (settings.s3_max_keys if settings else 1000)

    try:
        storage_service = StorageService(client_for(args))
        status(f"Fetching objects from {args.bucket}...", args.quiet)
        listing = storage_service.get_objects(
            args.bucket,
            max_count=max_count,
            prefix=args.prefix,
            continuation_token=args.continuation_token,
        )

        output = formatter.format_objects(listing)
        write_output(output, args.output, args.quiet)

        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_s3_download(args) -> int:
    """Download an object command"""
    try:
        storage_service = StorageService(client_for(args))
        status(f"Downloading s3://{args.bucket}/{args.key}...", args.quiet)
        size = storage_service.download_object(args.bucket, args.key, args.file_name)

        status(f"Downloaded {size} bytes", args.quiet)
        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
