"""RDS CLI commands"""

from nephele.cli.output import get_formatter
from nephele.services.database_service import DatabaseService

from .base import status, print_error, client_for, write_output


def cmd_rds_list(args) -> int:
    """List RDS instances command"""
    formatter = get_formatter(args.format)

    try:
        database_service = DatabaseService(client_for(args))
        status(f"Fetching RDS instances for region {args.region}...", args.quiet)
        db_instances = database_service.get_db_instances()

        output = formatter.format_db_instances(db_instances, args.region)
        write_output(output, args.output, args.quiet)

        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
