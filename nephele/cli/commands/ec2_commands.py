"""EC2 instance CLI commands"""

from nephele.cli.output import get_formatter
from nephele.services.filter_service import translate_all, load_filters_file
from nephele.services.instance_service import InstanceService

from .base import status, print_error, client_for, write_output


def cmd_ec2_list(args) -> int:
    """List EC2 instances command"""
    formatter = get_formatter(args.format)

    try:
        filters = translate_all(args.filter or [])
        if args.filters_file:
            filters.extend(load_filters_file(args.filters_file))

        instance_service = InstanceService(client_for(args))
        status(f"Fetching EC2 instances for region {args.region}...", args.quiet)
        instances = instance_service.get_instances(filters=filters or None)

        output = formatter.format_instances(instances, args.region)
        write_output(output, args.output, args.quiet)

        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_ec2_start(args) -> int:
    """Start EC2 instances command"""
    return _change_state(args, "start")


def cmd_ec2_stop(args) -> int:
    """Stop EC2 instances command"""
    return _change_state(args, "stop")


def _change_state(args, action: str) -> int:
    formatter = get_formatter(args.format)

    try:
        instance_service = InstanceService(client_for(args))
        verb = "Starting" if action == "start" else "Stopping"
        status(f"{verb} {', '.join(args.instance_ids)}...", args.quiet)

        if action == "start":
            changes = instance_service.start_instances(args.instance_ids, dry_run=args.dry_run)
        else:
            changes = instance_service.stop_instances(args.instance_ids, dry_run=args.dry_run)

        if args.dry_run and not changes:
            output = formatter.format_dry_run(action, args.instance_ids)
        else:
            output = formatter.format_state_changes(changes)
        write_output(output, args.output, args.quiet)

        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
