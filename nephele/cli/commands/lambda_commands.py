"""Lambda function CLI commands"""

from nephele.cli.output import get_formatter
from nephele.services.function_service import FunctionService

from .base import status, print_error, client_for, write_output


def cmd_lambda_list(args) -> int:
    """List Lambda functions command"""
    formatter = get_formatter(args.format)

    try:
        function_service = FunctionService(client_for(args))
        status(f"Fetching Lambda functions for region {args.region}...", args.quiet)
        functions = function_service.get_functions()

        output = formatter.format_functions(functions, args.region)
        write_output(output, args.output, args.quiet)

        return 0

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_lambda_invoke(args) -> int:
    """Invoke a Lambda function command

    Exits non-zero when the function itself reports an error.
    """
    formatter = get_formatter(args.format)

    try:
        function_service = FunctionService(client_for(args))
        status(f"Invoking {args.function_name}...", args.quiet)
        result = function_service.invoke_function(args.function_name)

        output = formatter.format_invocation(result)
        write_output(output, args.output, args.quiet)

        return 0 if result.succeeded else 1

    except Exception as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
