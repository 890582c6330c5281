"""Entry point for the application"""

import sys

from nephele.cli.parser import create_parser
from nephele.cli.commands import run_cli
from nephele.cli.commands.base import apply_settings
from nephele.config.settings import load_settings
from nephele.exceptions import ConfigurationError
from nephele.logging_config import setup_logging


def main(argv=None):
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(sys.stderr)
        sys.exit(1)

    log_level = "DEBUG" if args.debug else "INFO"
    setup_logging(level=log_level, log_file=args.log_file)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    apply_settings(args, settings)

    try:
        exit_code = run_cli(args)
    except KeyboardInterrupt:
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
