#!/usr/bin/env python3
"""ord - Bitcoin satoshi ordinal number utility.

Entry point for the ord command.
"""

import sys

from ord.cli import create_parser, run_cli
from ord.config import OrdConfig
from ord.observability.logging import configure_logging


def main(argv: list[str] | None = None) -> None:
    """Main entry point for ord."""
    config = OrdConfig()
    configure_logging(level=config.log_level, log_format=config.log_format.value)

    parser = create_parser()
    args = parser.parse_args(argv)

    exit_code = run_cli(args)
    if exit_code >= 0:
        sys.exit(exit_code)
    # exit_code < 0 means no command was given
    parser.print_help()
    sys.exit(0)


if __name__ == "__main__":
    main()
