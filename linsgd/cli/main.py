"""CLI Entry Point for linsgd
=========================

Entry point for console script: linsgd [command] [args]
"""

import sys

from linsgd.cli.args_parser import create_parser
from linsgd.cli.commands import dispatch_command
from linsgd.utils.logging import get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point.

    Processes command-line arguments and dispatches to appropriate command handler.
    """
    try:
        parser = create_parser()
        args = parser.parse_args(argv)

        logger.debug(f"Arguments: {vars(args)}")

        result = dispatch_command(args)

        if result and result.get("success", False):
            logger.info("Command completed successfully")
            sys.exit(0)
        else:
            error_msg = (
                result.get("error", "Unknown error") if result else "Command failed"
            )
            logger.error(f"Command failed: {error_msg}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        logger.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
