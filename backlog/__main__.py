"""Entry point for backlog.

This module allows running backlog as a module:
    python -m backlog

Or as an installed command:
    backlog
"""

import sys
from typing import Optional

from backlog.logging_config import setup_logging, get_logger

# Initialize logger for this module
logger = get_logger(__name__)


def main(args: Optional[list[str]] = None) -> int:
    """Main entry point for backlog.

    Args:
        args: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if args is None:
        args = sys.argv[1:]

    # Initialize logging before any other operations
    setup_logging()

    from backlog.cli import run_cli

    try:
        exit_code = run_cli(args)
        logger.info(f"backlog exited with code {exit_code}")
        return exit_code
    except KeyboardInterrupt:
        logger.info("backlog interrupted by user (Ctrl+C)")
        return 0
    except Exception:
        logger.error("Unexpected error running backlog", exc_info=True)
        print("Error: unexpected failure, see ~/.backlog/logs/backlog.log", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
