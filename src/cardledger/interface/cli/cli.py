"""
CLI main entry point.

Runs the typer application; typer exits through SystemExit with the
command's exit code, anything else unexpected maps to exit code 1.
"""

import logging

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Main entry point for the cardledger CLI.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        # Import here to avoid circular imports
        from .orchestrator import app
        app()
        return 0
    except Exception as e:
        logger.exception("Unhandled error")
        print(f"Error: {e}")
        return 1
