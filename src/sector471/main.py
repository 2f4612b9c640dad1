"""Main module for sector471."""

import logging
import os
import sys

from sector471.cli import run
from sector471.config.paths import get_paths


def setup_logging() -> None:
    """Configure logging to file for debugging."""
    paths = get_paths()
    paths.workspace_config.mkdir(parents=True, exist_ok=True)
    log_file = paths.debug_log

    # Set level from env var, default to INFO
    level = os.environ.get("SECTOR471_LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("Sector 471 starting, logging to %s", log_file)


def main() -> None:
    """Console entry point."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
