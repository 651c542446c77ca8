# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the task store, then runs the console menu loop
in the main thread until the user picks "exit".
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_task_store
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        store = create_task_store(settings=settings)
        run_console_loop(store)
    except OSError:
        logger.exception("Task store I/O failed.")
        return 1

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
