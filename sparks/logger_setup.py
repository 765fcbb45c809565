#!/usr/bin/env python3
"""
Logging setup for the Sparks app.

Configures a dedicated application logger ("sparks"), not the root logger, so that
third-party libraries such as pygame keep their own output settings.
"""
import logging
import os
from typing import Optional

LOGGER_NAME = "sparks"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s: %(message)s"


def setup_logging(run_id: str = "default", level: str = "INFO", fmt: str = DEFAULT_FORMAT,
                  log_dir: Optional[str] = "runs") -> logging.Logger:
    """
    Configure the "sparks" logger to write to the console and, when log_dir is set,
    to runs/<run_id>/simulation.log.

    Data Contract:
    - Inputs: run_id, level name, format string, base log directory (None disables the file).
    - Outputs: the configured logger.
    - Side Effects:
        - Replaces any handlers previously attached to the "sparks" logger.
        - Creates the run's log directory.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # --- Prevent logs from propagating to the root logger ---
    logger.propagate = False

    formatter = logging.Formatter(fmt)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = None
    if log_dir:
        run_dir = os.path.join(log_dir, run_id)
        os.makedirs(run_dir, exist_ok=True)
        log_file = os.path.join(run_dir, "simulation.log")
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file or 'none'}")
    return logger
