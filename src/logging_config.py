"""Logging setup for the vocabulary service."""

import logging
import sys


def setup_logging(level: str | int = logging.INFO, log_file: str | None = None, debug: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name or number.
        log_file: Optional path of a file to log to in addition to stdout.
        debug: If True, forces DEBUG level and adds file/line context.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
