"""Logging configuration for the command-line tools"""
import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configure a single console handler on stderr.

    Search results are printed to stdout, so log records never interleave
    with them.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)
