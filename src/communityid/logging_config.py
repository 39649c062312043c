"""Process-wide logging setup for the command-line entry point.

Library modules only create loggers; handlers and levels are configured
here once per process.
"""
import logging


def setup_logging(level: str = "WARNING"):
    levelno = getattr(logging, level.upper(), logging.WARNING)
    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    logging.basicConfig(level=levelno, format=fmt)
