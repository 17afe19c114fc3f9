"""Logging setup for CLI runs; the library itself never configures logging."""

import logging
import sys


def enable_debug_logging() -> None:
    """Send ``signpost.*`` DEBUG records to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger = logging.getLogger("signpost")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
