"""
Library to build raw SQL queries and bulk inserts with positional parameters
"""
import logging
import sys
from importlib.metadata import (
    PackageNotFoundError,
    version,
)
from typing import TextIO

# Import builders here for more convenient access
from sqlbuilder.builder import Builder
from sqlbuilder.bulk import (
    BulkBuilder,
    iter_bulk_queries,
)
from sqlbuilder.options import (
    Config,
    make_config,
    with_marker,
    with_paramstyle,
    with_placeholder,
    with_size,
)
from sqlbuilder import (
    exceptions,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "0.0.0"

# Create sqlbuilder logger and clear the logger handlers
# This prevents a new logger from being created when running 'logging.getLogger("sqlbuilder")'
# with default handlers
logging.getLogger("sqlbuilder").handlers.clear()


def log_to_console(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
) -> None:
    """
    Log SQL Builder messages to the given output.

    :param level: logger level
    :param output: the output location of the logger messages
    """
    logger = logging.getLogger('sqlbuilder')
    # Clear all existing handlers to prevent duplicate output
    logger.handlers.clear()

    # Debug messages contain multi-line queries so are printed bare
    class CleanDebugMessageFormatter(logging.Formatter):
        default_fmt = logging.Formatter('%(asctime)s %(funcName)s: %(message)s')
        debug_fmt = logging.Formatter('%(message)s')

        def format(self, record: logging.LogRecord) -> str:
            if record.levelno < logging.INFO:
                return self.debug_fmt.format(record)
            else:
                return self.default_fmt.format(record)

    handler = logging.StreamHandler(output)
    handler.setFormatter(CleanDebugMessageFormatter())

    logger.addHandler(handler)
    logger.setLevel(level=level)


__all__ = [
    "Builder",
    "BulkBuilder",
    "Config",
    "exceptions",
    "iter_bulk_queries",
    "log_to_console",
    "make_config",
    "with_marker",
    "with_paramstyle",
    "with_placeholder",
    "with_size",
]
