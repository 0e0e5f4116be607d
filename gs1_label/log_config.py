"""
Logging for the gs1-label command line.

Library modules only call logging.getLogger(__name__) and never add
handlers; the CLI attaches one stderr handler to the package logger so
encoded data strings and JSON on stdout stay machine-readable.
"""

import logging
import sys

PACKAGE_LOGGER = "gs1_label"

LOG_FORMAT = "gs1-label %(levelname)s [%(module)s] %(message)s"


def verbosity_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the -v / -q flags to a logging level; -v wins if both are set."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Route gs1_label log records to stderr.

    Calling it again replaces the previous handler, so repeated main()
    calls in one process (as in the CLI tests) do not duplicate output.

    Returns:
        The configured package logger
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(verbosity_level(verbose, quiet))
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
