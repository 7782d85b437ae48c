"""
Standardized logging for the CoderSwap MCP server.

All output goes to stderr: stdout is owned by the MCP stdio transport and
any stray write there corrupts the protocol stream.
"""

import logging
import sys

ROOT_LOGGER_NAME = "coderswap_mcp"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

_HANDLER_MARKER = "_coderswap_handler"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (use __name__)."""
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Install the stderr handler on the package logger.

    Safe to call more than once: the handler is added only on the first
    call, later calls just adjust the level.

    Args:
        verbose: Emit DEBUG records (the DEBUG=true toggle)

    Returns:
        The package root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    root.setLevel(level)

    if not any(getattr(h, _HANDLER_MARKER, False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_MARKER, True)
        root.addHandler(handler)
        root.propagate = False

    for handler in root.handlers:
        handler.setLevel(level)
    return root
