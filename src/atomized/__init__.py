"""
Build HTTP/1.x requests and responses, serialize them to wire bytes and parse
wire bytes back into messages.
"""

from __future__ import annotations

# Set default logging handler to avoid "No handler found" warnings.
import logging
import typing
from logging import NullHandler

from . import exceptions
from ._collections import HTTPHeaderMap
from ._version import __version__
from .message import HTTPMessage
from .method import MessageMethod
from .parser import HTTPMessageParser, parse_message
from .status import status_text_from_status_code

__license__ = "MIT"
__version__ = __version__

__all__ = (
    "HTTPHeaderMap",
    "HTTPMessage",
    "HTTPMessageParser",
    "MessageMethod",
    "add_stderr_logger",
    "exceptions",
    "parse_message",
    "status_text_from_status_code",
)

logging.getLogger(__name__).addHandler(NullHandler())


def add_stderr_logger(
    level: int = logging.DEBUG,
) -> logging.StreamHandler[typing.TextIO]:
    """
    Helper for quickly adding a StreamHandler to the logger. Useful for
    debugging.

    Returns the handler after adding it.
    """
    # This method needs to be in this __init__.py to get the __name__ correct
    # even if atomized is vendored within another package.
    logger = logging.getLogger(__name__)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", __name__)
    return handler


# ... Clean up.
del NullHandler
