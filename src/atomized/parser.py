from __future__ import annotations

import logging
import re
import typing
from enum import Enum

from .exceptions import (
    MalformedHeaderLine,
    MalformedRequestLine,
    MalformedStartLine,
)
from .message import DEFAULT_HTTP_VERSION, HTTP_VERSION_1_0, HTTPMessage
from .method import MessageMethod, method_from_string
from .status import MAX_STATUS_CODE
from .util.util import to_bytes, to_str

__all__ = ["HTTPMessageParser", "ParserState", "parse_message"]

log = logging.getLogger(__name__)

_TYPE_BUFFER = typing.Union[bytes, bytearray, memoryview, str]

_CR = ord("\r")
_SP = ord(" ")
_COLON = ord(":")

# A status code is plain ASCII digits, no sign and no whitespace.
_STATUS_CODE_RE = re.compile(rb"[0-9]+")

_RESPONSE_VERSIONS = frozenset({HTTP_VERSION_1_0, DEFAULT_HTTP_VERSION})


class ParserState(Enum):
    NONE = 0

    PARSING_START_LINE = 1
    START_LINE_REQUEST = 2
    START_LINE_RESPONSE = 3
    HEADER_KEY = 4
    HEADER_VALUE = 5
    PARSING_BODY = 6


class HTTPMessageParser:
    """
    Parses one complete HTTP/1.x message into an
    :class:`~atomized.message.HTTPMessage`.

    The buffer is scanned a byte at a time by a small state machine. Lines
    are expected to end in CRLF: when a CR ends a token the byte after it is
    skipped without being looked at, as is the space after a header colon.
    Everything after the blank line that ends the headers is the body, so a
    ``Content-Length`` header is never needed to find it.

    :param strict:
        The parser is lenient by default: a buffer that ends before the
        headers are finished, a header line without a colon or a request
        line with an unknown method or no path leaves the message partly
        filled in and a warning is logged. With ``strict=True`` those cases
        raise :class:`~atomized.exceptions.MalformedRequestLine`,
        :class:`~atomized.exceptions.MalformedStartLine` or
        :class:`~atomized.exceptions.MalformedHeaderLine` instead.

        A status code that isn't an unsigned 16-bit integer always raises
        :class:`~atomized.exceptions.MalformedStartLine`.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strict={self.strict!r})"

    def parse(self, message: HTTPMessage, buffer: _TYPE_BUFFER) -> None:
        """
        Parse ``buffer`` into ``message`` through its setters.

        The buffer must hold exactly one message. The body found in it is
        appended to any body ``message`` already has.
        """
        data = to_bytes(buffer)

        state = ParserState.PARSING_START_LINE
        # bytes of the token being read
        temp = bytearray()
        # set when a CR or colon was consumed; the byte after it is dropped
        skip_next = False
        header_key = ""
        # whether the first space after the method or version was seen
        first_field_done = False
        body_start: int | None = None

        for index, char in enumerate(data):
            if skip_next:
                skip_next = False
                continue

            if state is ParserState.PARSING_BODY:
                body_start = index
                break

            if state is ParserState.PARSING_START_LINE:
                if char == _SP:
                    token = to_str(temp)
                    if token in _RESPONSE_VERSIONS:
                        message.set_method(MessageMethod.NONE)
                        message.set_version(token)
                        state = ParserState.START_LINE_RESPONSE
                    else:
                        method = method_from_string(token)
                        if method is MessageMethod.NONE:
                            self._malformed(
                                MalformedRequestLine(
                                    "Unknown request method", _line(data, index)
                                )
                            )
                        message.set_method(method)
                        state = ParserState.START_LINE_REQUEST
                    temp.clear()
                    continue

            elif state is ParserState.START_LINE_REQUEST:
                if char == _SP:
                    message.set_path(to_str(temp))
                    first_field_done = True
                    temp.clear()
                    continue
                elif char == _CR:
                    if not first_field_done:
                        self._malformed(
                            MalformedRequestLine(
                                "Request line has no path", _line(data, index)
                            )
                        )
                    message.set_version(to_str(temp))
                    temp.clear()
                    state = ParserState.HEADER_KEY
                    skip_next = True
                    continue

            elif state is ParserState.START_LINE_RESPONSE:
                # only the first space ends the status code, the reason
                # phrase may contain spaces of its own
                if char == _SP and not first_field_done:
                    message.set_status_code(_parse_status_code(temp, data, index))
                    first_field_done = True
                    temp.clear()
                    continue
                elif char == _CR:
                    if first_field_done:
                        # may be empty, the default phrase is used then
                        message.set_status_message(to_str(temp))
                    else:
                        message.set_status_code(_parse_status_code(temp, data, index))
                        message.set_status_message("")
                    temp.clear()
                    state = ParserState.HEADER_KEY
                    skip_next = True
                    continue

            elif state is ParserState.HEADER_KEY:
                if char == _COLON:
                    header_key = to_str(temp)
                    temp.clear()
                    state = ParserState.HEADER_VALUE
                    # the space after the colon
                    skip_next = True
                    continue
                elif char == _CR:
                    if temp:
                        # a line without a colon ends the headers like a
                        # blank one would
                        self._malformed(
                            MalformedHeaderLine(
                                "Header line has no colon", to_str(temp)
                            )
                        )
                    temp.clear()
                    state = ParserState.PARSING_BODY
                    skip_next = True
                    continue

            elif state is ParserState.HEADER_VALUE:
                if char == _CR:
                    message.set_header(header_key, to_str(temp))
                    header_key = ""
                    temp.clear()
                    state = ParserState.HEADER_KEY
                    skip_next = True
                    continue

            temp.append(char)

        if body_start is not None:
            message.set_message_body(message.get_message_body() + data[body_start:])
        elif state is not ParserState.PARSING_BODY:
            self._malformed(_incomplete(state, temp, data))

        log.debug(
            "Parsed %s: %d headers, %d body bytes",
            "request" if message.is_request() else "response",
            len(message.get_headers()),
            message.content_length(),
        )

    def _malformed(self, error: MalformedStartLine | MalformedHeaderLine) -> None:
        if self.strict:
            raise error
        log.warning("Message was only partly parsed: %s", error)


def _incomplete(
    state: ParserState, temp: bytearray, data: bytes
) -> MalformedStartLine | MalformedHeaderLine:
    """Describe a buffer that ran out before the blank line ending the headers."""
    if state is ParserState.PARSING_START_LINE:
        return MalformedStartLine("Start line is incomplete", to_str(temp))
    elif state is ParserState.START_LINE_REQUEST:
        return MalformedRequestLine("Request line is incomplete", _line(data, 0))
    elif state is ParserState.START_LINE_RESPONSE:
        return MalformedStartLine("Status line is incomplete", _line(data, 0))
    elif state is ParserState.HEADER_VALUE:
        return MalformedHeaderLine("Header line is not terminated", to_str(temp))
    return MalformedHeaderLine("Headers are not terminated", to_str(temp))


def _line(data: bytes, index: int) -> str:
    """Return the line of ``data`` that contains ``index``."""
    start = data.rfind(b"\n", 0, index) + 1
    end = data.find(b"\r", index)
    if end == -1:
        end = len(data)
    return to_str(data[start:end])


def _parse_status_code(token: bytearray, data: bytes, index: int) -> int:
    if not _STATUS_CODE_RE.fullmatch(token):
        raise MalformedStartLine("Status code is not a number", _line(data, index))
    code = int(token)
    if code > MAX_STATUS_CODE:
        raise MalformedStartLine("Status code is out of range", _line(data, index))
    return code


def parse_message(buffer: _TYPE_BUFFER, strict: bool = False) -> HTTPMessage:
    """
    Parse ``buffer`` into a new :class:`~atomized.message.HTTPMessage`.

    .. code-block:: python

        msg = parse_message(b"HTTP/1.1 404 Not Found\\r\\n\\r\\n")
        msg.get_status_code()  # 404
    """
    message = HTTPMessage()
    HTTPMessageParser(strict=strict).parse(message, buffer)
    return message
