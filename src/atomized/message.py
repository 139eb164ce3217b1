from __future__ import annotations

import typing

from ._collections import HTTPHeaderMap, ValidHTTPHeaderSource
from .method import MessageMethod, is_request_method
from .status import MAX_STATUS_CODE, status_text_from_status_code
from .util.util import to_bytes, to_str, to_wire_bytes

__all__ = ["HTTPMessage", "CRLF", "DEFAULT_HTTP_VERSION", "HTTP_VERSION_1_0"]

CRLF = b"\r\n"

HTTP_VERSION_1_0 = "HTTP/1.0"
DEFAULT_HTTP_VERSION = "HTTP/1.1"

_TYPE_BODY = typing.Union[bytes, bytearray, memoryview, str]


class HTTPMessage:
    """
    An HTTP/1.x request or response.

    The role of a message follows from its method: ``MessageMethod.NONE``
    makes it a response, any other method makes it a request. Fields of the
    inactive role may still be set, they just aren't serialized.

    Every ``set_*`` method returns the message itself so calls can be
    chained::

        msg = (
            HTTPMessage()
            .set_method(MessageMethod.GET)
            .set_path("/")
            .set_header("Host", "example.com")
        )
        msg.serialize()

    :param method:
        Request method, ``MessageMethod.NONE`` (the default) for a response.

    :param status_code:
        Response status code, an unsigned 16-bit integer.

    :param status_message:
        Reason phrase. Leave empty to use the default phrase for
        ``status_code``, looked up every time it is read.

    :param path:
        Request target.

    :param version:
        Protocol version string, not validated. Defaults to ``"HTTP/1.1"``.

    :param headers:
        Initial headers, see :class:`~atomized._collections.HTTPHeaderMap`.

    :param body:
        Message body, bytes or text.
    """

    def __init__(
        self,
        method: MessageMethod = MessageMethod.NONE,
        *,
        status_code: int = 0,
        status_message: str = "",
        path: str = "",
        version: str = DEFAULT_HTTP_VERSION,
        headers: ValidHTTPHeaderSource | None = None,
        body: _TYPE_BODY = b"",
    ) -> None:
        self._method = MessageMethod.NONE
        self._status_code = 0
        self._status_message = ""
        self._path = ""
        self._version = DEFAULT_HTTP_VERSION
        self._headers = HTTPHeaderMap()
        self._body = b""

        self.set_method(method)
        self.set_status_code(status_code)
        self.set_status_message(status_message)
        self.set_path(path)
        self.set_version(version)
        if headers is not None:
            self.set_headers(headers)
        self.set_message_body(body)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self._start_line()!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HTTPMessage):
            return NotImplemented
        return (
            self._method is other._method
            and self._path == other._path
            and self._version == other._version
            and self._status_code == other._status_code
            and self.get_status_message() == other.get_status_message()
            and self._headers == other._headers
            and self._body == other._body
        )

    __hash__ = None  # type: ignore[assignment]

    def __bytes__(self) -> bytes:
        return self.serialize()

    def __str__(self) -> str:
        return to_str(self.serialize())

    def set_header(self, name: str, value: str) -> HTTPMessage:
        """Set a header, overwriting any value it already has."""
        self._headers[name] = value
        return self

    def set_headers(self, headers: ValidHTTPHeaderSource) -> HTTPMessage:
        """Set a number of headers at once, overwriting on collision."""
        self._headers.update(headers)
        return self

    def get_header(self, name: str) -> str:
        """
        Return the value of header ``name``.

        :raises HeaderNotFound: if the header was never set.
        """
        return self._headers[name]

    def get_headers(self) -> HTTPHeaderMap:
        """Return a copy of every header set on this message."""
        return self._headers.copy()

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def remove_header(self, name: str) -> HTTPMessage:
        del self._headers[name]
        return self

    def set_method(self, method: MessageMethod) -> HTTPMessage:
        """Set the method. Use ``MessageMethod.NONE`` to make this a response."""
        if not isinstance(method, MessageMethod):
            raise TypeError(f"not expecting type {type(method).__name__}")
        self._method = method
        return self

    def get_method(self) -> MessageMethod:
        return self._method

    def is_request(self) -> bool:
        return is_request_method(self._method)

    def is_response(self) -> bool:
        return not is_request_method(self._method)

    def set_path(self, path: str) -> HTTPMessage:
        self._path = path
        return self

    def get_path(self) -> str:
        return self._path

    def set_version(self, version: str) -> HTTPMessage:
        self._version = version
        return self

    def get_version(self) -> str:
        return self._version

    def set_status_code(self, code: int) -> HTTPMessage:
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f"not expecting type {type(code).__name__}")
        if not 0 <= code <= MAX_STATUS_CODE:
            raise ValueError(
                f"Status code must be between 0 and {MAX_STATUS_CODE}, got {code}"
            )
        self._status_code = code
        return self

    def get_status_code(self) -> int:
        return self._status_code

    def set_status_message(self, message: str) -> HTTPMessage:
        self._status_message = message
        return self

    def get_status_message(self) -> str:
        """
        Return the reason phrase for this message, falling back to the
        default phrase of the status code when none was set.
        """
        if not self._status_message:
            return status_text_from_status_code(self._status_code)
        return self._status_message

    def set_message_body(self, body: _TYPE_BODY) -> HTTPMessage:
        """Replace the body. Text is stored as its wire encoding."""
        self._body = to_bytes(body)
        return self

    def get_message_body(self) -> bytes:
        return self._body

    def content_length(self) -> int:
        return len(self._body)

    def _start_line(self) -> str:
        if self._method is MessageMethod.NONE:
            return (
                f"{self._version} {self._status_code} {self.get_status_message()}"
            )
        return f"{self._method.name} {self._path} {self._version}"

    def serialize(self) -> bytes:
        """
        Return the wire representation of this message.

        A ``Content-Length`` line is appended after the user's headers
        whenever the body isn't empty, even if a ``Content-Length`` header
        was set by hand.
        """
        lines = [self._start_line()]
        lines.extend(self._headers.iterlines())
        if self._body:
            lines.append(f"Content-Length: {len(self._body)}")

        head = CRLF.join(to_wire_bytes(line) for line in lines)
        return head + CRLF + CRLF + self._body
