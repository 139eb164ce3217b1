from __future__ import annotations

import typing

# Base Exceptions


class HTTPMessageError(Exception):
    """Base exception used by this module."""

    pass


_TYPE_REDUCE_RESULT = typing.Tuple[
    typing.Callable[..., object], typing.Tuple[object, ...]
]


class HeaderNotFound(KeyError, HTTPMessageError):
    """Raised when a header that was never set is requested."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Header not found: {self.name!r}"

    def __reduce__(self) -> _TYPE_REDUCE_RESULT:
        # For pickling purposes.
        return self.__class__, (self.name,)


class ParseError(ValueError, HTTPMessageError):
    """Base exception for errors raised while parsing wire bytes."""

    def __init__(self, message: str, line: str | None = None) -> None:
        self.message = message
        self.line = line
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)

    def __reduce__(self) -> _TYPE_REDUCE_RESULT:
        # For pickling purposes.
        return self.__class__, (self.message, self.line)


# Leaf Exceptions


class MalformedStartLine(ParseError):
    """Raised when the start line of a message cannot be parsed.

    This is always raised for a status code that is not an unsigned 16-bit
    integer, regardless of parser strictness.
    """

    pass


class MalformedRequestLine(MalformedStartLine):
    """Raised by a strict parser when a request line is incomplete or names
    an unknown method."""

    pass


class MalformedHeaderLine(ParseError):
    """Raised by a strict parser when a header line is missing its colon or
    its line terminator."""

    pass
