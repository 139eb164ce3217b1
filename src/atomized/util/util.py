from __future__ import annotations

import typing

# Text is carried on the wire as UTF-8. Bytes that are not valid UTF-8 are
# smuggled through ``str`` as lone surrogates so they come back out unchanged.
WIRE_ENCODING = "utf-8"
WIRE_ERRORS = "surrogateescape"


def to_bytes(
    x: str | bytes | bytearray | memoryview,
    encoding: typing.Optional[str] = None,
    errors: typing.Optional[str] = None,
) -> bytes:
    if isinstance(x, bytes):
        return x
    elif isinstance(x, (bytearray, memoryview)):
        return bytes(x)
    elif not isinstance(x, str):
        raise TypeError(f"not expecting type {type(x).__name__}")
    return x.encode(encoding or WIRE_ENCODING, errors=errors or WIRE_ERRORS)


def to_str(
    x: str | bytes | bytearray | memoryview,
    encoding: typing.Optional[str] = None,
    errors: typing.Optional[str] = None,
) -> str:
    if isinstance(x, str):
        return x
    elif not isinstance(x, (bytes, bytearray, memoryview)):
        raise TypeError(f"not expecting type {type(x).__name__}")
    return bytes(x).decode(encoding or WIRE_ENCODING, errors=errors or WIRE_ERRORS)


def to_wire_bytes(x: str) -> bytes:
    """
    Encode one line of message text for the wire.

    Unlike :func:`to_bytes` this never fails: text holding a lone surrogate
    that ``surrogateescape`` can't map back to a byte is encoded with
    ``surrogatepass`` instead.
    """
    try:
        return x.encode(WIRE_ENCODING, errors=WIRE_ERRORS)
    except UnicodeEncodeError:
        return x.encode(WIRE_ENCODING, errors="surrogatepass")
