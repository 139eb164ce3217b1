from __future__ import annotations

import typing

from atomized import HTTPMessage, MessageMethod

#: The request used throughout the parser tests.
SIMPLE_GET = (
    b"GET / HTTP/1.1\r\n"
    b"Host: example.com\r\n"
    b"User-Agent: Test Agent\r\n"
    b"Connection: keep-alive\r\n"
    b"\r\n"
)


def make_request(
    method: MessageMethod = MessageMethod.GET,
    path: str = "/",
    headers: typing.Mapping[str, str] | None = None,
    body: bytes = b"",
) -> HTTPMessage:
    msg = HTTPMessage().set_method(method).set_path(path).set_message_body(body)
    if headers:
        msg.set_headers(headers)
    return msg
