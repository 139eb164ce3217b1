from __future__ import annotations

import types
import typing

__all__ = [
    "MAX_STATUS_CODE",
    "STATUS_CODES",
    "UNDEFINED_STATUS_TEXT",
    "status_text_from_status_code",
]

UNDEFINED_STATUS_TEXT = "Undefined"

# Status codes are unsigned 16-bit integers.
MAX_STATUS_CODE = 0xFFFF

#: Default reason phrases, keyed by status code.
STATUS_CODES: typing.Mapping[int, str] = types.MappingProxyType(
    {
        100: "Continue",
        101: "Switching Protocol",
        200: "OK",
        201: "Created",
        202: "Accepted",
        203: "Non-Authoritative Information",
        204: "No Content",
        205: "Reset Content",
        206: "Partial Content",
        300: "Multiple Choice",
        301: "Moved Permanently",
        302: "Found",
        303: "See Other",
        304: "Not Modified",
        307: "Temporary Redirect",
        308: "Permanent Redirect",
        400: "Bad Request",
        401: "Unauthorized",
        402: "Payment Required",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        406: "Not Acceptable",
        407: "Proxy Authentication Required",
        408: "Request Timeout",
        409: "Conflict",
        410: "Gone",
        411: "Length Required",
        412: "Precondition Failed",
        413: "Payload Too Large",
        414: "URI Too Long",
        415: "Unsupported Media Type",
        416: "Requested Range Not Satisfiable",
        417: "Expectation Failed",
        418: "I'm a teapot",
        421: "Misdirected Request",
        425: "Too Early",
        426: "Upgrade Required",
        428: "Precondition Required",
        429: "Too Many Requests",
        431: "Request Header Fields Too Large",
        451: "Unavailable for Legal Reasons",
        500: "Internal Server Error",
        501: "Not Implemented",
        502: "Bad Gateway",
        503: "Service Unavailable",
        504: "Gateway Timeout",
        505: "HTTP Version Not Supported",
        506: "Variant Also Negotiates",
        507: "Insufficient Storage",
        510: "Not Extended",
        511: "Network Authentication Required",
    }
)


def status_text_from_status_code(status_code: int) -> str:
    """
    Return the default reason phrase for ``status_code``, or ``"Undefined"``
    when the code isn't registered.
    """
    return STATUS_CODES.get(status_code, UNDEFINED_STATUS_TEXT)
