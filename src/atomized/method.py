from __future__ import annotations

import types
import typing
from enum import Enum

__all__ = ["MessageMethod", "METHODS", "method_from_string", "is_request_method"]


class MessageMethod(Enum):
    """
    The request method of an :class:`~atomized.message.HTTPMessage`.

    ``NONE`` doesn't name a verb: it marks the message as a response.
    The wire name of every other member is its ``name``.
    """

    NONE = 0

    GET = 1
    HEAD = 2
    POST = 3
    PUT = 4
    DELETE = 5
    CONNECT = 6
    TRACE = 7
    PATCH = 8


#: Verb string -> method. Lookups are case-sensitive, as on the wire.
METHODS: typing.Mapping[str, MessageMethod] = types.MappingProxyType(
    {
        method.name: method
        for method in MessageMethod
        if method is not MessageMethod.NONE
    }
)


def method_from_string(method: str) -> MessageMethod:
    """
    Resolve a verb such as ``"GET"`` to its :class:`MessageMethod`.

    Unrecognized verbs resolve to ``MessageMethod.NONE``.
    """
    return METHODS.get(method, MessageMethod.NONE)


def is_request_method(method: MessageMethod) -> bool:
    return method is not MessageMethod.NONE
