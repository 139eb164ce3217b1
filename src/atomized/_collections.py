from __future__ import annotations

import typing
from collections.abc import Mapping, MutableMapping

from .exceptions import HeaderNotFound

__all__ = ["HTTPHeaderMap"]


ValidHTTPHeaderSource = typing.Union[
    "HTTPHeaderMap",
    typing.Mapping[str, str],
    typing.Iterable[typing.Tuple[str, str]],
]


class HTTPHeaderMap(MutableMapping[str, str]):
    """
    :param headers:
        A mapping or an iterable of field-value pairs.

    :param kwargs:
        Additional field-value pairs to pass in to ``dict.update``.

    A ``dict`` like container for storing HTTP Headers.

    Field names are stored and compared exactly as given: ``Host`` and
    ``host`` are two different fields. Each name holds a single value and
    setting an existing name overwrites its value without moving it, so
    iteration yields fields in the order they were first set.

    Looking up a field that was never set raises
    :class:`~atomized.exceptions.HeaderNotFound`, which is also a
    ``KeyError`` so ``get()`` and ``in`` behave as for a ``dict``.

    >>> headers = HTTPHeaderMap(Host="example.com")
    >>> headers["Connection"] = "keep-alive"
    >>> headers["Host"] = "example.org"
    >>> list(headers.items())
    [('Host', 'example.org'), ('Connection', 'keep-alive')]
    """

    _container: dict[str, str]

    def __init__(
        self, headers: ValidHTTPHeaderSource | None = None, **kwargs: str
    ) -> None:
        super().__init__()
        self._container = {}
        if headers is not None:
            if isinstance(headers, HTTPHeaderMap):
                self._container.update(headers._container)
            else:
                self.update(headers)
        if kwargs:
            self.update(kwargs)

    def __setitem__(self, key: str, val: str) -> None:
        self._container[key] = val

    def __getitem__(self, key: str) -> str:
        try:
            return self._container[key]
        except KeyError:
            raise HeaderNotFound(key) from None

    def __delitem__(self, key: str) -> None:
        try:
            del self._container[key]
        except KeyError:
            raise HeaderNotFound(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._container

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self._container == dict(other.items())

    def __len__(self) -> int:
        return len(self._container)

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._container)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._container})"

    def copy(self) -> HTTPHeaderMap:
        return type(self)(self)

    def iterlines(self) -> typing.Iterator[str]:
        """Iterate over the ``Name: Value`` lines of every field, without
        their line terminators."""
        for key, val in self._container.items():
            yield f"{key}: {val}"
