from __future__ import annotations

from .util import WIRE_ENCODING, WIRE_ERRORS, to_bytes, to_str, to_wire_bytes

__all__ = (
    "WIRE_ENCODING",
    "WIRE_ERRORS",
    "to_bytes",
    "to_str",
    "to_wire_bytes",
)
