"""Encoder for text and binary strings."""
from __future__ import annotations

import enum
from typing import Any

from .base import Encoder, Options, Recurse

__all__ = ("StringEncoder",)


class StringEncoder(Encoder):
    """Quote :class:`str`, :class:`bytes` and :class:`bytearray` values.

    When ``string.ascii`` is set, non-ascii characters in :class:`str` values
    are escaped.

    >>> from pyencoder import dumps
    >>> dumps("café")
    "'café'"
    >>> dumps("café", {"string.ascii": True})
    "'caf\\\\xe9'"
    """

    def get_default_options(self) -> Options:
        return {"string.ascii": False}

    def supports(self, value: Any) -> bool:
        return isinstance(value, str | bytes | bytearray) and not isinstance(
            value, enum.Enum
        )

    def encode(
        self,
        value: str | bytes | bytearray,
        depth: int,
        options: Options,
        recurse: Recurse,
    ) -> str:
        if isinstance(value, bytearray):
            return f"bytearray({bytes(value)!r})"
        if isinstance(value, bytes):
            return repr(bytes(value))
        # Ignore the ``__repr__`` of subclasses
        value = str.__str__(value)
        return ascii(value) if options["string.ascii"] else repr(value)
