"""Encoder for :mod:`gmpy2` integers."""
from __future__ import annotations

from typing import Any

import gmpy2

from .base import Encoder, Options, Recurse

__all__ = ("GMPEncoder",)


class GMPEncoder(Encoder):
    """Rebuild :class:`gmpy2.mpz` (and :class:`gmpy2.xmpz`) values from their
    decimal representation.

    >>> from pyencoder import dumps
    >>> print(dumps(gmpy2.mpz("98765432109876543210")))
    gmpy2.mpz('98765432109876543210')
    """

    def supports(self, value: Any) -> bool:
        return isinstance(value, gmpy2.mpz | gmpy2.xmpz)

    def encode(
        self, value: Any, depth: int, options: Options, recurse: Recurse
    ) -> str:
        constructor = "xmpz" if isinstance(value, gmpy2.xmpz) else "mpz"
        return f"gmpy2.{constructor}({recurse(value.digits(10))})"
