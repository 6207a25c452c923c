"""Encoders for ``None``, booleans, integers and floats."""
from __future__ import annotations

import enum
import math
from typing import Any, Final

from .base import Encoder, Options, Recurse, invalid_option

__all__ = ("NoneEncoder", "BooleanEncoder", "IntegerEncoder", "FloatEncoder")

# Floats with a magnitude below this value are exactly representable as ints
MAX_SAFE_INTEGER: Final = 2**53


class NoneEncoder(Encoder):
    def supports(self, value: Any) -> bool:
        return value is None

    def encode(
        self, value: None, depth: int, options: Options, recurse: Recurse
    ) -> str:
        return "None"


class BooleanEncoder(Encoder):
    def supports(self, value: Any) -> bool:
        return isinstance(value, bool)

    def encode(
        self, value: bool, depth: int, options: Options, recurse: Recurse
    ) -> str:
        return "True" if value else "False"


class IntegerEncoder(Encoder):
    """Encode integers in decimal, hexadecimal, octal or binary.

    >>> from pyencoder import dumps
    >>> dumps(255, {"integer.type": "hexadecimal"})
    '0xff'
    >>> dumps(-5, {"integer.type": "binary"})
    '-0b101'
    """

    FORMATS: Final = {
        "decimal": ("", "d"),
        "hexadecimal": ("0x", "x"),
        "octal": ("0o", "o"),
        "binary": ("0b", "b"),
    }

    def get_default_options(self) -> Options:
        return {"integer.type": "decimal", "hex.capitalize": False}

    def supports(self, value: Any) -> bool:
        # bool is a subclass of int, it is handled by the BooleanEncoder. Enum
        # members are referred to by name by the FunctionEncoder.
        return isinstance(value, int) and not isinstance(
            value, (bool, enum.Enum)
        )

    def encode(
        self, value: int, depth: int, options: Options, recurse: Recurse
    ) -> str:
        kind = options["integer.type"]
        if kind not in self.FORMATS:
            raise invalid_option("integer.type", kind)
        prefix, spec = self.FORMATS[kind]
        digits = format(abs(int(value)), spec)
        if spec == "x" and options["hex.capitalize"]:
            digits = digits.upper()
        sign = "-" if value < 0 else ""
        return f"{sign}{prefix}{digits}"


class FloatEncoder(Encoder):
    def get_default_options(self) -> Options:
        return {"float.precision": None, "float.integers": False}

    def supports(self, value: Any) -> bool:
        return isinstance(value, float) and not isinstance(value, enum.Enum)

    def encode(
        self, value: float, depth: int, options: Options, recurse: Recurse
    ) -> str:
        value = float(value)
        if not math.isfinite(value):
            if math.isnan(value):
                return 'float("nan")'
            return 'float("inf")' if value > 0 else '-float("inf")'
        if (
            options["float.integers"]
            and value.is_integer()
            and abs(value) < MAX_SAFE_INTEGER
        ):
            return str(int(value))
        precision = options["float.precision"]
        if precision is None:
            return repr(value)
        if (
            not isinstance(precision, int)
            or isinstance(precision, bool)
            or precision < 1
        ):
            raise invalid_option("float.precision", precision)
        res = format(value, f".{precision}g")
        if not any(c in res for c in ".e"):
            # Make sure the result reads back as a float
            res += ".0"
        return res
