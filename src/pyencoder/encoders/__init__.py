"""The built-in encoders.

The order in which the encoders are listed matters: the first encoder that
supports a value is the one used to encode it.
"""
from __future__ import annotations

from .array import ArrayEncoder
from .base import (
    Encoder,
    EncodingError,
    InvalidOptionError,
    MaxDepthError,
    Options,
    Recurse,
    RecursionDetectedError,
    SourceConvertible,
    UnsupportedValueError,
    ValueConvertible,
)
from .function import FunctionEncoder
from .gmp import GMPEncoder
from .object import ObjectEncoder, get_state, set_state
from .scalar import BooleanEncoder, FloatEncoder, IntegerEncoder, NoneEncoder
from .string import StringEncoder

__all__ = (
    "default_encoders",
    "Encoder",
    "Options",
    "Recurse",
    "SourceConvertible",
    "ValueConvertible",
    "EncodingError",
    "UnsupportedValueError",
    "InvalidOptionError",
    "RecursionDetectedError",
    "MaxDepthError",
    "NoneEncoder",
    "BooleanEncoder",
    "IntegerEncoder",
    "FloatEncoder",
    "StringEncoder",
    "ArrayEncoder",
    "GMPEncoder",
    "FunctionEncoder",
    "ObjectEncoder",
    "get_state",
    "set_state",
)


def default_encoders() -> list[Encoder]:
    "Fresh instances of the built-in encoders, in order of precedence."
    return [
        NoneEncoder(),
        BooleanEncoder(),
        IntegerEncoder(),
        FloatEncoder(),
        StringEncoder(),
        ArrayEncoder(),
        GMPEncoder(),
        FunctionEncoder(),
        ObjectEncoder(),
    ]
