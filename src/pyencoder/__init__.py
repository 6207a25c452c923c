"""Convert python values to python code"""
from __future__ import annotations

from importlib import metadata

from .encoder import DEFAULT_OPTIONS, PyEncoder, dumps, register
from .encoders import (
    Encoder,
    EncodingError,
    InvalidOptionError,
    MaxDepthError,
    RecursionDetectedError,
    SourceConvertible,
    UnsupportedValueError,
    ValueConvertible,
    default_encoders,
    set_state,
)
from .loader import loads

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)
__author__ = "The pyencoder developers"
__copyright__ = f"2026, {__author__}"

__all__ = (
    "PyEncoder",
    "Encoder",
    "DEFAULT_OPTIONS",
    "default_encoders",
    "register",
    "dumps",
    "loads",
    "set_state",
    "SourceConvertible",
    "ValueConvertible",
    "EncodingError",
    "UnsupportedValueError",
    "InvalidOptionError",
    "RecursionDetectedError",
    "MaxDepthError",
)
