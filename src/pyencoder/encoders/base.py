"""
``pyencoder.encoders.base``: The encoder contract
==================================================

An encoder turns values of one category into python source code. Encoders
never call the dispatcher directly: they are handed a *recurse* callback that
they use to get the code of the values nested in the one they are encoding.

"""
from __future__ import annotations

import abc
import typing
from typing import Any, Mapping, Protocol

__all__ = (
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
)

Options: typing.TypeAlias = Mapping[str, Any]


class EncodingError(Exception):
    "Base class for all the errors raised while encoding a value."


class UnsupportedValueError(EncodingError, TypeError):
    "None of the registered encoders accepts the value."


class InvalidOptionError(EncodingError, ValueError):
    "An option is unknown or its value isn't one of the accepted values."


class RecursionDetectedError(EncodingError, ValueError):
    "The value contains itself."


class MaxDepthError(EncodingError, RuntimeError):
    "The value is nested deeper than ``recursion.max``."


class Recurse(Protocol):  # pragma: no cover
    def __call__(
        self, value: Any, overrides: Options | None = None, /
    ) -> str:
        ...


@typing.runtime_checkable
class SourceConvertible(Protocol):
    """Values that know how to write their own source code.

    The string returned by ``__to_source__`` is used verbatim.
    """

    def __to_source__(self) -> str:  # pragma: no cover
        ...


@typing.runtime_checkable
class ValueConvertible(Protocol):
    """Values that can be replaced by a simpler value.

    The value returned by ``__to_value__`` is encoded in place of the
    original.
    """

    def __to_value__(self) -> Any:  # pragma: no cover
        ...


class Encoder(abc.ABC):
    """Converts one category of values to code.

    Subclasses implement :meth:`supports` and :meth:`encode`, and override
    :meth:`get_default_options` if they read any option.
    """

    def get_default_options(self) -> Options:
        """The options (and their default values) read by this encoder.

        Keys should be namespaced by the encoder (e.g.: ``object.format``).
        """
        return {}

    @abc.abstractmethod
    def supports(self, value: Any) -> bool:  # pragma: no cover
        "Whether this encoder can handle *value*."
        ...

    @abc.abstractmethod
    def encode(
        self, value: Any, depth: int, options: Options, recurse: Recurse
    ) -> str:  # pragma: no cover
        """Convert *value* to a python expression.

        Args:
          value: A value for which :meth:`supports` returned ``True``.
          depth: How deep *value* is nested in the value being encoded.
          options: The merged (read-only) encoding options.
          recurse: Callback used to encode nested values.
        """
        ...


def invalid_option(name: str, value: Any) -> InvalidOptionError:
    return InvalidOptionError(f"Invalid value for option {name!r}: {value!r}")
