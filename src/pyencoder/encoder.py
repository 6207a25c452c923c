"""
``pyencoder.encoder``: Selecting and driving encoders
=====================================================

:class:`PyEncoder` holds an ordered list of :class:`~pyencoder.Encoder` and a
table of options. Values are encoded by the first encoder that supports
them; nested values are fed back through the same selection via the
*recurse* callback handed to the encoders.

"""
from __future__ import annotations

import types
import warnings
from typing import Any, Final, Iterable, Mapping, TypeVar

from pyencoder import utils

from .encoders import (
    Encoder,
    InvalidOptionError,
    MaxDepthError,
    Options,
    RecursionDetectedError,
    UnsupportedValueError,
    default_encoders,
)

__all__ = ("PyEncoder", "DEFAULT_OPTIONS", "register", "dumps")

E = TypeVar("E", bound=type[Encoder])

#: Options understood by the dispatcher itself.
DEFAULT_OPTIONS: Final[Mapping[str, Any]] = types.MappingProxyType(
    {
        "whitespace": True,
        "recursion.detect": True,
        "recursion.ignore": False,
        "recursion.max": None,
    }
)

#: Encoders added via :func:`register`.
REGISTRY: list[Encoder] = []


def register(cls: E) -> E:
    """Class decorator that adds an encoder to all the :class:`PyEncoder`
    created without an explicit list of encoders.

    Registered encoders take precedence over the built-in ones (and are tried
    in the order in which they were registered)::

        >>> import fractions
        >>> @register
        ... class FractionEncoder(Encoder):
        ...     def supports(self, value):
        ...         return isinstance(value, fractions.Fraction)
        ...     def encode(self, value, depth, options, recurse):
        ...         args = recurse((value.numerator, value.denominator))
        ...         return f"fractions.Fraction(*{args})"
        >>> dumps(fractions.Fraction(1, 3))
        'fractions.Fraction(*(1, 3))'
        >>> del REGISTRY[-1]  # unregister the example

    Encoders should be registered when a module is imported; registering an
    encoder while values are being encoded in another thread isn't safe.
    """
    REGISTRY.append(cls())
    return cls


def _merge(options: Options, overrides: Options | None) -> dict[str, Any]:
    merged = dict(options)
    if overrides:
        for name, value in overrides.items():
            if name not in merged:
                raise InvalidOptionError(f"Unknown encoder option {name!r}")
            merged[name] = value
    return merged


class PyEncoder:
    """Convert python values to python code.

    Args:
      options: Values for the options (see :meth:`set_option`).
      encoders: The encoders to use. Defaults to the registered encoders
        followed by the built-in ones.
    """

    encoders: list[Encoder]
    options: dict[str, Any]

    def __init__(
        self,
        options: Options | None = None,
        encoders: Iterable[Encoder] | None = None,
    ) -> None:
        self.encoders = []
        self.options = dict(DEFAULT_OPTIONS)
        if encoders is None:
            encoders = [*REGISTRY, *default_encoders()]
        for encoder in encoders:
            self.add_encoder(encoder)
        if options:
            for name, value in options.items():
                self.set_option(name, value)

    def add_encoder(self, encoder: Encoder, prepend: bool = False) -> None:
        """Add an encoder at the end (or the beginning) of the list.

        The default options of *encoder* are added to the option table, the
        values that are already set are left untouched.
        """
        if prepend:
            self.encoders.insert(0, encoder)
        else:
            self.encoders.append(encoder)
        self.options = {**encoder.get_default_options(), **self.options}

    def set_option(self, name: str, value: Any) -> None:
        if name not in self.options:
            raise InvalidOptionError(f"Unknown encoder option {name!r}")
        self.options[name] = value

    def get_all_options(
        self, overrides: Options | None = None
    ) -> dict[str, Any]:
        "The options of this encoder with *overrides* applied."
        return _merge(self.options, overrides)

    def encode(self, value: Any, options: Options | None = None) -> str:
        """Convert *value* to python code.

        Args:
          value: The value to encode
          options: Options overriding the ones set on this encoder for this
            call only.
        """
        merged = types.MappingProxyType(self.get_all_options(options))
        return self._generate(value, 0, merged, ())

    def _generate(
        self, value: Any, depth: int, options: Options, path: tuple[int, ...]
    ) -> str:
        # `path` contains the ids of the values we are currently encoding. All
        # of them are kept alive by the callers so ids can't get reused.
        if options["recursion.detect"]:
            if id(value) in path:
                if not options["recursion.ignore"]:
                    raise RecursionDetectedError(
                        f"Recursive value of type {type(value).__name__!r}"
                    )
                warnings.warn(
                    f"Recursive value of type {type(value).__name__!r} "
                    "replaced by None",
                    RuntimeWarning,
                    stacklevel=2,
                )
                value = None
            path = (*path, id(value))

        max_depth = options["recursion.max"]
        if max_depth is not None and depth > max_depth:
            raise MaxDepthError(f"Maximum encoding depth ({max_depth}) reached")

        def recurse(inner: Any, overrides: Options | None = None, /) -> str:
            opts = options
            if overrides:
                opts = types.MappingProxyType(_merge(options, overrides))
            return self._generate(inner, depth + 1, opts, path)

        for encoder in self.encoders:
            if encoder.supports(value):
                return encoder.encode(value, depth, options, recurse)

        raise UnsupportedValueError(
            f"Unsupported value of type {type(value).__name__!r}: "
            f"{utils.cram(repr(value), 60)}"
        )


def dumps(value: Any, options: Options | None = None) -> str:
    """Convert *value* to python code using the default encoders.

    >>> dumps({"a": (1, 2.5, None)})
    "{'a': (1, 2.5, None)}"
    >>> dumps([1, 2], {"whitespace": False})
    '[1,2]'

    Args:
      value: The value to encode.
      options: Encoding options.
    """
    return PyEncoder().encode(value, options)
