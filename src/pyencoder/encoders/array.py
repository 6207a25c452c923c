"""
``pyencoder.encoders.array``: Containers
========================================

Encodes :class:`list`, :class:`tuple`, :class:`dict`, :class:`set` and
:class:`frozenset`. Short containers are printed on one line, longer ones get
one item per line:

  >>> from pyencoder import dumps
  >>> dumps({"a": [1, 2], "b": (3,)})
  "{'a': [1, 2], 'b': (3,)}"
  >>> print(dumps([1, 2, 3], {"array.inline": False}))
  [
      1,
      2,
      3,
  ]

"""
from __future__ import annotations

from typing import Any, Final, Iterable

from .base import Encoder, Options, Recurse, invalid_option

__all__ = ("ArrayEncoder",)

# type -> (opening bracket, closing bracket, empty value)
BRACKETS: Final[dict[type[Any], tuple[str, str, str]]] = {
    list: ("[", "]", "[]"),
    tuple: ("(", ")", "()"),
    dict: ("{", "}", "{}"),
    set: ("{", "}", "set()"),
    frozenset: ("frozenset({", "})", "frozenset()"),
}


def build_indent(base: int | str, indent: int | str, depth: int) -> str:
    prefix = " " * base if isinstance(base, int) else base
    unit = " " * indent if isinstance(indent, int) else indent
    return prefix + unit * depth


class ArrayEncoder(Encoder):
    def get_default_options(self) -> Options:
        return {
            "array.inline": 70,
            "array.align": False,
            "array.indent": 4,
            "array.base": 0,
            "array.eol": "\n",
        }

    def supports(self, value: Any) -> bool:
        # We do exact type comparisons instead of calls to `isinstance`:
        # subclasses (e.g.: named tuples) can't be rebuilt from a literal.
        return type(value) in BRACKETS

    def encode(
        self,
        value: list[Any] | tuple[Any, ...] | dict[Any, Any] | set[Any],
        depth: int,
        options: Options,
        recurse: Recurse,
    ) -> str:
        opar, cpar, empty = BRACKETS[type(value)]
        if not value:
            return empty

        pairs: list[tuple[str, str]] | None = None
        items: list[str]
        if isinstance(value, dict):
            # Note that the order matters here: keys are encoded before their
            # values.
            pairs = [(recurse(k), recurse(v)) for k, v in value.items()]
            colon = ": " if options["whitespace"] else ":"
            items = [k + colon + v for k, v in pairs]
        else:
            items = [recurse(x) for x in value]

        inline = options["array.inline"]
        if inline is not False:
            output = self.format_inline(items, opar, cpar, options)
            if "\n" not in output and (
                inline is True or len(output) <= self._inline_width(inline)
            ):
                return output

        if pairs is not None and options["array.align"]:
            items = self.align(pairs, colon)

        return self.format_lines(items, opar, cpar, depth, options)

    @staticmethod
    def _inline_width(inline: Any) -> int:
        if not isinstance(inline, int):
            raise invalid_option("array.inline", inline)
        return inline

    def format_inline(
        self, items: list[str], opar: str, cpar: str, options: Options
    ) -> str:
        sep = ", " if options["whitespace"] else ","
        body = sep.join(items)
        if opar == "(" and len(items) == 1:
            # One element tuple
            body += ","
        return f"{opar}{body}{cpar}"

    def format_lines(
        self,
        items: Iterable[str],
        opar: str,
        cpar: str,
        depth: int,
        options: Options,
    ) -> str:
        eol = options["array.eol"]
        base = options["array.base"]
        unit = options["array.indent"]
        indent = build_indent(base, unit, depth + 1)
        last = build_indent(base, unit, depth)
        lines = "".join(f"{eol}{indent}{item}," for item in items)
        return f"{opar}{lines}{eol}{last}{cpar}"

    @staticmethod
    def align(pairs: list[tuple[str, str]], colon: str) -> list[str]:
        """Pad the keys of a dict so that all the values start on the same
        column."""
        if any("\n" in key for key, _ in pairs):
            return [key + colon + value for key, value in pairs]
        width = max(len(key) for key, _ in pairs)
        return [
            key + colon + " " * (width - len(key)) + value
            for key, value in pairs
        ]
