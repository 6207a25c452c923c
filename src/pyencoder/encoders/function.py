"""Encoder for functions, classes, modules and enum members."""
from __future__ import annotations

import enum
import types
from typing import Any

from pyencoder import utils

from .base import Encoder, Options, Recurse

__all__ = ("FunctionEncoder",)


class FunctionEncoder(Encoder):
    """Refer to functions, classes, modules and enum members by their
    importable name.

    >>> import collections, math
    >>> from pyencoder import dumps
    >>> dumps([math.floor, collections.OrderedDict, len])
    '[math.floor, collections.OrderedDict, len]'
    """

    def supports(self, value: Any) -> bool:
        return isinstance(
            value,
            types.FunctionType
            | types.BuiltinFunctionType
            | types.ModuleType
            | type
            | enum.Enum,
        )

    def encode(
        self, value: Any, depth: int, options: Options, recurse: Recurse
    ) -> str:
        if isinstance(value, enum.Enum):
            return self.encode_member(value)
        return utils.get_locate_name(value)

    def encode_member(self, member: enum.Enum) -> str:
        cls = type(member)
        name = member.name
        # Combined flags (e.g.: `Perm.R | Perm.W`) don't have a name of their
        # own
        if name is None or cls.__members__.get(name) is not member:
            raise ValueError(f"{member!r} cannot be reloaded via its name")
        return f"{utils.get_locate_name(cls)}.{name}"
