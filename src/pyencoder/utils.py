from __future__ import annotations

import inspect
import pydoc
import types
import typing
from typing import Protocol, TypeVar

locate = pydoc.locate
cram = pydoc.cram


@typing.runtime_checkable
class QualnameAddressable(Protocol):

    __name__: str
    __qualname__: str
    __module__: str


Addressable = TypeVar(
    "Addressable", bound=types.ModuleType | QualnameAddressable
)


def get_locate_name(v: Addressable) -> str:
    """Get a name that can be used with `locate` to reload the given argument"""
    if inspect.ismodule(v):
        name = v.__name__
    elif isinstance(v, QualnameAddressable):
        if v.__name__ == "<lambda>":
            raise TypeError("lambdas are not supported")
        # Methods of builtin instances (e.g.: `[].append`) have no module
        if not isinstance(v.__module__, str):
            raise TypeError(f"{v!r} is not defined in a module")
        if v.__module__ == "builtins":
            name = v.__qualname__
        else:
            name = v.__module__ + "." + v.__qualname__
        if ".<locals>." in v.__qualname__:
            raise ValueError(
                "values defined inside of functions are not supported."
            )
    else:
        raise TypeError(f"Type {type(v).__name__!r} not supported")

    elt = locate(name)
    if elt is None:
        raise ValueError(
            f"Argument {v} cannot be reloaded via its name: {name!r}"
        )
    elif elt != v:
        raise ValueError(f"Can't use {v}, it's overridden by {elt} as {name!r}")
    return name


def get_import(path: str) -> str | None | Exception:
    """Find the module that needs to be imported to resolve *path*.

    Returns ``None`` for builtins and the exception raised while looking up the
    module if there was one.

    >>> get_import("collections.OrderedDict")
    'collections'
    >>> get_import("len") is None
    True
    """
    try:
        while True:
            obj = locate(path)
            if obj is None:
                return ImportError(f"Failed to find object {path!r}")
            if inspect.ismodule(obj):
                return path
            if "." not in path:
                return None
            module = getattr(obj, "__module__", None)
            if isinstance(module, str) and path.startswith(module + "."):
                return module
            path, _ = path.rsplit(".", 1)
    except Exception as e:
        # Clear out all the fields set by `raise ...` that might leak large
        # amounts of memory
        e.__cause__ = e.__context__ = e.__traceback__ = None
        return e
