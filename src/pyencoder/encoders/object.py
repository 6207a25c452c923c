"""
``pyencoder.encoders.object``: Arbitrary objects
=================================================

Objects are encoded according to the ``object.format`` option:

+ ``vars``: the public fields of the object (the ones that don't start with an
  underscore).
+ ``array``: the raw content of the instance's ``__dict__`` (private fields
  included).
+ ``iterate``: the key/value pairs obtained by iterating over the object.
+ ``string``: the result of :func:`str` on the object.
+ ``serialize``: the object serialised with :mod:`pickle`.
+ ``export``: every field of the object (``__dict__`` and ``__slots__``) along
  with its class. This is the only format that recreates an instance of the
  original class.

For ``vars``, ``array`` and ``iterate`` the fields are turned into a
:class:`types.SimpleNamespace` unless ``object.cast`` is ``False``, in which
case they are left as a dictionary.

Before looking at the format, objects that implement
:class:`~pyencoder.encoders.base.SourceConvertible` or
:class:`~pyencoder.encoders.base.ValueConvertible` are given a chance to
encode themselves (this can be disabled via ``object.method``).

"""
from __future__ import annotations

import dataclasses
import pickle
import weakref
from typing import Any, Final, Mapping, Type, TypeVar

from .base import (
    Encoder,
    InvalidOptionError,
    Options,
    Recurse,
    SourceConvertible,
    ValueConvertible,
    invalid_option,
)

__all__ = ("ObjectEncoder", "set_state", "get_state")

T = TypeVar("T")

FORMATS: Final = frozenset(
    ("vars", "array", "iterate", "string", "serialize", "export")
)


@dataclasses.dataclass(frozen=True, slots=True)
class SlotField:
    name: str
    # The member descriptor created by ``__slots__``
    descriptor: Any

    def get(self, obj: Any) -> Any:
        return self.descriptor.__get__(obj, type(obj))


SLOT_FIELDS = weakref.WeakKeyDictionary[Type[Any], tuple[SlotField, ...]]()


def _mangle(cls: type, name: str) -> str:
    stripped = cls.__name__.lstrip("_")
    # Names are not mangled in classes whose name is only underscores
    if stripped and name.startswith("__") and not name.endswith("__"):
        return f"_{stripped}{name}"
    return name


def slot_fields(cls: Type[Any]) -> tuple[SlotField, ...]:
    """All the slots of *cls*, from the most derived class to the least derived
    one.

    When a slot is redefined in a subclass only the most derived definition is
    kept.
    """
    fields = SLOT_FIELDS.get(cls)
    if fields is not None:
        return fields
    seen = set[str]()
    acc: list[SlotField] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            name = _mangle(klass, slot)
            if name in seen:
                continue
            seen.add(name)
            acc.append(SlotField(name, klass.__dict__[name]))
    fields = SLOT_FIELDS[cls] = tuple(acc)
    return fields


def _instance_dict(obj: Any) -> dict[str, Any]:
    try:
        return dict(vars(obj))
    except TypeError:
        # No __dict__ (e.g.: the class defines __slots__)
        return {}


def get_state(obj: Any) -> dict[str, Any]:
    """Get all the fields of *obj*, private fields and slots included.

    >>> class Point:
    ...     __slots__ = ("x", "_y")
    ...     def __init__(self, x, y):
    ...         self.x, self._y = x, y
    >>> get_state(Point(1, 2))
    {'x': 1, '_y': 2}
    """
    state = _instance_dict(obj)
    for field in slot_fields(type(obj)):
        if field.name in state:
            continue
        try:
            state[field.name] = field.get(obj)
        except AttributeError:
            # The slot was never set
            continue
    return state


def set_state(cls: Type[T], state: Mapping[str, Any]) -> T:
    """Create an instance of *cls* with the given fields, without calling its
    ``__init__``.

    This is the function used to reload objects encoded with the ``export``
    format. Classes that define ``__setstate__`` receive the whole state as a
    dictionary.
    """
    obj: T = cls.__new__(cls)
    # The `__setstate__` generated for frozen dataclasses with slots expects a
    # tuple of values
    has_setstate = getattr(cls, "__setstate__", None) is not None
    if has_setstate and not dataclasses.is_dataclass(cls):
        obj.__setstate__(dict(state))  # type: ignore[attr-defined]
        return obj
    for name, value in state.items():
        object.__setattr__(obj, name, value)
    return obj


class ObjectEncoder(Encoder):
    "Encoder for generic objects. It should be registered last."

    def get_default_options(self) -> Options:
        return {
            "object.method": True,
            "object.format": "vars",
            "object.cast": True,
        }

    def supports(self, value: Any) -> bool:
        return True

    def encode(
        self, value: Any, depth: int, options: Options, recurse: Recurse
    ) -> str:
        if options["object.method"]:
            if isinstance(value, SourceConvertible):
                return str(value.__to_source__())
            if isinstance(value, ValueConvertible):
                return recurse(value.__to_value__())
        return self.encode_object(value, options, recurse)

    def encode_object(
        self, obj: Any, options: Options, recurse: Recurse
    ) -> str:
        """Encode *obj* according to ``object.format``."""
        fmt = options["object.format"]
        if fmt not in FORMATS:
            raise invalid_option("object.format", fmt)
        if fmt == "string":
            return recurse(str(obj))
        if fmt == "serialize":
            return f"pickle.loads({recurse(pickle.dumps(obj))})"
        if fmt == "export":
            cls = recurse(type(obj))
            return f"pyencoder.set_state({cls}, {recurse(get_state(obj))})"

        fields = self.get_fields(obj, fmt)
        if not options["object.cast"]:
            return recurse(fields)
        for key in fields:
            if not isinstance(key, str):
                raise InvalidOptionError(
                    f"Can't cast {type(obj).__name__!r} to an object, the "
                    f"key {key!r} is not a string (set object.cast to False)"
                )
        return f"types.SimpleNamespace(**{recurse(fields)})"

    def get_fields(self, obj: Any, fmt: str) -> dict[Any, Any]:
        """Get the fields for the ``array``, ``vars`` and ``iterate``
        formats."""
        if fmt == "array":
            return _instance_dict(obj)
        if fmt == "vars":
            return {
                k: v for k, v in get_state(obj).items() if not k.startswith("_")
            }
        assert fmt == "iterate", fmt
        if hasattr(obj, "keys"):
            return {k: obj[k] for k in obj.keys()}
        return {k: v for k, v in obj}
