from __future__ import annotations

import collections

import pytest

import pyencoder

from .utils import roundtrip

NESTED = """\
{
    'name': 'nested',
    'values': [
        1,
        2,
    ],
}\
"""

ALIGNED = """\
{
    'a':   1,
    'bbb': 2,
}\
"""

TABS = """\
[
>\t1,
>]\
"""


def test_inline():
    assert pyencoder.dumps([1, "a", None]) == "[1, 'a', None]"
    assert pyencoder.dumps({"a": 1, 2: [3]}) == "{'a': 1, 2: [3]}"
    assert pyencoder.dumps({1, 2}) == "{1, 2}"
    assert pyencoder.dumps(frozenset([1])) == "frozenset({1})"


def test_tuples():
    assert pyencoder.dumps(()) == "()"
    assert pyencoder.dumps((1,)) == "(1,)"
    assert pyencoder.dumps((1, 2)) == "(1, 2)"
    assert pyencoder.dumps((1,), {"array.inline": False}) == "(\n    1,\n)"


def test_empty():
    assert pyencoder.dumps([[], {}, (), set(), frozenset()]) == (
        "[[], {}, (), set(), frozenset()]"
    )


def test_whitespace():
    v = {"a": [1, 2]}
    assert pyencoder.dumps(v, {"whitespace": False}) == "{'a':[1,2]}"


def test_multiline():
    v = {"name": "nested", "values": [1, 2]}
    assert pyencoder.dumps(v, {"array.inline": False}) == NESTED
    # Only the outer container is too long to fit
    long = ["x" * 30, "y" * 30, [1, 2]]
    assert pyencoder.dumps(long) == (
        "[\n    '" + "x" * 30 + "',\n    '" + "y" * 30 + "',\n    [1, 2],\n]"
    )


def test_inline_width():
    v = list(range(10))
    assert "\n" not in pyencoder.dumps(v, {"array.inline": 30})
    assert "\n" in pyencoder.dumps(v, {"array.inline": 20})
    assert "\n" not in pyencoder.dumps(
        [["x" * 80]], {"array.inline": True}
    )
    with pytest.raises(pyencoder.InvalidOptionError):
        pyencoder.dumps(v, {"array.inline": "wide"})


def test_align():
    v = {"a": 1, "bbb": 2}
    options = {"array.inline": False, "array.align": True}
    assert pyencoder.dumps(v, options) == ALIGNED


def test_indent_options():
    options = {
        "array.inline": False,
        "array.indent": "\t",
        "array.base": ">",
    }
    assert pyencoder.dumps([1], options) == TABS
    options = {"array.inline": False, "array.eol": "\r\n", "array.indent": 2}
    assert pyencoder.dumps([1], options) == "[\r\n  1,\r\n]"


def test_subclasses_are_not_literals():
    point = collections.namedtuple("point", "x y")(1, 2)
    assert not pyencoder.dumps(point).startswith("(")
    assert pyencoder.dumps(collections.OrderedDict(a=1)) != "{'a': 1}"


@pytest.mark.parametrize(
    "v",
    (
        [1, [2, [3, {"4": (5,)}]]],
        {(1, 2): {3, 4}, frozenset([5]): None},
        {"text": "x" * 100, "numbers": list(range(40))},
    ),
)
def test_roundtrip(v):
    roundtrip(v)
    roundtrip(v, {"array.inline": False, "array.align": True})
    roundtrip(v, {"whitespace": False})
