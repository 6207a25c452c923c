from __future__ import annotations

import ast
import pickle

import pyencoder


def assert_expression(code):
    "Check that *code* is exactly one python expression."
    tree = ast.parse(code, mode="eval")
    assert isinstance(tree, ast.Expression)
    return tree


def roundtrip(v, options=None):
    """Encode *v*, reload it and check that we got the same value back."""
    code = pyencoder.dumps(v, options)
    assert_expression(code)
    v2 = pyencoder.loads(code)
    # nan can wreak havoc in comparisons so we fall back on comparing pickles
    assert v == v2 or pickle.dumps(v) == pickle.dumps(v2), code
    return v2


class InstanceOf:
    """Utility class to check that a given value is an instance of a class."""

    def __init__(self, ty):
        self.ty = ty

    def __eq__(self, x):
        return isinstance(x, self.ty)
