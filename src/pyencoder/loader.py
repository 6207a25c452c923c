"""
``pyencoder.loader``: Evaluating encoded values
===============================================

The code generated by :func:`~pyencoder.dumps` refers to functions and classes
by their full dotted name (e.g.: ``types.SimpleNamespace``). :func:`loads`
imports the modules needed to resolve those names before evaluating the code.

.. warning::

   :func:`loads` evaluates arbitrary python code. Only use it on trusted
   input.

"""
from __future__ import annotations

import ast
import importlib
from typing import Any

from pyencoder import ast_utils, utils

__all__ = ("loads",)


class _DottedNames(ast.NodeVisitor):
    found: list[tuple[ast.Name | ast.Attribute, str]]

    def __init__(self) -> None:
        self.found = []

    def visit_Attribute(self, node: ast.Attribute) -> None:
        path = ast_utils.dotted_name(node)
        if path is None:
            self.generic_visit(node)
        else:
            self.found.append((node, path))

    def visit_Name(self, node: ast.Name) -> None:
        self.found.append((node, node.id))


def loads(code: str) -> Any:
    """Evaluate *code*, importing the modules it refers to.

    >>> loads("fractions.Fraction(1, 3)")
    Fraction(1, 3)

    Args:
      code: A single python expression.
    """
    tree = ast.parse(code, mode="eval")
    filename = ast_utils.fill_linecache(code)
    visitor = _DottedNames()
    visitor.visit(tree)
    env: dict[str, Any] = {}
    for node, path in visitor.found:
        module = utils.get_import(path)
        if module is None:
            continue
        if isinstance(module, Exception):
            if "." not in path:
                # Leave it to `eval` to report unbound variables
                continue
            ast_utils.raise_at(module, node, code, filename=filename)
        importlib.import_module(module)
        root = module.split(".", 1)[0]
        env[root] = importlib.import_module(root)
    return eval(compile(tree, filename=filename, mode="eval"), env)
