from __future__ import annotations

import ast
import hashlib
import io
import linecache
import typing
from typing import Protocol


class Located(Protocol):  # pragma: no cover
    @property
    def lineno(self) -> int:
        ...

    @property
    def col_offset(self) -> int:
        ...

    @property
    def end_lineno(self) -> int | None:
        ...

    @property
    def end_col_offset(self) -> int | None:
        ...


def dotted_name(node: ast.expr) -> str | None:
    """The dotted path represented by a chain of attribute accesses.

    >>> dotted_name(ast.parse("a.b.c", mode="eval").body)
    'a.b.c'
    >>> dotted_name(ast.parse("a().b", mode="eval").body) is None
    True
    """
    path = []
    while isinstance(node, ast.Attribute):
        path.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    path.append(node.id)
    return ".".join(reversed(path))


# Code handed to `loads` is registered in the linecache so that tracebacks can
# show the offending line. Entries get an mtime of None so that
# linecache.checkcache never purges them.


def fill_linecache(data: str) -> str:
    "Fill the linecache with a fake file containing the content of ``data``."
    digest = hashlib.sha1(data.encode("utf8")).hexdigest()
    filename = f"<pyencoder-{digest}>"
    if filename not in linecache.cache:
        size = len(data)
        lines = list(io.StringIO(data))
        mtime = None
        linecache.cache[filename] = (
            size,
            mtime,
            lines,
            filename,
        )
    return filename


def raise_at(
    exc: Exception, node: Located, content: str, *, filename: str | None = None
) -> typing.NoReturn:
    """Raise an exception for a given location in a string.

    This is a helper function to make sure we get traceback that go up all the
    way to their real source.
    """
    code = compile(
        ast.Module(
            body=[
                ast.Raise(
                    exc=ast.Name(
                        id="e",
                        ctx=ast.Load(),
                        lineno=node.lineno,
                        col_offset=node.col_offset,
                        end_lineno=node.end_lineno,
                        end_col_offset=node.end_col_offset,
                    ),
                    cause=None,
                    lineno=node.lineno,
                    col_offset=node.col_offset,
                    end_lineno=node.end_lineno,
                    end_col_offset=node.end_col_offset,
                )
            ],
            type_ignores=[],
        ),
        filename=fill_linecache(content) if filename is None else filename,
        mode="exec",
    )
    exec(code, {"e": exc})
    # Mypy fails to infer that this is unreachable
    assert False  # pragma: no cover
