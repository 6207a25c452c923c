"""Command line interface: encode JSON or pickle files as python code."""
from __future__ import annotations

import ast
import json
import pickle
import typing
from typing import Any

import click
import pygments
import pygments.formatters
import pygments.lexers

from pyencoder import EncodingError, PyEncoder


def parse_option(text: str) -> tuple[str, Any]:
    """Parse a ``KEY=VALUE`` pair.

    Values are read as python literals when possible and as strings otherwise.

    >>> parse_option("array.inline=False")
    ('array.inline', False)
    >>> parse_option("object.format=export")
    ('object.format', 'export')
    """
    name, sep, raw = text.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KEY=VALUE, got {text!r}")
    try:
        value = ast.literal_eval(raw)
    except (ValueError, SyntaxError):
        value = raw
    return name.strip(), value


def highlight(code: str) -> str:
    lexer = pygments.lexers.PythonLexer()
    formatter = pygments.formatters.TerminalFormatter()
    res: str = pygments.highlight(code, lexer, formatter)
    return res


@click.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "-f",
    "--input-format",
    type=click.Choice(["json", "pickle"]),
    default="json",
    show_default=True,
    help="How SOURCE is encoded.",
)
@click.option(
    "-O",
    "--option",
    "options",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set an encoding option (e.g.: -O array.inline=False).",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Highlight the output. Defaults to highlighting on terminals.",
)
@click.option(
    "--list-options", is_flag=True, help="Print the options and exit."
)
def main(
    source: typing.BinaryIO,
    input_format: str,
    options: tuple[str, ...],
    color: bool | None,
    list_options: bool,
) -> None:
    """Print the python code that rebuilds the value stored in SOURCE."""
    try:
        encoder = PyEncoder(dict(parse_option(o) for o in options))
    except EncodingError as e:
        raise click.UsageError(str(e)) from e

    if list_options:
        for name, value in sorted(encoder.options.items()):
            click.echo(f"{name} = {value!r}")
        return

    data = source.read()
    if input_format == "json":
        try:
            value = json.loads(data)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid JSON: {e}") from e
    else:
        value = pickle.loads(data)

    try:
        code = encoder.encode(value)
    except EncodingError as e:
        raise click.ClickException(str(e)) from e

    if color is None:
        color = click.get_text_stream("stdout").isatty()
    if color:
        click.echo(highlight(code), nl=False, color=True)
    else:
        click.echo(code)
