from __future__ import annotations

import json
import pickle
import types

import pytest
from click.testing import CliRunner

from pyencoder import cli

SAMPLE = {"name": "sample", "values": [1, 2.5, None, True]}


@pytest.fixture
def runner():
    return CliRunner()


def test_json_stdin(runner):
    result = runner.invoke(cli.main, input=json.dumps(SAMPLE))
    assert result.exit_code == 0, result.output
    assert result.output == (
        "{'name': 'sample', 'values': [1, 2.5, None, True]}\n"
    )


def test_options(runner):
    result = runner.invoke(
        cli.main,
        ["-O", "array.inline=False", "-O", "whitespace=False"],
        input="[1]",
    )
    assert result.exit_code == 0, result.output
    assert result.output == "[\n    1,\n]\n"


def test_pickle_file(runner, tmp_path):
    path = tmp_path / "value.pkl"
    path.write_bytes(pickle.dumps(types.SimpleNamespace(a=1)))
    result = runner.invoke(
        cli.main,
        ["--input-format", "pickle", "-O", "object.format=export", str(path)],
    )
    assert result.exit_code == 0, result.output
    assert result.output == (
        "pyencoder.set_state(types.SimpleNamespace, {'a': 1})\n"
    )


def test_color(runner):
    result = runner.invoke(cli.main, ["--color"], input="[1]")
    assert result.exit_code == 0, result.output
    assert "\x1b[" in result.output
    result = runner.invoke(cli.main, ["--no-color"], input="[1]")
    assert result.output == "[1]\n"


def test_list_options(runner):
    result = runner.invoke(cli.main, ["--list-options", "-O", "whitespace=0"])
    assert result.exit_code == 0, result.output
    assert "object.format = 'vars'\n" in result.output
    assert "whitespace = 0\n" in result.output


def test_errors(runner):
    result = runner.invoke(cli.main, ["-O", "bogus=1"], input="1")
    assert result.exit_code == 2
    assert "Unknown encoder option 'bogus'" in result.output

    result = runner.invoke(cli.main, ["-O", "whitespace"], input="1")
    assert result.exit_code != 0

    result = runner.invoke(cli.main, input="{")
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output

    result = runner.invoke(
        cli.main, ["-O", "integer.type=roman"], input="[1]"
    )
    assert result.exit_code == 1
    assert "integer.type" in result.output


def test_parse_option():
    assert cli.parse_option("recursion.max=10") == ("recursion.max", 10)
    assert cli.parse_option("array.indent='\\t'") == ("array.indent", "\t")
    assert cli.parse_option("array.base=  ") == ("array.base", "  ")
