"""JSON Console — tests for titled, highlighted JSON output."""

import io
import json

import pytest
from rich.console import Console

from northwind.infrastructure.json_console import display_json_console


def _console() -> Console:
    return Console(record=True, file=io.StringIO(), width=80, color_system=None)


def test_title_printed_above_json():
    console = _console()
    display_json_console('{"first_name": "Maria", "devices": []}', "Contact", console)

    lines = console.export_text().splitlines()
    assert lines[0] == ""
    assert lines[1] == "Contact"
    assert json.loads("\n".join(lines[2:])) == {"first_name": "Maria", "devices": []}


def test_title_markup_is_literal():
    console = _console()
    display_json_console("[1, 2]", "[bold]draft[/bold]", console)
    assert "[bold]draft[/bold]" in console.export_text()


def test_json_is_reindented():
    console = _console()
    display_json_console('{"a":{"b":1}}', "Nested", console)
    assert '    "b": 1' in console.export_text()


def test_invalid_json_raises():
    with pytest.raises(json.JSONDecodeError):
        display_json_console("{not json", "Broken", _console())
