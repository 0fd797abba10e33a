"""Unit tests for the JSON lessons."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fileguide.lessons.json_files import from_json_string, load_json, save_json, to_json_string


def test_save_and_load_nested(tmp_path: Path) -> None:
    path = tmp_path / "person.json"
    person = {"name": "Alice", "age": 30, "tags": ["a", "b"], "address": {"city": "Oslo"}, "pet": None}
    save_json(path, person)
    assert load_json(path) == person


def test_save_is_indented_and_keeps_non_ascii(tmp_path: Path) -> None:
    path = tmp_path / "city.json"
    save_json(path, {"city": "Tromsø"})
    text = path.read_text(encoding="utf-8")
    assert "Tromsø" in text
    assert '\n  "city"' in text


def test_compact_when_indent_none(tmp_path: Path) -> None:
    path = tmp_path / "c.json"
    save_json(path, [1, 2], indent=None)
    assert path.read_text(encoding="utf-8") == "[1, 2]"


def test_string_helpers() -> None:
    text = to_json_string({"ok": True, "n": [1, 2]})
    assert text == '{"ok": true, "n": [1, 2]}'
    assert from_json_string(text) == {"ok": True, "n": [1, 2]}


def test_integer_keys_become_strings() -> None:
    assert from_json_string(to_json_string({1: "a"})) == {"1": "a"}


def test_malformed_raises(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{'single': 'quotes'}", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_json(path)
