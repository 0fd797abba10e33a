"""JSON files: dump and load dicts and lists."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def save_json(path: Path | str, data: Any, indent: int | None = 2, encoding: str = "utf-8") -> None:
    with open(path, "w", encoding=encoding) as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def load_json(path: Path | str, encoding: str = "utf-8") -> Any:
    """Load JSON from path. Raises json.JSONDecodeError on malformed content."""
    with open(path, "r", encoding=encoding) as f:
        return json.load(f)


def to_json_string(data: Any, indent: int | None = None) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


def from_json_string(text: str) -> Any:
    return json.loads(text)


def demo(workdir: Path) -> None:
    path = workdir / "person.json"
    person = {"name": "Alice", "age": 30, "hobbies": ["reading", "coding"]}
    save_json(path, person)
    print(f"Wrote {path.name}:")
    print(path.read_text(encoding="utf-8"))
    loaded = load_json(path)
    print(f"Name: {loaded['name']}")
    print(f"Hobbies: {', '.join(loaded['hobbies'])}")
    print(f"As a string: {to_json_string(loaded)}")
