"""Unit tests for config (defaults, merge order, project root, docs root)."""

from __future__ import annotations

import json
from pathlib import Path

from fileguide.config import (
    FILEGUIDE_DIR,
    default_config,
    docs_root,
    find_project_root,
    global_config_path,
    load_config,
    project_config_path,
    resolve_path,
    save_config,
)


def test_default_config() -> None:
    cfg = default_config()
    assert cfg["docs_dir"] == "docs"
    assert cfg["encoding"] == "utf-8"
    assert cfg["check"]["verify_imports"] is True
    assert "python" in cfg["check"]["python_languages"]
    assert any(".fileguide" in p for p in cfg["ignore"]["builtin_patterns"])
    assert cfg["logging"]["file"] is None


def test_load_config_defaults_without_files(isolated_home: Path) -> None:
    assert load_config(None) == default_config()


def test_global_config_merged_over_defaults(isolated_home: Path) -> None:
    save_config(global_config_path(), {"logging": {"level": "DEBUG"}})
    cfg = load_config(None)
    assert cfg["logging"]["level"] == "DEBUG"
    # Sibling keys of a merged dict survive
    assert cfg["logging"]["file"] is None


def test_project_config_overrides_global(tmp_path: Path) -> None:
    save_config(global_config_path(), {"docs_dir": "global-docs", "encoding": "latin-1"})
    save_config(project_config_path(tmp_path), {"docs_dir": "guide"})
    cfg = load_config(tmp_path)
    assert cfg["docs_dir"] == "guide"
    assert cfg["encoding"] == "latin-1"


def test_invalid_json_is_ignored(tmp_path: Path) -> None:
    path = project_config_path(tmp_path)
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")
    assert load_config(tmp_path) == default_config()


def test_non_object_json_is_ignored(tmp_path: Path) -> None:
    save_config(project_config_path(tmp_path), [1, 2, 3])  # type: ignore[arg-type]
    assert load_config(tmp_path) == default_config()


def test_save_config_creates_parent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "config.json"
    save_config(target, {"x": 1})
    assert json.loads(target.read_text(encoding="utf-8")) == {"x": 1}


def test_resolve_path(tmp_path: Path) -> None:
    p = tmp_path / "sub" / ".." / "sub"
    assert resolve_path(p) == (tmp_path / "sub").resolve()


def test_find_project_root_not_found(tmp_path: Path) -> None:
    (tmp_path / "a" / "b").mkdir(parents=True)
    assert find_project_root(tmp_path / "a" / "b") is None


def test_find_project_root_from_nested_file(tmp_path: Path) -> None:
    (tmp_path / FILEGUIDE_DIR).mkdir()
    f = tmp_path / "docs" / "intro.md"
    f.parent.mkdir()
    f.write_text("# Intro\n", encoding="utf-8")
    assert find_project_root(f) == tmp_path.resolve()


def test_docs_root_uses_docs_dir_at_project_root(tmp_path: Path) -> None:
    (tmp_path / FILEGUIDE_DIR).mkdir()
    (tmp_path / "guide").mkdir()
    cfg = default_config()
    cfg["docs_dir"] = "guide"
    assert docs_root(tmp_path, cfg, tmp_path) == (tmp_path / "guide").resolve()


def test_docs_root_falls_back_when_docs_dir_missing(tmp_path: Path) -> None:
    assert docs_root(tmp_path, default_config(), None) == tmp_path.resolve()


def test_docs_root_keeps_explicit_subdirectory_and_file(tmp_path: Path) -> None:
    (tmp_path / "docs").mkdir()
    other = tmp_path / "other"
    other.mkdir()
    doc = tmp_path / "README.md"
    doc.write_text("# x\n", encoding="utf-8")
    assert docs_root(other, default_config(), tmp_path) == other.resolve()
    assert docs_root(doc, default_config(), tmp_path) == doc.resolve()
