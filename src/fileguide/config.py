"""Configuration: default paths, constants, and config loading (global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Directory name inside a project that holds fileguide settings
FILEGUIDE_DIR = ".fileguide"
CONFIG_FILENAME = "config.json"


def _global_config_dir() -> Path:
    return Path.home() / ".config" / "fileguide"


def global_config_path() -> Path:
    """Path to global config file (~/.config/fileguide/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Built-in defaults; global and project files are merged on top."""
    return {
        "docs_dir": "docs",
        "encoding": "utf-8",
        "check": {
            "python_languages": ["python", "py", "python3"],
            "verify_imports": True,
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
        "ignore": {
            "builtin_patterns": [".git/", ".fileguide/", ".venv/", "node_modules/"],
            "additional_patterns": [],
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.config/fileguide/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.fileguide/config.json)."""
    return project_root / FILEGUIDE_DIR / CONFIG_FILENAME


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.config/fileguide/config.json) + project overrides.

    If project_root is None, only global config (and defaults) are used.
    """
    merged = load_global_config()
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config as pretty JSON, creating the parent directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def resolve_path(path: Path) -> Path:
    """Resolve path to absolute, normalized."""
    return path.resolve()


def find_project_root(path: Path) -> Path | None:
    """
    Walk upward from path looking for a directory that contains .fileguide.
    Returns that directory if found, else None.
    """
    resolved = path.resolve()
    if resolved.is_file():
        resolved = resolved.parent
    current: Path | None = resolved
    while current is not None:
        if (current / FILEGUIDE_DIR).is_dir():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def docs_root(path: Path, config: dict[str, Any], project_root: Path | None) -> Path:
    """
    Directory or file the docs check should scan for path.

    An explicit file or a directory other than the project root is used as is; the
    project root itself maps to its configured docs_dir when that directory exists.
    """
    resolved = path.resolve()
    if resolved.is_file():
        return resolved
    base = project_root.resolve() if project_root is not None else resolved
    if resolved != base:
        return resolved
    candidate = base / str(config.get("docs_dir") or "docs")
    if candidate.is_dir():
        return candidate
    return resolved
