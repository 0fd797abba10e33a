"""Show or edit configuration (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from fileguide.config import (
    default_config,
    find_project_root,
    global_config_path,
    load_config,
    project_config_path,
    save_config,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def get_nested_key(data: dict[str, Any], key_path: str) -> Any:
    """Return value at dotted key (e.g. 'ignore.additional_patterns'); None if missing."""
    current: Any = data
    for part in key_path.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def set_nested_key(data: dict[str, Any], key_path: str, value: Any) -> None:
    """Set a dotted key (e.g. 'logging.level'), creating intermediate dicts as needed."""
    parts = key_path.split(".")
    current = data
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def parse_value(value_str: str) -> Any:
    """JSON value if it parses (number, bool, null, list, quoted string), else the raw string."""
    value_str = value_str.strip()
    try:
        return json.loads(value_str)
    except json.JSONDecodeError:
        return value_str


def _known_default(key_path: str) -> Any:
    """Default value for a dotted key; fails when fileguide has no such setting."""
    defaults = default_config()
    current: Any = defaults
    for part in key_path.split("."):
        if not isinstance(current, dict) or part not in current:
            known = ", ".join(sorted(_leaf_keys(defaults)))
            _fail(f"unknown config key '{key_path}'. Known keys: {known}.")
        current = current[part]
    return current


def _leaf_keys(data: dict[str, Any], prefix: str = "") -> list[str]:
    keys: list[str] = []
    for name, value in data.items():
        dotted = f"{prefix}{name}"
        if isinstance(value, dict):
            keys.extend(_leaf_keys(value, dotted + "."))
        else:
            keys.append(dotted)
    return keys


def _validate_set(key: str, value: Any) -> None:
    default = _known_default(key)
    if isinstance(default, dict):
        _fail(f"'{key}' is a section; set one of its keys instead.")
    if isinstance(default, bool) and not isinstance(value, bool):
        _fail(f"'{key}' must be true or false.")
    if isinstance(default, list) and not isinstance(value, list):
        _fail(f"'{key}' is a list; use --add/--remove or a JSON list.")
    if key == "logging.level" and str(value).upper() not in LOG_LEVELS:
        _fail(f"logging.level must be one of {', '.join(LOG_LEVELS)}.")


def _read_raw(path: Path) -> dict[str, Any]:
    """Raw (unmerged) config at path; {} if missing or invalid."""
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def run(args: Namespace) -> None:
    """Show merged settings, or set/add/remove one value in the global or project config file."""
    show = getattr(args, "show", False)
    set_key = getattr(args, "set_key", None)
    add_key = getattr(args, "add_key", None)
    remove_key = getattr(args, "remove_key", None)
    path = Path(getattr(args, "path", Path("."))).resolve()
    use_global = getattr(args, "global_", False)

    if not (show or set_key or add_key or remove_key):
        _fail("specify --show, --set KEY=VALUE, --add KEY VALUE, or --remove KEY VALUE.")

    project_root = find_project_root(path)
    if use_global or project_root is None:
        target, label = global_config_path(), "global"
    else:
        target, label = project_config_path(project_root), f"project ({project_root.as_posix()})"

    if set_key:
        key, sep, value_str = set_key.partition("=")
        key = key.strip()
        if not sep:
            _fail("--set requires KEY=VALUE (e.g. logging.level=DEBUG).")
        if not key:
            _fail("empty key in KEY=VALUE.")
        value = parse_value(value_str)
        _validate_set(key, value)
        data = _read_raw(target)
        set_nested_key(data, key, value)
        save_config(target, data)
        print(f"Set {key} = {json.dumps(value)} in {label} config.")

    for pair, verb in ((add_key, "add"), (remove_key, "remove")):
        if not pair:
            continue
        key, value_str = pair[0].strip(), pair[1].strip()
        if not key:
            _fail(f"empty key in --{verb} KEY VALUE.")
        if not isinstance(_known_default(key), list):
            _fail(f"--{verb} needs a list key such as ignore.additional_patterns; '{key}' is not a list.")
        data = _read_raw(target)
        current = get_nested_key(data, key)
        items = list(current) if isinstance(current, list) else []
        if verb == "add":
            items.append(value_str)
        else:
            items = [x for x in items if x != value_str]
        set_nested_key(data, key, items)
        save_config(target, data)
        done, preposition = ("Added", "to") if verb == "add" else ("Removed", "from")
        print(f"{done} {json.dumps(value_str)} {preposition} {key} in {label} config.")

    if show:
        config = load_config(project_root)
        source_note = "defaults + global"
        if project_root is not None:
            source_note += f" + project ({project_root.as_posix()})"
        print(f"# Config: {source_note}")
        print(json.dumps(config, indent=2))
