"""Find Markdown documents under a root, honoring gitignore-style patterns."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pathspec import GitIgnoreSpec

FILEGUIDEIGNORE = ".fileguideignore"
MARKDOWN_SUFFIXES = (".md", ".markdown")


def parse_ignore_file(path: Path) -> list[str]:
    """
    Read a gitignore-style file and return non-empty pattern lines (strip comments and blanks).
    """
    if not path.is_file():
        return []
    patterns: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        patterns.append(s)
    return patterns


def load_patterns(root: Path, config: dict[str, Any]) -> list[str]:
    """Builtin and additional patterns from config, then those in <root>/.fileguideignore."""
    ignore_cfg = config.get("ignore", {}) or {}
    patterns = list(ignore_cfg.get("builtin_patterns", []) or [])
    patterns.extend(parse_ignore_file(Path(root) / FILEGUIDEIGNORE))
    patterns.extend(ignore_cfg.get("additional_patterns", []) or [])
    return patterns


def build_spec(patterns: list[str]) -> GitIgnoreSpec:
    """Build a spec from gitignore-style pattern strings."""
    return GitIgnoreSpec.from_lines(patterns)


def is_ignored(path: Path | str, root: Path | str, spec: GitIgnoreSpec) -> bool:
    """
    Return True if path (absolute or relative to root) is ignored by spec.

    Paths outside root are never ignored.
    """
    path = Path(path).resolve()
    root = Path(root).resolve()
    try:
        rel = path.relative_to(root)
    except ValueError:
        return False
    rel_str = rel.as_posix()
    if spec.match_file(rel_str):
        return True
    # Directory-only patterns (e.g. "drafts/") need the trailing slash to match
    if not rel_str.endswith("/") and spec.match_file(rel_str + "/"):
        return True
    return False


def find_markdown_files(root: Path | str, config: dict[str, Any]) -> list[Path]:
    """
    Markdown files to check for root, sorted by path.

    A file root is returned as is (even if ignored); a directory is searched recursively.
    """
    root = Path(root).resolve()
    if root.is_file():
        return [root]
    if not root.is_dir():
        return []
    spec = build_spec(load_patterns(root, config))
    found: list[Path] = []
    for path in root.rglob("*"):
        if path.suffix.lower() not in MARKDOWN_SUFFIXES or not path.is_file():
            continue
        if is_ignored(path, root, spec):
            continue
        # A file inside an ignored directory is ignored too
        parents = [p for p in path.relative_to(root).parents if p != Path(".")]
        if any(is_ignored(root / parent, root, spec) for parent in parents):
            continue
        found.append(path)
    return sorted(found)
