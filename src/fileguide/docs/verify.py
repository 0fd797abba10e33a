"""Verify code samples: syntax, imported modules, and module attributes they use."""

from __future__ import annotations

import ast
import importlib
import importlib.util
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import ModuleType

from fileguide.docs.extract import CodeSample

logger = logging.getLogger(__name__)

KIND_FENCE = "fence"
KIND_SYNTAX = "syntax"
KIND_IMPORT = "import"
KIND_ATTRIBUTE = "attribute"


@dataclass
class Issue:
    """A problem found in one code sample, located at a document line."""

    source: str
    line: int
    kind: str  # fence | syntax | import | attribute
    message: str

    def location(self) -> str:
        return f"{self.source}:{self.line}"


@lru_cache(maxsize=None)
def _module_exists(name: str) -> bool:
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        # find_spec imports parent packages; a missing parent raises
        return False


@lru_cache(maxsize=None)
def _load_module(name: str) -> ModuleType | None:
    try:
        return importlib.import_module(name)
    except Exception as e:
        logger.debug("Could not import %s: %s", name, e)
        return None


def _has_member(module_name: str, member: str) -> bool:
    """True if member is an attribute of the module or one of its submodules."""
    module = _load_module(module_name)
    if module is not None and hasattr(module, member):
        return True
    return _module_exists(f"{module_name}.{member}")


def check_syntax(sample: CodeSample) -> tuple[ast.Module | None, Issue | None]:
    """Parse a sample. Returns (tree, None) on success or (None, issue) on a syntax error."""
    try:
        return ast.parse(sample.code, filename=sample.source), None
    except SyntaxError as e:
        offset = (e.lineno or 1) - 1
        return None, Issue(
            source=sample.source,
            line=sample.start_line + offset,
            kind=KIND_SYNTAX,
            message=f"invalid syntax: {e.msg}",
        )


def _rebound_names(tree: ast.Module) -> set[str]:
    """Names assigned or used as parameters anywhere in the tree (not import bindings)."""
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Name) and isinstance(node.ctx, (ast.Store, ast.Del)):
            names.add(node.id)
        elif isinstance(node, ast.arg):
            names.add(node.arg)
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            names.add(node.name)
    return names


def check_references(sample: CodeSample, tree: ast.Module) -> list[Issue]:
    """
    Check that imports resolve and that module.attr accesses name real attributes.

    Only aliases bound by a plain import statement are followed; relative imports are ignored.
    """
    issues: list[Issue] = []
    aliases: dict[str, str] = {}

    def issue(node: ast.AST, kind: str, message: str) -> None:
        issues.append(
            Issue(
                source=sample.source,
                line=sample.start_line + getattr(node, "lineno", 1) - 1,
                kind=kind,
                message=message,
            )
        )

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if not _module_exists(alias.name):
                    issue(node, KIND_IMPORT, f"module not found: {alias.name}")
                    continue
                if alias.asname:
                    aliases[alias.asname] = alias.name
                else:
                    top = alias.name.split(".")[0]
                    aliases[top] = top
        elif isinstance(node, ast.ImportFrom):
            if node.level or not node.module:
                continue
            if not _module_exists(node.module):
                issue(node, KIND_IMPORT, f"module not found: {node.module}")
                continue
            for alias in node.names:
                if alias.name == "*":
                    continue
                if not _has_member(node.module, alias.name):
                    issue(node, KIND_IMPORT, f"cannot import {alias.name} from {node.module}")

    rebound = _rebound_names(tree)
    seen: set[tuple[str, str]] = set()
    for node in ast.walk(tree):
        if not (isinstance(node, ast.Attribute) and isinstance(node.value, ast.Name)):
            continue
        name = node.value.id
        if name not in aliases or name in rebound:
            continue
        module_name = aliases[name]
        key = (module_name, node.attr)
        if key in seen:
            continue
        seen.add(key)
        if _load_module(module_name) is None:
            continue
        if not _has_member(module_name, node.attr):
            issue(node, KIND_ATTRIBUTE, f"{module_name} has no attribute {node.attr}")
    issues.sort(key=lambda i: i.line)
    return issues


def verify_sample(sample: CodeSample, verify_imports: bool = True) -> list[Issue]:
    """All issues for one sample. Skipped and non-Python samples are only checked for fences."""
    issues: list[Issue] = []
    if not sample.closed:
        issues.append(
            Issue(
                source=sample.source,
                line=max(sample.start_line - 1, 1),
                kind=KIND_FENCE,
                message="code fence is never closed",
            )
        )
    if sample.skipped:
        return issues
    tree, syntax_issue = check_syntax(sample)
    if syntax_issue is not None:
        issues.append(syntax_issue)
        return issues
    if verify_imports and tree is not None:
        issues.extend(check_references(sample, tree))
    return issues
