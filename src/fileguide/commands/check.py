"""Check command: verify the Python samples in Markdown documentation."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path

from fileguide.config import docs_root, find_project_root, load_config
from fileguide.docs import DocumentReport, check_documents


def _report_to_dict(r: DocumentReport) -> dict:
    """Convert report to a JSON-serializable dict."""
    return {
        "path": r.path,
        "samples": r.samples,
        "skipped": r.skipped,
        "ok": r.ok,
        "issues": [
            {"line": i.line, "kind": i.kind, "message": i.message} for i in r.issues
        ],
    }


def _print_report(reports: list[DocumentReport]) -> None:
    """Print human-readable report to stdout."""
    total_samples = sum(r.samples for r in reports)
    total_issues = sum(len(r.issues) for r in reports)
    for r in reports:
        status = "ok" if r.ok else f"{len(r.issues)} issue(s)"
        skipped = f", {r.skipped} skipped" if r.skipped else ""
        print(f"{r.path}: {r.samples} sample(s){skipped}, {status}")
        for issue in r.issues:
            print(f"  {issue.location()}  [{issue.kind}] {issue.message}")
    print()
    print(f"Checked {len(reports)} document(s), {total_samples} sample(s): {total_issues} issue(s).")


def run(args: Namespace) -> None:
    """Run the check command. Exits 1 when any issue is found."""
    path: Path = getattr(args, "path", Path("."))
    fmt = getattr(args, "format", "text")

    if not path.exists():
        print(f"Error: {path} does not exist.", file=sys.stderr)
        sys.exit(1)

    project_root = find_project_root(path)
    config = load_config(project_root)
    if getattr(args, "no_imports", False):
        config.setdefault("check", {})["verify_imports"] = False

    root = docs_root(path, config, project_root)
    reports = check_documents(root, config)
    if not reports:
        print(f"No Markdown documents found under {root.as_posix()}.", file=sys.stderr)
        sys.exit(1)

    if fmt == "json":
        json.dump([_report_to_dict(r) for r in reports], sys.stdout, indent=2)
        print()
    else:
        _print_report(reports)

    if any(not r.ok for r in reports):
        sys.exit(1)
