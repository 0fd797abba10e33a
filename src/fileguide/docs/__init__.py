"""Documentation check: extract code samples from Markdown and verify them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from fileguide.docs.discover import find_markdown_files
from fileguide.docs.extract import CodeSample, extract_file, extract_samples
from fileguide.docs.verify import KIND_FENCE, Issue, verify_sample

logger = logging.getLogger(__name__)


@dataclass
class DocumentReport:
    """Result of checking one Markdown document."""

    path: str
    samples: int = 0  # Python samples checked (skipped ones excluded)
    skipped: int = 0
    issues: list[Issue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def check_document(path: Path, config: dict[str, Any]) -> DocumentReport:
    """Extract and verify every Python sample of one document."""
    check_cfg = config.get("check", {}) or {}
    languages = tuple(check_cfg.get("python_languages") or ("python", "py", "python3"))
    verify_imports = bool(check_cfg.get("verify_imports", True))
    encoding = str(config.get("encoding") or "utf-8")

    report = DocumentReport(path=path.as_posix())
    try:
        samples = extract_file(path, encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        report.issues.append(Issue(report.path, 1, KIND_FENCE, f"cannot read document: {e}"))
        return report

    for sample in samples:
        if not sample.is_python(languages):
            # Other languages are not parsed, but a broken fence still breaks the document
            if not sample.closed:
                report.issues.extend(verify_sample(replace(sample, skipped=True)))
            continue
        if sample.skipped:
            report.skipped += 1
        else:
            report.samples += 1
        report.issues.extend(verify_sample(sample, verify_imports=verify_imports))
    logger.debug("%s: %d sample(s), %d issue(s)", report.path, report.samples, len(report.issues))
    return report


def check_documents(root: Path, config: dict[str, Any]) -> list[DocumentReport]:
    """Check every Markdown document found under root (or root itself if it is a file)."""
    return [check_document(path, config) for path in find_markdown_files(root, config)]


__all__ = [
    "CodeSample",
    "DocumentReport",
    "Issue",
    "check_document",
    "check_documents",
    "extract_file",
    "extract_samples",
    "find_markdown_files",
    "verify_sample",
]
