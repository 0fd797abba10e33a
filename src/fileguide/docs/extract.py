"""Extract fenced code blocks from Markdown documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

SKIP_MARKER = "<!-- fileguide: skip -->"

# Up to three spaces of indent, then three or more backticks or tildes, then the info string
_FENCE_RE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")


@dataclass
class CodeSample:
    """One fenced code block from a Markdown document."""

    source: str  # Document path (posix) or label
    start_line: int  # 1-based line of the first code line in the document
    language: str  # First word of the info string, lowercased ('' if none)
    code: str
    closed: bool = True  # False when the fence ran to end of file
    skipped: bool = False  # Preceded by the skip marker

    def is_python(self, languages: tuple[str, ...] | list[str] = ("python", "py", "python3")) -> bool:
        return self.language in languages


def _opening_fence(line: str) -> tuple[str, int, str] | None:
    """Return (fence char, fence length, language) if line opens a fence, else None."""
    m = _FENCE_RE.match(line)
    if m is None:
        return None
    fence = m.group("fence")
    info = m.group("info").strip()
    # A backtick fence's info string may not itself contain backticks
    if fence[0] == "`" and "`" in info:
        return None
    language = info.split()[0].lower() if info else ""
    return fence[0], len(fence), language


def _is_closing_fence(line: str, char: str, length: int) -> bool:
    stripped = line.strip()
    if len(line) - len(line.lstrip(" ")) > 3:
        return False
    return len(stripped) >= length and set(stripped) == {char}


def extract_samples(text: str, source: str = "<string>") -> list[CodeSample]:
    """
    Parse Markdown text and return every fenced code block in document order.

    Indentation of the opening fence (up to three spaces) is removed from the
    block's lines, as Markdown renderers do.
    """
    lines = text.splitlines()
    samples: list[CodeSample] = []
    last_text_line = ""
    i = 0
    while i < len(lines):
        line = lines[i]
        opened = _opening_fence(line)
        if opened is None:
            if line.strip():
                last_text_line = line.strip()
            i += 1
            continue
        char, length, language = opened
        indent = len(line) - len(line.lstrip(" "))
        skipped = last_text_line == SKIP_MARKER
        body: list[str] = []
        start = i + 2
        i += 1
        closed = False
        while i < len(lines):
            if _is_closing_fence(lines[i], char, length):
                closed = True
                i += 1
                break
            raw = lines[i]
            strip = min(indent, len(raw) - len(raw.lstrip(" ")))
            body.append(raw[strip:])
            i += 1
        code = "\n".join(body) + ("\n" if body else "")
        samples.append(
            CodeSample(
                source=source,
                start_line=start,
                language=language,
                code=code,
                closed=closed,
                skipped=skipped,
            )
        )
        last_text_line = ""
    return samples


def extract_file(path: Path | str, encoding: str = "utf-8") -> list[CodeSample]:
    """Extract code blocks from a Markdown file on disk."""
    path = Path(path)
    return extract_samples(path.read_text(encoding=encoding), source=path.as_posix())
