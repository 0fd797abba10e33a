"""Text files: write, read whole, read line by line, append."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path


def write_text_file(path: Path | str, lines: Iterable[str], encoding: str = "utf-8") -> None:
    """Write lines to path, one per line. Overwrites an existing file."""
    with open(path, "w", encoding=encoding) as f:
        for line in lines:
            f.write(line.rstrip("\n") + "\n")


def read_whole_file(path: Path | str, encoding: str = "utf-8") -> str:
    """Return the entire file as one string."""
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def read_lines(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Return the lines of a file without their trailing newline."""
    with open(path, "r", encoding=encoding) as f:
        return [line.rstrip("\n") for line in f]


def numbered_lines(path: Path | str, encoding: str = "utf-8") -> Iterator[tuple[int, str]]:
    """
    Return an iterator of (lineno, line) pairs, lineno starting at 1.

    The file is opened immediately, so a missing file raises FileNotFoundError here
    rather than on the first next(). It is closed once iteration finishes or a
    started iterator is closed early.
    """
    f = open(path, "r", encoding=encoding)

    def _numbered() -> Iterator[tuple[int, str]]:
        with f:
            for lineno, line in enumerate(f, start=1):
                yield lineno, line.rstrip("\n")

    return _numbered()


def append_text(path: Path | str, text: str, encoding: str = "utf-8") -> None:
    """Append text to the end of a file, creating it if missing."""
    with open(path, "a", encoding=encoding) as f:
        f.write(text)


def demo(workdir: Path) -> None:
    path = workdir / "notes.txt"
    write_text_file(path, ["Hello, World!", "This is a text file."])
    print(f"Wrote {path.name}")
    print("Whole file:")
    print(read_whole_file(path), end="")
    append_text(path, "This line was appended.\n")
    print("Line by line:")
    for lineno, line in numbered_lines(path):
        print(f"  {lineno}: {line}")
