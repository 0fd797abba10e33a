"""Solutions to the seven practice exercises in docs/file_handling.md.

Each solution handles its errors locally: catch the named condition, print a
message to stderr, and stop by returning a sentinel value.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def read_with_error_handling(path: Path | str) -> str | None:
    """Exercise 1: read a file, printing an error instead of raising when it is missing."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        _report(f"Error: {path} not found.")
        return None


def write_with_context_manager(path: Path | str, text: str) -> bool:
    """Exercise 2: write with a with block; returns whether the file ended up closed."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return f.closed


def handle_permission_error(path: Path | str, text: str) -> bool:
    """Exercise 3: attempt a write; False (and a message) when permission is denied."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except PermissionError:
        _report(f"Error: permission denied for {path}.")
        return False
    return True


def read_lines_safely(path: Path | str) -> list[str]:
    """Exercise 4: line-by-line reader combined with error handling."""
    lines: list[str] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                lines.append(line.strip())
    except FileNotFoundError:
        _report(f"Error: {path} not found.")
        return []
    except PermissionError:
        _report(f"Error: permission denied for {path}.")
        return []
    return lines


def verify_closure_with_finally(path: Path | str) -> tuple[str | None, bool]:
    """Exercise 5: close in a finally block and report (content, closed)."""
    try:
        f = open(path, "r", encoding="utf-8")
    except FileNotFoundError:
        _report(f"Error: {path} not found.")
        return None, True
    try:
        content = f.read()
    finally:
        f.close()
    return content, f.closed


def _needs_leading_newline(path: Path | str) -> bool:
    """True when path is a non-empty file whose last character is not a newline."""
    try:
        with open(path, "rb") as f:
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                return False
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"
    except FileNotFoundError:
        return False


def append_with_context_manager(path: Path | str, line: str) -> int:
    """Exercise 6: append one line; returns how many lines the file has afterwards."""
    if not line.endswith("\n"):
        line += "\n"
    if _needs_leading_newline(path):
        line = "\n" + line
    with open(path, "a", encoding="utf-8") as f:
        f.write(line)
    with open(path, "r", encoding="utf-8") as f:
        return sum(1 for _ in f)


def append_and_read_back(path: Path | str, line: str) -> str | None:
    """Exercise 7: append with a context manager and read back, both under try/except."""
    if not line.endswith("\n"):
        line += "\n"
    try:
        if _needs_leading_newline(path):
            line = "\n" + line
        with open(path, "a", encoding="utf-8") as f:
            f.write(line)
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except PermissionError:
        _report(f"Error: permission denied for {path}.")
    except (FileNotFoundError, NotADirectoryError):
        _report(f"Error: the folder for {path} does not exist.")
    return None


@dataclass(frozen=True)
class Exercise:
    """One practice prompt and the function that solves it."""

    number: int
    title: str
    prompt: str
    solution: Callable[..., Any]
    demo: Callable[[Path], None]


def _demo_1(workdir: Path) -> None:
    path = workdir / "exists.txt"
    path.write_text("I exist.\n", encoding="utf-8")
    print(f"Existing file: {read_with_error_handling(path)!r}")
    print(f"Missing file: {read_with_error_handling(workdir / 'missing.txt')!r}")


def _demo_2(workdir: Path) -> None:
    closed = write_with_context_manager(workdir / "output.txt", "Written safely.\n")
    print(f"File closed after the with block: {closed}")


def _demo_3(workdir: Path) -> None:
    ok = handle_permission_error(workdir / "allowed.txt", "ok\n")
    print(f"Writable location: {ok}")
    # Root ignores permission bits, so this prints True there
    locked = workdir / "locked.txt"
    locked.write_text("read only\n", encoding="utf-8")
    locked.chmod(0o444)
    try:
        print(f"Read-only file: {handle_permission_error(locked, 'nope')}")
    finally:
        locked.chmod(0o644)


def _demo_4(workdir: Path) -> None:
    path = workdir / "lines.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    print(f"Lines: {read_lines_safely(path)}")
    print(f"Missing file: {read_lines_safely(workdir / 'missing.txt')}")


def _demo_5(workdir: Path) -> None:
    path = workdir / "closing.txt"
    path.write_text("close me\n", encoding="utf-8")
    content, closed = verify_closure_with_finally(path)
    print(f"Read {content!r}; closed after finally: {closed}")


def _demo_6(workdir: Path) -> None:
    path = workdir / "log.txt"
    for entry in ("started", "working", "done"):
        count = append_with_context_manager(path, entry)
        print(f"Appended {entry!r}; file now has {count} line(s)")


def _demo_7(workdir: Path) -> None:
    path = workdir / "journal.txt"
    append_and_read_back(path, "day one")
    print(append_and_read_back(path, "day two"), end="")
    print(f"Missing folder: {append_and_read_back(workdir / 'nope' / 'journal.txt', 'x')!r}")


EXERCISES: list[Exercise] = [
    Exercise(
        1,
        "Read with error handling",
        "Open a file that may not exist and print a friendly message instead of crashing.",
        read_with_error_handling,
        _demo_1,
    ),
    Exercise(
        2,
        "Write with a context manager",
        "Write text to a file using a with statement and confirm the file is closed afterwards.",
        write_with_context_manager,
        _demo_2,
    ),
    Exercise(
        3,
        "Handle a permission error",
        "Try to write to a location you may not have access to and handle PermissionError.",
        handle_permission_error,
        _demo_3,
    ),
    Exercise(
        4,
        "Combine a reader with error handling",
        "Read a file line by line inside a with block, handling missing files and permission errors.",
        read_lines_safely,
        _demo_4,
    ),
    Exercise(
        5,
        "Verify closure with finally",
        "Open a file without with, close it in a finally block, and check that it is closed.",
        verify_closure_with_finally,
        _demo_5,
    ),
    Exercise(
        6,
        "Append with a context manager",
        "Append a line to a file using a with statement in append mode.",
        append_with_context_manager,
        _demo_6,
    ),
    Exercise(
        7,
        "Combine both patterns",
        "Append to a file with a context manager and read it back, all inside try/except.",
        append_and_read_back,
        _demo_7,
    ),
]


def get_exercise(number: int) -> Exercise:
    """Exercise by its number (1-based). Raises KeyError if there is no such exercise."""
    for exercise in EXERCISES:
        if exercise.number == number:
            return exercise
    raise KeyError(number)
