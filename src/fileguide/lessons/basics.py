"""File handling idioms: context managers, try/finally cleanup, error handling, directories."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from types import TracebackType
from typing import IO

logger = logging.getLogger(__name__)


def read_with_context_manager(path: Path | str, encoding: str = "utf-8") -> str:
    """Read a file inside a with block; the file is closed however the block exits."""
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def read_with_finally(path: Path | str, encoding: str = "utf-8") -> tuple[str, bool]:
    """
    Read a file with an explicit try/finally instead of a with block.

    Returns (content, closed) where closed is the file's state after the finally
    block ran. open() failing raises before there is anything to close.
    """
    f = open(path, "r", encoding=encoding)
    try:
        content = f.read()
    finally:
        f.close()
    return content, f.closed


def read_or_none(path: Path | str, encoding: str = "utf-8") -> str | None:
    """Return the file's text, or None when it does not exist."""
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except FileNotFoundError:
        logger.debug("No such file: %s", path)
        return None


class ManagedFile:
    """
    Minimal enter/exit resource scope around a file.

    Opens on __enter__, closes on __exit__ whether the block finished or raised.
    Exceptions from the block are never suppressed.
    """

    def __init__(self, path: Path | str, mode: str = "r", encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.mode = mode
        self.encoding = encoding
        self.file: IO[str] | None = None

    def __enter__(self) -> IO[str]:
        self.file = open(self.path, self.mode, encoding=self.encoding)
        return self.file

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if self.file is not None:
            self.file.close()
        return False

    @property
    def closed(self) -> bool:
        """True before entering and after leaving the block."""
        return self.file is None or self.file.closed


# --- Directory operations ---


def make_directory(path: Path | str) -> Path:
    """Create directory and parents if they do not exist. Returns the path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def list_directory(path: Path | str) -> list[str]:
    """Names of the entries directly inside path, sorted."""
    return sorted(entry.name for entry in Path(path).iterdir())


def find_files(directory: Path | str, pattern: str) -> list[Path]:
    """Files under directory matching a glob pattern (e.g. '*.csv' or '**/*.json'), sorted."""
    return sorted(p for p in Path(directory).glob(pattern) if p.is_file())


def remove_file(path: Path | str) -> None:
    """Delete a file. Raises FileNotFoundError if it is missing."""
    Path(path).unlink()


def remove_directory(path: Path | str, recursive: bool = False) -> None:
    """
    Delete a directory. Without recursive the directory must be empty
    (OSError otherwise); with recursive its whole tree is removed.
    """
    if recursive:
        shutil.rmtree(path)
    else:
        Path(path).rmdir()


def demo_context_managers(workdir: Path) -> None:
    path = workdir / "greeting.txt"
    with ManagedFile(path, "w") as f:
        f.write("Hello from a custom context manager.\n")
    print(f"with open(): {read_with_context_manager(path)}", end="")
    content, closed = read_with_finally(path)
    print(f"try/finally: closed after finally = {closed}")
    scope = ManagedFile(path)
    with scope as f:
        print(f"ManagedFile inside the block: closed = {f.closed}")
    print(f"ManagedFile after the block: closed = {scope.closed}")


def demo_exceptions(workdir: Path) -> None:
    missing = workdir / "missing.txt"
    try:
        read_with_context_manager(missing)
    except FileNotFoundError:
        print(f"Error: {missing.name} not found.")
    finally:
        print("The finally block always runs.")
    print(f"read_or_none returns {read_or_none(missing)!r} instead of raising.")
    try:
        read_with_context_manager(workdir)
    except (IsADirectoryError, PermissionError) as e:
        print(f"Opening a directory as a file fails: {type(e).__name__}")


def demo_directories(workdir: Path) -> None:
    data_dir = make_directory(workdir / "data" / "raw")
    for name in ("a.csv", "b.csv", "notes.txt"):
        (data_dir / name).write_text("x\n", encoding="utf-8")
    print(f"Created {data_dir.relative_to(workdir).as_posix()}")
    print(f"Contents: {list_directory(data_dir)}")
    print(f"CSV files: {[p.name for p in find_files(workdir, '**/*.csv')]}")
    remove_file(data_dir / "notes.txt")
    print(f"After removing notes.txt: {list_directory(data_dir)}")
    remove_directory(workdir / "data", recursive=True)
    print(f"After removing data/: exists = {(workdir / 'data').exists()}")
