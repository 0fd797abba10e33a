"""Delimited files (CSV and TSV) with the csv module, plus a pandas alternative."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import pandas as pd

TAB = "\t"


def write_rows(
    path: Path | str,
    rows: Iterable[Sequence[Any]],
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> None:
    """Write rows (lists of values) to a delimited file."""
    # newline="" lets the csv module control line endings and quoted newlines
    with open(path, "w", newline="", encoding=encoding) as f:
        writer = csv.writer(f, delimiter=delimiter)
        writer.writerows(rows)


def read_rows(path: Path | str, delimiter: str = ",", encoding: str = "utf-8") -> list[list[str]]:
    """Read a delimited file into a list of rows. Every field comes back as a string."""
    with open(path, "r", newline="", encoding=encoding) as f:
        return [row for row in csv.reader(f, delimiter=delimiter)]


def write_records(
    path: Path | str,
    records: Iterable[dict[str, Any]],
    fieldnames: Sequence[str],
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> None:
    """Write dicts as rows under a header line of fieldnames."""
    with open(path, "w", newline="", encoding=encoding) as f:
        writer = csv.DictWriter(f, fieldnames=list(fieldnames), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(records)


def read_records(path: Path | str, delimiter: str = ",", encoding: str = "utf-8") -> list[dict[str, str]]:
    """Read a delimited file with a header line into a list of dicts."""
    with open(path, "r", newline="", encoding=encoding) as f:
        return [dict(row) for row in csv.DictReader(f, delimiter=delimiter)]


def write_tsv(path: Path | str, rows: Iterable[Sequence[Any]], encoding: str = "utf-8") -> None:
    """Write rows to a tab-separated file."""
    write_rows(path, rows, delimiter=TAB, encoding=encoding)


def read_tsv(path: Path | str, encoding: str = "utf-8") -> list[list[str]]:
    """Read a tab-separated file into a list of rows."""
    return read_rows(path, delimiter=TAB, encoding=encoding)


def read_frame(path: Path | str, sep: str = ",", encoding: str = "utf-8") -> pd.DataFrame:
    """Load a delimited file with a header line as a pandas DataFrame (types inferred)."""
    return pd.read_csv(path, sep=sep, encoding=encoding)


def demo(workdir: Path) -> None:
    csv_path = workdir / "students.csv"
    write_records(
        csv_path,
        [{"name": "Alice", "age": 20}, {"name": "Bob", "age": 19}],
        fieldnames=["name", "age"],
    )
    print(f"Wrote {csv_path.name}")
    for row in read_records(csv_path):
        print(f"  {row['name']} is {row['age']}")

    tsv_path = workdir / "scores.tsv"
    write_tsv(tsv_path, [["name", "score"], ["Alice", 91], ["Bob", 84]])
    print(f"Wrote {tsv_path.name}")
    for row in read_tsv(tsv_path):
        print("  " + " | ".join(row))

    frame = read_frame(tsv_path, sep=TAB)
    print(f"pandas sees {len(frame)} rows, mean score {frame['score'].mean():.1f}")
