"""Parquet files through pandas (pyarrow engine) and pyarrow's schema reader."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd
import pyarrow.parquet as pq

ENGINE = "pyarrow"


def save_parquet(path: Path | str, data: pd.DataFrame | Sequence[dict[str, Any]]) -> None:
    """Save a DataFrame (or a list of row dicts) as Parquet. The index is not stored."""
    frame = data if isinstance(data, pd.DataFrame) else pd.DataFrame(list(data))
    frame.to_parquet(path, engine=ENGINE, index=False)


def load_parquet(path: Path | str, columns: Sequence[str] | None = None) -> pd.DataFrame:
    """Load a Parquet file; with columns, only those columns are read from disk."""
    return pd.read_parquet(path, engine=ENGINE, columns=list(columns) if columns is not None else None)


def parquet_schema(path: Path | str) -> dict[str, str]:
    """Return {column name: arrow type} from the file footer without reading any rows."""
    schema = pq.read_schema(path)
    return {field.name: str(field.type) for field in schema}


def demo(workdir: Path) -> None:
    path = workdir / "cities.parquet"
    save_parquet(
        path,
        [
            {"city": "Oslo", "population": 709000},
            {"city": "Lima", "population": 10000000},
        ],
    )
    print(f"Wrote {path.name}")
    print("Schema:")
    for name, type_name in parquet_schema(path).items():
        print(f"  {name}: {type_name}")
    frame = load_parquet(path, columns=["city"])
    print(f"Only the city column: {frame['city'].tolist()}")
