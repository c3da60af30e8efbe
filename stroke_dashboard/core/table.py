from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import pandas as pd


@dataclass(frozen=True)
class TableView:
    """Column order and JSON-safe rows for the data grid."""
    columns: List[str]
    records: List[Dict[str, Any]]

    @property
    def n_rows(self) -> int:
        return len(self.records)


def search_rows(table: pd.DataFrame, query: str | None) -> pd.DataFrame:
    """
    Free-text search: keep rows where any column's text contains `query`
    (case-insensitive, literal match). An empty query returns the table as-is.
    """
    if query is None or not str(query).strip():
        return table
    needle = str(query).strip()
    if table.empty:
        return table

    mask = table.apply(
        lambda col: col.astype(object)
        .where(col.notna(), "")
        .astype(str)
        .str.contains(needle, case=False, regex=False)
    )
    return table[mask.any(axis=1)]


def table_records(table: pd.DataFrame) -> TableView:
    """
    Convert the table to DataTable records without reordering or renaming.
    Missing cells become None so the grid shows them as empty.
    """
    columns = [str(c) for c in table.columns]
    safe = table.astype(object).where(table.notna(), None)
    records = [
        {col: value for col, value in zip(columns, row)}
        for row in safe.itertuples(index=False, name=None)
    ]
    return TableView(columns=columns, records=records)
