from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from stroke_dashboard.core.dataset import CoercionIssue, PatientDataset
from stroke_dashboard.core.exceptions import DatasetLoadError, DatasetSchemaError
from stroke_dashboard.core.schema import (
    CATEGORICAL_COLUMNS,
    ID_COLUMN,
    NUMERIC_COLUMNS,
    REQUIRED_COLUMNS,
    STROKE_COLUMN,
)

logger = logging.getLogger(__name__)

# Tokens that mean "no value" in the source file; these become missing without
# being reported as malformed
MISSING_TOKENS = frozenset({"", "N/A", "NA", "NaN", "nan", "null", "NULL", "None"})

# How many malformed raw values to include in the per-column warning
_SAMPLE_SIZE = 5


def _read_table(path: Path) -> pd.DataFrame:
    """
    Read the delimited file as text. Delimiter is sniffed (comma, semicolon, tab).
    """
    try:
        return pd.read_csv(
            path,
            sep=None,
            engine="python",
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError(f"Dataset file is empty: {path}") from e
    except (OSError, UnicodeDecodeError, csv.Error, pd.errors.ParserError) as e:
        raise DatasetLoadError(f"Could not read dataset file {path}: {e}") from e


def _validate_columns(df: pd.DataFrame, path: Path) -> None:
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        logger.error(
            "Dataset is missing required columns",
            extra={"path": str(path), "missing": missing},
        )
        raise DatasetSchemaError(missing, path)


def _coerce_numeric(
    df: pd.DataFrame,
    column: str,
    issues: List[CoercionIssue],
    integral: bool = False,
) -> pd.Series:
    """
    Coerce one text column to float. Values that fail to parse become NaN and
    are recorded as CoercionIssues with their original text.

    :param integral: also treat non-whole numbers (e.g. "0.5") as malformed
    """
    raw = df[column].astype(str).str.strip()
    token_missing = raw.isin(MISSING_TOKENS)
    coerced = pd.to_numeric(raw.where(~token_missing), errors="coerce")
    if integral:
        coerced = coerced.where(coerced.isna() | (coerced % 1 == 0))

    n_token_missing = int(token_missing.sum())
    if n_token_missing:
        logger.debug(
            "%d empty or N/A value(s) in '%s' read as missing",
            n_token_missing,
            column,
            extra={"column": column, "n_missing": n_token_missing},
        )

    malformed = coerced.isna() & ~token_missing
    if malformed.any():
        bad_ids = df.loc[malformed, ID_COLUMN].astype(str)
        bad_raw = raw[malformed]
        for row_id, value in zip(bad_ids, bad_raw):
            issues.append(CoercionIssue(row_id=row_id, column=column, raw_value=value))
            logger.debug(
                "Unparseable numeric value treated as missing",
                extra={"column": column, "row_id": row_id, "raw_value": value},
            )
        logger.warning(
            "Coerced %d malformed value(s) in '%s' to missing",
            int(malformed.sum()),
            column,
            extra={"column": column, "sample": list(bad_raw.unique()[:_SAMPLE_SIZE])},
        )

    return coerced.astype(float)


def load_dataset(path: str | Path, name: Optional[str] = None) -> PatientDataset:
    """
    Load the stroke table from a delimited file into a PatientDataset.

    Raises:
        DatasetLoadError: if the file is missing, unreadable or empty
        DatasetSchemaError: if any required column is absent

    Per-value coercion failures never abort the load; they become missing
    values and are listed in PatientDataset.coercion_issues.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(f"Dataset file not found at {path}.")
    if path.stat().st_size == 0:
        raise DatasetLoadError(f"Dataset file is empty: {path}")

    logger.info("Loading dataset", extra={"path": str(path)})

    df = _read_table(path)
    df.columns = [str(c).strip() for c in df.columns]
    _validate_columns(df, path)

    issues: List[CoercionIssue] = []
    for column in NUMERIC_COLUMNS:
        df[column] = _coerce_numeric(df, column, issues)

    df[STROKE_COLUMN] = _coerce_numeric(df, STROKE_COLUMN, issues, integral=True).astype("Int64")

    for column in CATEGORICAL_COLUMNS:
        df[column] = df[column].astype(str).str.strip()

    dataset = PatientDataset(
        name=name or path.stem,
        table=df,
        source_path=path,
        coercion_issues=issues,
    )

    logger.info(
        "Dataset loaded",
        extra={
            "path": str(path),
            "n_rows": dataset.n_rows,
            "n_coercion_issues": len(issues),
            "n_missing": {c: int(df[c].isna().sum()) for c in (*NUMERIC_COLUMNS, STROKE_COLUMN)},
        },
    )
    return dataset
