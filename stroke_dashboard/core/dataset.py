from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, TYPE_CHECKING

import pandas as pd

from stroke_dashboard.core.filtering import filter_patients
from stroke_dashboard.core.schema import AGE_COLUMN, GENDER_COLUMN, SMOKING_COLUMN

if TYPE_CHECKING:
    from stroke_dashboard.core.filter_state import FilterState


@dataclass(frozen=True)
class CoercionIssue:
    """
    A single numeric cell that failed to parse at load time.

    The cell itself becomes missing; the raw text is kept here for diagnostics.
    """
    row_id: str
    column: str
    raw_value: str


class PatientDataset:
    """
    Immutable, process-wide patient table.

    Loaded once by {@link load_dataset} and passed explicitly to every component
    that needs read access. Sessions share it by reference; nothing writes to it.

    Numeric columns (age, avg_glucose_level, bmi) are float with NaN for missing
    cells; stroke is a nullable integer; gender and smoking_status are strings.
    """

    def __init__(
        self,
        name: str,
        table: pd.DataFrame,
        source_path: Optional[Path] = None,
        coercion_issues: Optional[List[CoercionIssue]] = None,
    ) -> None:
        self.name = name
        self.source_path = source_path
        self._table = table
        self._coercion_issues: Tuple[CoercionIssue, ...] = tuple(coercion_issues or ())

        ages = table[AGE_COLUMN].dropna() if AGE_COLUMN in table.columns else pd.Series(dtype=float)
        if ages.empty:
            self._age_bounds: Tuple[float, float] = (0.0, 0.0)
        else:
            self._age_bounds = (float(ages.min()), float(ages.max()))

        self._genders = self._observed(GENDER_COLUMN)
        self._smoking_statuses = self._observed(SMOKING_COLUMN)

    def _observed(self, column: str) -> Tuple[str, ...]:
        if column not in self._table.columns:
            return ()
        return tuple(sorted(str(v) for v in self._table[column].dropna().unique()))

    # -------------------------------------------------------------------------
    # Properties & getters
    # -------------------------------------------------------------------------
    @property
    def table(self) -> pd.DataFrame:
        """The full dataset. Treat as read-only."""
        return self._table

    @property
    def columns(self) -> List[str]:
        return list(self._table.columns)

    @property
    def n_rows(self) -> int:
        return len(self._table)

    @property
    def coercion_issues(self) -> Tuple[CoercionIssue, ...]:
        return self._coercion_issues

    @property
    def genders(self) -> Tuple[str, ...]:
        """Observed gender values, sorted."""
        return self._genders

    @property
    def smoking_statuses(self) -> Tuple[str, ...]:
        """Observed smoking-status values, sorted."""
        return self._smoking_statuses

    @property
    def age_bounds(self) -> Tuple[float, float]:
        """(min, max) of non-missing ages; (0, 0) if every age is missing."""
        return self._age_bounds

    # -------------------------------------------------------------------------
    # Centralised subsetting based on FilterState
    # -------------------------------------------------------------------------
    def subset_for_state(self, state: "FilterState") -> pd.DataFrame:
        """
        Return the rows of this dataset matching the given FilterState.
        """
        return filter_patients(self._table, state)
