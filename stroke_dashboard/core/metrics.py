from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandas as pd

from stroke_dashboard.core.schema import BMI_COLUMN, GLUCOSE_COLUMN, STROKE_COLUMN

NO_DATA = "No data"


@dataclass(frozen=True)
class SummaryMetrics:
    """
    Scalar statistics over a filtered table.

    avg_glucose / avg_bmi are None when there is nothing to average (empty
    table or every value missing). They are never 0 or NaN in that case.
    """
    total_patients: int
    avg_glucose: Optional[float]
    avg_bmi: Optional[float]
    stroke_cases: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_patients": self.total_patients,
            "avg_glucose": self.avg_glucose,
            "avg_bmi": self.avg_bmi,
            "stroke_cases": self.stroke_cases,
        }


def mean_ignoring_missing(values: pd.Series, ndigits: int = 2) -> Optional[float]:
    """
    Mean of the non-missing values rounded to `ndigits`, or None if there are none.
    """
    present = pd.to_numeric(values, errors="coerce").dropna()
    if present.empty:
        return None
    result = float(present.mean())
    if math.isnan(result):
        return None
    return round(result, ndigits)


def compute_summary(table: pd.DataFrame) -> SummaryMetrics:
    stroke = pd.to_numeric(table[STROKE_COLUMN], errors="coerce")
    return SummaryMetrics(
        total_patients=int(len(table)),
        avg_glucose=mean_ignoring_missing(table[GLUCOSE_COLUMN]),
        avg_bmi=mean_ignoring_missing(table[BMI_COLUMN]),
        stroke_cases=int((stroke == 1).sum()),
    )


def format_metric(value: Optional[float], suffix: str = "") -> str:
    """Render a metric for display; None becomes the explicit "No data" label."""
    if value is None:
        return NO_DATA
    if isinstance(value, float) and math.isnan(value):
        return NO_DATA
    if isinstance(value, int):
        return f"{value:,}{suffix}"
    return f"{value:,.2f}{suffix}"
