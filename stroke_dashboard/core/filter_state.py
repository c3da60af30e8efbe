from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Sequence, TYPE_CHECKING

from stroke_dashboard.core.schema import ALL

if TYPE_CHECKING:
    from stroke_dashboard.core.dataset import PatientDataset


@dataclass(frozen=True)
class FilterState:
    """
    Immutable snapshot of the user's current filter selection.

    Fields:

    - gender: "All" or one observed gender value
    - age_min / age_max: inclusive age range, age_min <= age_max
    - smoking_status: "All" or one observed smoking-status value

    A new FilterState is created for every user input event; the old one is
    never mutated.
    """

    age_min: float
    age_max: float
    gender: str = ALL
    smoking_status: str = ALL

    def __post_init__(self) -> None:
        if math.isnan(self.age_min) or math.isnan(self.age_max):
            raise ValueError("Age range endpoints must be numbers")
        if self.age_min > self.age_max:
            raise ValueError(
                f"age_min ({self.age_min}) must not exceed age_max ({self.age_max})"
            )

    @classmethod
    def for_dataset(cls, dataset: "PatientDataset") -> FilterState:
        """The default state: every category, the full observed age range."""
        lo, hi = dataset.age_bounds
        return cls(age_min=lo, age_max=hi)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            age_min=float(data["age_min"]),
            age_max=float(data["age_max"]),
            gender=str(data.get("gender") or ALL),
            smoking_status=str(data.get("smoking_status") or ALL),
        )


def sanitise_filter_state(
    dataset: "PatientDataset",
    gender: Optional[str],
    age_range: Optional[Sequence[float]],
    smoking_status: Optional[str],
) -> FilterState:
    """
    Build a consistent FilterState from raw UI values.

    - unknown or empty categories fall back to "All"
    - a missing or malformed age range falls back to the dataset's bounds
    - endpoints are ordered and clamped to the dataset's observed bounds
    """
    lo, hi = dataset.age_bounds

    if gender not in dataset.genders:
        gender = ALL
    if smoking_status not in dataset.smoking_statuses:
        smoking_status = ALL

    try:
        a, b = (float(v) for v in age_range)  # type: ignore[union-attr]
    except (TypeError, ValueError):
        a, b = lo, hi

    if math.isnan(a):
        a = lo
    if math.isnan(b):
        b = hi
    if a > b:
        a, b = b, a

    age_min = min(max(a, lo), hi)
    age_max = min(max(b, lo), hi)

    return FilterState(
        age_min=age_min,
        age_max=age_max,
        gender=gender,
        smoking_status=smoking_status,
    )
