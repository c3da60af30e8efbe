from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from stroke_dashboard.core.schema import ALL, AGE_COLUMN, GENDER_COLUMN, SMOKING_COLUMN

if TYPE_CHECKING:
    from stroke_dashboard.core.filter_state import FilterState


def filter_patients(table: pd.DataFrame, state: "FilterState") -> pd.DataFrame:
    """
    Return the rows of `table` satisfying every predicate of `state`.

    Predicates (all must hold):
    - state.gender == "All" or row.gender == state.gender
    - state.age_min <= row.age <= state.age_max
    - state.smoking_status == "All" or row.smoking_status == state.smoking_status

    Missing-value policy: a row whose age is missing fails the age predicate and
    is excluded. Comparisons against NaN are False in numpy, but the mask makes it
    explicit with notna() so the rule does not depend on that.

    The result is a new DataFrame with the same columns and the source row order
    and index labels. `table` is never modified.
    """
    mask = np.ones(len(table), dtype=bool)

    if state.gender != ALL:
        mask &= (table[GENDER_COLUMN] == state.gender).to_numpy(dtype=bool, na_value=False)

    ages = table[AGE_COLUMN]
    in_range = ages.notna() & (ages >= state.age_min) & (ages <= state.age_max)
    mask &= in_range.to_numpy(dtype=bool, na_value=False)

    if state.smoking_status != ALL:
        mask &= (table[SMOKING_COLUMN] == state.smoking_status).to_numpy(dtype=bool, na_value=False)

    return table.loc[mask].copy()
