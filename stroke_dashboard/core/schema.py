"""
Column names of the stroke healthcare table.
"""
from __future__ import annotations

from typing import Tuple

ID_COLUMN = "id"
GENDER_COLUMN = "gender"
AGE_COLUMN = "age"
GLUCOSE_COLUMN = "avg_glucose_level"
BMI_COLUMN = "bmi"
SMOKING_COLUMN = "smoking_status"
STROKE_COLUMN = "stroke"

REQUIRED_COLUMNS: Tuple[str, ...] = (
    ID_COLUMN,
    GENDER_COLUMN,
    AGE_COLUMN,
    GLUCOSE_COLUMN,
    BMI_COLUMN,
    SMOKING_COLUMN,
    STROKE_COLUMN,
)

# Coerced to float at load time; unparseable cells become missing (NaN)
NUMERIC_COLUMNS: Tuple[str, ...] = (AGE_COLUMN, GLUCOSE_COLUMN, BMI_COLUMN)
CATEGORICAL_COLUMNS: Tuple[str, ...] = (GENDER_COLUMN, SMOKING_COLUMN)

# Sentinel for "no categorical filter"
ALL = "All"
