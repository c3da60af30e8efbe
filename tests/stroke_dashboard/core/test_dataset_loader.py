import math

import pandas as pd
import pytest

from stroke_dashboard.core.dataset_loader import load_dataset
from stroke_dashboard.core.exceptions import DatasetLoadError, DatasetSchemaError


HEADER = "id,gender,age,hypertension,avg_glucose_level,bmi,smoking_status,stroke"


def _write_csv(tmp_path, lines, name="stroke.csv"):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n")
    return path


def test_load_dataset_coerces_numeric_columns(tmp_path):
    path = _write_csv(
        tmp_path,
        [
            HEADER,
            "1,Male,67,0,228.69,36.6,formerly smoked,1",
            "2,Female,61,0,202.21,N/A,never smoked,1",
            "3,Female,49,1,abc,34.4,smokes,0",
        ],
    )

    ds = load_dataset(path)
    table = ds.table

    assert ds.n_rows == 3
    assert ds.name == "stroke"
    assert ds.source_path == path

    # Source column order is preserved, extra columns kept
    assert list(table.columns) == HEADER.split(",")

    assert table["age"].tolist() == [67.0, 61.0, 49.0]
    assert table["bmi"].iloc[0] == pytest.approx(36.6)
    assert math.isnan(table["bmi"].iloc[1])
    assert math.isnan(table["avg_glucose_level"].iloc[2])
    assert table["stroke"].tolist() == [1, 1, 0]


def test_load_dataset_records_malformed_values_only(tmp_path):
    path = _write_csv(
        tmp_path,
        [
            HEADER,
            "1,Male,67,0,228.69,,formerly smoked,1",
            "2,Female,61,0,202.21,N/A,never smoked,1",
            "3,Female,49,1,abc,thirty,smokes,0",
        ],
    )

    ds = load_dataset(path)

    issues = {(i.row_id, i.column, i.raw_value) for i in ds.coercion_issues}
    # Empty and "N/A" cells are plain missing values, not malformed ones
    assert issues == {
        ("3", "avg_glucose_level", "abc"),
        ("3", "bmi", "thirty"),
    }


def test_load_dataset_logs_coercion_warning(tmp_path, caplog):
    path = _write_csv(
        tmp_path,
        [
            HEADER,
            "1,Male,67,0,oops,36.6,formerly smoked,1",
        ],
    )

    with caplog.at_level("WARNING"):
        load_dataset(path)

    assert any("avg_glucose_level" in rec.getMessage() for rec in caplog.records)


def test_load_dataset_records_malformed_stroke_values(tmp_path, caplog):
    path = _write_csv(
        tmp_path,
        [
            HEADER,
            "1,Male,67,0,228.69,36.6,formerly smoked,1",
            "2,Female,61,0,202.21,30.1,never smoked,yes",
            "3,Female,49,1,171.23,34.4,smokes,0.5",
            "4,Male,80,1,105.92,32.5,never smoked,",
        ],
    )

    with caplog.at_level("WARNING"):
        ds = load_dataset(path)

    stroke = ds.table["stroke"]
    assert str(stroke.dtype) == "Int64"
    assert stroke.iloc[0] == 1
    assert stroke.iloc[1:].isna().all()

    issues = {(i.row_id, i.column, i.raw_value) for i in ds.coercion_issues}
    # The empty cell is missing, not malformed
    assert issues == {("2", "stroke", "yes"), ("3", "stroke", "0.5")}
    assert any("'stroke'" in rec.getMessage() for rec in caplog.records)


def test_load_dataset_logs_missing_token_counts(tmp_path, caplog):
    path = _write_csv(
        tmp_path,
        [
            HEADER,
            "1,Male,67,0,228.69,N/A,formerly smoked,1",
            "2,Female,61,0,202.21,N/A,never smoked,1",
            "3,Female,49,1,171.23,,smokes,0",
        ],
    )

    with caplog.at_level("DEBUG", logger="stroke_dashboard.core.dataset_loader"):
        ds = load_dataset(path)

    assert ds.coercion_issues == ()
    messages = [rec.getMessage() for rec in caplog.records]
    assert "3 empty or N/A value(s) in 'bmi' read as missing" in messages

    loaded = [rec for rec in caplog.records if rec.getMessage() == "Dataset loaded"]
    assert loaded[0].n_missing["bmi"] == 3


def test_load_dataset_observed_values(tmp_path):
    path = _write_csv(
        tmp_path,
        [
            HEADER,
            "1,Male,67,0,100,30,smokes,1",
            "2,Female,0.08,0,90,20, Unknown ,0",
            "3,Other,x,0,90,20,never smoked,0",
        ],
    )

    ds = load_dataset(path)

    assert ds.genders == ("Female", "Male", "Other")
    assert ds.smoking_statuses == ("Unknown", "never smoked", "smokes")
    assert ds.age_bounds == (0.08, 67.0)


def test_load_dataset_semicolon_delimiter(tmp_path):
    path = _write_csv(
        tmp_path,
        [
            "id;gender;age;avg_glucose_level;bmi;smoking_status;stroke",
            "1;Male;67;228.69;36.6;formerly smoked;1",
        ],
    )

    ds = load_dataset(path)

    assert ds.n_rows == 1
    assert ds.table["avg_glucose_level"].iloc[0] == pytest.approx(228.69)


def test_load_dataset_missing_file_is_fatal(tmp_path):
    with pytest.raises(DatasetLoadError):
        load_dataset(tmp_path / "nope.csv")


def test_load_dataset_empty_file_is_fatal(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(DatasetLoadError):
        load_dataset(path)


def test_load_dataset_missing_columns_is_fatal(tmp_path):
    path = _write_csv(
        tmp_path,
        [
            "id,gender,age,stroke",
            "1,Male,67,1",
        ],
    )

    with pytest.raises(DatasetSchemaError) as excinfo:
        load_dataset(path)

    assert excinfo.value.missing == ["avg_glucose_level", "bmi", "smoking_status"]


def test_load_dataset_does_not_touch_source_file(tmp_path):
    lines = [HEADER, "1,Male,67,0,abc,36.6,formerly smoked,1"]
    path = _write_csv(tmp_path, lines)
    before = path.read_bytes()

    load_dataset(path)

    assert path.read_bytes() == before
    assert isinstance(pd.read_csv(path), pd.DataFrame)
