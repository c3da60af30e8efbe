import json

import pytest

from stroke_dashboard.core.exceptions import DatasetLoadError, DatasetSchemaError
from stroke_dashboard.ui.dash_app import create_dash_app
from stroke_dashboard.ui.ids import IDs, graph_id


CSV = "\n".join(
    [
        "id,gender,age,avg_glucose_level,bmi,smoking_status,stroke",
        "1,Male,67,228.69,36.6,formerly smoked,1",
        "2,Female,61,202.21,N/A,never smoked,1",
        "3,Female,49,171.23,34.4,smokes,0",
    ]
)


def _write_project(tmp_path, csv_text=CSV):
    (tmp_path / "data").mkdir()
    (tmp_path / "config").mkdir()
    if csv_text is not None:
        (tmp_path / "data" / "stroke.csv").write_text(csv_text + "\n")
    config_path = tmp_path / "config" / "dashboard.json"
    config_path.write_text(
        json.dumps({"ui_title": "Test Stroke Dashboard", "data_path": "data/stroke.csv"})
    )
    return config_path


def _collect_ids(component, found):
    cid = getattr(component, "id", None)
    if cid is not None:
        found.add(cid)
    children = getattr(component, "children", None)
    if children is None:
        return found
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        if hasattr(child, "to_plotly_json"):
            _collect_ids(child, found)
    return found


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("STROKE_DASHBOARD_DATA_ROOT", raising=False)


def test_create_dash_app_builds_layout(tmp_path):
    app = create_dash_app(_write_project(tmp_path))

    assert app.title == "Test Stroke Dashboard"

    ids = _collect_ids(app.layout, set())
    for cid in [
        IDs.Store.FILTER_STATE,
        IDs.Control.GENDER_SELECT,
        IDs.Control.AGE_RANGE,
        IDs.Control.SMOKING_SELECT,
        IDs.Control.DATA_TABLE,
        IDs.Control.TABLE_SEARCH,
        IDs.Control.METRIC_TOTAL,
    ]:
        assert cid in ids
    for view_id in ["age_histogram", "age_glucose_scatter", "age_bmi_scatter", "gender_outcome_bar"]:
        assert graph_id(view_id) in ids


def test_create_dash_app_missing_data_is_fatal(tmp_path):
    with pytest.raises(DatasetLoadError):
        create_dash_app(_write_project(tmp_path, csv_text=None))


def test_create_dash_app_missing_columns_is_fatal(tmp_path):
    with pytest.raises(DatasetSchemaError):
        create_dash_app(_write_project(tmp_path, csv_text="id,gender\n1,Male"))
