from pathlib import Path

import numpy as np
import pandas as pd
import plotly.graph_objs as go

from stroke_dashboard.config.model import DashboardConfig
from stroke_dashboard.core.dataset import PatientDataset
from stroke_dashboard.core.filter_state import FilterState
from stroke_dashboard.core.pipeline import FilterPipeline
from stroke_dashboard.ui.callbacks.callbacks_filters import build_state_from_controls
from stroke_dashboard.ui.callbacks.callbacks_render import render_dashboard
from stroke_dashboard.ui.callbacks.callbacks_utils import state_from_store
from stroke_dashboard.ui.config import AppConfig
from stroke_dashboard.views import build_view_registry


def _make_ctx():
    """
    6 patients; id 5 has no age so the default state (observed bounds 20..70)
    covers 5 of them.
    """
    table = pd.DataFrame(
        {
            "id": [1, 2, 3, 4, 5, 6],
            "gender": ["Male", "Female", "Female", "Male", "Other", "Female"],
            "age": [30.0, 50.0, 50.0, 70.0, np.nan, 20.0],
            "avg_glucose_level": [100.0, 80.0, np.nan, 150.0, 90.0, 110.0],
            "bmi": [25.0, np.nan, 30.0, 35.0, 22.0, 28.0],
            "smoking_status": [
                "never smoked",
                "smokes",
                "Unknown",
                "formerly smoked",
                "never smoked",
                "never smoked",
            ],
            "stroke": pd.array([0, 1, 0, 1, 0, 0], dtype="Int64"),
        }
    )
    dataset = PatientDataset(name="UiDataset", table=table)
    registry = build_view_registry()
    return AppConfig(
        config=DashboardConfig(data_path=Path("unused.csv")),
        dataset=dataset,
        registry=registry,
        pipeline=FilterPipeline(dataset, registry),
    )


def test_render_dashboard_default_state():
    ctx = _make_ctx()

    frame = render_dashboard(ctx, None, None)

    assert frame["metrics"] == ["5", "110.00", "29.50", "2"]
    assert len(frame["figures"]) == 4
    assert all(isinstance(f, go.Figure) for f in frame["figures"])
    assert [r["id"] for r in frame["records"]] == [1, 2, 3, 4, 6]
    assert frame["token"] is not None


def test_render_dashboard_empty_result_shows_no_data():
    ctx = _make_ctx()
    fs_data = FilterState(age_min=20, age_max=70, gender="Male", smoking_status="smokes").to_dict()

    frame = render_dashboard(ctx, fs_data, None)

    assert frame["metrics"] == ["0", "No data", "No data", "0"]
    assert frame["records"] == []
    assert len(frame["figures"]) == 4


def test_render_dashboard_search_narrows_table_only():
    ctx = _make_ctx()

    frame = render_dashboard(ctx, None, "smokes")

    assert [r["id"] for r in frame["records"]] == [2]
    # metrics still describe the whole filtered table
    assert frame["metrics"][0] == "5"
    assert frame["row_count"] == "1 of 5 filtered rows"


def test_render_dashboard_token_follows_state():
    ctx = _make_ctx()
    a = FilterState(age_min=20, age_max=70, gender="Female").to_dict()
    b = FilterState(age_min=20, age_max=70, gender="Male").to_dict()

    assert render_dashboard(ctx, a, None)["token"] == render_dashboard(ctx, a, None)["token"]
    assert render_dashboard(ctx, a, None)["token"] != render_dashboard(ctx, b, None)["token"]


def test_state_from_store_falls_back_to_default():
    ctx = _make_ctx()
    default = ctx.pipeline.default_state()

    assert state_from_store(ctx, None) == default
    assert state_from_store(ctx, {}) == default
    assert state_from_store(ctx, {"foo": 1}) == default
    assert state_from_store(ctx, {"age_min": 60, "age_max": 10}) == default


def test_state_from_store_sanitises_stale_values():
    ctx = _make_ctx()

    state = state_from_store(
        ctx,
        {"age_min": 0, "age_max": 500, "gender": "Alien", "smoking_status": "smokes"},
    )

    assert state == FilterState(age_min=20, age_max=70, gender="All", smoking_status="smokes")


def test_build_state_from_controls():
    ctx = _make_ctx()

    raw = build_state_from_controls(ctx, "Female", [45, 55], "All")

    assert raw == {"age_min": 45.0, "age_max": 55.0, "gender": "Female", "smoking_status": "All"}
