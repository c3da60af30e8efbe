from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

import dash_bootstrap_components as dbc
from dash import dash_table, html

from stroke_dashboard.core.dataset import PatientDataset
from stroke_dashboard.core.schema import ALL

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def get_filter_options(dataset: PatientDataset) -> Tuple[List[dict], List[dict]]:
    """
    Dropdown options for the gender and smoking-status selectors:
    "All" first, then every observed value.
    """
    gender_options = [{"label": ALL, "value": ALL}] + [
        {"label": g, "value": g} for g in dataset.genders
    ]
    smoking_options = [{"label": ALL, "value": ALL}] + [
        {"label": s.replace("_", " ").capitalize() if s.islower() else s, "value": s}
        for s in dataset.smoking_statuses
    ]
    return gender_options, smoking_options


def age_slider_bounds(dataset: PatientDataset) -> Tuple[int, int]:
    """Integer slider bounds wide enough to include every observed age."""
    lo, hi = dataset.age_bounds
    return int(math.floor(lo)), int(math.ceil(hi))


def age_slider_marks(lo: int, hi: int, step: int = 10) -> Dict[int, str]:
    marks = {v: str(v) for v in range(lo - lo % step, hi + 1, step) if lo <= v <= hi}
    marks[lo] = str(lo)
    marks[hi] = str(hi)
    return marks


def metric_card(title: str, component_id: str, caption: str) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(title, className="text-muted small text-uppercase"),
                html.H3("–", id=component_id, className="mb-0 fw-semibold"),
                html.Small(caption, className="text-muted"),
            ]
        ),
        className="sd-metric-card h-100",
    )


def patient_table(component_id: str, columns: Sequence[str], page_size: int = 10) -> dash_table.DataTable:
    """
    Paginated, horizontally scrollable grid. Rows are filled by the render
    callback; columns are fixed to the dataset's source order.
    """
    return dash_table.DataTable(
        id=component_id,
        data=[],
        columns=[{"name": c, "id": c} for c in columns],

        page_action="native",
        page_size=page_size,
        sort_action="native",
        filter_action="none",

        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
    )


def describe_state(state_dict: dict, n_rows: int) -> html.Span:
    """One-line summary of the active filters for the status bar."""
    age_min = state_dict.get("age_min")
    age_max = state_dict.get("age_max")
    return html.Span(
        [
            html.Strong("Gender: "), str(state_dict.get("gender", ALL)), " • ",
            html.Strong("Age: "), f"{age_min:g}–{age_max:g}", " • ",
            html.Strong("Smoking: "), str(state_dict.get("smoking_status", ALL)), " • ",
            html.Strong("Patients: "), f"{n_rows:,}",
        ]
    )
