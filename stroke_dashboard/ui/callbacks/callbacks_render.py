from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from stroke_dashboard.core.metrics import NO_DATA, format_metric
from stroke_dashboard.core.table import search_rows, table_records
from stroke_dashboard.ui.callbacks.callbacks_utils import state_from_store
from stroke_dashboard.ui.helpers import describe_state
from stroke_dashboard.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from stroke_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def render_dashboard(ctx: AppConfig, fs_data: Any, search: Optional[str]) -> Dict[str, Any]:
    """
    Pure helper: stored FilterState (+ table search text) -> every output of
    one frame.

    All values come from a single DashboardSnapshot, so metrics, charts and
    table always describe the same filtered rows. The snapshot token is
    returned alongside so the frame can be traced back to its state.
    """
    view_ids = ctx.registry.ids()
    state = state_from_store(ctx, fs_data)

    try:
        snapshot = ctx.pipeline.evaluate(state)
        table = table_records(search_rows(snapshot.filtered, search))
    except Exception:
        logger.exception(
            "Error while rendering dashboard",
            extra={"filter_state": state.to_dict()},
        )
        error = _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )
        return {
            "metrics": [NO_DATA, NO_DATA, NO_DATA, NO_DATA],
            "status": "Error while applying filters",
            "figures": [error for _ in view_ids],
            "records": [],
            "row_count": "",
            "token": None,
        }

    summary = snapshot.summary
    figures: List[go.Figure] = [snapshot.figures[v] for v in view_ids]

    logger.info(
        "render_complete",
        extra={
            "token": snapshot.token,
            "n_rows": summary.total_patients,
            "n_table_rows": table.n_rows,
        },
    )

    return {
        "metrics": [
            format_metric(summary.total_patients),
            format_metric(summary.avg_glucose),
            format_metric(summary.avg_bmi),
            format_metric(summary.stroke_cases),
        ],
        "status": describe_state(snapshot.state.to_dict(), summary.total_patients),
        "figures": figures,
        "records": table.records,
        "row_count": f"{table.n_rows:,} of {summary.total_patients:,} filtered rows",
        "token": snapshot.token,
    }


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    view_ids = ctx.registry.ids()

    # ---------------------------------------------------------
    # FilterState -> whole frame (metrics, charts, table) at once
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.METRIC_TOTAL, "children"),
        Output(IDs.Control.METRIC_GLUCOSE, "children"),
        Output(IDs.Control.METRIC_BMI, "children"),
        Output(IDs.Control.METRIC_STROKES, "children"),
        Output(IDs.Control.STATUS_BAR, "children"),
        *[Output(graph_id(v), "figure") for v in view_ids],
        Output(IDs.Control.DATA_TABLE, "data"),
        Output(IDs.Control.TABLE_ROW_COUNT, "children"),
        Output(IDs.Store.RENDER_TOKEN, "data"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.TABLE_SEARCH, "value"),
    )
    def update_dashboard_from_state(fs_data: dict[str, Any] | None, search: str | None):
        frame = render_dashboard(ctx, fs_data, search)
        return (
            *frame["metrics"],
            frame["status"],
            *frame["figures"],
            frame["records"],
            frame["row_count"],
            frame["token"],
        )
