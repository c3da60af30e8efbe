from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        RENDER_TOKEN = "render-token"

    class Control:
        # Filters
        GENDER_SELECT = "gender-select"
        AGE_RANGE = "age-range"
        SMOKING_SELECT = "smoking-select"
        RESET_FILTERS_BTN = "reset-filters-btn"

        # Page tabs
        PAGE_TABS = "page-tabs"

        # Overview metrics
        METRIC_TOTAL = "metric-total-patients"
        METRIC_GLUCOSE = "metric-avg-glucose"
        METRIC_BMI = "metric-avg-bmi"
        METRIC_STROKES = "metric-stroke-cases"

        # Data table
        TABLE_SEARCH = "table-search"
        TABLE_ROW_COUNT = "table-row-count"
        DATA_TABLE = "patient-table"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"

        # Status bar
        STATUS_BAR = "status-bar"


def graph_id(view_id: str) -> str:
    """Component id of the dcc.Graph showing a registered view."""
    return f"graph-{view_id}"
