from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

ABOUT_TEXT = """
### About this dashboard

This dashboard explores a stroke healthcare dataset of patient records:
demographics, average glucose level, BMI, smoking status and whether the
patient had a stroke.

Use the filters on the **Analytics** tab to narrow the population by gender,
age range and smoking status. Every metric, chart and the data table update
together from the same filtered set of patients.

### Missing values

Glucose and BMI readings that could not be parsed are treated as missing.
They are ignored when averaging and left out of the chart that plots them,
but the patient still counts in the totals and appears in the table.
A metric with nothing to average shows **No data**.
"""


def build_about_panel() -> dbc.Container:
    return dbc.Container(
        fluid=True,
        children=[dbc.Card(dbc.CardBody(dcc.Markdown(ABOUT_TEXT)), className="mt-3")],
    )
