import pandas as pd
import pytest

from stroke_dashboard.core.base_view import BaseView
from stroke_dashboard.core.view_registry import ViewRegistry
from stroke_dashboard.views import (
    AgeOutcomeHistogram,
    BmiScatterView,
    GenderOutcomeBarView,
    GlucoseScatterView,
    build_view_registry,
)


class _DummyView(BaseView):
    id = "dummy"
    label = "Dummy"

    def compute_data(self, table: pd.DataFrame) -> pd.DataFrame:
        return table

    def render_figure(self, data: pd.DataFrame):
        return self.empty_figure("dummy")


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(_DummyView)

    view = registry.create("dummy")

    assert isinstance(view, _DummyView)
    assert "dummy" in registry
    assert len(registry) == 1


def test_register_rejects_duplicates():
    registry = ViewRegistry()
    registry.register(_DummyView)

    with pytest.raises(ValueError):
        registry.register(_DummyView)


def test_register_rejects_non_views():
    registry = ViewRegistry()

    with pytest.raises(TypeError):
        registry.register(dict)


def test_create_unknown_view_raises():
    with pytest.raises(KeyError):
        ViewRegistry().create("missing")


def test_build_view_registry_keeps_display_order():
    registry = build_view_registry()

    assert registry.ids() == [
        "age_histogram",
        "age_glucose_scatter",
        "age_bmi_scatter",
        "gender_outcome_bar",
    ]
    assert registry.all_classes() == [
        AgeOutcomeHistogram,
        GlucoseScatterView,
        BmiScatterView,
        GenderOutcomeBarView,
    ]
