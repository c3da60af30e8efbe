from stroke_dashboard.core.view_registry import ViewRegistry

from .age_histogram_view import AgeOutcomeHistogram
from .scatter_views import GlucoseScatterView, BmiScatterView
from .gender_outcome_view import GenderOutcomeBarView, aggregate_gender_outcome

__all__ = [
    "AgeOutcomeHistogram",
    "GlucoseScatterView",
    "BmiScatterView",
    "GenderOutcomeBarView",
    "aggregate_gender_outcome",
    "build_view_registry",
]


def build_view_registry() -> ViewRegistry:
    """Registry with every chart the dashboard renders, in display order."""
    registry = ViewRegistry()
    registry.register(AgeOutcomeHistogram)
    registry.register(GlucoseScatterView)
    registry.register(BmiScatterView)
    registry.register(GenderOutcomeBarView)
    return registry
