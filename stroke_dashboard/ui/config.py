from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from stroke_dashboard.config.model import DashboardConfig
from stroke_dashboard.core.dataset import PatientDataset
from stroke_dashboard.core.pipeline import FilterPipeline
from stroke_dashboard.core.view_registry import ViewRegistry

# Charts shown on the Overview tab; every other registered view goes to Analytics
OVERVIEW_VIEW_IDS: Tuple[str, ...] = ("age_histogram",)


@dataclass
class AppConfig:
    """
    Shared, read-only collaborators for the Dash app. Passed into layout and
    callback registration instead of module-level globals.

    Nothing here is per-session: each browser tab's FilterState lives in its
    own session-scoped dcc.Store.
    """
    config: DashboardConfig
    dataset: PatientDataset
    registry: ViewRegistry
    pipeline: FilterPipeline

    @property
    def overview_view_ids(self) -> list[str]:
        return [v for v in self.registry.ids() if v in OVERVIEW_VIEW_IDS]

    @property
    def analytics_view_ids(self) -> list[str]:
        return [v for v in self.registry.ids() if v not in OVERVIEW_VIEW_IDS]
