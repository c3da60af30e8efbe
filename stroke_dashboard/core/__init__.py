"""
Core domain layer: dataset abstraction, filter state, filtering engine,
summary metrics, view base class, the view registry and the recompute pipeline
"""

from .dataset import PatientDataset
from .filter_state import FilterState
from .base_view import BaseView
from .view_registry import ViewRegistry
from .pipeline import DashboardSnapshot, FilterPipeline, FilterSession

__all__ = [
    "PatientDataset",
    "FilterState",
    "BaseView",
    "ViewRegistry",
    "DashboardSnapshot",
    "FilterPipeline",
    "FilterSession",
]
