"""
Top-level package for the stroke dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    stroke_dashboard.core
    stroke_dashboard.views
    stroke_dashboard.ui
"""

__all__: list[str] = []
