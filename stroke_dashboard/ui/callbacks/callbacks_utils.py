from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stroke_dashboard.core.filter_state import FilterState, sanitise_filter_state

if TYPE_CHECKING:
    from stroke_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def state_from_store(ctx: AppConfig, data: object) -> FilterState:
    """
    Rebuild the FilterState held in the browser-side store.

    The stored dict may be stale (older session) or hand-edited, so it is
    re-sanitised against the dataset. Anything unparseable falls back to the
    default state.
    """
    if not isinstance(data, dict) or not data:
        return ctx.pipeline.default_state()
    try:
        state = FilterState.from_dict(data)
    except (KeyError, TypeError, ValueError):
        logger.warning("Invalid filter-state in store: %r", data)
        return ctx.pipeline.default_state()

    return sanitise_filter_state(
        ctx.dataset,
        gender=state.gender,
        age_range=(state.age_min, state.age_max),
        smoking_status=state.smoking_status,
    )
