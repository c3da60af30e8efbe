from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

import pandas as pd
import plotly.graph_objs as go

from stroke_dashboard.core.dataset import PatientDataset
from stroke_dashboard.core.filter_state import FilterState
from stroke_dashboard.core.metrics import SummaryMetrics, compute_summary
from stroke_dashboard.core.view_registry import ViewRegistry

logger = logging.getLogger(__name__)


def state_token(state: FilterState) -> str:
    """
    Stable digest of a FilterState. Equal states always give equal tokens, so
    every part of a rendered frame can be checked against the state it came from.
    """
    payload = json.dumps(state.to_dict(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()[:16]


@dataclass(frozen=True)
class DashboardSnapshot:
    """
    Everything the dashboard shows for one FilterState.

    All fields are derived from the same `filtered` table in a single
    evaluation, so a snapshot can never mix derivations from two states.

    Fields:

    - token: state_token(state)
    - state: the FilterState this snapshot was computed for
    - filtered: the filtered table (fresh copy, source row order)
    - summary: SummaryMetrics over `filtered`
    - charts: view id -> data computed by that view
    - figures: view id -> rendered Plotly figure
    """
    token: str
    state: FilterState
    filtered: pd.DataFrame
    summary: SummaryMetrics
    charts: Mapping[str, pd.DataFrame] = field(default_factory=dict)
    figures: Mapping[str, go.Figure] = field(default_factory=dict)


class FilterPipeline:
    """
    Stateless recompute graph: FilterState -> filtered table -> every derivation.

    A pipeline holds only the immutable dataset and the view registry, so one
    instance is safely shared by every session. Per-session state lives in
    {@link FilterSession} (or in the browser-side store for the Dash UI).
    """

    def __init__(self, dataset: PatientDataset, registry: ViewRegistry):
        self.dataset = dataset
        self.registry = registry

    def default_state(self) -> FilterState:
        return FilterState.for_dataset(self.dataset)

    def evaluate(self, state: FilterState, render: bool = True) -> DashboardSnapshot:
        """
        Filter once, then run every derivation against that single table.

        :param render: if False, only chart data is computed (no Plotly figures)
        """
        filtered = self.dataset.subset_for_state(state)
        summary = compute_summary(filtered)

        charts: Dict[str, pd.DataFrame] = {}
        figures: Dict[str, go.Figure] = {}
        for view_id in self.registry.ids():
            view = self.registry.create(view_id)
            data = view.timed_compute(filtered)
            charts[view_id] = data
            if render:
                figures[view_id] = view.render_figure(data)

        token = state_token(state)
        logger.debug(
            "pipeline_evaluate",
            extra={
                "token": token,
                "state": state.to_dict(),
                "n_rows": summary.total_patients,
            },
        )
        return DashboardSnapshot(
            token=token,
            state=state,
            filtered=filtered,
            summary=summary,
            charts=charts,
            figures=figures,
        )


Subscriber = Callable[[DashboardSnapshot], None]


class FilterSession:
    """
    One user's filter state and its subscribers.

    FilterState is the single source of truth. commit() recomputes the snapshot
    synchronously and hands the *same* snapshot to every subscriber, in
    subscription order, before returning. `revision` increases on every commit
    and identifies the update cycle a subscriber is being notified for.

    Sessions never share mutable state; only the pipeline (and through it the
    immutable dataset) is shared.
    """

    def __init__(self, pipeline: FilterPipeline, state: Optional[FilterState] = None):
        self._pipeline = pipeline
        self._subscribers: List[Subscriber] = []
        self._revision = 0
        self._snapshot = pipeline.evaluate(state or pipeline.default_state())

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def state(self) -> FilterState:
        return self._snapshot.state

    def current(self) -> DashboardSnapshot:
        """The snapshot for the most recently committed state."""
        return self._snapshot

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for future commits.
        :return: a function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def commit(self, state: FilterState) -> DashboardSnapshot:
        """
        Make `state` current, recompute, and notify subscribers.

        Every subscriber is notified even if an earlier one raises; failures
        are logged and the first one is re-raised once all have run.
        """
        snapshot = self._pipeline.evaluate(state)
        self._revision += 1
        self._snapshot = snapshot

        first_error: Optional[Exception] = None
        # Copy so a subscriber that unsubscribes during notification does not
        # skip its neighbour
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception as e:
                logger.exception(
                    "Subscriber failed during commit",
                    extra={"token": snapshot.token, "revision": self._revision},
                )
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error
        return snapshot
