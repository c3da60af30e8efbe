from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class DashboardConfig:
    """
    Parsed dashboard.json.

    Fields:

    - ui_title: page and navbar title
    - subtitle: navbar subtitle
    - data_path: resolved path of the source table
    - page_size: rows per page in the data table
    - source_path: the config file this was read from (None for defaults)
    """

    data_path: Path
    ui_title: str = "Stroke Risk Explorer"
    subtitle: str = "Interactive Healthcare Dataset Dashboard"
    page_size: int = 10
    source_path: Path | None = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], data_path: Path, source_path: Path | None = None) -> DashboardConfig:
        return cls(
            data_path=data_path,
            ui_title=raw.get("ui_title", cls.ui_title),
            subtitle=raw.get("subtitle", cls.subtitle),
            page_size=int(raw.get("page_size", cls.page_size)),
            source_path=source_path,
        )
