class StrokeDashboardError(Exception):
    """Base exception for all stroke_dashboard errors"""
    pass


class ConfigError(StrokeDashboardError):
    """Invalid or missing dashboard.json config"""
    pass


class DatasetLoadError(StrokeDashboardError):
    """Source file is missing, unreadable or empty. The app cannot start."""
    pass


class DatasetSchemaError(StrokeDashboardError):
    """
    Source table doesn't match what PatientDataset expects:
    one or more required columns are absent
    """

    def __init__(self, missing: list[str], path: object = None):
        self.missing = missing
        self.path = path
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Required columns missing{where}: {', '.join(missing)}")
