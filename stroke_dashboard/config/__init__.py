from .model import DashboardConfig
from .config_loader import load_config

__all__ = ["DashboardConfig", "load_config"]
