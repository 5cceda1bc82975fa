from .app_config import DEFAULT_DASHBOARD_CFG, DashboardConfig
from .paths import get_data_dir, get_dataset_path
from .plotting_config import DEFAULT_MAP_CFG, MapPlotConfig


__all__ = [
    "DEFAULT_DASHBOARD_CFG",
    "DEFAULT_MAP_CFG",
    "DashboardConfig",
    "MapPlotConfig",
    "get_data_dir",
    "get_dataset_path",
]
