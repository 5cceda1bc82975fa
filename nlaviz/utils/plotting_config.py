"""Shared map styling (figure size, colours, point scaling)."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field

import matplotlib as mpl
import seaborn as sns


REGION_PALETTE: tuple[str, ...] = (
    "#C39A6B",
    "#B51F2D",
    "#009344",
    "#FFF100",
    "#A87B4F",
    "#1B75BB",
    "#74B7E4",
    "#808284",
    "#FEDD4E",
    "#006738",
    "white",
)
"""Categorical colours assigned to nutrient ecoregions in sorted label order."""


@dataclass(frozen=True)
class MapPlotConfig:
    """Styling for the bloom map that can be applied per figure."""

    figsize: tuple[float, float] = (10.0, 6.0)
    figure_dpi: int = 100
    state_fill: str = "#939597"
    state_edge: str = "#939597"
    panel_color: str = "white"
    transparent: bool = True
    region_palette: tuple[str, ...] = REGION_PALETTE
    size_exponent: float = 1.2
    """Exponent applied to predictions before they become point diameters."""
    style: str = "white"
    context: str = "notebook"
    font_scale: float = 1.0
    rc_overrides: dict[str, object] = field(default_factory=dict)

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply the map style within a context, restoring previous rcParams afterwards."""
        with mpl.rc_context():
            sns.set_theme(style=self.style, context=self.context, font_scale=self.font_scale)
            mpl.rcParams.update(
                {
                    "figure.dpi": self.figure_dpi,
                    "savefig.transparent": self.transparent,
                    **self.rc_overrides,
                },
            )
            yield


# Default configuration used by the dashboard
DEFAULT_MAP_CFG = MapPlotConfig()


__all__ = ["DEFAULT_MAP_CFG", "REGION_PALETTE", "MapPlotConfig"]
