"""Bloom map: US state outlines with one colour-coded, size-scaled point per lake."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from itertools import cycle
from threading import Lock
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np

from nlaviz.utils.plotting_config import DEFAULT_MAP_CFG, REGION_PALETTE, MapPlotConfig


if TYPE_CHECKING:
    import geopandas as gpd
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from nlaviz.data.views import PredictionResult


MM_TO_PT = 72.27 / 25.4
"""Points per millimetre; point sizes are diameters in mm."""

LAKE_POINTS_GID = "lakes"

_RENDER_LOCK = Lock()


def point_size(values: Iterable[float] | float, exponent: float = DEFAULT_MAP_CFG.size_exponent) -> np.ndarray:
    """Point diameter (mm) for predicted values, ``value ** exponent``.

    Negative predictions get size zero.
    """
    clipped = np.clip(np.asarray(values, dtype=float), 0.0, None)
    return np.power(clipped, exponent)


def marker_area(diameters_mm: np.ndarray) -> np.ndarray:
    """Convert diameters in mm to matplotlib scatter areas (points squared)."""
    return (np.asarray(diameters_mm, dtype=float) * MM_TO_PT) ** 2


def region_colors(regions: Iterable[str], palette: Sequence[str] = REGION_PALETTE) -> dict[str, str]:
    """Assign palette colours to ecoregion labels in sorted order, cycling past the palette length."""
    return dict(zip(sorted(set(regions)), cycle(palette)))


def render_bloom_map(
    results: Sequence[PredictionResult],
    *,
    states: gpd.GeoDataFrame | None = None,
    colors: Mapping[str, str] | None = None,
    cfg: MapPlotConfig = DEFAULT_MAP_CFG,
    ax: Axes | None = None,
) -> Figure:
    """Draw predicted blooms over the state outlines.

    Args:
        results: Predictions to draw, one point each.
        states: State polygons (EPSG:4326); the base layer is skipped when ``None``.
        colors: Ecoregion to colour mapping. Regions missing from it fall back to
            ``region_colors`` over the regions in ``results``.
        cfg: Map styling.
        ax: Axes to draw into (a new figure is created otherwise).

    Returns:
        Matplotlib Figure without ticks, labels, grid or legend.
    """
    fallback = region_colors((r.region for r in results), cfg.region_palette)
    colors = {**fallback, **(colors or {})}

    # rcParams and the pyplot figure registry are process-wide; sessions render one at a time
    with _RENDER_LOCK, cfg.apply():
        owns_figure = ax is None
        if owns_figure:
            fig, ax = plt.subplots(figsize=cfg.figsize)
        else:
            fig = ax.figure

        try:
            _draw_layers(ax, results, states=states, colors=colors, cfg=cfg)
            if cfg.transparent:
                fig.patch.set_alpha(0.0)
            fig.tight_layout()
        except BaseException:
            if owns_figure:
                plt.close(fig)
            raise

    return fig


def _draw_layers(
    ax: Axes,
    results: Sequence[PredictionResult],
    *,
    states: gpd.GeoDataFrame | None,
    colors: Mapping[str, str],
    cfg: MapPlotConfig,
) -> None:
    if states is not None and not states.empty:
        states.plot(ax=ax, color=cfg.state_fill, edgecolor=cfg.state_edge)

    if results:
        ax.scatter(
            [r.longitude for r in results],
            [r.latitude for r in results],
            s=marker_area(point_size([r.predicted for r in results], cfg.size_exponent)),
            c=[colors[r.region] for r in results],
            linewidths=0,
            zorder=2,
            gid=LAKE_POINTS_GID,
        )

    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xlabel("")
    ax.set_ylabel("")
    ax.grid(False)
    for spine in ax.spines.values():
        spine.set_visible(False)
    if ax.get_legend() is not None:
        ax.get_legend().remove()
    ax.set_facecolor(cfg.panel_color)
