"""Reactive controller: owns the user's selection and re-runs filter, prediction and rendering on change."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Literal

import matplotlib.pyplot as plt

from nlaviz.analysis.filtering import ValidationError, filter_observations
from nlaviz.analysis.prediction import predict_blooms
from nlaviz.plotting.bloom_map import region_colors, render_bloom_map
from nlaviz.utils.app_config import DEFAULT_DASHBOARD_CFG, DashboardConfig
from nlaviz.utils.plotting_config import DEFAULT_MAP_CFG, MapPlotConfig


if TYPE_CHECKING:
    import geopandas as gpd
    from matplotlib.figure import Figure

    from nlaviz.analysis.bloom_model import BloomModel
    from nlaviz.data import NLADataset, PredictionResult


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    """Current widget values: nitrogen input and the checked origin/depth labels."""

    origins: frozenset[str]
    depths: frozenset[str]
    nitrogen: float = DEFAULT_DASHBOARD_CFG.nitrogen_default

    def __post_init__(self) -> None:
        # Accept any iterable of labels but compare as sets
        object.__setattr__(self, "origins", frozenset(self.origins))
        object.__setattr__(self, "depths", frozenset(self.depths))


@dataclass(frozen=True)
class MapOutcome:
    """Result of one pipeline run: either a figure or a message to show instead."""

    state: SelectionState
    figure: Figure | None = None
    results: tuple[PredictionResult, ...] = ()
    message: str | None = None
    status: Literal["ok", "invalid", "error"] = "ok"

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class BloomMapController:
    """Event-driven wiring between the selection widgets and the bloom map pipeline.

    The dataset, model and state polygons are fixed at construction; only the
    ``SelectionState`` changes. Every trigger re-runs
    ``filter_observations`` -> ``predict_blooms`` -> ``render_bloom_map``.

    Example:
        >>> controller = BloomMapController(dataset, model, states=states)
        >>> outcome = controller.current()
        >>> outcome = controller.on_nitrogen_changed(110)
        >>> outcome = controller.on_origins_changed([])  # outcome.message holds the validation text
    """

    def __init__(
        self,
        dataset: NLADataset,
        model: BloomModel,
        *,
        states: gpd.GeoDataFrame | None = None,
        map_cfg: MapPlotConfig = DEFAULT_MAP_CFG,
        dashboard_cfg: DashboardConfig = DEFAULT_DASHBOARD_CFG,
    ) -> None:
        self._observations = dataset.observations
        self._model = model
        self._states = states
        self._map_cfg = map_cfg
        self._dashboard_cfg = dashboard_cfg

        self.origin_choices: tuple[str, ...] = dataset.lake_origins
        self.depth_choices: tuple[str, ...] = dataset.depth_classes
        # Built from every region so colours do not shift when filters hide some regions
        self.colors: dict[str, str] = region_colors(dataset.regions, map_cfg.region_palette)

        self._state = SelectionState(
            origins=frozenset(self.origin_choices),
            depths=frozenset(self.depth_choices),
            nitrogen=dashboard_cfg.nitrogen_default,
        )
        self._outcome: MapOutcome | None = None

    @property
    def state(self) -> SelectionState:
        return self._state

    def current(self) -> MapOutcome:
        """Outcome for the current selection, computing it on first use."""
        if self._outcome is None:
            self._set_outcome(self._run(self._state))
        return self._outcome

    def on_nitrogen_changed(self, value: float) -> MapOutcome:
        return self.select(replace(self._state, nitrogen=value))

    def on_origins_changed(self, labels: Iterable[str]) -> MapOutcome:
        return self.select(replace(self._state, origins=frozenset(labels)))

    def on_depths_changed(self, labels: Iterable[str]) -> MapOutcome:
        return self.select(replace(self._state, depths=frozenset(labels)))

    def select(self, state: SelectionState) -> MapOutcome:
        """Switch to ``state`` and re-run the pipeline.

        An unchanged state returns the previous outcome unless that run failed.

        Raises:
            ValueError: If the nitrogen value lies outside the slider range.
        """
        self._check_nitrogen(state.nitrogen)
        if self._outcome is not None and state == self._state and self._outcome.status != "error":
            return self._outcome
        self._state = state
        self._set_outcome(self._run(state))
        return self._outcome

    def _check_nitrogen(self, value: float) -> None:
        cfg = self._dashboard_cfg
        if not cfg.nitrogen_min <= value <= cfg.nitrogen_max:
            raise ValueError(f"Nitrogen input {value} outside [{cfg.nitrogen_min}, {cfg.nitrogen_max}].")

    def _run(self, state: SelectionState) -> MapOutcome:
        try:
            rows = filter_observations(self._observations, state.origins, state.depths, state.nitrogen)
            results = predict_blooms(rows, self._model)
            figure = render_bloom_map(results, states=self._states, colors=self.colors, cfg=self._map_cfg)
        except ValidationError as exc:
            logger.debug("Empty selection: origins=%s depths=%s", sorted(state.origins), sorted(state.depths))
            return MapOutcome(state=state, message=exc.message, status="invalid")
        except Exception:
            logger.exception("Bloom map computation failed for %s", state)
            return MapOutcome(state=state, message=self._dashboard_cfg.error_text, status="error")

        logger.debug("Rendered %d lakes at nitrogen=%s", len(results), state.nitrogen)
        return MapOutcome(state=state, figure=figure, results=results)

    def _set_outcome(self, outcome: MapOutcome) -> None:
        previous, self._outcome = self._outcome, outcome
        if previous is not None and previous.figure is not None and previous.figure is not outcome.figure:
            plt.close(previous.figure)
