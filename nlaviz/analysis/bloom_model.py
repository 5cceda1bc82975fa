r"""Bloom regression model: fitting, persistence and batch prediction.

The dashboard predicts log10 cyanobacteria density from log10 total nitrogen.
Two model families are supported:

- ``"mixed"``: linear mixed model with a random intercept per nutrient
  ecoregion, :math:`y_{ij} = \beta_0 + \beta_1 x_{ij} + u_j + \varepsilon_{ij}`
  (``statsmodels.formula.api.mixedlm``). Predictions add the fitted
  :math:`\hat u_j` of the row's ecoregion, zero for ecoregions not seen in
  training.
- ``"ols"``: the same fixed part fitted by ordinary least squares.

Any object with a ``feature_name`` attribute and a ``predict(frame)`` method
returning one value per row can stand in for the fitted model (``BloomModel``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, Protocol

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from statsmodels.iolib.smpickle import load_pickle, save_pickle

from nlaviz.data import NLACol
from nlaviz.utils.paths import get_dataset_path


if TYPE_CHECKING:
    from nlaviz.data import NLADataset


logger = logging.getLogger(__name__)

ModelKind = Literal["mixed", "ols"]
_MODEL_KINDS: tuple[str, ...] = ("mixed", "ols")


class BloomModel(Protocol):
    """Batch predictor consumed by the prediction stage."""

    feature_name: str
    """Name of the nitrogen column the model reads."""

    def predict(self, frame: pd.DataFrame) -> np.ndarray:
        """Return one prediction per row of ``frame``, in row order."""
        ...


@dataclass(frozen=True)
class ModelMetrics:
    """In-sample fit metrics of a bloom model."""

    r2: float
    """Coefficient of determination :math:`1 - SS_{res}/SS_{tot}`."""
    rmse: float
    """Root mean squared error (log10 cells/mL)."""
    mae: float
    n_obs: int
    n_groups: int | None = None
    """Number of ecoregions with a random intercept (mixed models only)."""

    def __repr__(self) -> str:
        groups = f", groups={self.n_groups}" if self.n_groups is not None else ""
        return f"ModelMetrics(r2={self.r2:.3f}, rmse={self.rmse:.3f}, mae={self.mae:.3f}, n={self.n_obs}{groups})"


@dataclass(frozen=True)
class FittedBloomModel:
    """A fitted statsmodels result packaged with the column names it expects."""

    results: Any
    """statsmodels ``MixedLMResults`` or ``RegressionResults`` wrapper."""
    feature_name: str = NLACol.LOG10_NTL
    group_col: str = NLACol.ECO_NUTA
    metrics: ModelMetrics | None = None

    @property
    def kind(self) -> ModelKind:
        return "mixed" if hasattr(self.results, "random_effects") else "ols"

    @property
    def random_intercepts(self) -> dict[str, float]:
        """Fitted random intercept per ecoregion (empty for OLS)."""
        if self.kind != "mixed":
            return {}
        return {str(group): float(effects.iloc[0]) for group, effects in self.results.random_effects.items()}

    def predict(self, frame: pd.DataFrame) -> np.ndarray:
        """Predict log10 cyanobacteria density for each row of ``frame``.

        Args:
            frame: Must contain ``feature_name``; mixed models also read ``group_col``.

        Raises:
            KeyError: If a required column is missing.
        """
        required = [self.feature_name, *([self.group_col] if self.kind == "mixed" else [])]
        missing = [col for col in required if col not in frame.columns]
        if missing:
            raise KeyError(f"Model input is missing columns: {missing}")

        predictions = np.asarray(self.results.predict(frame), dtype=float)
        if self.kind == "mixed":
            offsets = frame[self.group_col].astype(str).map(self.random_intercepts).fillna(0.0)
            predictions = predictions + offsets.to_numpy(dtype=float)
        return predictions

    def save(self, path: str | Path) -> Path:
        """Pickle the model (statsmodels pickling keeps the formula design info)."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        save_pickle(self, str(path))
        logger.info("Saved %s bloom model to %s", self.kind, path)
        return path

    @classmethod
    def load(cls, path: str | Path) -> FittedBloomModel:
        """Load a model written by :meth:`save`.

        Raises:
            TypeError: If the pickle holds something other than a ``FittedBloomModel``.
        """
        model = load_pickle(str(path))
        if not isinstance(model, cls):
            raise TypeError(f"{path} does not contain a {cls.__name__} (got {type(model).__name__})")
        logger.info("Loaded %s bloom model from %s", model.kind, path)
        return model


def fit_bloom_model(
    frame: pd.DataFrame,
    *,
    kind: ModelKind = "mixed",
    target_col: str = NLACol.TARGET,
    feature_col: str = NLACol.LOG10_NTL,
    group_col: str = NLACol.ECO_NUTA,
) -> FittedBloomModel:
    """Fit the bloom model on a training frame and compute in-sample metrics.

    Args:
        frame: Rows with target, nitrogen feature and ecoregion (see ``NLADataset.training_frame``).
        kind: ``"mixed"`` (random intercept per ecoregion) or ``"ols"``.
        target_col: Response column.
        feature_col: Nitrogen feature column.
        group_col: Ecoregion column (random-effect grouping for mixed models).

    Raises:
        ValueError: If ``kind`` is unknown or ``frame`` is empty.
    """
    if kind not in _MODEL_KINDS:
        raise ValueError(f"Invalid kind='{kind}'. Use one of {_MODEL_KINDS}.")
    if frame.empty:
        raise ValueError("Cannot fit a bloom model on an empty frame.")

    formula = f"{target_col} ~ {feature_col}"
    data = frame.assign(**{group_col: frame[group_col].astype(str)})
    if kind == "mixed":
        results = smf.mixedlm(formula, data=data, groups=data[group_col]).fit(reml=True)
    else:
        results = smf.ols(formula, data=data).fit()

    model = FittedBloomModel(results=results, feature_name=feature_col, group_col=group_col)
    y_true = data[target_col].astype(float).to_numpy()
    y_pred = model.predict(data)
    metrics = ModelMetrics(
        r2=float(r2_score(y_true, y_pred)),
        rmse=float(np.sqrt(mean_squared_error(y_true, y_pred))),
        mae=float(mean_absolute_error(y_true, y_pred)),
        n_obs=len(data),
        n_groups=len(model.random_intercepts) if kind == "mixed" else None,
    )
    logger.info("Fitted %s bloom model '%s': %r", kind, formula, metrics)
    return FittedBloomModel(results=results, feature_name=feature_col, group_col=group_col, metrics=metrics)


def load_or_fit_bloom_model(
    dataset: NLADataset,
    *,
    model_path: str | Path | None = None,
    kind: ModelKind = "mixed",
) -> FittedBloomModel:
    """Load the persisted model if available, otherwise fit one on ``dataset``.

    Args:
        dataset: Dataset providing the training frame when fitting.
        model_path: Pickle written by ``FittedBloomModel.save`` (defaults to ``bloom_model.pickle``
            in the data directory).
        kind: Model family used when fitting.
    """
    if model_path is None:
        try:
            model_path = get_dataset_path("bloom_model")
        except FileNotFoundError:
            model_path = None
    if model_path is not None and Path(model_path).exists():
        return FittedBloomModel.load(model_path)

    logger.info("No persisted bloom model found; fitting a %s model on %d lakes", kind, len(dataset.df))
    return fit_bloom_model(dataset.training_frame(), kind=kind)
