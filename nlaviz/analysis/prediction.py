"""Batch prediction of bloom intensity for filtered lakes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from nlaviz.data import NLACol
from nlaviz.data.views import FilteredRow, PredictionResult

from .filtering import ValidationError


if TYPE_CHECKING:
    from .bloom_model import BloomModel


def model_input_frame(rows: Sequence[FilteredRow], feature_name: str) -> pd.DataFrame:
    """Lay out rows as the frame the model reads, nitrogen stored under ``feature_name``."""
    return pd.DataFrame(
        {
            NLACol.LON_DD: [row.longitude for row in rows],
            NLACol.LAT_DD: [row.latitude for row in rows],
            NLACol.ECO_NUTA: [row.region for row in rows],
            feature_name: [row.nitrogen for row in rows],
        },
    )


def predict_blooms(rows: Sequence[FilteredRow], model: BloomModel) -> tuple[PredictionResult, ...]:
    """Attach the model's predicted bloom intensity to each row.

    The model is called once for the whole batch; the i-th prediction belongs to the i-th row.

    Raises:
        ValidationError: If ``rows`` is empty.
        ValueError: If the model returns a different number of predictions than rows.
    """
    if not rows:
        raise ValidationError()

    predictions = np.asarray(model.predict(model_input_frame(rows, model.feature_name)), dtype=float).ravel()
    if predictions.shape[0] != len(rows):
        raise ValueError(f"Model returned {predictions.shape[0]} predictions for {len(rows)} rows.")

    return tuple(row.with_prediction(float(value)) for row, value in zip(rows, predictions, strict=True))
