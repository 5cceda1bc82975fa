"""Filtering, model fitting and prediction for the bloom map."""

from nlaviz.data.views import distinct_labels

from .bloom_model import (
    BloomModel,
    FittedBloomModel,
    ModelMetrics,
    fit_bloom_model,
    load_or_fit_bloom_model,
)
from .filtering import EMPTY_SELECTION_MESSAGE, ValidationError, filter_observations
from .prediction import model_input_frame, predict_blooms


__all__ = [
    "EMPTY_SELECTION_MESSAGE",
    "BloomModel",
    "FittedBloomModel",
    "ModelMetrics",
    "ValidationError",
    "distinct_labels",
    "filter_observations",
    "fit_bloom_model",
    "load_or_fit_bloom_model",
    "model_input_frame",
    "predict_blooms",
]
