"""Data module for dataset classes and typed rows."""

from .nla_columns import NLAColumn as NLACol
from .nla_dataset import NLADataset, depth_labels
from .views import FilteredRow, Observation, PredictionResult, distinct_labels


__all__ = [
    "FilteredRow",
    "NLACol",
    "NLADataset",
    "Observation",
    "PredictionResult",
    "depth_labels",
    "distinct_labels",
]
