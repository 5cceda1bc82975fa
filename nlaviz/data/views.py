"""Typed row records flowing through the filter, prediction and rendering stages."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Observation:
    """One lake of the loaded dataset.

    Attributes:
        longitude: Longitude in decimal degrees.
        latitude: Latitude in decimal degrees.
        region: Aggregated nutrient ecoregion label (ECO_NUTA).
        origin: Lake origin label (e.g. ``"MAN_MADE"``, ``"NATURAL"``).
        depth_class: Depth bucket label (e.g. ``"<= 4m"``).
        nitrogen: Measured total nitrogen, log10 scale.
    """

    longitude: float
    latitude: float
    region: str
    origin: str
    depth_class: str
    nitrogen: float


@dataclass(frozen=True)
class FilteredRow:
    """Projection of an ``Observation`` with the selected nitrogen value broadcast onto it."""

    index: int
    """Position of the source ``Observation`` in the dataset."""
    longitude: float
    latitude: float
    region: str
    nitrogen: float
    """Nitrogen input chosen by the user (identical for every row of a batch)."""

    def with_prediction(self, predicted: float) -> "PredictionResult":
        return PredictionResult(
            index=self.index,
            longitude=self.longitude,
            latitude=self.latitude,
            region=self.region,
            nitrogen=self.nitrogen,
            predicted=predicted,
        )


@dataclass(frozen=True)
class PredictionResult:
    """A ``FilteredRow`` paired with the model's predicted bloom intensity."""

    index: int
    longitude: float
    latitude: float
    region: str
    nitrogen: float
    predicted: float


def distinct_labels(labels: Iterable[str]) -> tuple[str, ...]:
    """Unique labels in first-seen order, used to populate the checkbox groups."""
    return tuple(dict.fromkeys(labels))
