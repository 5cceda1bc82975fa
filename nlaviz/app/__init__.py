"""Session-level orchestration of the bloom map."""

from .controller import BloomMapController, MapOutcome, SelectionState


__all__ = ["BloomMapController", "MapOutcome", "SelectionState"]
