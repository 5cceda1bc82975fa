"""Base dataset class for all dataset implementations."""

from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from .base_columns import BaseColumn
from .views import Observation


class BaseDataset(ABC):
    """Abstract base class for the immutable datasets served by the dashboard."""

    Col: type[BaseColumn]

    def __init__(self, df: pd.DataFrame | None = None) -> None:
        """Initialize the base dataset.

        Args:
            df: Pre-loaded and cleaned DataFrame (optional)
        """
        self._df: pd.DataFrame | None = df
        self._observations: tuple[Observation, ...] | None = None

    @classmethod
    @abstractmethod
    def from_csv(cls, csv_path: str | Path | None = None, **kwargs: object) -> "BaseDataset":
        """Load dataset from CSV file.

        Args:
            csv_path: Path to the CSV file
            **kwargs: Additional loading parameters

        Returns:
            Dataset instance with loaded data
        """
        ...

    @abstractmethod
    def _build_observations(self, df: pd.DataFrame) -> tuple[Observation, ...]:
        """Convert the cleaned frame into typed ``Observation`` rows."""
        ...

    @property
    def df(self) -> pd.DataFrame:
        """Get the cleaned DataFrame.

        Raises:
            ValueError: If dataset not loaded
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_csv() to load data.")
        return self._df

    @property
    def observations(self) -> tuple[Observation, ...]:
        """Typed, immutable rows of the dataset, built once on first access."""
        if self._observations is None:
            self._observations = self._build_observations(self.df)
        return self._observations

    def __len__(self) -> int:
        return len(self.observations)
