"""Base column definitions and metadata structures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pandas import Series


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for a dataset column.

    Attributes:
        cleaned_name: Standardized column name used in DataFrames.
        dtype: Expected pandas data type as a string.
        pretty_name: Human-readable name for use in plots and the dashboard.
        transform: Optional callable deriving this column from its source column (e.g., log10).
        source: Cleaned name of the column ``transform`` is applied to, for derived columns.
    """

    original_name: str | None
    """Column name as it appears in the raw CSV file (``None`` for derived columns)."""
    cleaned_name: str
    dtype: str
    pretty_name: str
    transform: Callable[[Series], Series] | None = None
    source: str | None = None


class BaseColumn(StrEnum):
    """Base class for dataset column enums.

    All derived column enums must define a TARGET member naming the response
    variable of the bloom model.

    Subclasses must implement:
    - metadata(): Return ColumnMetadata for each enum member
    - numeric_columns(): Return list of numeric column names
    - label_columns(): Return list of categorical label column names
    """

    TARGET: str

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement metadata() method")

    @classmethod
    def numeric_columns(cls) -> list[str]:
        """Get all numeric column names.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{cls.__name__} must implement numeric_columns() method")

    @classmethod
    def label_columns(cls) -> list[str]:
        """Get categorical label column names.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{cls.__name__} must implement label_columns() method")

    @classmethod
    def raw_columns(cls) -> dict[str, str]:
        """Map normalized raw CSV names to cleaned column names.

        Derived columns (without an ``original_name``) are skipped.
        """
        return {
            col.original_name.strip().lower(): col.value for col in cls if col.original_name is not None
        }

    @classmethod
    def derived_columns(cls) -> list["BaseColumn"]:
        """Columns computed from another column via their metadata transform."""
        return [col for col in cls if col.transform is not None and col.metadata().source is not None]

    @property
    def pretty_name(self) -> str:
        """Get the human-readable name for plots and the dashboard."""
        return self.metadata().pretty_name

    @property
    def original_name(self) -> str | None:
        """Get the original column name from the CSV file."""
        return self.metadata().original_name

    @property
    def dtype_name(self) -> str:
        """Get the expected data type as a string."""
        return self.metadata().dtype

    @property
    def transform(self) -> Callable[[Series], Series] | None:
        """Get the optional transformation function for this column."""
        return self.metadata().transform
