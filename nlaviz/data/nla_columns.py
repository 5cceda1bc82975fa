"""Column definitions for the National Lakes Assessment 2007 dataset."""

import numpy as np

from .base_columns import BaseColumn, ColumnMetadata


class NLAColumn(BaseColumn):
    """Column names for the [US EPA National Lakes Assessment 2007](https://www.epa.gov/national-aquatic-resource-surveys/nla) site data.

    Columns:
    - ``site_id``: str - Lake identifier
    - ``visit_no``: int - Visit number (1 or 2)
    - ``lon_dd``: float - Longitude in decimal degrees
    - ``lat_dd``: float - Latitude in decimal degrees
    - ``eco_nuta``: str - Aggregated nutrient ecoregion
    - ``lake_origin``: str - Lake origin (MAN_MADE/NATURAL)
    - ``depthmax``: float - Maximum observed lake depth (m)
    - ``depth_class``: str - Depth bucket derived from ``depthmax``
    - ``ntl``: float - Total nitrogen (ug/L)
    - ``log10_ntl``: float - log10 of total nitrogen
    - ``cyandens``: float - Cyanobacteria density (cells/mL)
    - ``log10_cyano``: float - log10(cyandens + 1) (target variable)
    """

    # Target variable
    TARGET = "log10_cyano"
    """log10(cyanobacteria density + 1), the bloom intensity the model predicts."""
    LOG10_CYANO = TARGET

    # Identifiers
    SITE_ID = "site_id"
    VISIT_NO = "visit_no"

    # Location
    LON_DD = "lon_dd"
    """Longitude (decimal degrees)."""
    LAT_DD = "lat_dd"
    """Latitude (decimal degrees)."""

    # Labels
    ECO_NUTA = "eco_nuta"
    """Aggregated nutrient ecoregion, used for colour coding."""
    LAKE_ORIGIN = "lake_origin"
    """Lake origin (MAN_MADE/NATURAL)."""
    DEPTH_CLASS = "depth_class"
    """Shallow/deep bucket of ``depthmax``."""

    # Measurements
    DEPTHMAX = "depthmax"
    NTL = "ntl"
    """Total nitrogen (ug/L)."""
    LOG10_NTL = "log10_ntl"
    """log10 total nitrogen; the single model feature."""
    CYANDENS = "cyandens"

    def metadata(self) -> ColumnMetadata:
        return _COLUMN_METADATA_NLA[self]

    @classmethod
    def numeric_columns(cls) -> list[str]:
        return [col.value for col in cls if col not in {cls.SITE_ID, *cls.label_columns()}]

    @classmethod
    def label_columns(cls) -> list[str]:
        """Get categorical label column names.

        Returns:
            List of label column names (ecoregion, origin, depth class).
        """
        return [cls.ECO_NUTA, cls.LAKE_ORIGIN, cls.DEPTH_CLASS]

    @classmethod
    def observation_columns(cls) -> list[str]:
        """Columns every row must carry to become an ``Observation``."""
        return [cls.LON_DD, cls.LAT_DD, cls.ECO_NUTA, cls.LAKE_ORIGIN, cls.DEPTH_CLASS, cls.LOG10_NTL]


_COLUMN_METADATA_NLA: dict[NLAColumn, ColumnMetadata] = {
    # Identifiers
    NLAColumn.SITE_ID: ColumnMetadata(
        original_name="SITE_ID",
        cleaned_name="site_id",
        dtype="string",
        pretty_name="Site ID",
    ),
    NLAColumn.VISIT_NO: ColumnMetadata(
        original_name="VISIT_NO",
        cleaned_name="visit_no",
        dtype="Int64",
        pretty_name="Visit Number",
    ),
    # Location
    NLAColumn.LON_DD: ColumnMetadata(
        original_name="LON_DD",
        cleaned_name="lon_dd",
        dtype="float64",
        pretty_name="Longitude",
    ),
    NLAColumn.LAT_DD: ColumnMetadata(
        original_name="LAT_DD",
        cleaned_name="lat_dd",
        dtype="float64",
        pretty_name="Latitude",
    ),
    # Labels
    NLAColumn.ECO_NUTA: ColumnMetadata(
        original_name="ECO_NUTA",
        cleaned_name="eco_nuta",
        dtype="string",
        pretty_name="Nutrient Ecoregion",
    ),
    NLAColumn.LAKE_ORIGIN: ColumnMetadata(
        original_name="LAKE_ORIGIN",
        cleaned_name="lake_origin",
        dtype="string",
        pretty_name="Lake Origin",
    ),
    NLAColumn.DEPTH_CLASS: ColumnMetadata(
        original_name=None,
        cleaned_name="depth_class",
        dtype="string",
        pretty_name="Lake Depth",
    ),
    # Measurements
    NLAColumn.DEPTHMAX: ColumnMetadata(
        original_name="DEPTHMAX",
        cleaned_name="depthmax",
        dtype="float64",
        pretty_name="Maximum Depth (m)",
    ),
    NLAColumn.NTL: ColumnMetadata(
        original_name="NTL",
        cleaned_name="ntl",
        dtype="float64",
        pretty_name="Total Nitrogen (ug/L)",
    ),
    NLAColumn.LOG10_NTL: ColumnMetadata(
        original_name=None,
        cleaned_name="log10_ntl",
        dtype="float64",
        pretty_name="Total Nitrogen (log10 ug/L)",
        transform=lambda s: np.log10(s.where(s > 0)),
        source="ntl",
    ),
    NLAColumn.CYANDENS: ColumnMetadata(
        original_name="CYANDENS",
        cleaned_name="cyandens",
        dtype="float64",
        pretty_name="Cyanobacteria Density (cells/mL)",
    ),
    NLAColumn.TARGET: ColumnMetadata(
        original_name=None,
        cleaned_name="log10_cyano",
        dtype="float64",
        pretty_name="Cyanobacteria Density (log10 cells/mL)",
        transform=lambda s: np.log10(s.clip(lower=0) + 1),
        source="cyandens",
    ),
}
