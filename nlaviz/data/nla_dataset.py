"""Loading and preprocessing for the National Lakes Assessment 2007 site data."""

import logging
from pathlib import Path

import pandas as pd

from nlaviz.utils.paths import get_dataset_path

from .base_dataset import BaseDataset
from .nla_columns import NLAColumn as Col
from .views import Observation, distinct_labels


logger = logging.getLogger(__name__)

DEFAULT_DEPTH_THRESHOLD = 4.0

_REQUIRED_RAW = (Col.LON_DD, Col.LAT_DD, Col.ECO_NUTA, Col.LAKE_ORIGIN, Col.DEPTHMAX, Col.NTL)


def depth_labels(threshold: float = DEFAULT_DEPTH_THRESHOLD) -> tuple[str, str]:
    """Return the (shallow, deep) labels for a depth threshold in metres, e.g. ``("<= 4m", "> 4m")``."""
    return f"<= {threshold:g}m", f"> {threshold:g}m"


class NLADataset(BaseDataset):
    """Loading, cleaning and label derivation for the [NLA 2007](https://www.epa.gov/national-aquatic-resource-surveys/nla) lakes.

    **Example workflow**:
    >>> from nlaviz.data import NLADataset, NLACol
    >>> ds = NLADataset.from_csv()
    >>> origins, depths = ds.lake_origins, ds.depth_classes
    >>> ds.training_frame()[[NLACol.LOG10_NTL, NLACol.TARGET]].corr()
    """

    Col = Col

    def __init__(self, df: pd.DataFrame | None = None, *, depth_threshold: float = DEFAULT_DEPTH_THRESHOLD) -> None:
        super().__init__(df)
        self.depth_threshold = depth_threshold

    @classmethod
    def from_csv(
        cls,
        csv_path: str | Path | None = None,
        *,
        depth_threshold: float = DEFAULT_DEPTH_THRESHOLD,
        first_visit_only: bool = True,
    ) -> "NLADataset":
        """Load and preprocess the NLA site table from a CSV file.

        Args:
            csv_path: Path to the CSV file (defaults to ``get_dataset_path("nla")``)
            depth_threshold: Maximum depth (m) still counted as shallow
            first_visit_only: Keep only the first visit of each site

        Returns:
            NLADataset instance with loaded and cleaned data
        """
        csv_path = get_dataset_path("nla") if csv_path is None else Path(csv_path)
        dataset = cls.from_frame(
            pd.read_csv(csv_path),
            depth_threshold=depth_threshold,
            first_visit_only=first_visit_only,
        )
        logger.info("Loaded %d lakes from %s", len(dataset.df), csv_path)
        return dataset

    @classmethod
    def from_frame(
        cls,
        raw: pd.DataFrame,
        *,
        depth_threshold: float = DEFAULT_DEPTH_THRESHOLD,
        first_visit_only: bool = True,
    ) -> "NLADataset":
        """Run the cleaning pipeline on an in-memory raw table.

        - Normalize column names
        - Convert data types
        - Keep the first visit per site
        - Derive log10 and depth class columns
        - Drop rows lacking any field of an ``Observation``

        Raises:
            KeyError: If a required raw column is missing.
        """
        df = raw.pipe(cls._normalize_col_names).pipe(cls._check_required).pipe(cls._convert_data_types)
        if first_visit_only:
            df = cls._first_visit(df)
        df = cls._derive_columns(df, depth_threshold=depth_threshold)

        n_before = len(df)
        df = df.dropna(subset=Col.observation_columns()).reset_index(drop=True)
        if len(df) < n_before:
            logger.debug("Dropped %d rows with incomplete location/label/nitrogen data", n_before - len(df))

        return cls(df=df, depth_threshold=depth_threshold)

    @staticmethod
    def _normalize_col_names(df: pd.DataFrame) -> pd.DataFrame:
        """Strip, lower-case and map raw CSV headers onto ``NLAColumn`` names; unknown columns are kept as is."""
        normalized = df.set_axis(df.columns.str.strip().str.lower(), axis=1)
        return normalized.rename(columns=Col.raw_columns())

    @staticmethod
    def _check_required(df: pd.DataFrame) -> pd.DataFrame:
        missing = [str(col) for col in _REQUIRED_RAW if col not in df.columns]
        if missing:
            raise KeyError(f"NLA table is missing required columns: {missing}")
        return df

    @classmethod
    def _convert_data_types(cls, df: pd.DataFrame) -> pd.DataFrame:
        """Cast columns to their metadata dtype: measurements via ``to_numeric``, labels stripped (missing stays missing)."""
        numeric_cols = [cls.Col(col) for col in cls.Col.numeric_columns() if col in df.columns]
        label_cols = [cls.Col(col) for col in (cls.Col.SITE_ID, *cls.Col.label_columns()) if col in df.columns]
        return df.assign(
            **{col.value: pd.to_numeric(df[col], errors="coerce").astype(col.dtype_name) for col in numeric_cols},
            **{col.value: df[col].astype(col.dtype_name).str.strip().replace("", pd.NA) for col in label_cols},
        )

    @staticmethod
    def _first_visit(df: pd.DataFrame) -> pd.DataFrame:
        if Col.SITE_ID not in df.columns or Col.VISIT_NO not in df.columns:
            return df
        return (
            df.sort_values(Col.VISIT_NO, kind="stable")
            .drop_duplicates(subset=[Col.SITE_ID], keep="first")
            .sort_index()
        )

    @staticmethod
    def _derive_columns(df: pd.DataFrame, *, depth_threshold: float) -> pd.DataFrame:
        """Apply metadata transforms (log10 columns) and bucket ``depthmax`` into depth classes."""
        derived = df.copy()
        for col in Col.derived_columns():
            source = col.metadata().source
            if source in derived.columns:
                derived[col] = col.transform(derived[source])

        shallow, deep = depth_labels(depth_threshold)
        depth = derived[Col.DEPTHMAX]
        derived[Col.DEPTH_CLASS] = (
            pd.Series(deep, index=derived.index, dtype="string")
            .mask(depth <= depth_threshold, shallow)
            .mask(depth.isna(), pd.NA)
        )
        return derived

    def _build_observations(self, df: pd.DataFrame) -> tuple[Observation, ...]:
        frame = df.loc[:, Col.observation_columns()]
        return tuple(
            Observation(
                longitude=float(lon),
                latitude=float(lat),
                region=str(region),
                origin=str(origin),
                depth_class=str(depth_class),
                nitrogen=float(nitrogen),
            )
            for lon, lat, region, origin, depth_class, nitrogen in frame.itertuples(index=False, name=None)
        )

    @property
    def lake_origins(self) -> tuple[str, ...]:
        """Distinct lake origin labels in first-seen order."""
        return distinct_labels(obs.origin for obs in self.observations)

    @property
    def depth_classes(self) -> tuple[str, ...]:
        """Distinct depth class labels in first-seen order."""
        return distinct_labels(obs.depth_class for obs in self.observations)

    @property
    def regions(self) -> tuple[str, ...]:
        """Distinct nutrient ecoregion labels in first-seen order."""
        return distinct_labels(obs.region for obs in self.observations)

    def training_frame(self) -> pd.DataFrame:
        """Rows usable for fitting the bloom model: target, nitrogen feature and ecoregion, no missing values.

        Raises:
            ValueError: If the dataset carries no cyanobacteria measurements.
        """
        cols = [Col.TARGET, Col.LOG10_NTL, Col.ECO_NUTA]
        if Col.TARGET not in self.df.columns:
            raise ValueError(
                f"Dataset has no '{Col.TARGET}' column; include '{Col.CYANDENS.original_name}' to fit a model.",
            )
        frame = self.df.loc[:, cols].dropna()
        return frame.assign(**{Col.ECO_NUTA: frame[Col.ECO_NUTA].astype(str)}).reset_index(drop=True)
