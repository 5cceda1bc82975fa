"""US state polygons for the map's base layer."""

import logging
from pathlib import Path

import geopandas as gpd

from nlaviz.utils.paths import get_dataset_path


logger = logging.getLogger(__name__)

CENSUS_STATES_URL = "https://www2.census.gov/geo/tiger/GENZ2018/shp/cb_2018_us_state_20m.zip"

# Not part of the lower 48 + DC outline drawn by the map.
NON_CONTIGUOUS = frozenset({"AK", "HI", "PR", "VI", "GU", "MP", "AS"})

_STATE_CODE_COLUMNS = ("STUSPS", "postal", "STATE_ABBR")


def load_state_boundaries(source: str | Path | None = None) -> gpd.GeoDataFrame:
    """Read contiguous US state polygons in EPSG:4326.

    Args:
        source: File path or URL readable by ``geopandas.read_file``. Defaults to
            ``us_states.geojson`` in the data directory when present, otherwise the
            Census Bureau's 1:20m cartographic boundary file.

    Returns:
        GeoDataFrame with one row per contiguous state.
    """
    if source is None:
        try:
            source = get_dataset_path("us_states")
        except FileNotFoundError:
            source = CENSUS_STATES_URL

    logger.info("Reading state boundaries from %s", source)
    return contiguous_states(gpd.read_file(source))


def contiguous_states(states: gpd.GeoDataFrame) -> gpd.GeoDataFrame:
    """Drop Alaska, Hawaii and territories and reproject to lon/lat degrees.

    Frames without a recognised state code column are only reprojected.
    """
    code_col = next((col for col in _STATE_CODE_COLUMNS if col in states.columns), None)
    if code_col is not None:
        states = states.loc[~states[code_col].isin(NON_CONTIGUOUS)]
    if states.crs is not None and states.crs.to_epsg() != 4326:
        states = states.to_crs(epsg=4326)
    return states.reset_index(drop=True)
