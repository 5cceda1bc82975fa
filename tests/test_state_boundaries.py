"""Tests for the state polygon base layer."""

from pathlib import Path

import geopandas as gpd
import pytest
from shapely.geometry import box

from nlaviz.data.state_boundaries import contiguous_states, load_state_boundaries


@pytest.fixture
def states() -> gpd.GeoDataFrame:
    return gpd.GeoDataFrame(
        {"STUSPS": ["CO", "AK", "KS", "HI", "PR"]},
        geometry=[
            box(-109.05, 37.0, -102.05, 41.0),
            box(-170.0, 52.0, -130.0, 71.0),
            box(-102.05, 37.0, -94.6, 40.0),
            box(-160.5, 18.9, -154.8, 22.2),
            box(-67.3, 17.9, -65.2, 18.5),
        ],
        crs="EPSG:4326",
    )


class TestContiguousStates:
    """Lower-48 filtering and reprojection."""

    def test_drops_non_contiguous(self, states: gpd.GeoDataFrame) -> None:
        result = contiguous_states(states)
        assert result["STUSPS"].tolist() == ["CO", "KS"]
        assert list(result.index) == [0, 1]

    def test_reprojects_to_lon_lat(self, states: gpd.GeoDataFrame) -> None:
        result = contiguous_states(states.to_crs(epsg=3857))
        assert result.crs.to_epsg() == 4326
        minx, miny, maxx, maxy = result.total_bounds
        assert minx == pytest.approx(-109.05, abs=1e-6)
        assert maxy == pytest.approx(41.0, abs=1e-6)

    def test_frame_without_code_column_is_kept(self, states: gpd.GeoDataFrame) -> None:
        result = contiguous_states(states.rename(columns={"STUSPS": "name"}))
        assert len(result) == 5


class TestLoadStateBoundaries:
    """Reading polygons from disk."""

    def test_explicit_path(self, states: gpd.GeoDataFrame, tmp_path: Path) -> None:
        path = tmp_path / "states.geojson"
        states.to_file(path, driver="GeoJSON")

        result = load_state_boundaries(path)
        assert sorted(result["STUSPS"]) == ["CO", "KS"]

    def test_default_file_in_data_dir(self, states: gpd.GeoDataFrame, tmp_path: Path, monkeypatch) -> None:
        states.to_file(tmp_path / "us_states.geojson", driver="GeoJSON")
        monkeypatch.setenv("NLAVIZ_DATA_DIR", str(tmp_path))

        result = load_state_boundaries()
        assert len(result) == 2
