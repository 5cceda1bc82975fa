"""Tests for data paths and plotting configuration."""

from pathlib import Path

import matplotlib as mpl
import pytest

from nlaviz.utils.app_config import DEFAULT_DASHBOARD_CFG
from nlaviz.utils.paths import get_data_dir, get_dataset_path
from nlaviz.utils.plotting_config import REGION_PALETTE, MapPlotConfig


class TestPaths:
    """Data directory resolution."""

    def test_env_override(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("NLAVIZ_DATA_DIR", str(tmp_path))
        assert get_data_dir() == tmp_path.resolve()

    def test_missing_directory_raises(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("NLAVIZ_DATA_DIR", str(tmp_path / "nope"))
        with pytest.raises(FileNotFoundError, match="Data directory"):
            get_data_dir()

    def test_known_keys_map_to_filenames(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("NLAVIZ_DATA_DIR", str(tmp_path))
        (tmp_path / "nla2007_sites.csv").write_text("SITE_ID\n")

        assert get_dataset_path("nla") == tmp_path.resolve() / "nla2007_sites.csv"
        assert get_dataset_path("bloom_model", must_exist=False).name == "bloom_model.pickle"

    def test_missing_file_raises(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("NLAVIZ_DATA_DIR", str(tmp_path))
        with pytest.raises(FileNotFoundError, match="us_states"):
            get_dataset_path("us_states")

    def test_custom_filename_passes_through(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("NLAVIZ_DATA_DIR", str(tmp_path))
        assert get_dataset_path("other.csv", must_exist=False).name == "other.csv"


class TestMapPlotConfig:
    """Scoped styling."""

    def test_apply_restores_rcparams(self) -> None:
        before = mpl.rcParams["figure.dpi"]
        with MapPlotConfig(figure_dpi=42, rc_overrides={"axes.linewidth": 3.0}).apply():
            assert mpl.rcParams["figure.dpi"] == 42
            assert mpl.rcParams["axes.linewidth"] == 3.0
        assert mpl.rcParams["figure.dpi"] == before

    def test_palette_has_eleven_colours(self) -> None:
        assert len(REGION_PALETTE) == 11
        assert REGION_PALETTE[-1] == "white"


class TestDashboardConfig:
    """Slider defaults."""

    def test_slider_range(self) -> None:
        cfg = DEFAULT_DASHBOARD_CFG
        assert (cfg.nitrogen_min, cfg.nitrogen_max, cfg.nitrogen_step, cfg.nitrogen_default) == (10, 5000, 100, 2500)
        assert cfg.nitrogen_min <= cfg.nitrogen_default <= cfg.nitrogen_max
