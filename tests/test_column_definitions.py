"""Tests for column definition modules."""

import numpy as np
import pandas as pd
import pytest

from nlaviz.data.base_columns import BaseColumn, ColumnMetadata
from nlaviz.data.nla_columns import NLAColumn


class TestColumnMetadata:
    """Test ColumnMetadata dataclass."""

    def test_column_metadata_creation(self) -> None:
        metadata = ColumnMetadata(
            original_name="NTL",
            cleaned_name="ntl",
            dtype="float64",
            pretty_name="Total Nitrogen (ug/L)",
        )
        assert metadata.original_name == "NTL"
        assert metadata.cleaned_name == "ntl"
        assert metadata.transform is None
        assert metadata.source is None

    def test_column_metadata_is_frozen(self) -> None:
        metadata = ColumnMetadata(original_name="X", cleaned_name="x", dtype="str", pretty_name="X")
        with pytest.raises(AttributeError):
            metadata.original_name = "Changed"  # type: ignore[misc]


class TestNLAColumn:
    """Test NLAColumn enum."""

    def test_target_column(self) -> None:
        assert NLAColumn.TARGET.value == "log10_cyano"
        assert NLAColumn.LOG10_CYANO is NLAColumn.TARGET

    def test_enum_values_are_snake_case(self) -> None:
        for col in NLAColumn:
            assert col.value.islower()
            assert " " not in col.value

    def test_every_member_has_matching_metadata(self) -> None:
        for col in NLAColumn:
            assert col.metadata().cleaned_name == col.value

    def test_pretty_name_property(self) -> None:
        assert NLAColumn.ECO_NUTA.pretty_name == "Nutrient Ecoregion"
        assert NLAColumn.NTL.pretty_name == "Total Nitrogen (ug/L)"

    def test_raw_columns_skip_derived(self) -> None:
        raw = NLAColumn.raw_columns()
        assert raw["lon_dd"] == "lon_dd"
        assert raw["cyandens"] == "cyandens"
        assert "log10_ntl" not in raw.values()
        assert "depth_class" not in raw.values()

    def test_derived_columns(self) -> None:
        assert set(NLAColumn.derived_columns()) == {NLAColumn.LOG10_NTL, NLAColumn.TARGET}

    def test_log10_transforms(self) -> None:
        ntl = NLAColumn.LOG10_NTL.transform(pd.Series([10.0, 1000.0, 0.0]))
        assert ntl.iloc[:2].tolist() == pytest.approx([1.0, 3.0])
        assert np.isnan(ntl.iloc[2])

        cyano = NLAColumn.TARGET.transform(pd.Series([0.0, 99.0]))
        assert cyano.tolist() == pytest.approx([0.0, 2.0])

    def test_label_and_numeric_columns_are_disjoint(self) -> None:
        labels = set(NLAColumn.label_columns())
        numeric = set(NLAColumn.numeric_columns())
        assert labels == {"eco_nuta", "lake_origin", "depth_class"}
        assert not labels & numeric
        assert "site_id" not in numeric


class TestBaseColumn:
    """Abstract hooks raise until implemented."""

    def test_unimplemented_hooks_raise(self) -> None:
        class Bare(BaseColumn):
            TARGET = "y"

        with pytest.raises(NotImplementedError):
            Bare.TARGET.metadata()
        with pytest.raises(NotImplementedError):
            Bare.numeric_columns()
        with pytest.raises(NotImplementedError):
            Bare.label_columns()
