"""Tests for the model training script."""

import importlib.util
from pathlib import Path

import pandas as pd
import pytest

from nlaviz.analysis.bloom_model import FittedBloomModel
from nlaviz.data import NLACol


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "train_bloom_model.py"


@pytest.fixture(scope="module")
def train_script():
    spec = importlib.util.spec_from_file_location("train_bloom_model", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def nla_csv(training_frame: pd.DataFrame, tmp_path: Path) -> Path:
    raw = pd.DataFrame(
        {
            "SITE_ID": [f"NLA-{i:04d}" for i in range(len(training_frame))],
            "VISIT_NO": 1,
            "LON_DD": -100.0,
            "LAT_DD": 40.0,
            "ECO_NUTA": training_frame[NLACol.ECO_NUTA],
            "LAKE_ORIGIN": "NATURAL",
            "DEPTHMAX": 3.0,
            "NTL": 10 ** training_frame[NLACol.LOG10_NTL],
            "CYANDENS": 10 ** training_frame[NLACol.TARGET] - 1,
        },
    )
    path = tmp_path / "nla.csv"
    raw.to_csv(path, index=False)
    return path


def test_writes_loadable_model(train_script, nla_csv: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "model.pickle"
    assert train_script.main(["--csv", str(nla_csv), "--kind", "ols", "--output", str(output)]) == 0

    model = FittedBloomModel.load(output)
    assert model.kind == "ols"
    assert model.metrics.n_obs == 160


def test_rejects_unknown_kind(train_script, nla_csv: Path) -> None:
    with pytest.raises(SystemExit):
        train_script.parse_args(["--csv", str(nla_csv), "--kind", "gam"])
