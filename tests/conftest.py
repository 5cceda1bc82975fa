"""Test configuration for the NLA bloom explorer."""

from pathlib import Path
import sys

import matplotlib
import numpy as np
import pandas as pd
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class RecordingModel:
    """Stand-in bloom model returning |longitude| / 10 and remembering every input frame."""

    feature_name = "log10_ntl"

    def __init__(self) -> None:
        self.frames: list[pd.DataFrame] = []

    def predict(self, frame: pd.DataFrame) -> np.ndarray:
        self.frames.append(frame.copy())
        return np.abs(frame["lon_dd"].to_numpy(dtype=float)) / 10


@pytest.fixture
def raw_three_lakes() -> pd.DataFrame:
    """Two shallow natural lakes and one deep man-made lake, with raw NLA headers."""
    return pd.DataFrame(
        {
            "SITE_ID": ["NLA06608-0001", "NLA06608-0002", "NLA06608-0003"],
            "VISIT_NO": [1, 1, 1],
            "LON_DD": [-100.0, -90.0, -80.0],
            "LAT_DD": [40.0, 35.0, 45.0],
            "ECO_NUTA": ["I", "II", "I"],
            "LAKE_ORIGIN": ["NATURAL", "NATURAL", "MAN_MADE"],
            "DEPTHMAX": [2.0, 3.5, 10.0],
            "NTL": [500.0, 800.0, 1500.0],
            "CYANDENS": [1000.0, 99.0, 50000.0],
        },
    )


@pytest.fixture
def three_lakes(raw_three_lakes: pd.DataFrame):
    """Dataset built from ``raw_three_lakes``."""
    from nlaviz.data import NLADataset

    return NLADataset.from_frame(raw_three_lakes)


@pytest.fixture
def recording_model() -> RecordingModel:
    return RecordingModel()


@pytest.fixture(scope="session")
def training_frame() -> pd.DataFrame:
    """Synthetic training rows: y = 1 + 2x + region intercept + noise, four regions."""
    from nlaviz.data import NLACol

    rng = np.random.default_rng(7)
    intercepts = {"I": -1.0, "II": -0.3, "III": 0.4, "IV": 0.9}
    frames = []
    for region, offset in intercepts.items():
        x = rng.uniform(2.0, 4.0, size=40)
        y = 1.0 + 2.0 * x + offset + rng.normal(0.0, 0.2, size=40)
        frames.append(pd.DataFrame({NLACol.TARGET: y, NLACol.LOG10_NTL: x, NLACol.ECO_NUTA: region}))
    return pd.concat(frames, ignore_index=True)
