"""Fit the bloom model on the NLA table and pickle it for the dashboard.

Usage:
    python scripts/train_bloom_model.py --csv _data/nla2007_sites.csv --kind mixed
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from nlaviz.analysis.bloom_model import fit_bloom_model
from nlaviz.data import NLACol, NLADataset
from nlaviz.utils.paths import get_dataset_path


logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--csv", type=Path, default=None, help="NLA site table (defaults to the data directory copy)")
    parser.add_argument("--kind", choices=("mixed", "ols"), default="mixed", help="Model family")
    parser.add_argument("--depth-threshold", type=float, default=4.0, help="Max depth (m) counted as shallow")
    parser.add_argument("--output", type=Path, default=None, help="Pickle path (defaults to bloom_model.pickle)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    dataset = NLADataset.from_csv(args.csv, depth_threshold=args.depth_threshold)
    frame = dataset.training_frame()
    logger.info("Training on %d of %d lakes with cyanobacteria counts", len(frame), len(dataset.df))
    logger.info("Response: %s, feature: %s", NLACol.TARGET.pretty_name, NLACol.LOG10_NTL.pretty_name)

    model = fit_bloom_model(frame, kind=args.kind)
    output = args.output or get_dataset_path("bloom_model", must_exist=False)
    model.save(output)
    print(model.results.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
