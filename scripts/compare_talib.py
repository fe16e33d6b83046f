#!/usr/bin/env python3
"""Compare native, streaming and TA-Lib outputs of the Hilbert indicators.

Computes every indicator three ways on synthetic OHLCV: the numba batch
kernels, a bar by bar replay seeded on the first ``--split`` rows, and
TA-Lib (talib=True).  Prints per column error summaries.
"""
from __future__ import annotations

import argparse
from typing import Dict, List

import numpy as np
import pandas as pd
import pandas_ta_cycle as ta
from pandas_ta_cycle import STATEFUL_REGISTRY, replay_seed
from pandas_ta_cycle.maps import Imports
from pandas_ta_cycle.utils import sample_ohlcv


DEFAULT_SPECS: List[Dict] = [
    {"kind": "ht_dcperiod"},
    {"kind": "ht_dcphase"},
    {"kind": "ht_phasor"},
    {"kind": "ht_sine"},
    {"kind": "ht_trendmode"},
    {"kind": "ht_trendline"},
    {"kind": "mama", "fastlimit": 0.5, "slowlimit": 0.05},
]


def compare_frames(ref: pd.DataFrame, test: pd.DataFrame, tol: float) -> pd.DataFrame:
    """Per column: largest and RMS absolute error, the bar where the
    largest error sits, and how many bars differ by more than ``tol``."""
    diff = (test - ref).abs()
    return pd.DataFrame(
        {
            "max_abs": diff.max(),
            "rms": np.sqrt((diff ** 2).mean()),
            "worst_bar": diff.idxmax(),
            "over_tol": (diff > tol).sum(),
        }
    )


def batch_frame(close: pd.Series, spec: Dict, talib: bool) -> pd.DataFrame:
    params = {k: v for k, v in spec.items() if k != "kind"}
    result = getattr(ta, spec["kind"])(close, talib=talib, **params)
    return pd.DataFrame(result).astype(float)


def stream_frame(close: pd.Series, spec: Dict, split: int) -> pd.DataFrame:
    """Seeds on ``close[:split]`` then updates bar by bar."""
    kind = spec["kind"]
    params = {k: v for k, v in spec.items() if k != "kind"}
    indicator = STATEFUL_REGISTRY[kind]
    state = replay_seed(kind, {"close": close.iloc[:split]}, params)

    rows = []
    for x in close.iloc[split:]:
        values, state = indicator.update(state, {"close": float(x)}, params)
        rows.append(values)
    return pd.DataFrame(
        rows, columns=indicator.output_names(params), index=close.index[split:]
    ).astype(float)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=2000)
    ap.add_argument("--split", type=int, default=1500)
    ap.add_argument("--seed", type=int, default=11)
    ap.add_argument("--tol", type=float, default=1e-9)
    args = ap.parse_args()

    if args.split >= args.rows:
        raise SystemExit("--split must be < --rows")

    close = sample_ohlcv(args.rows, args.seed)["close"]
    native = pd.concat([batch_frame(close, s, False) for s in DEFAULT_SPECS], axis=1)
    stream = pd.concat(
        [stream_frame(close, s, args.split) for s in DEFAULT_SPECS], axis=1
    )

    print("[i] rows:", args.rows)
    print("[i] split index:", args.split)
    print("[i] indicator columns:", len(native.columns))

    print("\nnative vs stream (rows after split):")
    print(compare_frames(native.iloc[args.split:], stream, args.tol))

    if not Imports.get("talib", False):
        print("\n[!] TA-Lib not available, skipping the TA-Lib comparison.")
        return

    reference = pd.concat([batch_frame(close, s, True) for s in DEFAULT_SPECS], axis=1)
    summary = compare_frames(reference, native, args.tol)
    print("\nTA-Lib vs native, by max_abs:")
    print(summary.sort_values("max_abs", ascending=False))


if __name__ == "__main__":
    main()
