# -*- coding: utf-8 -*-
from numpy import maximum, minimum
from numpy.random import default_rng
from pandas import DataFrame, date_range

__all__ = [
    "sample_ohlcv",
]


def sample_ohlcv(rows: int = 600, seed: int = 11, freq: str = "1min") -> DataFrame:
    """Seeded random walk bars for demos and comparisons.

    ``open`` and ``close`` scatter around a shared Gaussian walk starting
    at 100; ``high``/``low`` extend up to half a point past them.
    """
    rng = default_rng(seed)
    walk = 100 + rng.standard_normal(rows).cumsum()
    close = walk + rng.normal(0, 0.2, rows)
    open_ = walk + rng.normal(0, 0.2, rows)
    wick_up, wick_down = rng.random(rows), rng.random(rows)

    return DataFrame(
        {
            "open": open_,
            "high": maximum(open_, close) + 0.5 * wick_up,
            "low": minimum(open_, close) - 0.5 * wick_down,
            "close": close,
            "volume": rng.integers(100, 1000, rows),
        },
        index=date_range("2025-01-01", periods=rows, freq=freq),
    )
