# -*- coding: utf-8 -*-
from numbers import Integral, Real

from numpy import asarray, float64, ndarray
from pandas import Series

from pandas_ta_cycle._typing import Any, ArrayLike, Float, Int, Tuple
from pandas_ta_cycle.maps import Imports, LOOKBACK

__all__ = [
    "ConfigurationError",
    "v_bool",
    "v_limits",
    "v_offset",
    "v_series",
    "v_talib",
    "v_unstable",
    "warmup",
]


class ConfigurationError(ValueError):
    """Raised for invalid indicator parameters, before any computation."""


def v_bool(var: Any, default: bool = True) -> bool:
    """Returns default if var is not a bool."""
    if isinstance(var, bool):
        return var
    return default


def v_offset(var: Int) -> int:
    """Defaults to 0"""
    if isinstance(var, Integral) and not isinstance(var, bool):
        return int(var)
    return 0


def v_talib(var: Any) -> bool:
    """Use TA-Lib only when asked to and when it is importable."""
    return v_bool(var, False) and Imports["talib"]


def v_unstable(var: Int) -> int:
    """Extra warm-up bars on top of an indicator's lookback. Defaults to 0."""
    if var is None:
        return 0
    if isinstance(var, bool) or not isinstance(var, Integral) or var < 0:
        raise ConfigurationError(
            f"unstable must be a non-negative int, got {var!r}"
        )
    return int(var)


def v_limits(fastlimit: Float, slowlimit: Float) -> Tuple[float, float]:
    """MAMA limits: 0 < slowlimit <= fastlimit <= 1. Defaults 0.5, 0.05."""
    fastlimit = 0.5 if fastlimit is None else fastlimit
    slowlimit = 0.05 if slowlimit is None else slowlimit
    for name, value in (("fastlimit", fastlimit), ("slowlimit", slowlimit)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ConfigurationError(f"{name} must be a number, got {value!r}")
        if not 0.0 < value <= 1.0:
            raise ConfigurationError(f"{name} must lie in (0, 1], got {value}")
    if slowlimit > fastlimit:
        raise ConfigurationError(
            f"slowlimit ({slowlimit}) must not exceed fastlimit ({fastlimit})"
        )
    return float(fastlimit), float(slowlimit)


def v_series(series: ArrayLike, name: str = "close") -> Series:
    """Returns a float64 Series. Array-likes get a RangeIndex."""
    if isinstance(series, Series):
        if series.dtype != float64:
            series = series.astype(float64)
        return series
    if isinstance(series, (ndarray, list, tuple)):
        values = asarray(series, dtype=float64)
        if values.ndim != 1:
            raise ValueError(
                f"{name} must be one dimensional, got shape {values.shape}"
            )
        return Series(values, name=name)
    raise TypeError(
        f"{name} must be a Series or array-like, got {type(series).__name__}"
    )


def warmup(kind: str, unstable: Int = None) -> int:
    """Length of the zero filled prefix of ``kind``. Depends only on
    parameters, never on data."""
    return LOOKBACK[kind] + v_unstable(unstable)
