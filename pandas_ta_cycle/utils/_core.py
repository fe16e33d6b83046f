# -*- coding: utf-8 -*-
from warnings import warn

from pandas_ta_cycle._typing import Array, DataFrame, Series, Union

__all__ = [
    "apply_offset",
    "zero_warmup",
]


def zero_warmup(values: Array, lookback: int, kind: str = "") -> Array:
    """Fills the first ``lookback`` entries with the 0.0 placeholder, in
    place. This also replaces TA-Lib's NaN prefix. Warns when ``kind``
    is given and nothing is left after the warm-up."""
    values[:lookback] = 0.0
    if kind and values.size <= lookback:
        warn(
            f"{kind}: {values.size} bars do not exceed the "
            f"{lookback} bar warm-up, output is all zeros",
            UserWarning,
            stacklevel=3,
        )
    return values


def apply_offset(
    obj: Union[Series, DataFrame], offset: int
) -> Union[Series, DataFrame]:
    """Post shift; vacated slots take the 0.0 placeholder."""
    if offset == 0:
        return obj
    return obj.shift(offset, fill_value=0)
