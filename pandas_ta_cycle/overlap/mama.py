# -*- coding: utf-8 -*-
from pandas import DataFrame, Series

from pandas_ta_cycle._typing import DictLike, Float, Int
from pandas_ta_cycle.cycle._hilbert import nb_mama
from pandas_ta_cycle.maps import FEEDBACK_START, LOOKBACK
from pandas_ta_cycle.utils import (
    apply_offset,
    v_limits,
    v_offset,
    v_series,
    v_talib,
    warmup,
    zero_warmup,
)


def mama(
    close: Series, fastlimit: Float = None, slowlimit: Float = None,
    unstable: Int = None, talib: bool = None, offset: Int = None,
    **kwargs: DictLike
) -> DataFrame:
    """MESA Adaptive Moving Average

    An exponential average whose alpha follows the rate of change of the
    Hilbert phase ``atan(Q1 / I1)``: ``alpha = fastlimit / delta_phase``,
    bounded to [slowlimit, fastlimit].  FAMA (Following Adaptive Moving
    Average) applies half that alpha to MAMA itself.

    Sources:
        * [MESA](https://www.mesasoftware.com/papers/MAMA.pdf)
        * [TA-Lib](https://ta-lib.org/functions/) MAMA

    Parameters:
        close (pd.Series): ```close``` Series
        fastlimit (float): Upper alpha limit, in (0, 1]. Default: ```0.5```
        slowlimit (float): Lower alpha limit, in (0, fastlimit].
            Default: ```0.05```
        unstable (int): Extra bars of warm-up beyond the 32 bar
            lookback. Default: ```0```
        talib (bool): If TA-Lib is installed and talib is True, returns
            the TA-Lib version. Limits TA-Lib rejects (outside
            [0.01, 0.99]) use the native kernel. Default: ```False```
        offset (int): Post shift. Default: ```0```

    Returns:
        (pd.DataFrame): mama, fama columns

    Raises:
        ConfigurationError: invalid limits, before any computation.
    """
    # Validate
    fastlimit, slowlimit = v_limits(fastlimit, slowlimit)
    close = v_series(close)
    lookback = warmup("mama", unstable)
    mode_tal = v_talib(talib)
    offset = v_offset(offset)

    # Calculation
    # TA-Lib rejects MAMA limits outside [0.01, 0.99]
    if mode_tal and slowlimit >= 0.01 and fastlimit <= 0.99:
        from talib import MAMA
        mama_, fama = MAMA(close.to_numpy(), fastlimit, slowlimit)
    else:
        start = FEEDBACK_START[LOOKBACK["mama"]]
        mama_, fama, _ = nb_mama(close.to_numpy(), start, fastlimit, slowlimit)
    mama_ = zero_warmup(mama_, lookback, "MAMA")
    fama = zero_warmup(fama, lookback)

    _props = f"_{fastlimit}_{slowlimit}"
    df = DataFrame({
        f"MAMA{_props}": mama_,
        f"FAMA{_props}": fama,
    }, index=close.index)

    # Offset
    df = apply_offset(df, offset)

    # Name and Category
    df.name = f"MAMA{_props}"
    df.category = "overlap"

    return df
