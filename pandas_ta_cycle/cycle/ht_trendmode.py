# -*- coding: utf-8 -*-
from numpy import int64
from pandas import Series

from pandas_ta_cycle._typing import DictLike, Int
from pandas_ta_cycle.cycle._hilbert import nb_ht
from pandas_ta_cycle.maps import FEEDBACK_START, LOOKBACK
from pandas_ta_cycle.utils import (
    apply_offset,
    v_offset,
    v_series,
    v_talib,
    warmup,
    zero_warmup,
)


def ht_trendmode(
    close: Series, unstable: Int = None, talib: bool = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Hilbert Transform - Trend vs Cycle Mode

    Classifies every bar as trending (1) or cycling (0).

    A crossing of the sine and lead sine restarts a day counter, and the
    market is only called trending after the counter reaches half the
    dominant cycle period.  A phase advancing at the cycle rate forces
    cycle mode; a smoothed price at least 1.5% away from the
    instantaneous trendline forces trend mode.

    Sources:
        * John F. Ehlers, "Rocket Science for Traders", Wiley, 2001
        * [TA-Lib](https://ta-lib.org/functions/) HT_TRENDMODE

    Parameters:
        close (pd.Series): ```close``` Series
        unstable (int): Extra bars of warm-up beyond the 63 bar
            lookback. Default: ```0```
        talib (bool): If TA-Lib is installed and talib is True, returns
            the TA-Lib version. Default: ```False```
        offset (int): Post shift. Default: ```0```

    Returns:
        (pd.Series): 1 int column, the first 63 + unstable entries are 0
    """
    # Validate
    close = v_series(close)
    lookback = warmup("ht_trendmode", unstable)
    mode_tal = v_talib(talib)
    offset = v_offset(offset)

    # Calculation
    if mode_tal:
        from talib import HT_TRENDMODE
        values = HT_TRENDMODE(close.to_numpy()).astype(float)
    else:
        start = FEEDBACK_START[LOOKBACK["ht_trendmode"]]
        values = nb_ht(close.to_numpy(), start)[7]
    values = zero_warmup(values, lookback, "HT_TRENDMODE")

    result = Series(values.astype(int64), index=close.index)

    # Offset
    result = apply_offset(result, offset)

    # Name and Category
    result.name = "HT_TRENDMODE"
    result.category = "cycle"

    return result
