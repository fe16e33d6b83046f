# -*- coding: utf-8 -*-
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


def ht_trendline(
    close: Series, unstable: Int = None, talib: bool = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Hilbert Transform - Instantaneous Trendline

    The mean of price over one dominant cycle removes the cycle component;
    a 4 bar WMA of those means gives the trendline.

    Sources:
        * John F. Ehlers, "Rocket Science for Traders", Wiley, 2001
        * [TA-Lib](https://ta-lib.org/functions/) HT_TRENDLINE

    Parameters:
        close (pd.Series): ```close``` Series
        unstable (int): Extra bars of warm-up beyond the 63 bar
            lookback. Default: ```0```
        talib (bool): If TA-Lib is installed and talib is True, returns
            the TA-Lib version. Default: ```False```
        offset (int): Post shift. Default: ```0```

    Returns:
        (pd.Series): 1 column, the first 63 + unstable entries are 0.0
    """
    # Validate
    close = v_series(close)
    lookback = warmup("ht_trendline", unstable)
    mode_tal = v_talib(talib)
    offset = v_offset(offset)

    # Calculation
    if mode_tal:
        from talib import HT_TRENDLINE
        values = HT_TRENDLINE(close.to_numpy())
    else:
        start = FEEDBACK_START[LOOKBACK["ht_trendline"]]
        values = nb_ht(close.to_numpy(), start)[6]
    values = zero_warmup(values, lookback, "HT_TL")

    result = Series(values, index=close.index)

    # Offset
    result = apply_offset(result, offset)

    # Name and Category
    result.name = "HT_TL"
    result.category = "overlap"

    return result
