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


def ht_dcperiod(
    close: Series, unstable: Int = None, talib: bool = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Hilbert Transform - Dominant Cycle Period

    Estimates the length, in bars, of the dominant market cycle with John
    Ehlers' homodyne discriminator.  The raw period is limited to move at
    most +50%/-33% per bar, clamped to [6, 50] and then smoothed twice.

    Sources:
        * John F. Ehlers, "Rocket Science for Traders", Wiley, 2001
        * [TA-Lib](https://ta-lib.org/functions/) HT_DCPERIOD

    Parameters:
        close (pd.Series): ```close``` Series
        unstable (int): Extra bars of warm-up beyond the 32 bar
            lookback. Default: ```0```
        talib (bool): If TA-Lib is installed and talib is True, returns
            the TA-Lib version. Default: ```False```
        offset (int): Post shift. Default: ```0```

    Returns:
        (pd.Series): 1 column, the first 32 + unstable entries are 0.0
    """
    # Validate
    close = v_series(close)
    lookback = warmup("ht_dcperiod", unstable)
    mode_tal = v_talib(talib)
    offset = v_offset(offset)

    # Calculation
    if mode_tal:
        from talib import HT_DCPERIOD
        values = HT_DCPERIOD(close.to_numpy())
    else:
        start = FEEDBACK_START[LOOKBACK["ht_dcperiod"]]
        values = nb_ht(close.to_numpy(), start)[4]
    values = zero_warmup(values, lookback, "HT_DCPERIOD")

    result = Series(values, index=close.index)

    # Offset
    result = apply_offset(result, offset)

    # Name and Category
    result.name = "HT_DCPERIOD"
    result.category = "cycle"

    return result
