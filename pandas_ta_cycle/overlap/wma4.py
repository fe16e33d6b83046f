# -*- coding: utf-8 -*-
from pandas import Series

from pandas_ta_cycle._typing import DictLike, Int
from pandas_ta_cycle.cycle._hilbert import nb_wma4
from pandas_ta_cycle.utils import (
    apply_offset,
    v_offset,
    v_series,
    v_talib,
    warmup,
    zero_warmup,
)


def wma4(
    close: Series, talib: bool = None, offset: Int = None,
    **kwargs: DictLike
) -> Series:
    """Weighted Moving Average, 4 bars

    ``(4 * x[t] + 3 * x[t-1] + 2 * x[t-2] + x[t-3]) / 10``, computed with
    the running sums the Hilbert indicators use to smooth price.

    Parameters:
        close (pd.Series): ```close``` Series
        talib (bool): If TA-Lib is installed and talib is True, returns
            TA-Lib's WMA(4). Default: ```False```
        offset (int): Post shift. Default: ```0```

    Returns:
        (pd.Series): 1 column, the first 3 entries are 0.0
    """
    # Validate
    close = v_series(close)
    lookback = warmup("wma4")
    mode_tal = v_talib(talib)
    offset = v_offset(offset)

    # Calculation
    if mode_tal:
        from talib import WMA
        values = WMA(close.to_numpy(), 4)
    else:
        values = nb_wma4(close.to_numpy())
    values = zero_warmup(values, lookback, "WMA_4")

    result = Series(values, index=close.index)

    # Offset
    result = apply_offset(result, offset)

    # Name and Category
    result.name = "WMA_4"
    result.category = "overlap"

    return result
