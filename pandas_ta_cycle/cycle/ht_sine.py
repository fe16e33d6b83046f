# -*- coding: utf-8 -*-
from numpy import sin
from pandas import DataFrame, Series

from pandas_ta_cycle._typing import DictLike, Int
from pandas_ta_cycle.cycle._hilbert import DEG2RAD, nb_ht
from pandas_ta_cycle.maps import FEEDBACK_START, LOOKBACK
from pandas_ta_cycle.utils import (
    apply_offset,
    v_offset,
    v_series,
    v_talib,
    warmup,
    zero_warmup,
)


def ht_sine(
    close: Series, unstable: Int = None, talib: bool = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Hilbert Transform - SineWave

    Sine of the dominant cycle phase and a lead sine advanced by 45
    degrees.  Crossings of the two lines anticipate cycle turning points;
    in a trend they run roughly parallel.

    Sources:
        * John F. Ehlers, "Rocket Science for Traders", Wiley, 2001
        * [TA-Lib](https://ta-lib.org/functions/) HT_SINE

    Parameters:
        close (pd.Series): ```close``` Series
        unstable (int): Extra bars of warm-up beyond the 63 bar
            lookback. Default: ```0```
        talib (bool): If TA-Lib is installed and talib is True, returns
            the TA-Lib version. Default: ```False```
        offset (int): Post shift. Default: ```0```

    Returns:
        (pd.DataFrame): sine, leadsine columns
    """
    # Validate
    close = v_series(close)
    lookback = warmup("ht_sine", unstable)
    mode_tal = v_talib(talib)
    offset = v_offset(offset)

    # Calculation
    if mode_tal:
        from talib import HT_SINE
        sine, leadsine = HT_SINE(close.to_numpy())
    else:
        start = FEEDBACK_START[LOOKBACK["ht_sine"]]
        dc_phase = nb_ht(close.to_numpy(), start)[5]
        sine = sin(dc_phase * DEG2RAD)
        leadsine = sin((dc_phase + 45.0) * DEG2RAD)
    sine = zero_warmup(sine, lookback, "HT_SINE")
    leadsine = zero_warmup(leadsine, lookback)

    df = DataFrame({
        "HT_SINE": sine,
        "HT_LEADSINE": leadsine,
    }, index=close.index)

    # Offset
    df = apply_offset(df, offset)

    # Name and Category
    df.name = "HT_SINE"
    df.category = "cycle"

    return df
