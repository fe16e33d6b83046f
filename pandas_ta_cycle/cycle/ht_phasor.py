# -*- coding: utf-8 -*-
from pandas import DataFrame, Series

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


def ht_phasor(
    close: Series, unstable: Int = None, talib: bool = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Hilbert Transform - Phasor Components

    The in-phase (I1) and quadrature (Q1) components of the detrended,
    smoothed price.  I1 is the detrender delayed three bars; Q1 is the
    Hilbert transform of the detrender.

    Sources:
        * John F. Ehlers, "Rocket Science for Traders", Wiley, 2001
        * [TA-Lib](https://ta-lib.org/functions/) HT_PHASOR

    Parameters:
        close (pd.Series): ```close``` Series
        unstable (int): Extra bars of warm-up beyond the 32 bar
            lookback. Default: ```0```
        talib (bool): If TA-Lib is installed and talib is True, returns
            the TA-Lib version. Default: ```False```
        offset (int): Post shift. Default: ```0```

    Returns:
        (pd.DataFrame): inphase, quadrature columns
    """
    # Validate
    close = v_series(close)
    lookback = warmup("ht_phasor", unstable)
    mode_tal = v_talib(talib)
    offset = v_offset(offset)

    # Calculation
    if mode_tal:
        from talib import HT_PHASOR
        inphase, quadrature = HT_PHASOR(close.to_numpy())
    else:
        start = FEEDBACK_START[LOOKBACK["ht_phasor"]]
        ht = nb_ht(close.to_numpy(), start)
        inphase, quadrature = ht[1], ht[2]
    inphase = zero_warmup(inphase, lookback, "HT_PHASOR")
    quadrature = zero_warmup(quadrature, lookback)

    df = DataFrame({
        "HT_INPHASE": inphase,
        "HT_QUADRATURE": quadrature,
    }, index=close.index)

    # Offset
    df = apply_offset(df, offset)

    # Name and Category
    df.name = "HT_PHASOR"
    df.category = "cycle"

    return df
