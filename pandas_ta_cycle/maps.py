# -*- coding: utf-8 -*-
from importlib.util import find_spec

from pandas_ta_cycle._typing import DictLike

# Optional libraries. "talib" enables the talib=True delegation path.
Imports: DictLike = {
    "talib": find_spec("talib") is not None,
}

Category: DictLike = {
    "cycle": ["ht_dcperiod", "ht_dcphase", "ht_phasor", "ht_sine", "ht_trendmode"],
    "overlap": ["ht_trendline", "mama", "wma4"],
}

# Bars suppressed (zero filled) before the first output, TA-Lib compatible.
LOOKBACK: DictLike = {
    "ht_dcperiod": 32,
    "ht_phasor": 32,
    "mama": 32,
    "ht_dcphase": 63,
    "ht_sine": 63,
    "ht_trendmode": 63,
    "ht_trendline": 63,
    "wma4": 3,
}

# Bar at which the Hilbert feedback loop starts: 3 WMA seed bars plus the
# WMA settling run (9 bars for the short lookback, 34 for the long one).
FEEDBACK_START: DictLike = {
    32: 12,
    63: 37,
}
