# -*- coding: utf-8 -*-
from .ht_dcperiod import ht_dcperiod
from .ht_dcphase import ht_dcphase
from .ht_phasor import ht_phasor
from .ht_sine import ht_sine
from .ht_trendmode import ht_trendmode

__all__ = [
    "ht_dcperiod",
    "ht_dcphase",
    "ht_phasor",
    "ht_sine",
    "ht_trendmode",
]
