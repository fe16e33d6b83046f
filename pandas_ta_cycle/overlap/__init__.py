# -*- coding: utf-8 -*-
from .ht_trendline import ht_trendline
from .mama import mama
from .wma4 import wma4

__all__ = [
    "ht_trendline",
    "mama",
    "wma4",
]
