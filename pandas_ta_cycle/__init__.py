# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

try:
    version = version("pandas_ta_cycle")
except PackageNotFoundError:
    version = "0.0.0"

from pandas_ta_cycle.maps import Category, FEEDBACK_START, Imports, LOOKBACK
from pandas_ta_cycle.utils import *
from pandas_ta_cycle.utils import __all__ as utils_all
from pandas_ta_cycle.stateful import *
from pandas_ta_cycle.stateful import __all__ as stateful_all

# Flat Structure. Supports ta.mama() or ta.overlap.mama()
from pandas_ta_cycle.cycle import *
from pandas_ta_cycle.overlap import *
from pandas_ta_cycle.cycle import __all__ as cycle_all
from pandas_ta_cycle.overlap import __all__ as overlap_all

# Enable "ht" DataFrame Extension
from pandas_ta_cycle.core import AnalysisIndicators

__all__ = [
    "Category",
    "FEEDBACK_START",
    "Imports",
    "LOOKBACK",
    "version",
    "AnalysisIndicators",
]

__all__ += (
    utils_all
    + stateful_all
    + cycle_all
    + overlap_all
)
