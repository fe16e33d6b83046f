# -*- coding: utf-8 -*-
from typing import Any, Dict, Sequence, Tuple, Union

from numpy import float64, ndarray
from pandas import DataFrame, Series

DictLike = Dict[str, Any]
Int = Union[int, None]
Float = Union[float, None]
Array = ndarray
ArrayLike = Union[Series, ndarray, Sequence[float]]

__all__ = [
    "Array",
    "ArrayLike",
    "DataFrame",
    "DictLike",
    "Float",
    "Int",
    "Series",
    "float64",
]
