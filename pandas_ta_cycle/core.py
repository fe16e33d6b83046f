# -*- coding: utf-8 -*-
from pandas import DataFrame, Series
from pandas.api.extensions import register_dataframe_accessor

from pandas_ta_cycle._typing import DictLike, Float, Int, Union
from pandas_ta_cycle.cycle import (
    ht_dcperiod, ht_dcphase, ht_phasor, ht_sine, ht_trendmode
)
from pandas_ta_cycle.overlap import ht_trendline, mama, wma4


@register_dataframe_accessor("ht")
class AnalysisIndicators(object):
    """
    This Pandas Extension is named 'ht' for Hilbert Transform.  It runs the
    package's indicators on the DataFrame's 'close' column (matched case
    insensitively).

    By default the result is returned; with append=True its column(s) are
    also joined onto the DataFrame.

    Examples:
    >>> import pandas_ta_cycle
    >>> df.ht.ht_dcperiod()
    >>> df.ht.mama(fastlimit=0.5, slowlimit=0.05, append=True)
    >>> df.ht.ht_sine(close="adj close")
    """

    def __init__(self, pandas_obj: DataFrame):
        self._df = pandas_obj

    def _get_column(self, name: str) -> Series:
        """Case insensitive column lookup."""
        df = self._df
        if name in df.columns:
            return df[name]
        for column in df.columns:
            if isinstance(column, str) and column.lower() == name.lower():
                return df[column]
        raise KeyError(f"column '{name}' not found in {list(df.columns)}")

    def _post_process(
        self, result: Union[Series, DataFrame], append: bool
    ) -> Union[Series, DataFrame]:
        if append:
            if isinstance(result, DataFrame):
                for column in result.columns:
                    self._df[column] = result[column]
            else:
                self._df[result.name] = result
        return result

    def _run(self, fn, close: str, append: bool, **kwargs: DictLike):
        series = self._get_column(close or "close")
        return self._post_process(fn(series, **kwargs), append)

    # Cycle
    def ht_dcperiod(self, close: str = None, append: bool = False, **kwargs: DictLike):
        return self._run(ht_dcperiod, close, append, **kwargs)

    def ht_dcphase(self, close: str = None, append: bool = False, **kwargs: DictLike):
        return self._run(ht_dcphase, close, append, **kwargs)

    def ht_phasor(self, close: str = None, append: bool = False, **kwargs: DictLike):
        return self._run(ht_phasor, close, append, **kwargs)

    def ht_sine(self, close: str = None, append: bool = False, **kwargs: DictLike):
        return self._run(ht_sine, close, append, **kwargs)

    def ht_trendmode(self, close: str = None, append: bool = False, **kwargs: DictLike):
        return self._run(ht_trendmode, close, append, **kwargs)

    # Overlap
    def ht_trendline(self, close: str = None, append: bool = False, **kwargs: DictLike):
        return self._run(ht_trendline, close, append, **kwargs)

    def mama(
        self, fastlimit: Float = None, slowlimit: Float = None,
        close: str = None, append: bool = False, **kwargs: DictLike
    ):
        return self._run(
            mama, close, append,
            fastlimit=fastlimit, slowlimit=slowlimit, **kwargs
        )

    def wma4(self, close: str = None, append: bool = False, offset: Int = None, **kwargs: DictLike):
        return self._run(wma4, close, append, offset=offset, **kwargs)
