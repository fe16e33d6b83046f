# -*- coding: utf-8 -*-
"""pandas-ta-cycle stateful -- overlap indicators built on the Hilbert
engine: MAMA/FAMA and the instantaneous trendline.  Replay only, see
``_cycle``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from numpy import ndarray, zeros

from pandas_ta_cycle.cycle._hilbert import FAMA, MAMA, MAMA_SIZE, nb_mama_step
from pandas_ta_cycle.utils import v_limits

from ._base import (
    _param,
    StatefulIndicator,
    STATEFUL_REGISTRY,
)
from ._cycle import HilbertState, _ready, hilbert_advance, hilbert_make


# ===========================================================================
# MAMA  (replay_only) -- MESA Adaptive Moving Average
# ===========================================================================
# State: the Hilbert engine (for I1/Q1) plus [prev phase, mama, fama].
# Default: fastlimit=0.5, slowlimit=0.05

@dataclass
class MamaState:
    fastlimit: float
    slowlimit: float
    hilbert: HilbertState
    alpha: float = 0.0
    mstate: ndarray = field(default=None, repr=False)

    def __post_init__(self):
        if self.mstate is None:
            self.mstate = zeros(MAMA_SIZE)


def _limits(params: Dict[str, Any]) -> Tuple[float, float]:
    return v_limits(
        _param(params, "fastlimit", 0.5), _param(params, "slowlimit", 0.05)
    )


def _mama_init(params: Dict[str, Any]) -> MamaState:
    fastlimit, slowlimit = _limits(params)
    return MamaState(
        fastlimit=fastlimit,
        slowlimit=slowlimit,
        hilbert=hilbert_make("mama", params),
    )


def _mama_update(
    state: MamaState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], MamaState]:
    close = bar["close"]
    result = hilbert_advance(state.hilbert, close)
    if result is None:
        return [0.0, 0.0], state

    state.alpha = nb_mama_step(
        state.mstate, close, result.in_phase, result.quadrature,
        state.fastlimit, state.slowlimit,
    )
    if not _ready(state.hilbert, result):
        return [0.0, 0.0], state
    return [state.mstate[MAMA], state.mstate[FAMA]], state


def _mama_output_names(params: Dict[str, Any]) -> List[str]:
    fastlimit, slowlimit = _limits(params)
    _props = f"_{fastlimit}_{slowlimit}"
    return [f"MAMA{_props}", f"FAMA{_props}"]


STATEFUL_REGISTRY["mama"] = StatefulIndicator(
    kind="mama",
    inputs=("close",),
    init=_mama_init,
    update=_mama_update,
    output_names=_mama_output_names,
)


# ===========================================================================
# HT_TRENDLINE  (replay_only) -- Instantaneous Trendline
# ===========================================================================

def _ht_trendline_init(params: Dict[str, Any]) -> HilbertState:
    return hilbert_make("ht_trendline", params)


def _ht_trendline_update(
    state: HilbertState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], HilbertState]:
    result = hilbert_advance(state, bar["close"])
    if not _ready(state, result):
        return [0.0], state
    return [result.trendline], state


def _ht_trendline_output_names(params: Dict[str, Any]) -> List[str]:
    return ["HT_TL"]


STATEFUL_REGISTRY["ht_trendline"] = StatefulIndicator(
    kind="ht_trendline",
    inputs=("close",),
    init=_ht_trendline_init,
    update=_ht_trendline_update,
    output_names=_ht_trendline_output_names,
)
