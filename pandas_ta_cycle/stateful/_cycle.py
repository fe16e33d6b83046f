# -*- coding: utf-8 -*-
"""pandas-ta-cycle stateful -- Hilbert Transform cycle indicators.

Each section follows the pattern:
  1. State dataclass  (if beyond what ``HilbertState`` already provides)
  2. init / update / output_names helpers
  3. STATEFUL_REGISTRY["<kind>"] = StatefulIndicator(...)

All kinds are replay only: the feedback chain has no closed form, so the
only way to initialise is to push every bar through update().  The per
bar arithmetic is the numba step functions the batch kernels use, which
keeps streaming and batch results identical.
"""
from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from numpy import ndarray, zeros

from pandas_ta_cycle.cycle._hilbert import (
    CORE_SIZE,
    DEG2RAD,
    MODE_SIZE,
    PERIOD,
    RING,
    SMOOTH_PERIOD,
    TAP_BANKS,
    nb_dc_average,
    nb_dc_phase_step,
    nb_ht_step,
    nb_trend_mode_step,
    nb_trendline_step,
    nb_wma4_step,
)
from pandas_ta_cycle.maps import FEEDBACK_START, LOOKBACK
from pandas_ta_cycle.utils import warmup

from ._base import (
    _param,
    StatefulIndicator,
    STATEFUL_REGISTRY,
)


# ===========================================================================
# Shared Hilbert engine state
# ===========================================================================
# State: WMA4 running sums, the last three raw inputs, the Hilbert tap
# banks, the discriminator/period vector, the 50 bar price rings and the
# trend mode counters.  ``start`` is the bar the feedback loop begins at.

@dataclass
class HilbertState:
    start: int
    lookback: int
    count: int = 0
    sub: float = 0.0
    total: float = 0.0
    trailing: float = 0.0
    dc_phase: float = 0.0
    lag: deque = None
    taps: ndarray = field(default=None, repr=False)
    tap_prev: ndarray = field(default=None, repr=False)
    core: ndarray = field(default=None, repr=False)
    mode: ndarray = field(default=None, repr=False)
    itrend: ndarray = field(default=None, repr=False)
    price_ring: ndarray = field(default=None, repr=False)
    raw_ring: ndarray = field(default=None, repr=False)

    def __post_init__(self):
        if self.lag is None:
            self.lag = deque(maxlen=3)
        if self.taps is None:
            self.taps = zeros((TAP_BANKS, 3))
            self.tap_prev = zeros((TAP_BANKS, 2))
            self.core = zeros(CORE_SIZE)
            self.mode = zeros(MODE_SIZE)
            self.itrend = zeros(3)
            self.price_ring = zeros(RING)
            self.raw_ring = zeros(RING)


@dataclass
class HilbertBar:
    """Everything one bar of the engine produces."""
    smoothed: float
    in_phase: float
    quadrature: float
    period: float
    smooth_period: float
    dc_phase: float
    trendline: float
    trend: int


def hilbert_make(kind: str, params: Dict[str, Any]) -> HilbertState:
    """Engine state for *kind*; ``params["unstable"]`` extends the warm-up."""
    lookback = warmup(kind, _param(params, "unstable", 0))
    return HilbertState(start=FEEDBACK_START[LOOKBACK[kind]], lookback=lookback)


def hilbert_advance(state: HilbertState, x: float) -> Optional[HilbertBar]:
    """Pushes one raw input through the engine.

    Returns None until the feedback loop has started.
    """
    today = state.count
    state.count += 1
    pos = today % RING
    state.raw_ring[pos] = x

    # WMA4 seed
    if today < 3:
        state.sub += x
        state.total += x * (today + 1)
        state.lag.append(x)
        return None

    smoothed, state.sub, state.total = nb_wma4_step(
        x, state.trailing, state.sub, state.total
    )
    state.trailing = state.lag[0]
    state.lag.append(x)
    if today < state.start:
        return None

    state.price_ring[pos] = smoothed
    i1, q1 = nb_ht_step(state.taps, state.tap_prev, state.core, today, smoothed)
    smooth_period = state.core[SMOOTH_PERIOD]

    prev_phase = state.dc_phase
    state.dc_phase = nb_dc_phase_step(
        state.price_ring, pos, smooth_period, state.dc_phase
    )

    average = nb_dc_average(state.raw_ring, pos, smooth_period)
    trendline = nb_trendline_step(state.itrend, average)
    trend = nb_trend_mode_step(
        state.mode, state.dc_phase, prev_phase, smooth_period, smoothed, trendline
    )

    return HilbertBar(
        smoothed=smoothed,
        in_phase=i1,
        quadrature=q1,
        period=state.core[PERIOD],
        smooth_period=smooth_period,
        dc_phase=state.dc_phase,
        trendline=trendline,
        trend=int(trend),
    )


def _ready(state: HilbertState, result: Optional[HilbertBar]) -> bool:
    """True once *result* lies past the (unstable extended) warm-up."""
    return result is not None and state.count > state.lookback


# ===========================================================================
# HT_DCPERIOD  (replay_only) -- Dominant Cycle Period
# ===========================================================================

def _ht_dcperiod_init(params: Dict[str, Any]) -> HilbertState:
    return hilbert_make("ht_dcperiod", params)


def _ht_dcperiod_update(
    state: HilbertState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], HilbertState]:
    result = hilbert_advance(state, bar["close"])
    if not _ready(state, result):
        return [0.0], state
    return [result.smooth_period], state


def _ht_dcperiod_output_names(params: Dict[str, Any]) -> List[str]:
    return ["HT_DCPERIOD"]


STATEFUL_REGISTRY["ht_dcperiod"] = StatefulIndicator(
    kind="ht_dcperiod",
    inputs=("close",),
    init=_ht_dcperiod_init,
    update=_ht_dcperiod_update,
    output_names=_ht_dcperiod_output_names,
)


# ===========================================================================
# HT_DCPHASE  (replay_only) -- Dominant Cycle Phase
# ===========================================================================

def _ht_dcphase_init(params: Dict[str, Any]) -> HilbertState:
    return hilbert_make("ht_dcphase", params)


def _ht_dcphase_update(
    state: HilbertState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], HilbertState]:
    result = hilbert_advance(state, bar["close"])
    if not _ready(state, result):
        return [0.0], state
    return [result.dc_phase], state


def _ht_dcphase_output_names(params: Dict[str, Any]) -> List[str]:
    return ["HT_DCPHASE"]


STATEFUL_REGISTRY["ht_dcphase"] = StatefulIndicator(
    kind="ht_dcphase",
    inputs=("close",),
    init=_ht_dcphase_init,
    update=_ht_dcphase_update,
    output_names=_ht_dcphase_output_names,
)


# ===========================================================================
# HT_PHASOR  (replay_only) -- In-phase / Quadrature
# ===========================================================================

def _ht_phasor_init(params: Dict[str, Any]) -> HilbertState:
    return hilbert_make("ht_phasor", params)


def _ht_phasor_update(
    state: HilbertState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], HilbertState]:
    result = hilbert_advance(state, bar["close"])
    if not _ready(state, result):
        return [0.0, 0.0], state
    return [result.in_phase, result.quadrature], state


def _ht_phasor_output_names(params: Dict[str, Any]) -> List[str]:
    return ["HT_INPHASE", "HT_QUADRATURE"]


STATEFUL_REGISTRY["ht_phasor"] = StatefulIndicator(
    kind="ht_phasor",
    inputs=("close",),
    init=_ht_phasor_init,
    update=_ht_phasor_update,
    output_names=_ht_phasor_output_names,
)


# ===========================================================================
# HT_SINE  (replay_only) -- SineWave / Lead SineWave
# ===========================================================================

def _ht_sine_init(params: Dict[str, Any]) -> HilbertState:
    return hilbert_make("ht_sine", params)


def _ht_sine_update(
    state: HilbertState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], HilbertState]:
    result = hilbert_advance(state, bar["close"])
    if not _ready(state, result):
        return [0.0, 0.0], state
    sine = math.sin(result.dc_phase * DEG2RAD)
    leadsine = math.sin((result.dc_phase + 45.0) * DEG2RAD)
    return [sine, leadsine], state


def _ht_sine_output_names(params: Dict[str, Any]) -> List[str]:
    return ["HT_SINE", "HT_LEADSINE"]


STATEFUL_REGISTRY["ht_sine"] = StatefulIndicator(
    kind="ht_sine",
    inputs=("close",),
    init=_ht_sine_init,
    update=_ht_sine_update,
    output_names=_ht_sine_output_names,
)


# ===========================================================================
# HT_TRENDMODE  (replay_only) -- Trend (1) vs Cycle (0)
# ===========================================================================

def _ht_trendmode_init(params: Dict[str, Any]) -> HilbertState:
    return hilbert_make("ht_trendmode", params)


def _ht_trendmode_update(
    state: HilbertState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[int]], HilbertState]:
    result = hilbert_advance(state, bar["close"])
    if not _ready(state, result):
        return [0], state
    return [result.trend], state


def _ht_trendmode_output_names(params: Dict[str, Any]) -> List[str]:
    return ["HT_TRENDMODE"]


STATEFUL_REGISTRY["ht_trendmode"] = StatefulIndicator(
    kind="ht_trendmode",
    inputs=("close",),
    init=_ht_trendmode_init,
    update=_ht_trendmode_update,
    output_names=_ht_trendmode_output_names,
)
