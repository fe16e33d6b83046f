# -*- coding: utf-8 -*-
"""Hilbert Transform engine shared by the HT_* indicators and MAMA.

John Ehlers' cycle machinery as TA-Lib implements it, split into
numba-compiled step functions.  Every step receives its feedback state as
numpy arrays owned by the caller, so the batch kernel (``nb_ht``) and the
streaming states in ``pandas_ta_cycle.stateful`` run the exact same
arithmetic bar by bar.

Stages:
  1. WMA4 price smoother                       nb_wma4_step
  2. Hilbert transformer (I1, Q1, jI, jQ)      nb_ht_tap, nb_ht_step
  3. Homodyne discriminator (Re, Im)           nb_homodyne
  4. Period clamp and smoothing                nb_period_step
  5. Dominant cycle phase (one period DFT)     nb_dc_phase_step
  6. Instantaneous trendline, trend/cycle mode nb_dc_average, nb_trendline_step,
                                               nb_trend_mode_step
  7. MESA adaptive moving average              nb_mama_step
"""
from math import atan, isnan

from numba import njit
from numpy import arctan, cos, floor, nan, sin, zeros

# Hilbert filter taps
A = 0.0962
B = 0.5769

RAD2DEG = 45.0 / atan(1.0)
DEG2RAD = 1.0 / RAD2DEG
DEG2RAD_BY_360 = atan(1.0) * 8.0

# Ring depth of the smoothed price / raw price history (max DC period).
RING = 50

# Filter banks in the ``taps``/``tap_prev`` arrays; add the bar parity
# (0 even, 1 odd) to select the bank.
DETRENDER, Q1, JI, JQ = 0, 2, 4, 6
TAP_BANKS = 8

# Slots of the ``core`` state vector.
HT_IDX = 0          # position in the 3 slot tap rings
I1_EVEN2 = 1        # detrender lags feeding the in-phase component
I1_EVEN3 = 2
I1_ODD2 = 3
I1_ODD3 = 4
I2 = 5
Q2 = 6
RE = 7
IM = 8
PERIOD = 9
SMOOTH_PERIOD = 10
CORE_SIZE = 11

# Slots of the trend mode state vector.
DAYS_IN_TREND = 0
SINE = 1
LEAD_SINE = 2
MODE_SIZE = 3

# Slots of the MAMA state vector.
PHASE = 0
MAMA = 1
FAMA = 2
MAMA_SIZE = 3


@njit(cache=True)
def nb_wma4_step(value, trailing, sub, total):
    """One bar of TA-Lib's running 4 bar WMA.  ``trailing`` is the value
    four bars back (0.0 on the first call).  Returns (smoothed, sub, total).
    """
    sub += value
    sub -= trailing
    total += value * 4.0
    smoothed = total * 0.1
    total -= sub
    return smoothed, sub, total


@njit(cache=True)
def nb_wma4(x):
    n = x.size
    result = zeros(n)
    if n < 3:
        return result

    sub, total = x[0], x[0]
    sub += x[1]
    total += x[1] * 2.0
    sub += x[2]
    total += x[2] * 3.0

    trailing = 0.0
    for i in range(3, n):
        value, sub, total = nb_wma4_step(x[i], trailing, sub, total)
        result[i] = value
        trailing = x[i - 3]
    return result


@njit(cache=True)
def nb_ht_tap(taps, tap_prev, bank, idx, value, adj):
    """Hilbert FIR ``A*v[0] + B*v[2] - B*v[4] - A*v[6]`` kept as a 3 slot
    ring of same parity samples plus the running B term."""
    hilbert = A * value
    result = -taps[bank, idx]
    taps[bank, idx] = hilbert
    result += hilbert
    result -= tap_prev[bank, 0]
    tap_prev[bank, 0] = B * tap_prev[bank, 1]
    result += tap_prev[bank, 0]
    tap_prev[bank, 1] = value
    result *= adj
    return result


@njit(cache=True)
def nb_homodyne(i2, q2, prev_i2, prev_q2, re, im):
    re = 0.2 * ((i2 * prev_i2) + (q2 * prev_q2)) + 0.8 * re
    im = 0.2 * ((i2 * prev_q2) - (q2 * prev_i2)) + 0.8 * im
    return re, im


@njit(cache=True)
def nb_period_step(prev_period, re, im):
    """Raw period from the discriminator, limited to +50%/-33% of the
    previous estimate, clamped to [6, 50] and smoothed 0.2/0.8."""
    period = prev_period
    if im != 0.0 and re != 0.0:
        period = 360.0 / (arctan(im / re) * RAD2DEG)

    limit = 1.5 * prev_period
    if period > limit:
        period = limit
    limit = 0.67 * prev_period
    if period < limit:
        period = limit

    if period < 6.0:
        period = 6.0
    elif period > 50.0:
        period = 50.0

    return 0.2 * period + 0.8 * prev_period


@njit(cache=True)
def nb_ht_step(taps, tap_prev, core, today, smoothed):
    """Advances the transformer, discriminator and period by one bar.

    Returns the in-phase (I1) and quadrature (Q1) components.  The tap
    lag adapts to the previous bar's period.
    """
    adj = 0.075 * core[PERIOD] + 0.54
    parity = today % 2
    idx = int(core[HT_IDX])

    if parity == 0:
        i1 = core[I1_EVEN3]
    else:
        i1 = core[I1_ODD3]

    detrender = nb_ht_tap(taps, tap_prev, DETRENDER + parity, idx, smoothed, adj)
    q1 = nb_ht_tap(taps, tap_prev, Q1 + parity, idx, detrender, adj)
    ji = nb_ht_tap(taps, tap_prev, JI + parity, idx, i1, adj)
    jq = nb_ht_tap(taps, tap_prev, JQ + parity, idx, q1, adj)

    if parity == 0:
        core[HT_IDX] = (idx + 1) % 3
        core[I1_ODD3] = core[I1_ODD2]
        core[I1_ODD2] = detrender
    else:
        core[I1_EVEN3] = core[I1_EVEN2]
        core[I1_EVEN2] = detrender

    # Phasor addition, smoothed
    q2 = 0.2 * (q1 + ji) + 0.8 * core[Q2]
    i2 = 0.2 * (i1 - jq) + 0.8 * core[I2]

    re, im = nb_homodyne(i2, q2, core[I2], core[Q2], core[RE], core[IM])
    core[RE] = re
    core[IM] = im
    core[Q2] = q2
    core[I2] = i2

    core[PERIOD] = nb_period_step(core[PERIOD], core[RE], core[IM])
    core[SMOOTH_PERIOD] = 0.33 * core[PERIOD] + 0.67 * core[SMOOTH_PERIOD]
    return i1, q1


@njit(cache=True)
def nb_dc_phase_step(price_ring, pos, smooth_period, dc_phase):
    """Dominant cycle phase, in degrees, from a one period DFT of the
    smoothed prices ending at ``price_ring[pos]``.

    When the imaginary part vanishes the previous phase is kept (nudged
    by 90 degrees toward the sign of the real part).
    """
    if isnan(smooth_period):
        return nan
    count = int(floor(smooth_period + 0.5))
    real_part = 0.0
    imag_part = 0.0
    idx = pos
    for i in range(count):
        angle = (i * DEG2RAD_BY_360) / count
        value = price_ring[idx]
        real_part += sin(angle) * value
        imag_part += cos(angle) * value
        if idx == 0:
            idx = RING - 1
        else:
            idx -= 1

    magnitude = abs(imag_part)
    if magnitude > 0.0:
        dc_phase = arctan(real_part / imag_part) * RAD2DEG
    elif magnitude <= 0.01:
        if real_part < 0.0:
            dc_phase -= 90.0
        elif real_part > 0.0:
            dc_phase += 90.0

    dc_phase += 90.0
    # Compensate one bar lag of the smoothed price
    dc_phase += 360.0 / smooth_period
    if imag_part < 0.0:
        dc_phase += 180.0
    if dc_phase > 315.0:
        dc_phase -= 360.0
    return dc_phase


@njit(cache=True)
def nb_dc_average(raw_ring, pos, smooth_period):
    """Simple mean of the raw input over one dominant cycle."""
    if isnan(smooth_period):
        return nan
    count = int(floor(smooth_period + 0.5))
    total = 0.0
    idx = pos
    for _ in range(count):
        total += raw_ring[idx]
        if idx == 0:
            idx = RING - 1
        else:
            idx -= 1
    if count > 0:
        total = total / count
    return total


@njit(cache=True)
def nb_trendline_step(itrend, average):
    """WMA4 of the cycle averages.  ``itrend`` holds the three previous."""
    trendline = (4.0 * average + 3.0 * itrend[0] + 2.0 * itrend[1] + itrend[2]) / 10.0
    itrend[2] = itrend[1]
    itrend[1] = itrend[0]
    itrend[0] = average
    return trendline


@njit(cache=True)
def nb_trend_mode_step(mode, dc_phase, prev_dc_phase, smooth_period, price, trendline):
    """1 (trend) or 0 (cycle).

    A sine/lead sine crossing restarts the day counter and the market is
    only called trending once the counter reaches half a cycle.  Phase
    advancing at the cycle rate means cycle; price stretched 1.5% or more
    from the trendline means trend.
    """
    prev_sine = mode[SINE]
    prev_lead_sine = mode[LEAD_SINE]
    sine = sin(dc_phase * DEG2RAD)
    lead_sine = sin((dc_phase + 45.0) * DEG2RAD)
    mode[SINE] = sine
    mode[LEAD_SINE] = lead_sine

    trend = 1
    if (sine > lead_sine and prev_sine <= prev_lead_sine) or (
        sine < lead_sine and prev_sine >= prev_lead_sine
    ):
        mode[DAYS_IN_TREND] = 0.0
        trend = 0
    mode[DAYS_IN_TREND] += 1.0

    if mode[DAYS_IN_TREND] < 0.5 * smooth_period:
        trend = 0

    delta = dc_phase - prev_dc_phase
    if smooth_period != 0.0 and (
        delta > (0.67 * 360.0 / smooth_period) and delta < (1.5 * 360.0 / smooth_period)
    ):
        trend = 0

    if trendline != 0.0 and abs((price - trendline) / trendline) >= 0.015:
        trend = 1
    return trend


@njit(cache=True)
def nb_mama_step(mstate, value, i1, q1, fastlimit, slowlimit):
    """Adapts alpha to the phase rate of change and updates MAMA/FAMA in
    ``mstate``.  Returns alpha, always within [slowlimit, fastlimit]."""
    if i1 != 0.0:
        phase = arctan(q1 / i1) * RAD2DEG
    else:
        phase = 0.0

    delta = mstate[PHASE] - phase
    mstate[PHASE] = phase
    if delta < 1.0:
        delta = 1.0

    if delta > 1.0:
        alpha = fastlimit / delta
        if alpha < slowlimit:
            alpha = slowlimit
    else:
        alpha = fastlimit

    mstate[MAMA] = (alpha * value) + ((1.0 - alpha) * mstate[MAMA])
    half = alpha * 0.5
    mstate[FAMA] = (half * mstate[MAMA]) + ((1.0 - half) * mstate[FAMA])
    return alpha


@njit(cache=True)
def nb_ht(x, start):
    """Runs the full Hilbert chain over ``x``.

    The feedback loop begins at bar ``start`` (12 or 37, matching TA-Lib's
    WMA settling run); earlier entries of every output stay 0.0.

    Returns smoothed, in_phase, quadrature, period, smooth_period,
    dc_phase, trendline and trend arrays.
    """
    n = x.size
    smoothed = zeros(n)
    in_phase = zeros(n)
    quadrature = zeros(n)
    period = zeros(n)
    smooth_period = zeros(n)
    dc_phase = zeros(n)
    trendline = zeros(n)
    trend = zeros(n)
    if n < 3:
        return smoothed, in_phase, quadrature, period, smooth_period, dc_phase, trendline, trend

    taps = zeros((TAP_BANKS, 3))
    tap_prev = zeros((TAP_BANKS, 2))
    core = zeros(CORE_SIZE)
    mode = zeros(MODE_SIZE)
    itrend = zeros(3)
    price_ring = zeros(RING)
    raw_ring = zeros(RING)

    sub, total = x[0], x[0]
    sub += x[1]
    total += x[1] * 2.0
    sub += x[2]
    total += x[2] * 3.0
    for i in range(3):
        raw_ring[i % RING] = x[i]

    trailing = 0.0
    phase = 0.0
    for today in range(3, n):
        value, sub, total = nb_wma4_step(x[today], trailing, sub, total)
        trailing = x[today - 3]
        smoothed[today] = value
        pos = today % RING
        raw_ring[pos] = x[today]
        if today < start:
            continue

        price_ring[pos] = value
        i1, q1 = nb_ht_step(taps, tap_prev, core, today, value)
        in_phase[today] = i1
        quadrature[today] = q1
        period[today] = core[PERIOD]
        smooth_period[today] = core[SMOOTH_PERIOD]

        prev_phase = phase
        phase = nb_dc_phase_step(price_ring, pos, core[SMOOTH_PERIOD], phase)
        dc_phase[today] = phase

        average = nb_dc_average(raw_ring, pos, core[SMOOTH_PERIOD])
        trendline[today] = nb_trendline_step(itrend, average)
        trend[today] = nb_trend_mode_step(
            mode, phase, prev_phase, core[SMOOTH_PERIOD], value, trendline[today]
        )

    return smoothed, in_phase, quadrature, period, smooth_period, dc_phase, trendline, trend


@njit(cache=True)
def nb_mama(x, start, fastlimit, slowlimit):
    """MAMA, FAMA and the per bar alpha."""
    n = x.size
    mama_ = zeros(n)
    fama_ = zeros(n)
    alpha = zeros(n)

    ht = nb_ht(x, start)
    in_phase, quadrature = ht[1], ht[2]

    mstate = zeros(MAMA_SIZE)
    for today in range(max(start, 3), n):
        alpha[today] = nb_mama_step(
            mstate, x[today], in_phase[today], quadrature[today], fastlimit, slowlimit
        )
        mama_[today] = mstate[MAMA]
        fama_[today] = mstate[FAMA]
    return mama_, fama_, alpha
