# -*- coding: utf-8 -*-
import numpy as np
import pytest

from pandas_ta_cycle.cycle import _hilbert as hb


def test_constants():
    assert hb.RAD2DEG == pytest.approx(180.0 / np.pi, rel=1e-15)
    assert hb.DEG2RAD_BY_360 == pytest.approx(2.0 * np.pi, rel=1e-15)


def test_wma4_short_input():
    np.testing.assert_array_equal(hb.nb_wma4(np.array([1.0, 2.0])), [0.0, 0.0])


def test_wma4_step_matches_kernel():
    x = np.array([3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0])
    expected = hb.nb_wma4(x)

    sub, total = x[0], x[0] + 0.0
    sub += x[1]
    total += 2.0 * x[1]
    sub += x[2]
    total += 3.0 * x[2]
    trailing = 0.0
    for i in range(3, x.size):
        value, sub, total = hb.nb_wma4_step(x[i], trailing, sub, total)
        trailing = x[i - 3]
        assert value == expected[i]
    assert expected[7] == pytest.approx((4 * 6.0 + 3 * 2.0 + 2 * 9.0 + 5.0) / 10.0)


def test_period_keeps_previous_when_discriminator_is_zero():
    assert hb.nb_period_step(10.0, 0.0, 0.0) == pytest.approx(10.0)
    assert hb.nb_period_step(10.0, 1.0, 0.0) == pytest.approx(10.0)


def test_period_rate_limits():
    # tiny phase step: raw period huge, limited to +50%
    assert hb.nb_period_step(10.0, 1.0, 1e-6) == pytest.approx(0.2 * 15.0 + 8.0)
    # 80 degree step: raw 4.5 bars, limited to -33%
    im = np.tan(np.deg2rad(80.0))
    assert hb.nb_period_step(10.0, 1.0, im) == pytest.approx(0.2 * 6.7 + 8.0)


def test_period_absolute_clamp():
    assert hb.nb_period_step(0.0, 0.0, 0.0) == pytest.approx(1.2)
    assert hb.nb_period_step(60.0, 1.0, 1e-6) == pytest.approx(0.2 * 50.0 + 0.8 * 60.0)


def test_dc_phase_degenerate_keeps_previous():
    ring = np.zeros(hb.RING)
    phase = hb.nb_dc_phase_step(ring, 0, 20.0, 10.0)
    assert phase == pytest.approx(10.0 + 90.0 + 18.0)


def test_dc_phase_wraps_above_315():
    ring = np.zeros(hb.RING)
    phase = hb.nb_dc_phase_step(ring, 0, 20.0, 250.0)
    assert phase == pytest.approx(250.0 + 90.0 + 18.0 - 360.0)


def test_dc_average_wraps_ring():
    ring = np.arange(hb.RING, dtype=float)
    # bars 1, 0, 49, 48
    assert hb.nb_dc_average(ring, 1, 4.0) == pytest.approx((1 + 0 + 49 + 48) / 4.0)


def test_nan_period_propagates():
    ring = np.ones(hb.RING)
    assert np.isnan(hb.nb_dc_phase_step(ring, 0, np.nan, 0.0))
    assert np.isnan(hb.nb_dc_average(ring, 0, np.nan))


def test_trendline_step_shifts_history():
    itrend = np.array([3.0, 2.0, 1.0])
    tl = hb.nb_trendline_step(itrend, 4.0)
    assert tl == pytest.approx((16.0 + 9.0 + 4.0 + 1.0) / 10.0)
    np.testing.assert_array_equal(itrend, [4.0, 3.0, 2.0])


def test_trend_mode_crossing_resets_counter():
    mode = np.zeros(hb.MODE_SIZE)
    mode[hb.DAYS_IN_TREND] = 30.0
    trend = hb.nb_trend_mode_step(mode, 0.0, 0.0, 20.0, 100.0, 100.0)
    assert trend == 0
    assert mode[hb.DAYS_IN_TREND] == 1.0


def test_trend_mode_counter_holds_cycle_for_half_a_period():
    mode = np.zeros(hb.MODE_SIZE)
    mode[hb.SINE] = np.sin(np.deg2rad(60.0))
    mode[hb.LEAD_SINE] = np.sin(np.deg2rad(105.0))
    # sine overtakes the lead sine between 60 and 70 degrees
    assert hb.nb_trend_mode_step(mode, 70.0, 60.0, 20.0, 100.0, 100.0) == 0
    assert mode[hb.DAYS_IN_TREND] == 1.0

    # stalled phase, price on the trendline: only the counter decides
    modes = [
        hb.nb_trend_mode_step(mode, 70.0, 70.0, 20.0, 100.0, 100.0)
        for _ in range(12)
    ]
    # days 2..9 are under half of the 20 bar period, day 10 reaches it
    assert modes[:8] == [0] * 8
    assert modes[8:] == [1] * 4
    assert mode[hb.DAYS_IN_TREND] == 13.0


def test_trend_mode_price_distance_forces_trend():
    mode = np.zeros(hb.MODE_SIZE)
    assert hb.nb_trend_mode_step(mode, 0.0, 0.0, 20.0, 102.0, 100.0) == 1


def test_trend_mode_cycle_rate_phase_means_cycle():
    mode = np.zeros(hb.MODE_SIZE)
    mode[hb.DAYS_IN_TREND] = 100.0
    mode[hb.SINE] = np.sin(np.deg2rad(100.0))
    mode[hb.LEAD_SINE] = np.sin(np.deg2rad(145.0))
    # phase advanced 18 degrees, one 20 bar cycle's worth
    assert hb.nb_trend_mode_step(mode, 118.0, 100.0, 20.0, 100.0, 100.0) == 0
    # a stalled phase with no crossing reads as trend
    mode[hb.SINE] = np.sin(np.deg2rad(118.0))
    mode[hb.LEAD_SINE] = np.sin(np.deg2rad(163.0))
    assert hb.nb_trend_mode_step(mode, 119.0, 118.0, 20.0, 100.0, 100.0) == 1


def test_mama_step_alpha_bounds():
    mstate = np.zeros(hb.MAMA_SIZE)
    # phase falling fast: alpha floored at slowlimit
    mstate[hb.PHASE] = 80.0
    alpha = hb.nb_mama_step(mstate, 10.0, 1.0, 0.0, 0.5, 0.05)
    assert alpha == pytest.approx(0.05)
    # phase not decreasing: alpha is fastlimit
    alpha = hb.nb_mama_step(mstate, 10.0, 1.0, 1.0, 0.5, 0.05)
    assert alpha == pytest.approx(0.5)
    # I1 == 0: phase 0
    alpha = hb.nb_mama_step(mstate, 10.0, 0.0, 1.0, 0.5, 0.001)
    assert mstate[hb.PHASE] == 0.0
    assert alpha == pytest.approx(0.5 / 45.0)
