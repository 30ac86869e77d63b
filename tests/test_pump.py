"""Pump (balloon) game: burst selection, survival and payouts."""

import pytest

from fairnum import FairNumbers, InvalidParameterError
from fairnum.pump import pump


def test_pop_point_within_slots():
    for nonce in range(50):
        rnd = FairNumbers("clientSeed", "serverSeed", nonce=nonce).pump(3, size=25)
        assert 1 <= rnd.pop_point <= 25


def test_pump_advances_once_per_burst_slot(pf):
    pf.pump("hard")
    assert pf.nonce >= 5


def test_difficulty_presets(pf):
    assert pf.pump("easy").burst_count == 1
    assert pf.pump("medium").burst_count == 3
    assert pf.pump("hard").burst_count == 5
    assert pf.pump("expert").burst_count == 10
    assert pf.pump(7).burst_count == 7
    with pytest.raises(InvalidParameterError):
        pf.pump("impossible")


def test_all_slots_bursting_pops_immediately(pf):
    rnd = pump(pf.state, burst_count=25, size=25)
    assert rnd.pop_point == 1


def test_survival_probability_shape(pf):
    rnd = pf.pump(3, size=25)
    assert rnd.survival_probability(0) == 1
    assert rnd.survival_probability(-4) == 1
    assert rnd.survival_probability(1) == pytest.approx(22 / 25)
    assert rnd.survival_probability(2) == pytest.approx(22 / 25 * 21 / 24)
    assert rnd.survival_probability(23) == 0
    values = [rnd.survival_probability(k) for k in range(0, 26)]
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_payout_times_survival_is_return_to_player():
    for nonce in range(20):
        rnd = FairNumbers("clientSeed", "serverSeed", nonce=nonce).pump(3, size=25, edge=0.02)
        for k in range(rnd.pop_point):
            s = rnd.survival_probability(k)
            if s >= 0.01:
                assert rnd.payout_multiplier(k) * s == pytest.approx(0.98, rel=1e-2)


def test_payout_fixed_point_value(pf):
    rnd = pf.pump(1, size=2, edge=0.02)
    assert rnd.payout_multiplier(0) == 0.98


def test_payout_zero_outside_live_rounds(pf):
    rnd = pf.pump(3, size=25)
    assert rnd.payout_multiplier(rnd.pop_point) == 0
    assert rnd.payout_multiplier(-1) == 0
    assert rnd.payout_multiplier(0.5) == 0


def test_round_state_queries(pf):
    rnd = pf.pump(3, size=25)
    p = rnd.pop_point
    assert rnd.is_burst_at(p)
    assert not rnd.is_burst_at(p - 1)
    assert rnd.will_burst_next(p - 1)
    assert rnd.can_continue_at(p - 1)
    assert not rnd.can_continue_at(p)
    assert not rnd.can_continue_at(-1)
    assert not rnd.is_burst_at(float(p))


@pytest.mark.parametrize("burst_count,size", [(1, 1), (0, 25), (26, 25), (True, 25), (3, 2.5), (2.0, 25)])
def test_invalid_configuration(pf, burst_count, size):
    with pytest.raises(InvalidParameterError):
        pump(pf.state, burst_count=burst_count, size=size)


def test_pump_reproducible():
    a = FairNumbers("clientSeed", "serverSeed", nonce=3).pump("expert")
    b = FairNumbers("clientSeed", "serverSeed", nonce=3).pump("expert")
    assert a == b
