"""Statistical audit helpers: survival, uniformity and tail fits."""

import numpy as np
import pytest

from fairnum import FairNumbers, RangeError
from fairnum.fit import best_model_by_aic, fit_models
from fairnum.report import prob_ge_thresholds, summarize_fit, summarize_uniformity
from fairnum.survival import empirical_survival, theoretical_crash_survival
from fairnum.uniformity import uniformity_test


def test_empirical_survival_steps():
    emp = empirical_survival([1, 2, 2, 4, np.nan, 0.5])
    assert emp["n"] == 4
    assert list(emp["t"]) == [1, 2, 4]
    assert list(emp["S"]) == [1.0, 0.75, 0.25]


def test_theoretical_crash_survival():
    S = theoretical_crash_survival([0.5, 1, 2, 10], house_edge=1)
    assert S[0] == 1
    assert S[1] == 1
    assert S[2] == pytest.approx(0.495)
    assert S[3] == pytest.approx(0.099)


def test_dice_draws_pass_uniformity():
    pf = FairNumbers("audit-client", "audit-server")
    values = pf.int_range(1, 6, 6000)
    result = uniformity_test(values, 1, 6)
    assert result["dof"] == 5
    assert result["counts"].sum() == 6000
    assert result["pvalue"] > 0.001
    assert "uniform" in summarize_uniformity(result)


def test_skewed_draws_fail_uniformity():
    result = uniformity_test([1] * 90 + [2] * 10, 1, 2)
    assert result["pvalue"] < 0.01
    assert "NOT uniform" in summarize_uniformity(result)


def test_uniformity_input_checks():
    with pytest.raises(RangeError):
        uniformity_test([1], 3, 1)
    with pytest.raises(ValueError):
        uniformity_test([0, 7], 1, 6)
    with pytest.raises(ValueError):
        uniformity_test([], 1, 6)


def test_fair_crash_tail_is_pareto_near_one():
    values = FairNumbers("audit-client", "audit-server").crash_sequence(5000, house_edge=1)
    fits = fit_models(values)
    best = best_model_by_aic(fits)
    assert best["name"] == "pareto_xm1"
    assert 0.9 < best["params"]["alpha"] < 1.15
    assert "Best: pareto_xm1" in summarize_fit(fits, best, house_edge=1)
    probs = prob_ge_thresholds(best, [1, 2, 10])
    assert probs[0] == pytest.approx(1.0)
    assert probs[0] > probs[1] > probs[2]
