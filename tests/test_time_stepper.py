from __future__ import annotations

import numpy as np
import pytest

from timestepping import InvalidArgument, TimeStepper, build_time_grid, integrate
from timestepping.tools.exact_solutions import (constant_rate_solution,
                                                linear_rate_solution,
                                                quadratic_rate_solution)

RULES = ("start", "mid", "average")


def test_default_configuration() -> None:
    stepper = TimeStepper()
    assert stepper.dt == 0.2
    assert stepper.n_steps == 10
    assert stepper.x0 == 0.0
    assert stepper.rule == "start"
    assert len(stepper.t) == 11
    assert "rule='start'" in repr(stepper)


def test_constant_rate_all_rules_match_exact() -> None:
    # Default rate is the constant 10
    stepper = TimeStepper()
    exact = constant_rate_solution(stepper.t, 0.0, 10.0)
    for rule, x in stepper.solve_all().items():
        np.testing.assert_allclose(x, exact, rtol=1e-12, atol=1e-12, err_msg=rule)


def test_constant_rate_state_form() -> None:
    stepper = TimeStepper(lambda x: 3.0, x0=1.0, depends_on="state")
    exact = constant_rate_solution(stepper.t, 1.0, 3.0)
    for x in stepper.solve_all().values():
        np.testing.assert_allclose(x, exact, rtol=1e-12)


def test_time_dependent_rate_mid_and_average_coincide() -> None:
    stepper = TimeStepper(lambda t: 2 * t, depends_on="time")
    x = stepper.solve_all()
    np.testing.assert_allclose(x["mid"], x["average"], rtol=0, atol=1e-12)


def test_time_dependent_rate_mid_and_average_are_exact() -> None:
    stepper = TimeStepper(lambda t: 2 * t, depends_on="time")
    exact = linear_rate_solution(stepper.t)
    x = stepper.solve_all()
    np.testing.assert_allclose(x["mid"], exact, rtol=0, atol=1e-12)
    np.testing.assert_allclose(x["average"], exact, rtol=0, atol=1e-12)


def test_time_dependent_rate_start_lags_behind() -> None:
    stepper = TimeStepper(lambda t: 2 * t, depends_on="time")
    x = stepper.solve_all()
    exact = linear_rate_solution(stepper.t)
    assert not np.allclose(x["start"], x["mid"])
    # x_start(t) = t^2 - t*dt
    np.testing.assert_allclose(x["start"], exact - stepper.t * 0.2, atol=1e-12)
    assert np.all(x["start"][1:] < exact[1:])


def test_start_differs_for_any_step_size() -> None:
    for dt in (0.2, 0.05, 0.001):
        t = build_time_grid(dt, 5)
        x_start = integrate(t, 0.0, dt, lambda t: 2 * t, "start", depends_on="time")
        x_mid = integrate(t, 0.0, dt, lambda t: 2 * t, "mid", depends_on="time")
        assert x_start[-1] != x_mid[-1]


def test_state_dependent_rate_rules_all_differ() -> None:
    stepper = TimeStepper(lambda x: x ** 2, x0=0.4, depends_on="state")
    x = stepper.solve_all()
    for a in RULES:
        for b in RULES:
            if a != b:
                assert not np.allclose(x[a], x[b], rtol=0, atol=1e-12), (a, b)


def test_state_dependent_rate_mid_and_average_closest() -> None:
    stepper = TimeStepper(lambda x: x ** 2, x0=0.4, depends_on="state")
    x = stepper.solve_all()

    def distance(a, b):
        return np.max(np.abs(x[a] - x[b]))

    assert distance("mid", "average") < distance("mid", "start")
    assert distance("mid", "average") < distance("average", "start")


def test_state_dependent_rate_errors_against_exact() -> None:
    stepper = TimeStepper(lambda x: x ** 2, x0=0.4, depends_on="state")
    errors = stepper.errors(lambda t: quadratic_rate_solution(t, 0.4))
    assert errors["start"][0] == 0.0
    assert errors["mid"][-1] < errors["start"][-1]
    assert errors["average"][-1] < errors["start"][-1]


def test_time_and_state_rate() -> None:
    # dx/dt = t x  ->  x = x0 exp(t^2/2)
    stepper = TimeStepper(lambda t, x: t * x, dt=0.01, n_steps=100, x0=1.0)
    _, x = stepper.solve("mid")
    assert abs(x[-1] - np.exp(0.5)) < 1e-3


def test_solve_is_idempotent() -> None:
    t = build_time_grid(0.2, 10)
    for rule in RULES:
        first = integrate(t, 0.4, 0.2, lambda x: x ** 2, rule, depends_on="state")
        second = integrate(t, 0.4, 0.2, lambda x: x ** 2, rule, depends_on="state")
        np.testing.assert_array_equal(first, second)


def test_stepper_is_idempotent() -> None:
    stepper = TimeStepper(lambda x: x ** 2, x0=0.4, depends_on="state", rule="mid")
    np.testing.assert_array_equal(stepper.solve()[1], stepper.solve()[1])


def test_zero_steps_returns_initial_value_only() -> None:
    for rule in RULES:
        t, x = TimeStepper(n_steps=0, x0=3.0, rule=rule).solve()
        assert t.tolist() == [0.0]
        assert x.tolist() == [3.0]


def test_integrate_single_point_grid() -> None:
    x = integrate(np.array([0.0]), 3.0, 0.2, lambda t, x: x)
    assert x.tolist() == [3.0]


def test_initial_time_offset() -> None:
    stepper = TimeStepper(lambda t: 2 * t, t0=5.0, depends_on="time", rule="mid")
    t, x = stepper.solve()
    assert t[0] == 5.0
    np.testing.assert_allclose(x, t ** 2 - 25.0, atol=1e-10)


def test_zero_step_size_raises() -> None:
    with pytest.raises(InvalidArgument):
        TimeStepper(dt=0.0)


def test_negative_step_count_raises() -> None:
    with pytest.raises(InvalidArgument):
        TimeStepper(n_steps=-1)


def test_unknown_rule_raises() -> None:
    with pytest.raises(InvalidArgument):
        TimeStepper(rule="backward")
    with pytest.raises(InvalidArgument):
        TimeStepper().solve("backward")


def test_integrate_empty_grid_raises() -> None:
    with pytest.raises(InvalidArgument):
        integrate(np.array([]), 0.0, 0.2, lambda t, x: x)


def test_integrate_mismatched_step_raises() -> None:
    t = build_time_grid(0.2, 10)
    with pytest.raises(InvalidArgument):
        integrate(t, 0.0, 0.1, lambda t, x: x)


def test_integrate_unknown_rate_form_raises() -> None:
    t = build_time_grid(0.2, 10)
    with pytest.raises(InvalidArgument):
        integrate(t, 0.0, 0.2, lambda t, x: x, depends_on="velocity")


def test_blow_up_propagates_non_finite_values() -> None:
    # Exact solution 1/(2.5 - t) blows up at t = 2.5
    t = build_time_grid(0.2, 40)
    with np.errstate(over="ignore", invalid="ignore"):
        x = integrate(t, 0.4, 0.2, lambda x: x ** 2, "start", depends_on="state")
    assert len(x) == len(t)
    assert np.all(np.isfinite(x[:11]))
    assert np.isinf(x[-1])


def test_verbose_reports_non_finite_solution(capsys) -> None:
    stepper = TimeStepper(lambda x: x ** 2, n_steps=40, x0=0.4,
                          depends_on="state", verbose=True)
    with np.errstate(over="ignore", invalid="ignore"):
        stepper.solve()
    out = capsys.readouterr().out
    assert "start:" in out
    assert "non-finite" in out


def test_quiet_by_default(capsys) -> None:
    TimeStepper().solve_all()
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("dt", ["0.2", None])
def test_non_numeric_step_size_raises(dt) -> None:
    with pytest.raises(InvalidArgument):
        TimeStepper(dt=dt)
