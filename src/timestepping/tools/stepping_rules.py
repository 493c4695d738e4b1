"""
Explicit stepping rules for finite difference equations x(t + dt) = x(t) + f(t, x) dt.
"""
from typing import Callable, Dict, Union, Literal
import numpy as np
from ..errors import InvalidArgument
from .time_grid import DTYPE

RuleName = Literal["start", "mid", "average"]


def delta_x_start(t0: float, x0, dt: float, f: Callable):
    """Rate at the start of the interval: dx = f(t0, x0) dt"""
    return f(t0, x0) * dt


def delta_x_mid(t0: float, x0, dt: float, f: Callable):
    """
    Rate at the middle of the interval, with a half Euler step
    to estimate the state there:

        x_mid = x0 + f(t0, x0) dt/2
        dx    = f(t0 + dt/2, x_mid) dt
    """
    x_mid = x0 + f(t0, x0) * dt / 2
    return f(t0 + dt / 2, x_mid) * dt


def delta_x_average(t0: float, x0, dt: float, f: Callable):
    """
    Average of the rates at both ends of the interval. The end state
    comes from a single forward Euler step:

        x_end = x0 + f(t0, x0) dt
        dx    = (f(t0, x0) + f(t0 + dt, x_end)) / 2 dt
    """
    f_start = f(t0, x0)
    x_end = x0 + f_start * dt
    f_ave = (f_start + f(t0 + dt, x_end)) / 2
    return f_ave * dt


STEPPING_RULES: Dict[str, Callable] = {
    "start": delta_x_start,
    "mid": delta_x_mid,
    "average": delta_x_average,
}

_ALIASES = {"ave": "average"}


def canonical_rule(rule: str) -> str:
    """Resolve aliases and reject unknown rule names."""
    name = _ALIASES.get(rule, rule) if isinstance(rule, str) else None
    if name not in STEPPING_RULES:
        raise InvalidArgument(
            f"rule must be one of {sorted(STEPPING_RULES)}, got {rule!r}")
    return name


def get_stepping_rule(rule: str) -> Callable:
    """Look up an increment function by name."""
    return STEPPING_RULES[canonical_rule(rule)]


class SteppingMethod:
    """
    Explicit integrator for x(t + dt) = x(t) + dx over a time grid.

    - rule="start":   rate at the start of each interval (forward Euler)
    - rule="mid":     rate at the midpoint
    - rule="average": mean of the rates at both ends
    """

    def __init__(self, rule: RuleName = "start"):
        self.rule = canonical_rule(rule)
        self.increment = STEPPING_RULES[self.rule]

    def solve(self,
              dt: float,
              x0: Union[float, np.ndarray],
              t_vec: np.ndarray,
              rate: Callable) -> np.ndarray:
        """
        Marches x over t_vec.

        Parameters
        ----------
        dt : float
            Time step.
        x0 : float or array
            Initial value (scalar, or a 1-D vector of states).
        t_vec : ndarray
            Time grid, spaced by dt.
        rate : Callable
            rate(t, x) -> dx/dt

        Returns
        -------
        x_hist : ndarray
            State at each grid time, x_hist[0] == x0.
        """
        dt = DTYPE(dt)
        is_scalar = np.ndim(x0) == 0
        n = len(t_vec)

        # Initial value
        if is_scalar:
            x = np.empty(n, dtype=DTYPE)
            x[0] = DTYPE(x0)
        else:
            x0 = np.asarray(x0, dtype=DTYPE)
            x = np.empty((n, len(x0)), dtype=DTYPE)
            x[0] = x0

        # Each step only looks at the previous one
        for i in range(1, n):
            x[i] = x[i - 1] + self.increment(t_vec[i - 1], x[i - 1], dt, rate)

        return x
