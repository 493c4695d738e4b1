import numpy as np
from typing import Callable, Dict, Optional, Tuple, Union
from .tools.time_grid import build_time_grid, check_time_grid, DTYPE
from .tools.rate_function import as_rate_function, constant_rate, DependsOn
from .tools.stepping_rules import SteppingMethod, STEPPING_RULES, RuleName, canonical_rule


def integrate(t: np.ndarray,
              x0: Union[float, np.ndarray],
              dt: float,
              rate: Callable,
              rule: RuleName = "start",
              depends_on: DependsOn = "both") -> np.ndarray:
    """
    Solve x(t + dt) = x(t) + dx over the grid `t`, starting from x0.

    x[0] = x0 and x[i] = x[i-1] + rule(t[i-1], x[i-1], dt, f).

    Parameters
    ----------
    t : np.ndarray
        Uniform time grid spaced by `dt`.
    x0 : float or array
        Initial value.
    dt : float
        Step size; must match the grid spacing.
    rate : Callable or RateFunction
        f(t), f(x) or f(t, x), see `depends_on`.
    rule : {"start", "mid", "average"}
        Where in each interval the rate is evaluated. Default: "start".
    depends_on : {"time", "state", "both"}
        Arguments taken by `rate`. Ignored if `rate` is already a RateFunction.

    Returns
    -------
    np.ndarray
        State sequence with the same length as `t`.

    Raises
    ------
    InvalidArgument
        Empty grid, mismatched step size, unknown rule or rate form.
    """
    t = check_time_grid(t, dt)
    method = SteppingMethod(rule)
    return method.solve(dt, x0, t, as_rate_function(rate, depends_on))


class TimeStepper:
    """
    Time stepping driver for one finite difference equation

        x(t + dt) = x(t) + f(t, x(t)) dt,    x(t0) = x0

    evaluated with any of the stepping rules ("start", "mid", "average").

    Parameters
    ----------
    rate : Callable, optional
        Rate f. If None, the constant rate 10.0 is used.
    dt : float, optional
        Step size. Default: 0.2
    n_steps : int, optional
        Number of steps; final time is t0 + n_steps*dt. Default: 10
    x0 : float or array, optional
        Initial value. Default: 0.0
    depends_on : {"time", "state", "both"}, optional
        Arguments taken by `rate`. Default: "both"
    rule : {"start", "mid", "average"}, optional
        Rule used by `solve()` when none is given. Default: "start"
    t0 : float, optional
        Initial time. Default: 0.0
    verbose : bool, optional
        If True, prints a summary of each solution. Default: False
    """
    def __init__(self,
                 rate: Optional[Callable] = None,
                 dt: float = 0.2,
                 n_steps: int = 10,
                 x0: Union[float, np.ndarray] = 0.,
                 depends_on: DependsOn = "both",
                 rule: RuleName = "start",
                 t0: float = 0.,
                 verbose: bool = False):

        self.rate = constant_rate(10.) if rate is None else as_rate_function(rate, depends_on)
        self.t = build_time_grid(dt, n_steps, t0)
        self.dt = DTYPE(dt)
        self.n_steps = n_steps
        self.x0 = x0
        self.rule = canonical_rule(rule)
        self.verbose = verbose

    def solve(self, rule: Optional[RuleName] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Integrate with `rule` (or the configured rule).

        Returns
        -------
        t : np.ndarray
            Time grid.
        x : np.ndarray
            Solution values at each time point.
        """
        rule = self.rule if rule is None else rule
        x = integrate(self.t, self.x0, self.dt, self.rate, rule)

        if self.verbose:
            print(f"{rule}: x[0]={x[0]}  x[-1]={x[-1]}")
            if not np.isfinite(x).all():
                print(f"{rule}: non-finite values (NaN / Inf) in the solution")
        return self.t, x

    def solve_all(self) -> Dict[str, np.ndarray]:
        """Solution for every stepping rule, keyed by rule name."""
        return {rule: self.solve(rule)[1] for rule in STEPPING_RULES}

    def errors(self, exact: Callable) -> Dict[str, np.ndarray]:
        """
        Absolute error of every rule against a closed form `exact(t)`.
        """
        x_exact = np.asarray(exact(self.t), dtype=DTYPE)
        return {rule: np.abs(x - x_exact) for rule, x in self.solve_all().items()}

    def __repr__(self):
        return (f"TimeStepper(rate={self.rate!r}, dt={self.dt}, n_steps={self.n_steps}, "
                f"x0={self.x0!r}, rule={self.rule!r})")
