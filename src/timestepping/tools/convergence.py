import numpy as np
from typing import Callable, Dict, Optional, Sequence, Tuple
from scipy.interpolate import interp1d as scipy_interp1d
from ..errors import InvalidArgument
from .time_grid import build_time_grid, DTYPE
from .rate_function import as_rate_function, DependsOn
from .stepping_rules import STEPPING_RULES, canonical_rule
from ..time_stepper import integrate


class ConvergenceStudy:
    """
    Step-halving study: dt0, dt0/2, dt0/4, ... and the error of each
    stepping rule at a fixed sample time.

    Parameters
    ----------
    rate : Callable
        Rate f, see `depends_on`.
    x0 : float
        Initial value at t0.
    exact : Callable
        Closed form x(t), evaluated at `sample_time`.
    sample_time : float
        Time at which errors are measured. Must be a whole number of
        steps of dt0 after t0.
    dt0 : float, optional
        Coarsest step size. Default: 0.2
    levels : int, optional
        Number of step sizes (>= 2). Default: 4
    depends_on : {"time", "state", "both"}, optional
        Default: "both"
    rules : sequence of str, optional
        Rules to study. Default: all of them.
    t0 : float, optional
        Initial time. Default: 0.0
    verbose : bool, optional
        If True, prints the error of every rule and level. Default: False
    """
    def __init__(self,
                 rate: Callable,
                 x0: float,
                 exact: Callable,
                 sample_time: float,
                 dt0: float = 0.2,
                 levels: int = 4,
                 depends_on: DependsOn = "both",
                 rules: Optional[Sequence[str]] = None,
                 t0: float = 0.,
                 verbose: bool = False):

        if not np.isfinite(dt0) or dt0 <= 0:
            raise InvalidArgument(f"dt0 must be a positive number, got {dt0}")
        if levels < 2:
            raise InvalidArgument(f"levels must be >= 2, got {levels}")

        span = sample_time - t0
        n0 = int(round(span / dt0))
        if n0 < 1 or not np.isclose(n0 * dt0, span, rtol=1e-9, atol=1e-12):
            raise InvalidArgument(
                f"sample_time {sample_time} is not reachable from t0={t0} in steps of {dt0}")

        self.rate = as_rate_function(rate, depends_on)
        self.x0 = x0
        self.exact = exact
        self.sample_time = DTYPE(sample_time)
        self.t0 = DTYPE(t0)
        self.n0 = n0
        self.dts = DTYPE(dt0) / 2. ** np.arange(levels)
        if rules is None:
            rules = list(STEPPING_RULES)
        if len(rules) == 0:
            raise InvalidArgument("rules must name at least one stepping rule")
        self.rules = [canonical_rule(r) for r in rules]
        self.verbose = verbose

    def _sample(self, t: np.ndarray, x: np.ndarray) -> DTYPE:
        """
        Numerical solution at sample_time (linear interpolation on the grid).
        The last grid node can round a few ulps short of sample_time.
        """
        return DTYPE(scipy_interp1d(t, x, kind='linear', axis=0,
                                    bounds_error=False,
                                    fill_value='extrapolate')(self.sample_time))

    def run(self) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        """
        Returns
        -------
        dts : np.ndarray
            Step sizes, coarsest first.
        errors : dict
            Absolute error at sample_time per rule, one entry per step size.
        """
        x_ref = DTYPE(self.exact(self.sample_time))
        errors = {rule: np.empty(len(self.dts), dtype=DTYPE) for rule in self.rules}

        for k, dt in enumerate(self.dts):
            t = build_time_grid(dt, self.n0 * 2 ** k, self.t0)
            for rule in self.rules:
                x = integrate(t, self.x0, dt, self.rate, rule)
                errors[rule][k] = abs(self._sample(t, x) - x_ref)
                if self.verbose:
                    print(f"dt={dt:.3e}  {rule}: err={errors[rule][k]:.3e}")

        return self.dts, errors

    @staticmethod
    def is_monotone(errors: np.ndarray) -> bool:
        """True if the error strictly decreases at every refinement."""
        errors = np.asarray(errors)
        return bool(np.all(np.isfinite(errors)) and np.all(np.diff(errors) < 0))

    @staticmethod
    def observed_order(errors: np.ndarray) -> np.ndarray:
        """log2(e_k / e_{k+1}); about 1 for "start", about 2 for "mid" and "average"."""
        errors = np.asarray(errors, dtype=DTYPE)
        return np.log2(errors[:-1] / errors[1:])
