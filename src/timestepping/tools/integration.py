from typing import Callable
import numpy as np
from ..errors import InvalidArgument
from .time_grid import DTYPE


class IntegrationQuadrature:
    """
    Gauss-Legendre reference solutions for rates that only depend on time.

    When f = f(t), the finite difference equation has the exact solution

        x(t) = x(t_0) + \\int_{t_0}^{t} f(s) ds

    which is evaluated here interval by interval on the time grid.

    Parameters
    ----------
    n : int, optional
        Quadrature order (number of nodes/weights). Default: 8
    tol : float, optional
        Threshold below which intervals are treated as zero-length. Default: 1e-12
    verbose : bool, optional
        If True, prints intermediate results. Default: False
    """
    def __init__(self, n: int = 8, tol: float = 1e-12, verbose: bool = False):
        if n < 1:
            raise InvalidArgument(f"quadrature order must be >= 1, got {n}")
        self.n = n
        self.tol = tol
        self.verbose = verbose
        self.xg, self.wg = np.polynomial.legendre.leggauss(n)

    def integrate(self, fun: Callable, lo: float, hi: float) -> float:
        """
        Integrate fun(t) over [lo, hi]. Reversed bounds flip the sign.
        """
        sign = -1. if hi < lo else 1.
        lo, hi = min(lo, hi), max(lo, hi)
        if hi - lo < self.tol:
            return DTYPE(0.)

        # Affine map from [-1, 1] to [lo, hi]
        mid = 0.5 * (hi + lo)
        half = 0.5 * (hi - lo)
        vals = np.array([fun(pt) for pt in mid + half * self.xg], dtype=DTYPE)

        res = DTYPE(sign * half * np.sum(self.wg * vals))
        if self.verbose:
            print(f"fixed_quad: a={lo} b={hi}  res={res}")
        return res

    def reference_solution(self, t: np.ndarray, x0: float, fun: Callable) -> np.ndarray:
        """
        x(t_i) = x0 + sum of the integrals of fun over [t_{k-1}, t_k], k <= i.

        Parameters
        ----------
        t : np.ndarray
            Time grid; t[0] is the initial time.
        x0 : float
            Initial value.
        fun : Callable
            Rate f(t).
        """
        t = np.asarray(t, dtype=DTYPE)
        if t.ndim != 1 or t.size == 0:
            raise InvalidArgument("time grid must be a non-empty 1-D array")
        pieces = [self.integrate(fun, lo, hi) for lo, hi in zip(t[:-1], t[1:])]
        return DTYPE(x0) + np.concatenate(([0.], np.cumsum(pieces)))
