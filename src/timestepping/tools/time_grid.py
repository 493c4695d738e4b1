"""
Uniform time grids t_i = t0 + i * dt, i = 0..n.
"""
import numbers
import numpy as np
from ..errors import InvalidArgument

DTYPE = np.float64

# Relative tolerance when comparing the grid spacing against dt
SPACING_RTOL = 1e-9
# Largest spacing error accepted from rounding, as a fraction of dt
SPACING_MAX_ERROR = 1e-3


def _check_real(name: str, value, positive: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not np.isfinite(value):
        raise InvalidArgument(f"{name} must be a finite number, got {value!r}")
    if positive and value <= 0:
        raise InvalidArgument(f"{name} must be a positive number, got {value}")


def build_time_grid(dt: float, n_steps: int, t0: float = 0.) -> np.ndarray:
    """
    Time grid [t0, t0 + dt, ..., t0 + n_steps*dt].

    Parameters
    ----------
    dt : float
        Step size, must be > 0.
    n_steps : int
        Number of steps, must be >= 0. The grid has n_steps + 1 points.
    t0 : float, optional
        Initial time. Default: 0.

    Returns
    -------
    np.ndarray
        Read-only array of length n_steps + 1.
    """
    if isinstance(n_steps, bool) or not isinstance(n_steps, numbers.Integral):
        raise InvalidArgument(f"n_steps must be an integer, got {n_steps!r}")
    if n_steps < 0:
        raise InvalidArgument(f"n_steps must be >= 0, got {n_steps}")
    _check_real("dt", dt, positive=True)
    _check_real("t0", t0)

    t = DTYPE(t0) + np.arange(n_steps + 1, dtype=DTYPE) * DTYPE(dt)
    t.setflags(write=False)
    return t


def check_time_grid(t: np.ndarray, dt: float) -> np.ndarray:
    """
    Validate that `t` is a non-empty, strictly increasing grid spaced by `dt`.

    Returns the grid as a float64 array.
    """
    _check_real("dt", dt, positive=True)

    t = np.asarray(t, dtype=DTYPE)
    if t.ndim != 1:
        raise InvalidArgument(f"time grid must be one-dimensional, got shape {t.shape}")
    if t.size == 0:
        raise InvalidArgument("time grid is empty")

    steps = np.diff(t)
    if np.any(steps <= 0):
        raise InvalidArgument("time grid must be strictly increasing")
    # Differences of large times lose digits: allow a few ulps of max|t|,
    # but never more than SPACING_MAX_ERROR * dt
    atol = min(4 * np.finfo(DTYPE).eps * np.max(np.abs(t)), SPACING_MAX_ERROR * dt)
    if not np.allclose(steps, dt, rtol=SPACING_RTOL, atol=atol):
        raise InvalidArgument(
            f"step size {dt} does not match the grid spacing {steps[0]}")
    return t
