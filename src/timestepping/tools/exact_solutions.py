import numpy as np


def constant_rate_solution(
    t: np.ndarray,
    x0: float,
    c: float,
) -> np.ndarray:
    r"""
    Closed form for dx/dt = c:  x(t) = x(t_0) + c (t - t_0).
    Parameters
    ----------
    t : np.ndarray
        Time grid; t[0] is the initial time.
    x0 : float
        Initial value x(t_0).
    c : float
        Constant rate.
    """
    t = np.asarray(t, dtype=float)
    return x0 + c * (t - t[0])


def linear_rate_solution(
    t: np.ndarray,
    x0: float = 0.,
) -> np.ndarray:
    r"""
    Closed form for dx/dt = 2t starting at t = 0:  x(t) = x(0) + t^2.
    """
    t = np.asarray(t, dtype=float)
    return x0 + t ** 2


def quadratic_rate_solution(
    t: np.ndarray,
    x0: float,
) -> np.ndarray:
    r"""
    Closed form for dx/dt = x^2 starting at t = 0:

        x(t) = 1 / (x(0)^{-1} - t)

    The solution blows up at t = 1/x(0). Values at or past that time are
    returned as numpy computes them (inf or negative).
    Parameters
    ----------
    t : np.ndarray
        Time grid, starting at 0.
    x0 : float
        Initial value, must be nonzero.
    """
    if x0 == 0:
        return np.zeros_like(np.asarray(t, dtype=float))
    t = np.asarray(t, dtype=float)
    with np.errstate(divide="ignore"):
        return 1.0 / (1.0 / x0 - t)


def time_sine_rate_solution(
    t: np.ndarray,
    x0: float,
) -> np.ndarray:
    r"""
    Closed form for dx/dt = t sin(x) starting at t = 0, with 0 < x(0) < pi:

        tan(x/2) = tan(x(0)/2) exp(t^2/2)

    Parameters
    ----------
    t : np.ndarray
        Time grid, starting at 0.
    x0 : float
        Initial value.
    """
    t = np.asarray(t, dtype=float)
    return 2.0 * np.arctan(np.tan(x0 / 2.0) * np.exp(t ** 2 / 2.0))
