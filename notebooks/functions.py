import numpy as np

## Rate functions for the time stepping experiments

def f_constant(t: float) -> float:
    """
    Constant rate: f = 10.
    """
    return 10.0


def f_time(t: float) -> float:
    """
    Rate that depends on time only: f(t) = 2t. Exact solution x(t) = x(0) + t^2.
    """
    return 2 * t


def g_state(x: np.ndarray) -> np.ndarray:
    """
    Rate that depends on the state only: g(x) = x^2. Exact solution x(t) = 1/(x(0)^{-1} - t).
    """
    return x ** 2


def h_both(t: float, x: np.ndarray) -> np.ndarray:
    """
    Rate that depends on time and state: h(t, x) = t sin(x).
    """
    return t * np.sin(x)
