from typing import Callable, Literal, Union
import numpy as np
from ..errors import InvalidArgument

DependsOn = Literal["time", "state", "both"]


class RateFunction:
    """
    Wraps a caller rate f so every stepping rule can call it as rate(t, x).

    Parameters
    ----------
    fun : Callable
        f(t), f(x) or f(t, x), depending on `depends_on`.
    depends_on : {"time", "state", "both"}
        Which arguments `fun` takes. Default: "both".
    """
    def __init__(self, fun: Callable, depends_on: DependsOn = "both"):
        if not callable(fun):
            raise InvalidArgument(f"rate must be callable, got {type(fun).__name__}")
        if depends_on not in ("time", "state", "both"):
            raise InvalidArgument(
                f"depends_on must be 'time', 'state' or 'both', got {depends_on!r}")
        self.fun = fun
        self.depends_on = depends_on

    def __call__(self, t: float, x: Union[float, np.ndarray]):
        if self.depends_on == "time":
            return self.fun(t)
        if self.depends_on == "state":
            return self.fun(x)
        return self.fun(t, x)

    def __repr__(self):
        name = getattr(self.fun, "__name__", repr(self.fun))
        return f"RateFunction({name}, depends_on={self.depends_on!r})"


def as_rate_function(rate, depends_on: DependsOn = "both") -> RateFunction:
    """Return `rate` unchanged if already wrapped, otherwise wrap it."""
    if isinstance(rate, RateFunction):
        return rate
    return RateFunction(rate, depends_on)


def constant_rate(value: float = 10.) -> RateFunction:
    """Rate that ignores time and state."""
    value = np.float64(value)
    return RateFunction(lambda t: value, depends_on="time")
