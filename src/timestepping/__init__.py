from .errors import InvalidArgument
from .time_stepper import TimeStepper, integrate
from .tools.time_grid import build_time_grid
from .tools.rate_function import RateFunction
from .tools.stepping_rules import SteppingMethod, STEPPING_RULES
from .tools.convergence import ConvergenceStudy

__all__ = ['InvalidArgument', 'TimeStepper', 'integrate', 'build_time_grid',
           'RateFunction', 'SteppingMethod', 'STEPPING_RULES', 'ConvergenceStudy']
