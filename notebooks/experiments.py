"""
Time stepping experiments: constant rate, f(t) = 2t, g(x) = x^2 and h(t, x) = t sin(x),
each solved with the three stepping rules and compared with the exact result.

Run as a script to show the figures.
"""
import matplotlib.pyplot as plt
from timestepping import TimeStepper
from timestepping.tools.exact_solutions import (constant_rate_solution,
                                                linear_rate_solution,
                                                quadratic_rate_solution,
                                                time_sine_rate_solution)
from utils.plotting import StepperPlotter
from functions import f_constant, f_time, g_state, h_both

# Time grid shared by all experiments: final time = dt*nmax
DT = 0.2
NMAX = 10

EXPERIMENTS = {
    # name: (rate, depends_on, x0, exact)
    'constant': (f_constant, 'time', 0.0, lambda t: constant_rate_solution(t, 0.0, 10.0)),
    'time': (f_time, 'time', 0.0, lambda t: linear_rate_solution(t, 0.0)),
    'state': (g_state, 'state', 0.4, lambda t: quadratic_rate_solution(t, 0.4)),
    'both': (h_both, 'both', 1.0, lambda t: time_sine_rate_solution(t, 1.0)),
}


def run_experiment(name, dt=DT, n_steps=NMAX, verbose=False):
    """Returns (t, solutions per rule, exact solution on the grid)."""
    rate, depends_on, x0, exact = EXPERIMENTS[name]
    stepper = TimeStepper(rate, dt=dt, n_steps=n_steps, x0=x0,
                          depends_on=depends_on, verbose=verbose)
    return stepper.t, stepper.solve_all(), exact(stepper.t)


if __name__ == '__main__':
    for name in EXPERIMENTS:
        t, solutions, exact = run_experiment(name, verbose=True)
        plotter = StepperPlotter(t, solutions, exact)
        plotter.plot('rules')
        plotter.plot('exact')
    plt.show()
