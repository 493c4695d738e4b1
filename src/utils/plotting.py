import matplotlib.pyplot as plt
import numpy as np
from typing import Dict, Optional


class StepperPlotter:
    """
    Plots the solutions of the stepping rules, optionally against the exact result.

    Parameters
    ----------
    t : np.ndarray
        Time grid.
    solutions : Dict[str, np.ndarray]
        Solution per rule, e.g. the output of TimeStepper.solve_all().
    exact : np.ndarray, optional
        Exact solution on the same grid.
    """

    def __init__(self, t: np.ndarray,
                 solutions: Dict[str, np.ndarray],
                 exact: Optional[np.ndarray] = None):
        self.t = np.asarray(t)
        self.solutions = {rule: np.asarray(x) for rule, x in solutions.items()}
        self.exact = None if exact is None else np.asarray(exact)

    @staticmethod
    def _decorate(ax, title, ylabel='x [some units]'):
        ax.set_xlabel('time [some units]', fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.legend(fontsize=11)
        ax.grid(True, alpha=0.3)

    def __plot_rules__(self, figsize=(10, 6)):
        """Every rule on the same axes."""
        fig, ax = plt.subplots(figsize=figsize)
        for rule, x in self.solutions.items():
            ax.plot(self.t, x, label=rule, linewidth=2)
        self._decorate(ax, '3 choices for evaluating f')
        plt.tight_layout()
        return fig, ax

    def __plot_exact__(self, figsize=(10, 6)):
        """Rules plus the exact result."""
        fig, ax = plt.subplots(figsize=figsize)
        for rule, x in self.solutions.items():
            ax.plot(self.t, x, label=rule, linewidth=2)
        ax.plot(self.t, self.exact, 'k--', label='exact', linewidth=2)
        self._decorate(ax, 'With exact result')
        plt.tight_layout()
        return fig, ax

    def __plot_error__(self, figsize=(10, 6)):
        """Absolute error |x - x_exact| of each rule."""
        fig, ax = plt.subplots(figsize=figsize)
        for rule, x in self.solutions.items():
            ax.plot(self.t, np.abs(x - self.exact), label=rule, linewidth=2)
        self._decorate(ax, 'Error against exact result', ylabel='|x - x_exact|')
        plt.tight_layout()
        return fig, ax

    # Public method to plot the results
    def plot(self, which='rules', figsize=None):
        """
        Parameters
        ----------
        which : str
            'rules', 'exact' or 'error' (default: 'rules')
        figsize : tuple, optional
            Figure size. Default: (10, 6)
        """
        figsize = figsize or (10, 6)

        if which in ('exact', 'error') and self.exact is None:
            raise ValueError(f"Option '{which}' needs an exact solution")

        if which == 'rules':
            return self.__plot_rules__(figsize)
        elif which == 'exact':
            return self.__plot_exact__(figsize)
        elif which == 'error':
            return self.__plot_error__(figsize)
        else:
            raise ValueError(f"Option '{which}' not valid. Use 'rules', 'exact' or 'error'")
