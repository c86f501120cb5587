import logging
from functools import partial

import numpy as np
from scipy import optimize

from ..errors import InvalidStateError
from .cost import WEIGHT_FUNCTIONS, cost

logger = logging.getLogger(__name__)

BOUNDED_METHODS = ('L-BFGS-B', 'TNC', 'SLSQP', 'Powell', 'Nelder-Mead', 'trust-constr')
# L-BFGS-B reports through ``iprint``; its ``disp`` option is deprecated.
DISP_METHODS = ('TNC', 'SLSQP', 'Powell', 'Nelder-Mead', 'trust-constr')


class VariogramFitting:
    """
    This class fits the parameters of a covariance model to an empirical variogram.
    """

    def __init__(self, variogram, model, weight='npairs'):
        if weight not in WEIGHT_FUNCTIONS:
            raise ValueError("Unknown weight '{}'. Available: {}.".format(weight, sorted(WEIGHT_FUNCTIONS)))
        if variogram.bin_distance.shape[0] == 0:
            raise ValueError("Empirical variogram has no populated bins.")
        self.variogram = variogram
        self.model = model
        self.weight = weight
        self.algorithm = None
        self.verbose = False
        self.solution = None
        self.__cost__ = partial(cost, model=model, variogram=variogram, weight=weight)

    def set_solver(self, method='L-BFGS-B', verbose=False):
        """
        Select the scipy.optimize.minimize method used by :meth:`solve`.

        Only methods that honor the parameter bounds are accepted. With
        ``verbose`` the optimizer prints its own convergence messages and
        the fit result is logged at INFO level.
        """
        if method not in BOUNDED_METHODS:
            raise ValueError("Unknown or unbounded optimization method '{}'. Available: {}.".format(
                method, list(BOUNDED_METHODS)))
        options = {'disp': True} if verbose and method in DISP_METHODS else {}
        self.algorithm = partial(optimize.minimize, method=method, tol=1e-12, options=options)
        self.verbose = verbose
        return None

    def initial_parameters(self):
        """
        Heuristic starting point: sill from the largest binned semivariance,
        half the largest binned distance as range, no nugget.
        """
        psill = max(float(np.max(self.variogram.bin_gamma)), np.finfo(float).eps)
        range_ = max(0.5 * float(np.max(self.variogram.bin_distance)), 1e-6)
        return np.array([psill, range_, 0.0])

    def get_bounds(self):
        return [(lb, None) for lb in self.model.parameter_lower_bounds]

    def solve(self, x0=None):
        """
        Run the optimizer.

        Parameters
        ----------
        x0 : ndarray, optional
            Starting parameters; defaults to :meth:`initial_parameters`.

        Returns
        -------
        model : rbfinterp.rbf.CovarianceFunction
            A fitted copy of the model. The optimizer result is kept in ``solution``.
        """
        if self.algorithm is None:
            raise InvalidStateError("Solver not set; call set_solver() first.")
        x0 = self.initial_parameters() if x0 is None else np.asarray(x0, dtype=float)
        solution = self.algorithm(self.__cost__, x0, bounds=self.get_bounds())
        self.solution = solution
        fitted = self.model.clone()
        fitted.set_parameters(np.maximum(solution.x, self.model.parameter_lower_bounds))
        log = logger.info if self.verbose else logger.debug
        log("Variogram fit finished (success=%s, cost=%g): %r", solution.success, solution.fun, fitted)
        return fitted
