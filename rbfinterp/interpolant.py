import logging

import numpy as np
from scipy.spatial.distance import cdist
from tqdm import tqdm

from .errors import InvalidStateError
from .interpolation import RbfDirectSolver
from .polynomial import MonomialBasis

logger = logging.getLogger(__name__)


class Interpolant:
    """
    Interpolant class fits an RBF field with an optional polynomial drift to
    scattered 3D values and evaluates the fitted field.

    Parameters
    ----------
    rbf : rbfinterp.rbf.RbfBase
        Kernel of the field. The nugget of the kernel controls smoothing.

    poly_degree : int
        Degree of the polynomial drift, -1 for none. Must be at least
        ``rbf.cpd_order - 1``.

    options : rbfinterp.config.SolverOptions, optional
        Passed to the direct solver.

    Examples
    --------
    .. code-block:: python

        from rbfinterp import Interpolant, SphericalVariogram

        interpolant = Interpolant(SphericalVariogram([1.0, 2.0, 0.0]), poly_degree=0)
        interpolant.fit(points, values)
        field = interpolant.evaluate(grid_points)
    """

    def __init__(self, rbf, poly_degree=0, options=None):
        if poly_degree < rbf.cpd_order - 1:
            raise ValueError("{} needs a polynomial degree of at least {}, got {}.".format(
                type(rbf).__name__, rbf.cpd_order - 1, poly_degree))
        self.rbf = rbf
        self.poly_degree = int(poly_degree)
        self.options = options
        self.mono_basis = MonomialBasis(self.poly_degree) if self.poly_degree >= 0 else None
        self.solver = None
        self.centers = None
        self.weights = None
        self.polynomial_coefficients = None

    @property
    def fitted(self):
        return self.weights is not None

    def fit(self, points, values):
        """
        Fit the interpolant to values at points.

        Parameters
        ----------
        points : ndarray of shape (m, 3)

        values : ndarray of shape (m,)

        Returns
        -------
        self : Interpolant
        """
        points = np.asarray(points, dtype=np.float64)
        values = np.asarray(values, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError("Points must be an array of shape (m, 3), got {}.".format(points.shape))
        if values.shape != (points.shape[0],):
            raise ValueError("Expected {} values, got shape {}.".format(points.shape[0], values.shape))
        logger.debug("Fitting %d points with %r (degree %d drift).", points.shape[0], self.rbf, self.poly_degree)
        self.solver = RbfDirectSolver(self.rbf, self.poly_degree, points, options=self.options)
        self.centers = points.copy()
        self._set_coefficients(self.solver.solve(values))
        return self

    def refit(self, values):
        """
        Fit new values at the same points, reusing the solver factorization.
        """
        if self.solver is None or self.centers is None:
            raise InvalidStateError("Interpolant has no factorization to reuse; call fit() first.")
        self._set_coefficients(self.solver.solve(values))
        return self

    def clear(self):
        """Release the solver factorization. Fitted coefficients are kept."""
        if self.solver is not None:
            self.solver.clear()
        self.solver = None
        return None

    def _set_coefficients(self, coefficients):
        m = self.centers.shape[0]
        self.weights = np.array(coefficients[:m])
        self.polynomial_coefficients = np.array(coefficients[m:])
        return None

    def _check_fitted(self):
        if not self.fitted:
            raise InvalidStateError("Interpolant is not fitted; call fit() first.")
        return None

    def _chunks(self, points, chunk_size, show_progress, desc):
        n = points.shape[0]
        starts = range(0, n, chunk_size)
        if show_progress:
            starts = tqdm(starts, total=(n + chunk_size - 1) // chunk_size, desc=desc, unit='chunk', leave=False)
        for start in starts:
            yield start, min(start + chunk_size, n)

    def evaluate(self, points, chunk_size=1024, show_progress=False):
        """
        Evaluate the fitted field.

        Parameters
        ----------
        points : ndarray of shape (n, 3)

        chunk_size : int
            Number of points evaluated at once; bounds the size of the
            temporary distance matrix.

        show_progress : bool
            Show a progress bar over the chunks.

        Returns
        -------
        values : ndarray of shape (n,)
        """
        self._check_fitted()
        points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        values = np.zeros(points.shape[0])
        for start, stop in self._chunks(points, chunk_size, show_progress, 'Evaluating field'):
            chunk = points[start:stop]
            values[start:stop] = self.rbf.evaluate(cdist(chunk, self.centers)) @ self.weights
            if self.mono_basis is not None:
                values[start:stop] += self.polynomial_coefficients @ self.mono_basis.evaluate_points(chunk)
        return values

    def __call__(self, points, **kwargs):
        return self.evaluate(points, **kwargs)

    def evaluate_gradient(self, points, chunk_size=1024, show_progress=False):
        """
        Evaluate the gradient of the fitted field.

        Returns
        -------
        gradients : ndarray of shape (n, 3)
        """
        self._check_fitted()
        points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        gradients = np.zeros((points.shape[0], 3))
        for start, stop in self._chunks(points, chunk_size, show_progress, 'Evaluating gradient'):
            chunk = points[start:stop]
            diff = chunk[:, np.newaxis, :] - self.centers[np.newaxis, :, :]
            r = np.linalg.norm(diff, axis=-1)
            gradients[start:stop] = np.einsum('ijk,j->ik', self.rbf.evaluate_gradient(diff, r), self.weights)
            if self.mono_basis is not None:
                gradients[start:stop] += np.einsum(
                    'lik,l->ik', self.mono_basis.evaluate_gradient_points(chunk), self.polynomial_coefficients)
        return gradients

    def save(self, path):
        """Write the fitted coefficients to a ``.rbfi`` file."""
        from .io.rbfi import write_rbfi
        return write_rbfi(self, path)

    @classmethod
    def load(cls, path):
        """Restore a fitted interpolant written by :meth:`save`."""
        from .io.rbfi import read_rbfi
        return read_rbfi(path)
