import enum
import logging

import numpy as np
from scipy.linalg import lu_factor, lu_solve

from ..config import SolverOptions
from ..errors import InvalidStateError, SolverError
from ..polynomial import LagrangeBasis, MonomialBasis, dimension
from .core import a_matrix, me_matrix, qtaq_matrix
from .factorization import LuFactor, factor_symmetric

logger = logging.getLogger(__name__)


class SolverState(enum.Enum):
    UNINITIALIZED = 'uninitialized'
    FACTORED = 'factored'
    CLEARED = 'cleared'


class RbfDirectSolver:
    """
    Direct solver for RBF interpolation problems on small to mid-sized
    (up to about 1k) point sets. Costs O(N^2) memory and O(N^3) time.

    The polynomial unknowns are eliminated with a null-space transform built
    from a Lagrange basis on ``l`` randomly chosen reference points, and the
    reduced symmetric system is factored once by :meth:`setup`. :meth:`solve`
    can then be called for any number of value vectors.

    Parameters
    ----------
    rbf : rbfinterp.rbf.RbfBase
        Kernel. Held by reference.

    poly_degree : int
        Degree of the polynomial drift; negative for none.

    points : int or ndarray of shape (m, 3)
        Number of points, or the points themselves, in which case
        :meth:`setup` runs immediately.

    options : rbfinterp.config.SolverOptions, optional

    Notes
    -----
    :meth:`setup` and :meth:`clear` need exclusive access to the instance.
    :meth:`solve` does not modify the instance and may run from several
    threads at once after :meth:`setup` has returned.
    """

    def __init__(self, rbf, poly_degree, points, options=None):
        self.rbf = rbf
        self.poly_degree = int(poly_degree)
        self.options = options if options is not None else SolverOptions()
        self.dtype = self.options.dtype
        self.random_generator = np.random.Generator(np.random.PCG64(seed=self.options.seed))
        self.l = dimension(self.poly_degree)
        if np.ndim(points) == 0:
            self.m = int(points)
            points = None
        else:
            points = np.asarray(points, dtype=np.float64)
            self.m = points.shape[0]
        if self.m <= self.l:
            raise ValueError("Degree {} drift needs more than {} points, got {}.".format(
                self.poly_degree, self.l, self.m))
        self.state = SolverState.UNINITIALIZED
        self.point_idcs = None
        self.inverse_idcs = None
        self.poly_points = None
        # -E, first l rows of A, factorization of Q^T A Q, LU of P^T at the reference points.
        self.me = None
        self.a_top = None
        self.factor = None
        self.lu_of_pt = None
        if points is not None:
            self.setup(points)

    @property
    def n_points(self):
        return self.m

    @property
    def poly_dimension(self):
        return self.l

    def clear(self):
        self.me = None
        self.a_top = None
        self.factor = None
        self.lu_of_pt = None
        self.poly_points = None
        self.state = SolverState.CLEARED
        return None

    def setup(self, points):
        points = np.asarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError("Points must be an array of shape (m, 3), got {}.".format(points.shape))
        if points.shape[0] != self.m:
            raise ValueError("Solver was created for {} points, got {}.".format(self.m, points.shape[0]))
        if self.state is SolverState.FACTORED:
            # A failed refactorization must not leave a stale factorization behind.
            self.clear()
        l, m = self.l, self.m

        if self.poly_degree >= 0:
            lagrange_basis = self._draw_reference_points(points)
            other_points = points[self.point_idcs[l:]]
            me = me_matrix(lagrange_basis, other_points, dtype=self.dtype)
        else:
            self._set_permutation(self.random_generator.permutation(m))

        a_ = a_matrix(self.rbf, points[self.point_idcs], dtype=self.dtype)

        if self.poly_degree >= 0:
            aq, qtaq = qtaq_matrix(a_, me)
            factor = factor_symmetric(qtaq, try_cholesky=self.options.try_cholesky)
            mono_basis = MonomialBasis(self.poly_degree)
            pt = mono_basis.evaluate_points(self.poly_points).T
            self.lu_of_pt = lu_factor(pt)
            self.me = me
            self.a_top = np.array(a_[:l, :])
        else:
            factor = LuFactor(a_)
        self.factor = factor
        self.state = SolverState.FACTORED
        logger.debug("Factored %d points (degree %d drift, l=%d) with %s in %s precision.",
                     m, self.poly_degree, l, factor.name, self.options.precision)
        return None

    def solve(self, values):
        """
        Solve for the interpolation coefficients.

        Parameters
        ----------
        values : ndarray of shape (m,)
            Values at the points, in the order the points were given to :meth:`setup`.

        Returns
        -------
        coefficients : ndarray of shape (m + l,), float64
            RBF weights in the original point order followed by the
            polynomial coefficients in monomial basis order.
        """
        if self.state is not SolverState.FACTORED:
            raise InvalidStateError("Solver is {}; call setup() before solve().".format(self.state.value))
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (self.m,):
            raise ValueError("Expected {} values, got shape {}.".format(self.m, values.shape))
        l, m = self.l, self.m

        values_permuted = values[self.point_idcs].astype(self.dtype)
        lambda_c = np.empty(m + l, dtype=np.float64)
        if self.poly_degree >= 0:
            # Solve (Q^T A Q) gamma = Q^T d and lift lambda = Q gamma.
            qtd = self.me.T @ values_permuted[:l]
            qtd += values_permuted[l:]
            gamma = self.factor.solve(qtd)
            lambda_permuted = np.empty(m, dtype=self.dtype)
            lambda_permuted[:l] = self.me @ gamma
            lambda_permuted[l:] = gamma

            # Solve P^T c = d - A lambda at the reference points.
            residual = values_permuted[:l] - self.a_top @ lambda_permuted
            lambda_c[m:] = lu_solve(self.lu_of_pt, residual)
        else:
            lambda_permuted = self.factor.solve(values_permuted)

        lambda_c[:m] = lambda_permuted[self.inverse_idcs]
        return lambda_c

    def _set_permutation(self, point_idcs):
        self.point_idcs = point_idcs
        self.inverse_idcs = np.empty_like(point_idcs)
        self.inverse_idcs[point_idcs] = np.arange(point_idcs.shape[0])
        return None

    def _draw_reference_points(self, points):
        for draw in range(self.options.max_reference_draws):
            self._set_permutation(self.random_generator.permutation(self.m))
            poly_points = points[self.point_idcs[:self.l]]
            try:
                lagrange_basis = LagrangeBasis(self.poly_degree, poly_points)
            except SolverError:
                logger.warning("Reference points of draw %d are not unisolvent; redrawing.", draw + 1)
                continue
            self.poly_points = poly_points
            return lagrange_basis
        raise SolverError("No unisolvent set of {} reference points found in {} draws. "
                          "The points may be degenerate for a degree {} drift.".format(
                              self.l, self.options.max_reference_draws, self.poly_degree))
