import numpy as np
from scipy.linalg import lu_factor, lu_solve

from ..errors import SolverError
from .basis_base import BasisBase
from .monomial_basis import MonomialBasis


class LagrangeBasis(BasisBase):
    r"""
    Lagrange basis of the polynomials up to ``degree`` on a set of reference points.

    Basis function :math:`L_k` equals 1 at reference point :math:`k` and 0 at the
    other reference points. With :math:`P_{ij} = p_i(x_j)` the monomial matrix at
    the reference points, :math:`L_k = \sum_i (P^{-1})_{ki} p_i`.

    Parameters
    ----------
    degree : int
        Polynomial degree, at least 0.

    points : ndarray of shape (dimension(degree), 3)
        Reference points. They must be unisolvent for the polynomial space,
        e.g. four non-coplanar points for degree 1.

    Raises
    ------
    ValueError
        If the degree is negative or the number of points is not the space dimension.

    SolverError
        If the reference points are not unisolvent.
    """

    def __init__(self, degree, points):
        super().__init__(degree)
        if self.degree < 0:
            raise ValueError("Lagrange basis requires a non-negative degree.")
        points = self._as_points(points)
        if points.shape[0] != self.dimension:
            raise ValueError("Degree {} Lagrange basis needs {} reference points, got {}.".format(
                self.degree, self.dimension, points.shape[0]))
        self.points = points
        self.monomial_basis = MonomialBasis(self.degree)
        p = self.monomial_basis.evaluate_points(points)
        if np.linalg.matrix_rank(p) < self.dimension:
            raise SolverError("Reference points are not unisolvent for degree {}.".format(self.degree))
        self._lu_p = lu_factor(p)

    def evaluate_points(self, points):
        """
        Evaluate the Lagrange basis functions.

        Returns
        -------
        values : ndarray of shape (dimension, n)
        """
        return lu_solve(self._lu_p, self.monomial_basis.evaluate_points(points))
