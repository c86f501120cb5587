import numpy as np

from .basis_base import BasisBase, monomial_exponents


class MonomialBasis(BasisBase):
    """
    Canonical monomial basis :math:`x^i y^j z^k`, :math:`i + j + k \\le` degree.
    """

    def __init__(self, degree):
        super().__init__(degree)
        self.exponents = monomial_exponents(self.degree)

    def evaluate_points(self, points):
        """
        Evaluate every monomial at every point.

        Parameters
        ----------
        points : ndarray of shape (n, 3)

        Returns
        -------
        values : ndarray of shape (dimension, n)
        """
        points = self._as_points(points)
        return np.prod(points[np.newaxis, :, :] ** self.exponents[:, np.newaxis, :], axis=2)

    def evaluate_gradient_points(self, points):
        """
        Gradients of every monomial at every point.

        Returns
        -------
        gradients : ndarray of shape (dimension, n, 3)
        """
        points = self._as_points(points)
        gradients = np.zeros((self.dimension, points.shape[0], 3))
        for axis in range(3):
            exponents = self.exponents.copy()
            factor = exponents[:, axis].astype(float)
            exponents[:, axis] = np.maximum(exponents[:, axis] - 1, 0)
            powers = np.prod(points[np.newaxis, :, :] ** exponents[:, np.newaxis, :], axis=2)
            gradients[:, :, axis] = factor[:, np.newaxis] * powers
        return gradients
