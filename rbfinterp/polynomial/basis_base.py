import numpy as np


def dimension(degree):
    """
    Dimension of the space of trivariate polynomials of total degree at most ``degree``.

    Returns 0 for a negative degree, which denotes the absence of a polynomial term.
    """
    if degree < 0:
        return 0
    return (degree + 1) * (degree + 2) * (degree + 3) // 6


def monomial_exponents(degree):
    """
    Exponent triples of the monomials up to ``degree`` in graded order.

    For degree 2 the order is ``1, x, y, z, x^2, xy, xz, y^2, yz, z^2``.

    Returns
    -------
    exponents : ndarray of shape (dimension(degree), 3)
    """
    exponents = []
    for total in range(degree + 1):
        for i in range(total, -1, -1):
            for j in range(total - i, -1, -1):
                exponents.append((i, j, total - i - j))
    return np.array(exponents, dtype=int).reshape(-1, 3)


class BasisBase:
    """Common state of polynomial bases in three variables."""

    def __init__(self, degree):
        self.degree = int(degree)
        self.dimension = dimension(self.degree)

    @staticmethod
    def _as_points(points):
        points = np.asarray(points, dtype=float)
        if points.ndim == 1:
            points = points.reshape(1, -1)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError("Points must be an array of shape (n, 3), got {}.".format(points.shape))
        return points
