import numpy as np


def me_matrix(lagrange_basis, other_points, dtype=np.float64):
    r"""
    Construct the null-space generator :math:`-E`.

    :math:`E_{ij}` is the value of the :math:`i`-th Lagrange basis function at the
    :math:`j`-th point outside the reference set. With :math:`Q^\top = (-E^\top \; I)`,
    every vector :math:`Q \gamma` is orthogonal to the polynomial space on the points.

    Parameters
    ----------
    lagrange_basis : rbfinterp.polynomial.LagrangeBasis
        Basis built on the ``l`` reference points.

    other_points : ndarray of shape (m - l, 3)

    Returns
    -------
    me : ndarray of shape (l, m - l)
    """
    return np.asarray(-lagrange_basis.evaluate_points(other_points), dtype=dtype)
