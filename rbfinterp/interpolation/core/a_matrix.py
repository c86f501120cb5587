import numpy as np
from scipy.spatial.distance import pdist, squareform


def a_matrix(rbf, points, dtype=np.float64):
    r"""
    Construct the RBF interpolation matrix :math:`A`.

    Parameters
    ----------
    rbf : rbfinterp.rbf.RbfBase
        Kernel providing :meth:`evaluate` and :attr:`nugget`.

    points : ndarray of shape (m, 3)
        Points in the order in which rows and columns are assembled.

    dtype : numpy dtype, optional
        Precision of the returned matrix. Default is float64.

    Returns
    -------
    a_ : ndarray of shape (m, m)
        Symmetric matrix with entries

        .. math::

            A_{ii} = \phi(0) + c_0, \qquad A_{ij} = \phi(\| x_i - x_j \|), \; i \ne j

        where :math:`c_0` is the nugget.

    Notes
    -----
    The kernel is evaluated once per unordered pair on the condensed distance
    vector returned by :func:`scipy.spatial.distance.pdist` and mirrored by
    :func:`scipy.spatial.distance.squareform`, so ``a_ == a_.T`` holds exactly.

    Examples
    --------
    .. code-block:: python

        import numpy as np
        from rbfinterp.rbf import SphericalVariogram
        from rbfinterp.interpolation.core import a_matrix

        points = np.random.rand(10, 3)
        A = a_matrix(SphericalVariogram([1.0, 2.0, 0.0]), points)
        assert np.array_equal(A, A.T)

    """
    points = np.asarray(points, dtype=np.float64)
    m = points.shape[0]
    a_ = np.empty((m, m), dtype=dtype)
    if m > 1:
        condensed = np.asarray(rbf.evaluate(pdist(points)), dtype=np.float64)
        a_[:, :] = squareform(condensed, checks=False)
    np.fill_diagonal(a_, float(rbf.evaluate(0.0)) + rbf.nugget)
    return a_
