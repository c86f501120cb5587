def qtaq_matrix(a_, me):
    r"""
    Project :math:`A` onto the null space of the polynomial constraints.

    Parameters
    ----------
    a_ : ndarray of shape (m, m)
        Interpolation matrix, rows and columns ordered with the ``l`` reference
        points first.

    me : ndarray of shape (l, m - l)
        The matrix :math:`-E` from :func:`me_matrix`.

    Returns
    -------
    aq : ndarray of shape (m, m - l)
        :math:`A Q = A_{:, :l} (-E) + A_{:, l:}`.

    qtaq : ndarray of shape (m - l, m - l)
        :math:`Q^\top A Q = (-E)^\top (AQ)_{:l} + (AQ)_{l:}`.
    """
    l = me.shape[0]
    aq = a_[:, :l] @ me
    aq += a_[:, l:]
    qtaq = me.T @ aq[:l, :]
    qtaq += aq[l:, :]
    return aq, qtaq
