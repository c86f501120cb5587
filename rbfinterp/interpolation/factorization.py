"""
Dense factorizations with a common ``solve(b)`` interface.

The reduced system of the direct solver is symmetric but not necessarily
positive definite (covariance and polyharmonic kernels can both produce
indefinite matrices), so :class:`LdltFactor` is the default. :class:`CholeskyFactor`
is an optional fast path and :class:`LuFactor` serves the unreduced system.

Every factor raises :class:`~rbfinterp.errors.SolverError` when a pivot is
not finite or its magnitude is at most ``n * eps * max|pivot|``. A singular
system (e.g. two identical points) factors with rounding-level pivots rather
than exact zeros, so the check is relative. :class:`LuFactor` also rejects
a LAPACK reciprocal condition estimate below machine epsilon.
"""
import logging
import warnings

import numpy as np
from scipy.linalg import (LinAlgWarning, cho_factor, cho_solve, get_lapack_funcs, ldl, lu_factor,
                          lu_solve, solve_banded, solve_triangular)

from ..errors import SolverError

logger = logging.getLogger(__name__)


class LdltFactor:
    r"""
    Bunch-Kaufman factorization :math:`A = L D L^\top` of a symmetric matrix.

    ``scipy.linalg.ldl`` returns a factor ``lu`` such that ``lu[perm]`` is unit
    lower triangular and a block diagonal ``d`` with 1x1 and 2x2 blocks. A solve
    is two triangular solves around a tridiagonal solve with ``d``.
    """
    name = 'ldlt'

    def __init__(self, a_):
        lu, d, perm = ldl(a_, lower=True, hermitian=True)
        _check_block_pivots(d)
        self.n = a_.shape[0]
        self.perm = perm
        self.l_perm = np.ascontiguousarray(lu[perm])
        self.d_bands = np.zeros((3, self.n), dtype=d.dtype)
        self.d_bands[0, 1:] = np.diagonal(d, 1)
        self.d_bands[1, :] = np.diagonal(d)
        self.d_bands[2, :-1] = np.diagonal(d, -1)

    def solve(self, b):
        y = solve_triangular(self.l_perm, b[self.perm], lower=True, unit_diagonal=True)
        z = solve_banded((1, 1), self.d_bands, y)
        w = solve_triangular(self.l_perm, z, lower=True, trans='T', unit_diagonal=True)
        x = np.empty_like(w)
        x[self.perm] = w
        return x


class CholeskyFactor:
    name = 'cholesky'

    def __init__(self, a_):
        try:
            self._c = cho_factor(a_, lower=True)
        except np.linalg.LinAlgError as exc:
            raise SolverError("Matrix is not positive definite.") from exc
        _check_pivots(np.square(np.diagonal(self._c[0])))

    def solve(self, b):
        return cho_solve(self._c, b)


class LuFactor:
    name = 'lu'

    def __init__(self, a_):
        with warnings.catch_warnings():
            # Singular pivots are reported below as a SolverError.
            warnings.simplefilter('ignore', LinAlgWarning)
            self._lu = lu_factor(a_)
        _check_pivots(np.diagonal(self._lu[0]))
        gecon, = get_lapack_funcs(('gecon',), (self._lu[0],))
        rcond, _ = gecon(self._lu[0], np.linalg.norm(a_, 1))
        if not rcond >= np.finfo(self._lu[0].dtype).eps:
            raise SolverError("Matrix is numerically singular (reciprocal condition number {:.3g}).".format(rcond))

    def solve(self, b):
        return lu_solve(self._lu, b)


def factor_symmetric(a_, try_cholesky=False):
    """
    Factor a symmetric matrix, optionally trying Cholesky before LDLT.

    Returns
    -------
    factor : CholeskyFactor or LdltFactor
    """
    if try_cholesky:
        try:
            return CholeskyFactor(a_)
        except SolverError:
            logger.warning("Cholesky factorization of the reduced system failed; falling back to LDLT.")
    return LdltFactor(a_)


def _check_pivots(pivots):
    """
    Raise SolverError unless every pivot is finite and, in magnitude, above
    ``n * eps * max|pivot|``.
    """
    pivots = np.abs(np.asarray(pivots))
    if pivots.size == 0:
        return None
    if not np.all(np.isfinite(pivots)):
        raise SolverError("Factorization produced non-finite pivots.")
    tolerance = pivots.shape[0] * np.finfo(pivots.dtype).eps * np.max(pivots)
    small = np.flatnonzero(pivots <= tolerance)
    if small.size > 0:
        raise SolverError("Matrix is numerically singular (pivot {} of magnitude {:.3g}, tolerance {:.3g}).".format(
            small[0], pivots[small[0]], tolerance))
    return None


def _check_block_pivots(d):
    """Relative pivot check on the 1x1 and 2x2 blocks of an LDLT block diagonal."""
    n = d.shape[0]
    magnitudes = []
    i = 0
    while i < n:
        if i + 1 < n and d[i + 1, i] != 0:
            # Eigenvalue magnitudes of the symmetric 2x2 block.
            magnitudes.extend(np.linalg.eigvalsh(d[i:i + 2, i:i + 2]))
            i += 2
        else:
            magnitudes.append(d[i, i])
            i += 1
    _check_pivots(np.array(magnitudes, dtype=d.dtype))
    return None
