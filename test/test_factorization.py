import pytest
import numpy as np
from rbfinterp.errors import SolverError
from rbfinterp.interpolation import CholeskyFactor, LdltFactor, LuFactor, factor_symmetric


def _symmetric_indefinite(n, seed=0):
    rng = np.random.default_rng(seed)
    a_ = rng.standard_normal((n, n))
    a_ = a_ + a_.T
    eigenvalues = np.linalg.eigvalsh(a_)
    assert eigenvalues.min() < 0 < eigenvalues.max()
    return a_


def test_ldlt_solves_indefinite_system():
    a_ = _symmetric_indefinite(30)
    b = np.arange(30, dtype=float)
    x = LdltFactor(a_).solve(b)
    assert np.allclose(a_ @ x, b)


def test_ldlt_single_entry_and_single_precision():
    assert np.allclose(LdltFactor(np.array([[4.0]])).solve(np.array([2.0])), [0.5])
    a_ = _symmetric_indefinite(10, seed=1).astype(np.float32)
    b = np.ones(10, dtype=np.float32)
    x = LdltFactor(a_).solve(b)
    assert np.allclose(a_.astype(float) @ x, 1.0, atol=1e-3)


def test_ldlt_rejects_singular_matrix():
    with pytest.raises(SolverError):
        LdltFactor(np.zeros((3, 3)))


def test_cholesky_rejects_indefinite_matrix():
    with pytest.raises(SolverError):
        CholeskyFactor(_symmetric_indefinite(8))


def test_factor_symmetric_fast_path_and_fallback():
    rng = np.random.default_rng(4)
    b_ = rng.standard_normal((12, 12))
    spd = b_ @ b_.T + 12 * np.eye(12)
    factor = factor_symmetric(spd, try_cholesky=True)
    assert factor.name == 'cholesky'
    rhs = rng.standard_normal(12)
    assert np.allclose(spd @ factor.solve(rhs), rhs)

    indefinite = _symmetric_indefinite(12, seed=6)
    factor = factor_symmetric(indefinite, try_cholesky=True)
    assert factor.name == 'ldlt', "Indefinite systems must fall back to LDLT."
    assert np.allclose(indefinite @ factor.solve(rhs), rhs)
    assert factor_symmetric(spd).name == 'ldlt'


def test_lu_solves_and_rejects_singular():
    rng = np.random.default_rng(7)
    a_ = rng.standard_normal((9, 9))
    b = rng.standard_normal(9)
    assert np.allclose(a_ @ LuFactor(a_).solve(b), b)
    singular = np.ones((3, 3))
    with pytest.raises(SolverError):
        LuFactor(singular)


@pytest.mark.parametrize("factor_class", [LdltFactor, CholeskyFactor, LuFactor])
def test_rounding_level_pivot_is_singular(factor_class):
    """
    Test that a pivot many orders below machine precision of the largest pivot is rejected.
    """
    nearly_singular = np.diag([1.0, 2.0, 1e-20])
    with pytest.raises(SolverError):
        factor_class(nearly_singular)
    # Well scaled but small matrices are accepted.
    factor = factor_class(np.diag([1e-8, 2e-8, 3e-8]))
    assert np.allclose(factor.solve(np.array([1e-8, 2e-8, 3e-8])), 1.0)
