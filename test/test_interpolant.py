import pytest
import numpy as np
from rbfinterp import Interpolant, SolverOptions
from rbfinterp.errors import InvalidStateError
from rbfinterp.rbf import (Biharmonic3D, ExponentialVariogram, GaussianVariogram,
                           SphericalVariogram, Triharmonic3D)


def _data(n=30, seed=21):
    rng = np.random.default_rng(seed)
    points = rng.random((n, 3))
    values = np.sin(2 * points[:, 0]) + points[:, 1] ** 2 - points[:, 2]
    return points, values


def test_fit_reproduces_data():
    points, values = _data()
    interpolant = Interpolant(SphericalVariogram([1.0, 2.0, 0.0]), poly_degree=1,
                              options=SolverOptions(seed=0)).fit(points, values)
    assert interpolant.fitted
    assert interpolant.weights.shape == (30,)
    assert interpolant.polynomial_coefficients.shape == (4,)
    assert np.allclose(interpolant.evaluate(points), values, atol=1e-7)
    assert np.allclose(interpolant(points, chunk_size=7), values, atol=1e-7)


def test_chunked_evaluation_matches_single_chunk():
    points, values = _data()
    interpolant = Interpolant(Biharmonic3D([1.0]), poly_degree=0).fit(points, values)
    grid = np.random.default_rng(5).random((100, 3))
    whole = interpolant.evaluate(grid, chunk_size=1000)
    chunked = interpolant.evaluate(grid, chunk_size=9, show_progress=True)
    assert np.allclose(whole, chunked)


def test_constant_field():
    points, _ = _data()
    interpolant = Interpolant(ExponentialVariogram([1.0, 0.5, 0.0]), poly_degree=0)
    interpolant.fit(points, np.full(30, 3.0))
    far = np.array([[5.0, 5.0, 5.0], [-2.0, 0.3, 0.1]])
    assert np.allclose(interpolant.evaluate(far), 3.0, atol=1e-8)


def test_refit_matches_fresh_fit():
    points, values = _data()
    rbf = SphericalVariogram([1.0, 1.5, 0.0])
    interpolant = Interpolant(rbf, poly_degree=1).fit(points, values)
    other = np.cos(3 * points[:, 1])
    interpolant.refit(other)
    fresh = Interpolant(rbf, poly_degree=1).fit(points, other)
    assert np.allclose(interpolant.weights, fresh.weights, atol=1e-8)
    assert np.allclose(interpolant.polynomial_coefficients, fresh.polynomial_coefficients, atol=1e-8)


def test_unfitted_interpolant_raises():
    interpolant = Interpolant(SphericalVariogram([1.0, 1.0, 0.0]))
    assert not interpolant.fitted
    with pytest.raises(InvalidStateError):
        interpolant.evaluate(np.zeros((1, 3)))
    with pytest.raises(InvalidStateError):
        interpolant.refit(np.zeros(5))


def test_drift_degree_must_cover_kernel_order():
    with pytest.raises(ValueError):
        Interpolant(Triharmonic3D([1.0]), poly_degree=0)
    with pytest.raises(ValueError):
        Interpolant(Biharmonic3D([1.0]), poly_degree=-1)
    Interpolant(Triharmonic3D([1.0]), poly_degree=1)


def test_fit_validates_input():
    interpolant = Interpolant(SphericalVariogram([1.0, 1.0, 0.0]))
    with pytest.raises(ValueError):
        interpolant.fit(np.zeros((5, 2)), np.zeros(5))
    with pytest.raises(ValueError):
        interpolant.fit(np.random.rand(5, 3), np.zeros(4))


def test_nugget_smooths_the_data():
    points, values = _data()
    values = values + np.random.default_rng(3).normal(scale=0.2, size=30)
    interpolant = Interpolant(ExponentialVariogram([1.0, 0.5, 0.5]), poly_degree=0).fit(points, values)
    assert not np.allclose(interpolant.evaluate(points), values, atol=1e-3), \
        "A nugget should turn exact interpolation into smoothing."


def test_gradient_matches_finite_differences():
    points, values = _data(20)
    interpolant = Interpolant(GaussianVariogram([1.0, 0.5, 0.01]), poly_degree=1).fit(points, values)
    at = np.random.default_rng(8).random((6, 3))
    gradients = interpolant.evaluate_gradient(at)
    assert gradients.shape == (6, 3)
    h = 1e-6
    for k in range(3):
        step = np.zeros(3)
        step[k] = h
        numeric = (interpolant.evaluate(at + step) - interpolant.evaluate(at - step)) / (2 * h)
        assert np.allclose(gradients[:, k], numeric, atol=1e-5)


def test_clear_keeps_coefficients():
    points, values = _data()
    interpolant = Interpolant(SphericalVariogram([1.0, 2.0, 0.0]), poly_degree=0).fit(points, values)
    expected = interpolant.evaluate(points[:3])
    interpolant.clear()
    assert interpolant.solver is None
    assert np.allclose(interpolant.evaluate(points[:3]), expected)
    with pytest.raises(InvalidStateError):
        interpolant.refit(values)


def test_save_and_load(tmp_path):
    points, values = _data()
    rbf = SphericalVariogram([1.2, 1.5, 0.05])
    interpolant = Interpolant(rbf, poly_degree=1).fit(points, values)
    written = interpolant.save(tmp_path / "field")
    assert written == str(tmp_path / "field.rbfi")

    loaded = Interpolant.load(tmp_path / "field")
    assert type(loaded.rbf) is SphericalVariogram
    assert np.allclose(loaded.rbf.parameters, rbf.parameters)
    assert loaded.rbf.nugget == pytest.approx(0.05)
    assert loaded.poly_degree == 1
    assert loaded.solver is None
    grid = np.random.default_rng(9).random((40, 3))
    assert np.allclose(loaded.evaluate(grid), interpolant.evaluate(grid))
