from types import SimpleNamespace

import numpy as np
import pytest

from rbfinterp.errors import InvalidStateError
from rbfinterp.rbf import ExponentialVariogram, SphericalVariogram
from rbfinterp.variogram import EmpiricalVariogram, VariogramFitting, cost


def _line():
    points = np.array([[0.0, 0.0, 0.0],
                       [1.0, 0.0, 0.0],
                       [2.0, 0.0, 0.0]])
    return points, np.array([0.0, 1.0, 3.0])


def test_empirical_variogram_bins():
    points, values = _line()
    variogram = EmpiricalVariogram(points, values, bin_width=1.5, n_bins=2)
    assert len(variogram) == 2
    assert np.array_equal(variogram.bin_num_pairs, [2, 1])
    assert np.allclose(variogram.bin_distance, [1.0, 2.0])
    assert np.allclose(variogram.bin_gamma, [1.25, 4.5])


def test_empirical_variogram_drops_far_and_empty_bins():
    points, values = _line()
    variogram = EmpiricalVariogram(points, values, bin_width=1.5, n_bins=1)
    assert np.array_equal(variogram.bin_num_pairs, [2])
    variogram = EmpiricalVariogram(points, values, bin_width=0.5, n_bins=5)
    assert np.allclose(variogram.bin_distance, [1.0, 2.0])


def test_empirical_variogram_validates_input():
    points, values = _line()
    with pytest.raises(ValueError):
        EmpiricalVariogram(points, values, bin_width=0.0, n_bins=2)
    with pytest.raises(ValueError):
        EmpiricalVariogram(points, values[:2], bin_width=1.0, n_bins=2)


def _synthetic(model):
    distance = np.linspace(0.05, 2.0, 40)
    return SimpleNamespace(bin_distance=distance,
                           bin_gamma=model.variogram(distance),
                           bin_num_pairs=np.full(40, 10))


def test_cost_vanishes_for_exact_model():
    model = SphericalVariogram([1.0, 1.0, 0.2])
    variogram = _synthetic(model)
    for weight in ('equal', 'npairs', 'npairs_over_distance_squared', 'cressie'):
        assert cost(model.parameters, model, variogram, weight) == pytest.approx(0.0, abs=1e-20)
    assert cost(np.array([2.0, 1.0, 0.2]), model, variogram, 'equal') > 0
    with pytest.raises(ValueError):
        cost(model.parameters, model, variogram, 'bogus')


def test_fit_recovers_exponential_parameters():
    truth = ExponentialVariogram([1.0, 0.5, 0.1])
    fitting = VariogramFitting(_synthetic(truth), ExponentialVariogram([1.0, 1.0, 0.0]))
    fitting.set_solver('L-BFGS-B')
    fitted = fitting.solve()
    assert isinstance(fitted, ExponentialVariogram)
    assert fitting.solution is not None
    assert np.allclose(fitted.parameters, truth.parameters, atol=1e-2), \
        f"Expected {truth.parameters}, got {fitted.parameters}"


def test_fitting_preconditions():
    model = ExponentialVariogram([1.0, 1.0, 0.0])
    variogram = _synthetic(model)
    fitting = VariogramFitting(variogram, model)
    with pytest.raises(InvalidStateError):
        fitting.solve()
    with pytest.raises(ValueError):
        fitting.set_solver('not-a-method')
    with pytest.raises(ValueError):
        fitting.set_solver('BFGS')
    assert fitting.algorithm is None
    fitting.set_solver('TNC', verbose=True)
    assert fitting.algorithm is not None and fitting.verbose
    with pytest.raises(ValueError):
        VariogramFitting(variogram, model, weight='bogus')
    empty = SimpleNamespace(bin_distance=np.zeros(0), bin_gamma=np.zeros(0), bin_num_pairs=np.zeros(0))
    with pytest.raises(ValueError):
        VariogramFitting(empty, model)
