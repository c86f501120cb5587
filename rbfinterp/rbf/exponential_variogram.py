import numpy as np

from .covariance_function import CovarianceFunction
from .rbf_base import _radial_gradient


class ExponentialVariogram(CovarianceFunction):
    r"""
    Exponential covariance model :math:`C(r) = s \exp(-r / a)`.
    """

    def evaluate(self, r):
        psill, range_ = self._parameters[0], self._parameters[1]
        return psill * np.exp(-np.asarray(r, dtype=float) / range_)

    def evaluate_gradient(self, diff, r):
        psill, range_ = self._parameters[0], self._parameters[1]
        return _radial_gradient(diff, r, lambda r_: -psill / range_ * np.exp(-r_ / range_) / r_)
