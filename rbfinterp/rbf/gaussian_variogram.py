import numpy as np

from .covariance_function import CovarianceFunction
from .rbf_base import _radial_gradient


class GaussianVariogram(CovarianceFunction):
    r"""
    Gaussian covariance model :math:`C(r) = s \exp(-(r / a)^2)`.
    """

    def evaluate(self, r):
        psill, range_ = self._parameters[0], self._parameters[1]
        return psill * np.exp(-np.square(np.asarray(r, dtype=float) / range_))

    def evaluate_gradient(self, diff, r):
        psill, range_ = self._parameters[0], self._parameters[1]
        return _radial_gradient(diff, r,
                                lambda r_: -2.0 * psill / range_ ** 2 * np.exp(-np.square(r_ / range_)))
