import numpy as np

from .covariance_function import CovarianceFunction
from .rbf_base import _radial_gradient


class SphericalVariogram(CovarianceFunction):
    r"""
    Spherical covariance model.

    .. math::

        C(r) = \begin{cases}
                   s \left(1 - \frac{3}{2}\frac{r}{a} + \frac{1}{2}\left(\frac{r}{a}\right)^3\right) & r < a \\
                   0 & r \ge a
               \end{cases}

    Examples
    --------
    .. code-block:: python

        from rbfinterp.rbf import SphericalVariogram

        rbf = SphericalVariogram([1.0, 2.0, 0.0])  # psill, range, nugget
        rbf.evaluate(1.0)  # 0.3125
    """

    def evaluate(self, r):
        psill, range_ = self._parameters[0], self._parameters[1]
        r = np.asarray(r, dtype=float)
        t = r / range_
        return np.where(r < range_, psill * (1.0 - 1.5 * t + 0.5 * t ** 3), 0.0)

    def evaluate_gradient(self, diff, r):
        psill, range_ = self._parameters[0], self._parameters[1]

        def dphi_over_r(r_):
            return np.where(r_ < range_, psill * 1.5 * (-1.0 / (range_ * r_) + r_ / range_ ** 3), 0.0)
        return _radial_gradient(diff, r, dphi_over_r)
