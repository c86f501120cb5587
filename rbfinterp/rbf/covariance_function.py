import numpy as np

from .rbf_base import RbfBase


class CovarianceFunction(RbfBase):
    r"""
    Base class for covariance models parameterized by partial sill, range and nugget.

    The covariance :math:`C(h)` is related to the semivariogram by

    .. math::

        \gamma(h) = c_0 + s - C(h), \quad h > 0

    where :math:`s` is the partial sill and :math:`c_0` the nugget; :math:`\gamma(0) = 0`.

    Parameters
    ----------
    parameters : sequence of float
        ``(psill, range, nugget)``.
    """
    num_parameters = 3
    parameter_names = ('psill', 'range', 'nugget')
    parameter_lower_bounds = (0.0, 1e-12, 0.0)

    def __init__(self, parameters, nugget=None):
        parameters = np.asarray(parameters, dtype=float).ravel()
        if nugget is not None and parameters.shape[0] == self.num_parameters:
            parameters = parameters.copy()
            parameters[2] = nugget
        # The nugget lives in the parameter vector, so RbfBase.__init__ is bypassed.
        self._parameters = None
        self.set_parameters(parameters)

    def set_parameters(self, parameters):
        parameters = np.asarray(parameters, dtype=float).ravel()
        if parameters.shape[0] == self.num_parameters:
            if parameters[0] < 0:
                raise ValueError("Partial sill must be non-negative.")
            if parameters[1] <= 0:
                raise ValueError("Range must be positive.")
            if parameters[2] < 0:
                raise ValueError("Nugget must be non-negative.")
        super().set_parameters(parameters)
        return None

    @property
    def psill(self):
        return self._parameters[0]

    @property
    def range(self):
        return self._parameters[1]

    @property
    def nugget(self):
        return self._parameters[2]

    def set_nugget(self, nugget):
        nugget = float(nugget)
        if nugget < 0:
            raise ValueError("Nugget must be non-negative.")
        self._parameters[2] = nugget
        return None

    def variogram(self, h):
        h = np.asarray(h, dtype=float)
        return np.where(h > 0, self.psill + self.nugget - self.evaluate(h), 0.0)

    def clone(self):
        return type(self)(self.parameters)
