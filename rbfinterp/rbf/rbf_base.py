from abc import ABC, abstractmethod

import numpy as np


class RbfBase(ABC):
    r"""
    Base class for radial basis functions :math:`\phi(r)` in three dimensions.

    Parameters
    ----------
    parameters : sequence of float
        Model parameters. The expected length is given by ``num_parameters``.

    nugget : float, optional
        Value added to the diagonal of the interpolation matrix. Models
        measurement noise and improves conditioning. Default is 0.

    Notes
    -----
    Subclasses implement :meth:`evaluate` and :meth:`evaluate_gradient`. The
    attribute ``cpd_order`` is the order of conditional positive definiteness
    of the kernel; an interpolant needs a polynomial term of degree at least
    ``cpd_order - 1`` for the linear system to be well posed.
    """
    num_parameters = 0
    parameter_names = ()
    cpd_order = 0

    def __init__(self, parameters, nugget=0.0):
        self._parameters = None
        self._nugget = 0.0
        self.set_parameters(parameters)
        self.set_nugget(nugget)

    @property
    def parameters(self):
        return self._parameters.copy()

    def set_parameters(self, parameters):
        parameters = np.asarray(parameters, dtype=float).ravel()
        if parameters.shape[0] != self.num_parameters:
            raise ValueError("{} expects {} parameters {}, got {}.".format(
                type(self).__name__, self.num_parameters, self.parameter_names, parameters.shape[0]))
        if not np.all(np.isfinite(parameters)):
            raise ValueError("Kernel parameters must be finite.")
        self._parameters = parameters
        return None

    @property
    def nugget(self):
        return self._nugget

    def set_nugget(self, nugget):
        nugget = float(nugget)
        if nugget < 0:
            raise ValueError("Nugget must be non-negative.")
        self._nugget = nugget
        return None

    @abstractmethod
    def evaluate(self, r):
        """Evaluate the kernel at distance(s) ``r``."""

    def evaluate_points(self, p, q):
        """
        Evaluate the kernel between points ``p`` and ``q``.

        Both arguments are arrays whose last axis holds the three coordinates;
        leading axes broadcast against each other.
        """
        diff = np.asarray(p, dtype=float) - np.asarray(q, dtype=float)
        return self.evaluate(np.linalg.norm(diff, axis=-1))

    @abstractmethod
    def evaluate_gradient(self, diff, r):
        r"""
        Gradient of :math:`\phi(\|x\|)` with respect to :math:`x`.

        Parameters
        ----------
        diff : ndarray of shape (..., 3)
            Offsets :math:`x - c` from the kernel center.

        r : ndarray of shape (...)
            Norms of ``diff``.

        Returns
        -------
        grad : ndarray of shape (..., 3)
            Zero where ``r == 0``.
        """

    def clone(self):
        return type(self)(self.parameters, nugget=self.nugget)

    def __repr__(self):
        params = ", ".join("{}={:g}".format(name, value)
                           for name, value in zip(self.parameter_names, self._parameters))
        return "{}({}, nugget={:g})".format(type(self).__name__, params, self.nugget)


def _radial_gradient(diff, r, dphi_over_r):
    """Scale offsets by :math:`\\phi'(r) / r`, masking the kernel centers."""
    diff = np.asarray(diff, dtype=float)
    r = np.asarray(r, dtype=float)
    mask = r > 0
    # Kernel centers get a dummy radius so dphi_over_r never divides by zero.
    scale = np.where(mask, dphi_over_r(np.where(mask, r, 1.0)), 0.0)
    return scale[..., np.newaxis] * diff
