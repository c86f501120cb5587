import numpy as np

from .rbf_base import RbfBase, _radial_gradient


class Biharmonic3D(RbfBase):
    r"""
    Biharmonic spline in 3D, :math:`\phi(r) = -s r`.

    Conditionally positive definite of order 1: fits need at least a constant term.
    """
    num_parameters = 1
    parameter_names = ('scale',)
    cpd_order = 1

    def evaluate(self, r):
        return -self._parameters[0] * np.asarray(r, dtype=float)

    def evaluate_gradient(self, diff, r):
        scale = self._parameters[0]
        return _radial_gradient(diff, r, lambda r_: -scale / r_)


class Triharmonic3D(RbfBase):
    r"""
    Triharmonic spline in 3D, :math:`\phi(r) = s r^3`.

    Conditionally positive definite of order 2: fits need at least a linear term.
    """
    num_parameters = 1
    parameter_names = ('scale',)
    cpd_order = 2

    def evaluate(self, r):
        return self._parameters[0] * np.asarray(r, dtype=float) ** 3

    def evaluate_gradient(self, diff, r):
        scale = self._parameters[0]
        return _radial_gradient(diff, r, lambda r_: 3.0 * scale * r_)
