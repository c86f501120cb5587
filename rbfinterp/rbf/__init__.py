"""
Radial basis functions and covariance models.

Every kernel exposes scalar evaluation at a distance (:meth:`evaluate`),
evaluation between points (:meth:`evaluate_points`), a nugget and a gradient
(:meth:`evaluate_gradient`). Kernels are looked up by class name when a fitted
interpolant is restored from disk, see :func:`make_rbf`.
"""
from .rbf_base import RbfBase
from .covariance_function import CovarianceFunction
from .spherical_variogram import SphericalVariogram
from .exponential_variogram import ExponentialVariogram
from .gaussian_variogram import GaussianVariogram
from .polyharmonic import Biharmonic3D, Triharmonic3D


RBF_TYPES = {cls.__name__: cls for cls in (SphericalVariogram,
                                           ExponentialVariogram,
                                           GaussianVariogram,
                                           Biharmonic3D,
                                           Triharmonic3D)}


def make_rbf(name, parameters, nugget=0.0):
    """Instantiate the kernel class called ``name``."""
    try:
        cls = RBF_TYPES[name]
    except KeyError as exc:
        raise ValueError("Unknown RBF type '{}'. Available: {}.".format(name, sorted(RBF_TYPES))) from exc
    if issubclass(cls, CovarianceFunction):
        return cls(parameters)
    return cls(parameters, nugget=nugget)
