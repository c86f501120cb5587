__version__ = "0.1.0"

import logging

from .errors import RbfInterpError, InvalidStateError, SolverError
from .config import SolverOptions
from .rbf import (RbfBase, CovarianceFunction, SphericalVariogram, ExponentialVariogram,
                  GaussianVariogram, Biharmonic3D, Triharmonic3D, make_rbf)
from .polynomial import MonomialBasis, LagrangeBasis, dimension
from .interpolation import RbfDirectSolver, SolverState
from .interpolant import Interpolant

# Library code only logs; applications decide where records go.
logging.getLogger(__name__).addHandler(logging.NullHandler())
