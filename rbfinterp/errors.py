"""Exception types raised by rbfinterp.

Argument preconditions (bad shapes, too few points for the requested
polynomial degree, wrong value-vector length) raise the built-in
``ValueError``. The classes below cover lifecycle and numerical failures.
"""

import numpy as np


class RbfInterpError(Exception):
    """Base class for errors raised by rbfinterp."""


class InvalidStateError(RbfInterpError, RuntimeError):
    """Raised when an operation is called in the wrong lifecycle state."""


class SolverError(RbfInterpError, np.linalg.LinAlgError):
    """Raised when a linear system is singular and cannot be factored or solved."""
