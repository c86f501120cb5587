"""Runtime options for the direct solver.

Options can be given explicitly or read from the environment:

>>> from rbfinterp.config import SolverOptions
>>> SolverOptions(precision='single', seed=0).dtype
dtype('float32')

Recognized environment variables:

``RBFINTERP_PRECISION``
    ``double`` (default) or ``single``.
``RBFINTERP_SEED``
    Integer seed for the point permutation. Unset means a fresh seed per solver.
``RBFINTERP_TRY_CHOLESKY``
    Try a Cholesky factorization of the reduced system before LDLT.
``RBFINTERP_MAX_REFERENCE_DRAWS``
    How many permutations may be drawn to find unisolvent reference points.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np


_PRECISIONS: Mapping[str, type] = {
    'double': np.float64,
    'single': np.float32,
}


def env_flag(name: str, default: bool = False, environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    val = environ.get(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: Optional[int] = None,
            environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    environ = os.environ if environ is None else environ
    val = environ.get(name)
    if val is None or not str(val).strip():
        return default
    try:
        return int(str(val).strip())
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer, got '{val}'.") from exc


@dataclass
class SolverOptions:
    """
    Options controlling :class:`rbfinterp.interpolation.RbfDirectSolver`.

    Parameters
    ----------
    precision : str
        Floating point precision of the internal matrices, ``'double'`` or
        ``'single'``. Results are always returned as float64.
    seed : int or None
        Seed of the generator used to permute the points. ``None`` draws
        a fresh seed, so each solver splits the points differently.
    try_cholesky : bool
        Attempt a Cholesky factorization of the reduced system first and
        fall back to LDLT when the matrix is not positive definite.
    max_reference_draws : int
        Number of random permutations tried when the first ``l`` points
        cannot carry a Lagrange basis.
    """
    precision: str = 'double'
    seed: Optional[int] = None
    try_cholesky: bool = False
    max_reference_draws: int = 16

    def __post_init__(self):
        if self.precision not in _PRECISIONS:
            raise ValueError(f"Unsupported precision '{self.precision}'. "
                             f"Choose one of {sorted(_PRECISIONS)}.")
        if self.max_reference_draws < 1:
            raise ValueError("max_reference_draws must be at least 1.")

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_PRECISIONS[self.precision])

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "SolverOptions":
        """Build options from ``RBFINTERP_*`` variables; keyword overrides win."""
        environ = os.environ if environ is None else environ
        values = {
            'precision': environ.get('RBFINTERP_PRECISION', 'double').strip().lower(),
            'seed': env_int('RBFINTERP_SEED', None, environ),
            'try_cholesky': env_flag('RBFINTERP_TRY_CHOLESKY', False, environ),
            'max_reference_draws': env_int('RBFINTERP_MAX_REFERENCE_DRAWS', 16, environ),
        }
        values.update(overrides)
        return cls(**values)
