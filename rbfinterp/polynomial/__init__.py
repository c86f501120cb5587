from .basis_base import dimension, monomial_exponents
from .monomial_basis import MonomialBasis
from .lagrange_basis import LagrangeBasis
