from .rbf_direct_solver import RbfDirectSolver, SolverState
from .factorization import LdltFactor, CholeskyFactor, LuFactor, factor_symmetric
