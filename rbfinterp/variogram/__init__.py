from .empirical_variogram import EmpiricalVariogram
from .cost import cost, WEIGHT_FUNCTIONS
from .variogram_fitting import VariogramFitting
