r"""
Matrix assembly for direct RBF interpolation with a polynomial drift.

Overview
--------

An interpolant

.. math::

    f(x) = \sum_{i=1}^{m} \lambda_i \phi(\| x - x_i \|) + \sum_{k=1}^{l} c_k p_k(x)

is well posed when the weights are orthogonal to the polynomial space on the
data points, :math:`\sum_i \lambda_i p_k(x_i) = 0`. Instead of factoring the
saddle-point system

.. math::

    \begin{bmatrix}
        A & P^\top \\
        P & 0
    \end{bmatrix}
    \begin{bmatrix} \lambda \\ c \end{bmatrix} =
    \begin{bmatrix} d \\ 0 \end{bmatrix}

the weights are written :math:`\lambda = Q \gamma` with
:math:`Q^\top = (-E^\top \; I)`, where :math:`E` holds the Lagrange basis of
``l`` reference points evaluated at the remaining points. The constraint then
holds for any :math:`\gamma`, and :math:`\gamma` solves the smaller symmetric
system :math:`Q^\top A Q \gamma = Q^\top d`.

- **a_matrix**: the interpolation matrix :math:`A`.
- **me_matrix**: the null-space generator :math:`-E`.
- **qtaq_matrix**: :math:`AQ` and :math:`Q^\top A Q`.

See Also
--------

:class:`rbfinterp.interpolation.RbfDirectSolver` : uses these matrices to factor and solve.
"""
from .a_matrix import a_matrix
from .me_matrix import me_matrix
from .qtaq_matrix import qtaq_matrix
