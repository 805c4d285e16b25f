"""
Matrices of Exact Quantities

- OperableMatrix: grid ownership and in-place row/column operations
- Matrix: arithmetic and row reduction (REF, RREF, rank)
- SquareMatrix: determinant and triangularity
- IdentityMatrix: read-only identity
"""

from .operable_matrix import OperableMatrix
from .matrix import Matrix, dot_product
from .square_matrix import SquareMatrix
from .identity_matrix import IdentityMatrix

__all__ = [
    'OperableMatrix',
    'Matrix',
    'SquareMatrix',
    'IdentityMatrix',
    'dot_product',
]
