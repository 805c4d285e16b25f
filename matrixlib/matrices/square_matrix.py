#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Square matrices: determinant and triangularity"""

import logging
from typing import Optional, Sequence

from matrixlib.algebra.quantity import NumberKind, Numeric, Quantity
from matrixlib.exceptions import InvalidDimensionError
from matrixlib.matrices.matrix import Matrix
from matrixlib.matrices.operable_matrix import OperableMatrix

LOG = logging.getLogger(__name__)


class SquareMatrix(Matrix):
    """A NxN matrix with an equal amount of rows and columns.

    Args:
        dimension (int): Amount of rows and columns.
        entries (list of lists, optional): Row-major values.
        kind (NumberKind): Kind whose zero fills the matrix when no entries are given.
    """

    def __init__(self,
                 dimension: int,
                 entries: Optional[Sequence[Sequence[Numeric]]] = None,
                 kind: NumberKind = NumberKind.RATIONAL):
        super().__init__(dimension, dimension, entries, kind)

    @staticmethod
    def from_matrix(matrix: OperableMatrix) -> 'SquareMatrix':
        """Copies a matrix that happens to be square into a writable SquareMatrix

        Raises:
            InvalidDimensionError: The matrix is not square.
        """
        if matrix.row_count != matrix.column_count:
            raise InvalidDimensionError(matrix.shape, f"{matrix.row_count}x{matrix.column_count} matrix is not square")
        return SquareMatrix(matrix.row_count, matrix.entries())

    def det(self, correct_sign: bool = False) -> Quantity:
        """Determinant as the product of the diagonal of a row echelon form.

        The reduction runs on a copy, this matrix is left unchanged.

        Every row swap during elimination flips the sign of the true
        determinant. By default the swaps are not accounted for, so the
        result has the wrong sign whenever an odd number of swaps occurred;
        a warning is logged in that case. Pass ``correct_sign=True`` for
        the exact determinant.

        Args:
            correct_sign (bool): Negate the result once per row swap.

        Returns:
            (Quantity): The determinant.
        """
        work = self.copy()
        swaps = work._row_echelon()
        result = NumberKind.RATIONAL.one
        for i in range(self._rows):
            result = result.multiply(work._grid[i][i])
        if swaps and not result.is_zero():
            if correct_sign:
                if swaps % 2:
                    result = result.negate()
            else:
                LOG.warning("Determinant computed after %d row swap(s) without sign correction", swaps)
        return result

    def is_triangular(self) -> bool:
        """Determines if every entry below the diagonal is zero"""
        for row in range(self._rows):
            for col in range(row):
                if not self._grid[row][col].is_zero():
                    return False
        return True
