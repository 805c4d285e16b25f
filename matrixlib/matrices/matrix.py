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
"""MxN matrices: whole-matrix arithmetic and row reduction"""

import logging
from typing import Optional, Sequence

from matrixlib.algebra.quantity import NumberKind, Numeric, Quantity, as_quantity
from matrixlib.exceptions import DimensionMismatchError, MatrixMultiplicationDimensionError
from matrixlib.matrices.operable_matrix import OperableMatrix

LOG = logging.getLogger(__name__)

DIMENSION_ERROR = "Vector dimensions are not equal"


class Matrix(OperableMatrix):
    """A MxN matrix of exact quantities.

    ``scale``, ``add_entries``, ``multiply`` and ``transpose`` return new
    matrices and leave the receiver alone, while ``ref`` and ``rref``
    transform the receiver in place.

    Example:
        >>> m = Matrix(2, 3, [[1, 2, 3], [4, 5, 6]])
        >>> m.rref()
        >>> str(m)
        '[{1,0,-1};{0,1,2}]'
    """

    def __init__(self,
                 row_count: int,
                 column_count: int,
                 entries: Optional[Sequence[Sequence[Numeric]]] = None,
                 kind: NumberKind = NumberKind.RATIONAL):
        super().__init__(row_count, column_count, entries, kind)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def is_zero(self) -> bool:
        """Determines if every entry is zero"""
        return all(value.is_zero() for value in self)

    def scale(self, scalar: Numeric) -> 'Matrix':
        """Returns a new matrix with every entry multiplied by ``scalar``"""
        scalar = as_quantity(scalar)
        scaled = self.copy()
        for row in range(self._rows):
            for col in range(self._cols):
                scaled._set(row, col, self._grid[row][col].multiply(scalar))
        return scaled

    def add_entries(self, addend: 'Matrix') -> 'Matrix':
        """Returns the entry-wise sum of this matrix and ``addend``

        Raises:
            DimensionMismatchError: The matrices do not have the same shape.
        """
        if self.shape != addend.shape:
            raise DimensionMismatchError.for_shapes(self, addend)
        total = self.copy()
        for row in range(self._rows):
            for col in range(self._cols):
                total._set(row, col, self._grid[row][col].add(addend._grid[row][col]))
        return total

    def multiply(self, multiplier: 'Matrix') -> 'Matrix':
        """Returns the row-by-column product of this matrix and ``multiplier``.

        This matrix is MxN, so ``multiplier`` must be NxP; the product is MxP.

        Raises:
            MatrixMultiplicationDimensionError: The matrices are not compatible.
        """
        if multiplier is None:
            raise TypeError("multiplier must not be None")
        if self._cols != multiplier.row_count:
            raise MatrixMultiplicationDimensionError(self, multiplier)
        product = Matrix(self._rows, multiplier.column_count)
        columns = [multiplier.get_column(col) for col in range(multiplier.column_count)]
        for row in range(self._rows):
            row_vector = self._grid[row]
            for col, column_vector in enumerate(columns):
                product._set(row, col, dot_product(row_vector, column_vector))
        return product

    def transpose(self) -> 'Matrix':
        """Returns a new NxM matrix with rows and columns exchanged"""
        return Matrix(self._cols, self._rows, [self.get_column(col) for col in range(self._cols)])

    # =========================================================================
    # Row reduction
    # =========================================================================

    def ref(self) -> None:
        """Reduces the matrix into row echelon form, in place

        The reduction runs on a copy that replaces the grid once it is done,
        so a reduction that raises leaves the matrix unchanged.
        """
        self._check_writable("reduce to row echelon form")
        work = self.copy()
        work._row_echelon()
        self._grid = work._grid

    def rref(self) -> None:
        """Reduces the matrix into reduced row echelon form, in place

        Like ``ref``, a reduction that raises leaves the matrix unchanged.
        """
        self._check_writable("reduce to reduced row echelon form")
        work = self.copy()
        work._reduced_row_echelon()
        self._grid = work._grid

    def _reduced_row_echelon(self) -> None:
        self._row_echelon()
        # Make every leading entry equal to one
        leading = []
        for row in range(self._rows):
            col = self._leading_column(row)
            leading.append(col)
            if col is not None:
                self.divide_row(row, self._grid[row][col])
        # Clear the entries above each leading one, bottom row first
        for row in range(self._rows - 1, -1, -1):
            col = leading[row]
            if col is None:
                continue
            for above in range(row - 1, -1, -1):
                value = self._grid[above][col]
                if not value.is_zero():
                    self.row_sum(above, row, value.negate())

    def rank(self) -> int:
        """Number of nonzero rows in a row echelon form of this matrix"""
        work = self.copy()
        work._row_echelon()
        return sum(1 for row in range(self._rows) if work._leading_column(row) is not None)

    def _leading_column(self, row: int) -> Optional[int]:
        for col, value in enumerate(self._grid[row]):
            if not value.is_zero():
                return col
        return None

    def _row_echelon(self) -> int:
        """Gaussian elimination without normalization.

        For every column index ``col`` the submatrix of rows >= col and
        columns >= col is searched, column by column and top to bottom
        within a column, for the first nonzero entry. Its row is swapped into
        position ``col`` and every nonzero entry below it is eliminated.

        Returns:
            (int): The number of row swaps performed.
        """
        if self._rows == 1:
            return 0
        swaps = 0
        for col in range(self._cols):
            pivot = self._find_pivot(col)
            if pivot is None:
                # The remaining rows are all zero
                break
            pivot_row, pivot_col = pivot
            LOG.debug("Pivot for step %d at (%d, %d)", col, pivot_row, pivot_col)
            if pivot_row != col:
                self.swap_rows(col, pivot_row)
                swaps += 1
            pivot_value = self._grid[col][pivot_col]
            for row in range(col + 1, self._rows):
                value = self._grid[row][pivot_col]
                if value.is_zero():
                    continue
                self.row_sum(row, col, value.divide(pivot_value).negate())
        return swaps

    def _find_pivot(self, start: int):
        for col in range(start, self._cols):
            for row in range(start, self._rows):
                if not self._grid[row][col].is_zero():
                    return row, col
        return None

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, OperableMatrix):
            return NotImplemented
        return self.add_entries(other)

    def __matmul__(self, other):
        if not isinstance(other, OperableMatrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar):
        if isinstance(scalar, OperableMatrix):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__


def dot_product(v: Sequence[Quantity], u: Sequence[Quantity]) -> Quantity:
    """Sum of the pairwise products of two vectors of equal length

    Raises:
        DimensionMismatchError: The vectors have different lengths.
    """
    if len(v) != len(u):
        raise DimensionMismatchError(DIMENSION_ERROR)
    total = NumberKind.RATIONAL.zero
    for a, b in zip(v, u):
        total = total.add(a.multiply(b))
    return total
