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
"""Grid of exact quantities with in-place row and column operations"""

from typing import Iterator, List, Optional, Sequence

from matrixlib.algebra.quantity import NumberKind, Numeric, Quantity, as_quantity
from matrixlib.exceptions import (DimensionMismatchError, DivisionByZeroError, ImmutableMatrixError,
                                  InvalidDimensionError)
from matrixlib.names import MATRIX_END, MATRIX_START, ROW_END, ROW_SEPARATOR, ROW_START, SEPARATOR

ILLEGAL_ROW = "Row length does not equal amount of columns"
ILLEGAL_COLUMN = "Column length does not equal amount of rows"


class OperableMatrix:
    """MxN matrix supporting row and column operations.

    The matrix owns its grid. Values passed in (entries, rows, columns) are
    copied cell by cell and values handed out are fresh lists, so no two
    matrices ever share storage. Quantities themselves are immutable and
    can be shared freely.

    Every mutator checks its arguments before writing, so a call that
    raises leaves the matrix unchanged. Matrices marked read-only raise
    ImmutableMatrixError from every mutator.

    Args:
        row_count (int): Amount of rows, M >= 1.
        column_count (int): Amount of columns, N >= 1.
        entries (list of lists, optional): Row-major values. Anything
            accepted by ``as_quantity`` may be used as a value.
        kind (NumberKind): Kind whose zero fills the matrix when no entries are given.

    Raises:
        InvalidDimensionError: A dimension is not a positive int.
        DimensionMismatchError: The entries do not have the given shape.
    """

    def __init__(self,
                 row_count: int,
                 column_count: int,
                 entries: Optional[Sequence[Sequence[Numeric]]] = None,
                 kind: NumberKind = NumberKind.RATIONAL):
        for dimension in (row_count, column_count):
            if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension <= 0:
                raise InvalidDimensionError(dimension)
        self._rows = row_count
        self._cols = column_count
        self._read_only = False
        if entries is None:
            zero = kind.zero
            self._grid = [[zero] * column_count for _ in range(row_count)]
            return
        if len(entries) != row_count:
            raise DimensionMismatchError(f"Expected {row_count} rows but found {len(entries)}")
        grid = []
        for row in entries:
            if len(row) != column_count:
                raise DimensionMismatchError(ILLEGAL_ROW)
            grid.append([as_quantity(value) for value in row])
        self._grid = grid

    # -- shape and access -----------------------------------------------------

    @property
    def row_count(self) -> int:
        """Amount of rows, M"""
        return self._rows

    @property
    def column_count(self) -> int:
        """Amount of columns, N"""
        return self._cols

    @property
    def shape(self):
        return self._rows, self._cols

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def kind(self) -> NumberKind:
        """Widest number kind among the cells"""
        kind = NumberKind.RATIONAL
        for value in self:
            kind = kind.widest(value.kind)
        return kind

    def get_value(self, row: int, column: int) -> Quantity:
        self._check_row(row)
        self._check_column(column)
        return self._grid[row][column]

    def get_row(self, row: int) -> List[Quantity]:
        """Returns a copy of a row vector"""
        self._check_row(row)
        return list(self._grid[row])

    def get_column(self, column: int) -> List[Quantity]:
        """Returns a copy of a column vector"""
        self._check_column(column)
        return [values[column] for values in self._grid]

    def entries(self) -> List[List[Quantity]]:
        """Returns a copy of the grid as a list of rows"""
        return [list(values) for values in self._grid]

    # -- mutators -------------------------------------------------------------

    def set_value(self, row: int, column: int, value: Numeric) -> None:
        self._check_writable("set a value")
        self._check_row(row)
        self._check_column(column)
        self._grid[row][column] = as_quantity(value)

    def set_row(self, row: int, values: Sequence[Numeric]) -> None:
        """Replaces a row vector

        Raises:
            DimensionMismatchError: ``values`` does not have one value per column.
        """
        self._check_writable("set a row")
        self._check_row(row)
        if len(values) != self._cols:
            raise DimensionMismatchError(ILLEGAL_ROW)
        self._grid[row] = [as_quantity(value) for value in values]

    def set_column(self, column: int, values: Sequence[Numeric]) -> None:
        """Replaces a column vector

        Raises:
            DimensionMismatchError: ``values`` does not have one value per row.
        """
        self._check_writable("set a column")
        self._check_column(column)
        if len(values) != self._rows:
            raise DimensionMismatchError(ILLEGAL_COLUMN)
        converted = [as_quantity(value) for value in values]
        for row in range(self._rows):
            self._grid[row][column] = converted[row]

    def swap_rows(self, a: int, b: int) -> None:
        self._check_writable("swap rows")
        self._check_row(a)
        self._check_row(b)
        self._grid[a], self._grid[b] = self._grid[b], self._grid[a]

    def swap_columns(self, a: int, b: int) -> None:
        self._check_writable("swap columns")
        self._check_column(a)
        self._check_column(b)
        for values in self._grid:
            values[a], values[b] = values[b], values[a]

    def multiply_row(self, row: int, scalar: Numeric) -> None:
        self._check_writable("multiply a row")
        self._check_row(row)
        scalar = as_quantity(scalar)
        self._grid[row] = [value.multiply(scalar) for value in self._grid[row]]

    def divide_row(self, row: int, divisor: Numeric) -> None:
        """Divides every value of a row

        Raises:
            DivisionByZeroError: ``divisor`` is zero.
        """
        self._check_writable("divide a row")
        self._check_row(row)
        divisor = as_quantity(divisor)
        if divisor.is_zero():
            raise DivisionByZeroError()
        self._grid[row] = [value.divide(divisor) for value in self._grid[row]]

    def multiply_column(self, column: int, scalar: Numeric) -> None:
        self._check_writable("multiply a column")
        self._check_column(column)
        scalar = as_quantity(scalar)
        for values in self._grid:
            values[column] = values[column].multiply(scalar)

    def divide_column(self, column: int, divisor: Numeric) -> None:
        """Divides every value of a column

        Raises:
            DivisionByZeroError: ``divisor`` is zero.
        """
        self._check_writable("divide a column")
        self._check_column(column)
        divisor = as_quantity(divisor)
        if divisor.is_zero():
            raise DivisionByZeroError()
        for values in self._grid:
            values[column] = values[column].divide(divisor)

    def row_sum(self, row: int, addend_row: int, scalar: Numeric) -> None:
        """Adds ``scalar`` times ``addend_row`` to ``row``

        This is the elimination step of Gaussian elimination.
        """
        self._check_writable("add rows")
        self._check_row(row)
        self._check_row(addend_row)
        scalar = as_quantity(scalar)
        addend = self._grid[addend_row]
        self._grid[row] = [value.add(addend[col].multiply(scalar)) for col, value in enumerate(self._grid[row])]

    # -- copying --------------------------------------------------------------

    def _copy_type(self) -> type:
        return type(self)

    def copy(self) -> 'OperableMatrix':
        """Returns a writable deep copy with its own grid"""
        clone = object.__new__(self._copy_type())
        OperableMatrix.__init__(clone, self._rows, self._cols, self._grid)
        return clone

    # -- internals ------------------------------------------------------------

    def _set(self, row: int, column: int, value: Quantity) -> None:
        # Unguarded write for constructors and for results that are still private
        self._grid[row][column] = value

    def _check_writable(self, operation: str) -> None:
        if self._read_only:
            raise ImmutableMatrixError(self, operation)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise IndexError(f"Row index {row} out of range for {self._rows} rows")

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._cols:
            raise IndexError(f"Column index {column} out of range for {self._cols} columns")

    # -- Python protocol ------------------------------------------------------

    def __iter__(self) -> Iterator[Quantity]:
        """Iterates over the values left to right, then top to bottom"""
        for values in self._grid:
            yield from values

    def __eq__(self, other) -> bool:
        if not isinstance(other, OperableMatrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __str__(self) -> str:
        rows = (ROW_START + SEPARATOR.join(str(value) for value in values) + ROW_END for values in self._grid)
        return MATRIX_START + ROW_SEPARATOR.join(rows) + MATRIX_END

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows}x{self._cols}, '{self}')"
