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
"""Exceptions raised by the matrixlib package

Every error kind derives from MatrixLibError and from the builtin exception
that is closest in meaning, so callers can catch either.
"""


class MatrixLibError(Exception):
    """Base class of all errors raised by matrixlib."""


class InvalidDimensionError(MatrixLibError, ValueError):
    """A matrix was requested with a non-positive or inconsistent dimension."""

    def __init__(self, dimension, message=None):
        self.dimension = dimension
        super().__init__(message or f"Illegal dimension: {dimension}")


class DimensionMismatchError(MatrixLibError, ValueError):
    """A vector or matrix does not have the shape an operation requires."""

    @classmethod
    def for_shapes(cls, a, b) -> 'DimensionMismatchError':
        """Error for two matrices whose shapes should be equal."""
        return cls(f"{a.row_count}x{a.column_count} not equal to {b.row_count}x{b.column_count}")


class MatrixMultiplicationDimensionError(DimensionMismatchError):
    """The multiplier's row count differs from the multiplicand's column count.

    Let the multiplicand be a MxN matrix. The multiplier must then be a NxP matrix.
    """

    def __init__(self, multiplicand, multiplier):
        super().__init__(f"Multiplier must have {multiplicand.column_count} rows but has {multiplier.row_count}")


class DivisionByZeroError(MatrixLibError, ZeroDivisionError):
    """A quantity was divided by the additive identity."""

    def __init__(self, message="Cannot divide by zero"):
        super().__init__(message)


class NonRealError(MatrixLibError, ArithmeticError):
    """A complex value with a nonzero imaginary part was used as a real value."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"{value} is non-real")


class NotIntegerError(MatrixLibError, ArithmeticError):
    """A quantity that is not a whole number was used as an integer."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"{value} is not an integer")


class ImmutableMatrixError(MatrixLibError, TypeError):
    """A mutating operation was attempted on a read-only matrix."""

    def __init__(self, matrix, operation):
        self.operation = operation
        super().__init__(f"{type(matrix).__name__} is read-only, cannot {operation}")


class ReadMatrixError(MatrixLibError, ValueError):
    """Text or a file could not be read as a matrix."""

    @classmethod
    def unexpected(cls, received, expected) -> 'ReadMatrixError':
        """Error for an unexpected delimiter character."""
        return cls(f"Expected {expected!r} but received {received!r}")


class ExpressionSyntaxError(MatrixLibError, ValueError):
    """An algebraic expression has invalid syntax."""

    def __init__(self, expression, reason="Invalid syntax"):
        self.expression = expression
        super().__init__(f"{reason}: {expression!r}")
