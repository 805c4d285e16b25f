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
"""Conversion between matrixlib values and numpy, scipy and sympy

Values cross the boundary exactly wherever the target type allows it:
rationals become ``fractions.Fraction`` or ``sympy.Rational``, complex values
become ``a + b*I`` in sympy. Only ``to_numpy(..., dtype=float)`` and
``dtype=complex`` are lossy.
"""

from fractions import Fraction
from numbers import Complex as _ComplexNumber, Real
from typing import Union

import numpy as np
import sympy
from scipy import sparse

from matrixlib.algebra import Complex, NumberKind, Quantity, Rational
from matrixlib.builder import from_rows
from matrixlib.exceptions import InvalidDimensionError, NonRealError
from matrixlib.matrices import Matrix


# ==================================
# Single values
# ==================================
def to_fraction(value: Union[Quantity, int, Fraction, sympy.Rational, float]) -> Fraction:
    """Converts a real value to a Fraction

    Raises:
        NonRealError: The value is complex with a nonzero imaginary part.
    """
    return _real(value).to_fraction()


def to_sympy_rational(value: Union[Quantity, int, Fraction, sympy.Rational, float]) -> sympy.Rational:
    """Converts a real value to a sympy Rational

    Raises:
        NonRealError: The value is complex with a nonzero imaginary part.
    """
    r = _real(value)
    return sympy.Rational(r.numerator, r.denominator)


def to_sympy_number(value: Quantity) -> sympy.Expr:
    """Converts a quantity to a sympy number, ``a + b*I`` for complex values"""
    if isinstance(value, Complex):
        real = sympy.Rational(value.real.numerator, value.real.denominator)
        imaginary = sympy.Rational(value.imaginary.numerator, value.imaginary.denominator)
        return real + imaginary * sympy.I
    return to_sympy_rational(value)


def _real(value) -> Rational:
    if isinstance(value, Complex):
        return value.to_rational()
    return Rational.value_of(value)


def _from_python(value) -> Quantity:
    # numpy and Python complex scalars are not Real, everything else is handed to Rational
    if isinstance(value, _ComplexNumber) and not isinstance(value, (Real, Quantity)):
        return _demote(Complex(float(value.real), float(value.imag)))
    if isinstance(value, Quantity):
        return value
    return Rational.value_of(value)


def _from_sympy(value) -> Quantity:
    real, imaginary = sympy.sympify(value).as_real_imag()
    if imaginary == 0:
        return _sympy_part(real)
    return Complex(_sympy_part(real), _sympy_part(imaginary))


def _sympy_part(part) -> Rational:
    if part.is_Rational:
        return Rational(int(part.p), int(part.q))
    if part.is_Float:
        return Rational.value_of(float(part))
    raise TypeError(f"Cannot convert {part} to an exact rational")


def _demote(value: Complex) -> Quantity:
    if value.is_real():
        return value.to_rational()
    return value


# ==================================
# Matrices
# ==================================
def to_numpy(matrix: Matrix, dtype=object) -> np.ndarray:
    """Converts a matrix to a 2-dimensional numpy array

    Args:
        matrix (Matrix): The matrix to convert.

        dtype: ``object`` (default) keeps the exact matrixlib values, ``float``
            converts real values to floats, ``complex`` converts every value
            to a Python complex.

    Returns:
        (numpy.ndarray): Array of shape ``matrix.shape``.

    Raises:
        NonRealError: A float array was requested for a matrix with a
        non-real value.
    """
    result = np.empty(matrix.shape, dtype=dtype)
    kind = result.dtype.kind
    flat_result = result.flat
    for i, value in enumerate(matrix):
        if kind == "O":
            flat_result[i] = value
        elif kind == "c":
            flat_result[i] = complex(value)
        else:
            flat_result[i] = float(_real(value))
    return result


def from_numpy(array) -> Matrix:
    """Builds a matrix from a 2-dimensional array-like

    Floats are converted with ``Fraction.limit_denominator``, so the result
    has a denominator of at most 10**6. Floats closer to zero than 5e-7
    become 0. Complex numbers become Complex values.

    Raises:
        InvalidDimensionError: The array is not 2-dimensional or is empty.
    """
    array = np.asarray(array, dtype=object) if not isinstance(array, np.ndarray) else array
    if array.ndim != 2:
        raise InvalidDimensionError(array.ndim, f"Expected a 2-dimensional array but got {array.ndim} dimensions")
    if array.size == 0:
        raise InvalidDimensionError(0, f"Cannot build a matrix of shape {array.shape}")
    return from_rows([[_from_python(v) for v in row] for row in array.tolist()])


def from_sparse(sparse_matrix) -> Matrix:
    """Builds a matrix from a scipy sparse matrix

    Entries that are not stored become zero.
    """
    if not sparse.issparse(sparse_matrix):
        raise TypeError(f"Expected a scipy sparse matrix, got {type(sparse_matrix).__name__}")
    rows, cols = sparse_matrix.shape
    if rows == 0 or cols == 0:
        raise InvalidDimensionError(0, f"Cannot build a matrix of shape {sparse_matrix.shape}")
    zero = NumberKind.RATIONAL.zero
    grid = [[zero] * cols for _ in range(rows)]
    coo = sparse_matrix.tocoo()
    for i, j, v in zip(coo.row, coo.col, coo.data):
        # duplicate coordinates are summed, as scipy does
        grid[int(i)][int(j)] = grid[int(i)][int(j)] + _from_python(v)
    return from_rows(grid)


def to_sympy(matrix: Matrix) -> sympy.Matrix:
    """Converts a matrix to an exact sympy Matrix"""
    return sympy.Matrix(matrix.row_count, matrix.column_count, [to_sympy_number(v) for v in matrix])


def from_sympy(sympy_matrix) -> Matrix:
    """Builds a matrix from a sympy Matrix of rational or complex rational numbers

    Raises:
        TypeError: An entry is not a rational number, e.g. ``sqrt(2)``.
    """
    rows, cols = sympy_matrix.shape
    if rows == 0 or cols == 0:
        raise InvalidDimensionError(0, f"Cannot build a matrix of shape {sympy_matrix.shape}")
    return from_rows([[_from_sympy(sympy_matrix[i, j]) for j in range(cols)] for i in range(rows)])
