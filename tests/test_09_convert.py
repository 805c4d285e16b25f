"""Test conversion to and from numpy, scipy and sympy."""
import pytest
import numpy as np
import sympy
from fractions import Fraction
from scipy import sparse
import matrixlib as ml
from matrixlib import Complex, Matrix, Rational, SquareMatrix


def test_single_values():
    assert (ml.to_fraction(Rational(3, 4)) == Fraction(3, 4))
    assert (ml.to_fraction(Complex(Rational(1, 2))) == Fraction(1, 2))
    assert (ml.to_sympy_rational(Rational(-2, 6)) == sympy.Rational(-1, 3))
    assert (ml.to_sympy_rational(5) == sympy.Integer(5))
    with pytest.raises(ml.NonRealError):
        ml.to_fraction(Complex(1, 1))


def test_to_numpy_object(matrix_2x3):
    arr = ml.to_numpy(matrix_2x3)
    assert (arr.shape == (2, 3))
    assert (arr.dtype == object)
    assert (isinstance(arr[1, 2], Rational))
    assert (arr[1, 2] == 6)


def test_to_numpy_float(matrix_3x3):
    arr = ml.to_numpy(matrix_3x3, dtype=float)
    assert (arr.dtype == np.float64)
    assert (arr[0, 1] == 0.5)
    assert (np.isclose(arr[1, 2], -1 / 3))


def test_to_numpy_float_rejects_non_real(complex_matrix):
    with pytest.raises(ml.NonRealError):
        ml.to_numpy(complex_matrix, dtype=float)
    arr = ml.to_numpy(complex_matrix, dtype=complex)
    assert (arr[1, 1] == 1 - 2j)


def test_from_numpy():
    m = ml.from_numpy(np.array([[1, 2], [3, 4]]))
    assert (type(m) is SquareMatrix)
    assert (str(m) == "[{1,2};{3,4}]")
    m = ml.from_numpy(np.array([[0.5, 0.25, 0.1]]))
    assert (str(m) == "[{1/2,1/4,1/10}]")
    m = ml.from_numpy(np.array([[1 + 2j, 3]]))
    assert (m.get_value(0, 0) == Complex(1, 2))
    assert (isinstance(m.get_value(0, 1), Rational))
    m = ml.from_numpy([[Fraction(1, 3), 2]])
    assert (m.get_value(0, 0) == Rational(1, 3))


def test_from_numpy_shape_errors():
    with pytest.raises(ml.InvalidDimensionError):
        ml.from_numpy(np.array([1, 2, 3]))
    with pytest.raises(ml.InvalidDimensionError):
        ml.from_numpy(np.zeros((0, 3)))


def test_numpy_round_trip(matrix_3x3, complex_matrix):
    for m in (matrix_3x3, complex_matrix):
        assert (ml.from_numpy(ml.to_numpy(m)) == m)


def test_from_sparse():
    a = sparse.csr_matrix(np.array([[0, 2, 0], [1, 0, 3]]))
    m = ml.from_sparse(a)
    assert (str(m) == "[{0,2,0};{1,0,3}]")
    coo = sparse.coo_matrix(([1, 1], ([0, 0], [1, 1])), shape=(2, 2))
    assert (str(ml.from_sparse(coo)) == "[{0,2};{0,0}]")
    with pytest.raises(TypeError):
        ml.from_sparse(np.eye(2))


def test_sympy_round_trip(matrix_3x3, complex_matrix):
    s = ml.to_sympy(matrix_3x3)
    assert (s[0, 1] == sympy.Rational(1, 2))
    assert (ml.from_sympy(s) == matrix_3x3)
    s = ml.to_sympy(complex_matrix)
    assert (s[1, 1] == 1 - 2 * sympy.I)
    assert (ml.from_sympy(s) == complex_matrix)


def test_from_sympy_rejects_irrational():
    with pytest.raises(TypeError):
        ml.from_sympy(sympy.Matrix([[sympy.sqrt(2)]]))


def test_det_agrees_with_sympy(matrix_3x3):
    assert (ml.to_sympy_rational(matrix_3x3.det(correct_sign=True)) == ml.to_sympy(matrix_3x3).det())


def test_from_numpy_limits_denominators():
    """Floats become fractions with a denominator of at most 10**6."""
    m = ml.from_numpy(np.array([[1e-7, 0.5e-5, 1 / 3]]))
    assert (m.get_value(0, 0) == 0)
    assert (m.get_value(0, 1) == Rational(1, 200000))
    assert (m.get_value(0, 2) == Rational(1, 3))
