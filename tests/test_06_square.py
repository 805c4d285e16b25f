"""Test square matrices, determinants and the read-only identity matrix."""
import pytest
import sympy
import matrixlib as ml
from matrixlib import Complex, IdentityMatrix, Matrix, NumberKind, Rational, SquareMatrix

# =============================================================================
# Determinant
# =============================================================================


def test_det_with_sign_correction(det_case):
    """The corrected determinant is exact."""
    entries, expected = det_case
    m = SquareMatrix(len(entries), entries)
    assert (m.det(correct_sign=True) == expected)
    assert (ml.to_sympy_rational(m.det(correct_sign=True)) == sympy.Matrix(entries).det())


def test_det_literal_ignores_swaps(quiet_logs):
    """Without correction every row swap is left unaccounted."""
    m = SquareMatrix(2, [[0, 1], [1, 0]])
    assert (m.det() == 1)
    assert (m.det(correct_sign=True) == -1)


def test_det_literal_without_swaps():
    m = SquareMatrix(2, [[1, 2], [3, 4]])
    assert (m.det() == -2)


def test_det_literal_logs_warning(caplog):
    m = SquareMatrix(3, [[0, 2, 1], [1, 1, 0], [3, 0, 1]])
    with caplog.at_level("WARNING", logger="matrixlib.matrices.square_matrix"):
        m.det()
    assert ("row swap" in caplog.text)
    caplog.clear()
    with caplog.at_level("WARNING", logger="matrixlib.matrices.square_matrix"):
        m.det(correct_sign=True)
    assert (caplog.text == "")


def test_det_leaves_matrix_unchanged(matrix_3x3):
    before = matrix_3x3.copy()
    matrix_3x3.det(correct_sign=True)
    assert (matrix_3x3 == before)
    assert (matrix_3x3.det(correct_sign=True) == Rational(-31, 6))


def test_det_complex():
    m = SquareMatrix(2, [[Complex(1, 1), 0], [0, Complex(1, -1)]])
    assert (m.det() == 2)


def test_det_singular():
    assert (SquareMatrix(3, [[1, 2, 3], [2, 4, 6], [1, 1, 1]]).det() == 0)
    assert (SquareMatrix(2).det() == 0)


# =============================================================================
# Square matrix helpers
# =============================================================================


def test_is_triangular():
    assert (SquareMatrix(2, [[1, 2], [0, 3]]).is_triangular())
    assert (not SquareMatrix(2, [[1, 0], [2, 3]]).is_triangular())
    assert (IdentityMatrix(5).is_triangular())


def test_from_matrix():
    m = SquareMatrix.from_matrix(Matrix(2, 2, [[1, 2], [3, 4]]))
    assert (isinstance(m, SquareMatrix))
    assert (m.det(correct_sign=True) == -2)
    with pytest.raises(ml.InvalidDimensionError):
        SquareMatrix.from_matrix(Matrix(2, 3))


def test_square_copy_stays_square(matrix_3x3):
    assert (type(matrix_3x3.copy()) is SquareMatrix)


# =============================================================================
# Identity matrix
# =============================================================================


def test_identity_values(kind):
    e = IdentityMatrix(3, kind=kind)
    for row in range(3):
        for col in range(3):
            assert (e.get_value(row, col) == (1 if row == col else 0))
            assert (e.get_value(row, col).kind is kind)
    assert (e.det() == 1)
    assert (e.read_only)


@pytest.mark.parametrize("mutate", [
    lambda e: e.set_value(0, 0, 5),
    lambda e: e.set_row(0, [1, 1]),
    lambda e: e.set_column(1, [1, 1]),
    lambda e: e.swap_rows(0, 1),
    lambda e: e.swap_columns(0, 1),
    lambda e: e.multiply_row(0, 2),
    lambda e: e.divide_row(0, 2),
    lambda e: e.multiply_column(0, 2),
    lambda e: e.divide_column(0, 2),
    lambda e: e.row_sum(0, 1, 1),
    lambda e: e.ref(),
    lambda e: e.rref(),
])
def test_identity_is_read_only(mutate):
    """Every mutator of an identity matrix raises and leaves it intact."""
    e = IdentityMatrix(2)
    with pytest.raises(ml.ImmutableMatrixError):
        mutate(e)
    with pytest.raises(TypeError):
        mutate(e)
    assert (str(e) == "[{1,0};{0,1}]")


def test_identity_copy_is_writable():
    clone = IdentityMatrix(2).copy()
    assert (type(clone) is SquareMatrix)
    assert (not clone.read_only)
    clone.set_value(0, 1, 7)
    assert (str(clone) == "[{1,7};{0,1}]")


def test_identity_arithmetic_returns_writable_results():
    e = IdentityMatrix(2)
    doubled = e.scale(2)
    doubled.set_value(0, 1, 1)
    assert (str(doubled) == "[{2,1};{0,2}]")
    assert (str(e + e) == "[{2,0};{0,2}]")


def test_identity_law(complex_matrix):
    """E * A == A == A * E"""
    e = IdentityMatrix(2, kind=NumberKind.COMPLEX)
    assert (e @ complex_matrix == complex_matrix)
    assert (complex_matrix @ e == complex_matrix)


def test_det_diagonal_and_zero_row():
    assert (SquareMatrix(2, [[2, 0], [0, 3]]).det() == 6)
    assert (SquareMatrix(3, [[1, 2, 3], [0, 0, 0], [4, 5, 6]]).det() == 0)


def test_from_matrix_on_identity_class():
    """from_matrix always builds a writable SquareMatrix."""
    m = IdentityMatrix.from_matrix(Matrix(2, 2, [[1, 2], [3, 4]]))
    assert (type(m) is SquareMatrix)
    assert (not m.read_only)
    assert (str(m) == "[{1,2};{3,4}]")
    assert (SquareMatrix.from_matrix(IdentityMatrix(2)) == IdentityMatrix(2))
