import pytest
import matrixlib as ml

# Matrices whose exact determinant is known
det_cases = [
    ([[2]], 2),
    ([[1, 2], [3, 4]], -2),
    ([[2, 0, 0], [0, 3, 0], [0, 0, 4]], 24),
    ([[0, 1], [1, 0]], -1),
    ([[0, 2, 1], [1, 1, 0], [3, 0, 1]], -5),
    ([[1, 2], [2, 4]], 0),
]


@pytest.fixture(params=[ml.NumberKind.RATIONAL, ml.NumberKind.COMPLEX], scope="session")
def kind(request: pytest.FixtureRequest) -> ml.NumberKind:
    """Provide session-level fixture for both number kinds."""
    return request.param


@pytest.fixture(params=det_cases, scope="session")
def det_case(request: pytest.FixtureRequest):
    """Provide session-level fixture for square matrices with their determinant."""
    return request.param


@pytest.fixture
def matrix_2x3() -> ml.Matrix:
    """The 2x3 matrix with rows 1 2 3 and 4 5 6."""
    return ml.Matrix(2, 3, [[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def matrix_3x3() -> ml.SquareMatrix:
    """A regular 3x3 matrix with fractions that needs a row swap to reduce."""
    return ml.SquareMatrix(3, [[0, ml.Rational(1, 2), 1], [2, 1, ml.Rational(-1, 3)], [1, 0, 4]])


@pytest.fixture
def complex_matrix() -> ml.Matrix:
    """A 2x2 matrix holding real and non-real values."""
    return ml.parse_matrix("[{1,2i};{3/4,1+-2i}]")


@pytest.fixture
def quiet_logs():
    """Silence the package's loggers for a test."""
    with ml.DisableLogger():
        yield
