"""Test exact rational arithmetic."""
import pytest
from fractions import Fraction
from sympy import Rational as SympyRational
import matrixlib as ml
from matrixlib import Rational


def test_normalized_on_construction():
    """Fractions are reduced and the sign lives in the numerator."""
    r = Rational(6, -8)
    assert (r.numerator == -3)
    assert (r.denominator == 4)
    assert (str(r) == "-3/4")
    assert (Rational(0, -5).denominator == 1)


def test_zero_denominator():
    """A zero denominator is a division by zero."""
    with pytest.raises(ml.DivisionByZeroError):
        Rational(1, 0)
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)


def test_rejects_non_integers():
    """Only ints are numerators and denominators."""
    with pytest.raises(TypeError):
        Rational(1.5, 2)
    with pytest.raises(TypeError):
        Rational(True)


def test_add():
    """Addition reduces the result."""
    assert (Rational(1, 2) + Rational(1, 3) == Rational(5, 6))
    assert (Rational(1, 6) + Rational(1, 3) == Rational(1, 2))
    assert (Rational(3, 4) + Rational(1, 4) == 1)
    assert (Rational(2, 3) + 0 == Rational(2, 3))
    assert (Rational(-1, 2) + Rational(1, 2)).is_zero()
    total = Rational(2, 9).add(Rational(4, 15))
    assert (total.numerator == 22 and total.denominator == 45)


def test_add_matches_fraction():
    """Addition agrees with fractions.Fraction on a spread of values."""
    values = [Fraction(n, d) for n in range(-7, 8, 3) for d in (1, 2, 6, 9, 14)]
    for a in values:
        for b in values:
            s = Rational.value_of(a).add(Rational.value_of(b))
            assert (s.to_fraction() == a + b)


def test_subtract_multiply_divide():
    """The remaining field operations."""
    assert (Rational(1, 2) - Rational(1, 3) == Rational(1, 6))
    assert (Rational(2, 3) * Rational(9, 4) == Rational(3, 2))
    assert (Rational(2, 3) / Rational(4, 9) == Rational(3, 2))
    assert (1 - Rational(1, 4) == Rational(3, 4))
    assert (2 / Rational(1, 2) == 4)


def test_divide_by_zero():
    """Division by the additive identity raises."""
    with pytest.raises(ml.DivisionByZeroError):
        Rational(1, 2).divide(Rational.ZERO)
    with pytest.raises(ml.DivisionByZeroError):
        Rational.ZERO.reciprocal()


def test_equality_by_cross_product():
    """Equal values compare equal regardless of how they were written."""
    assert (Rational(2, 4) == Rational(1, 2))
    assert (Rational(4, 2) == 2)
    assert (Rational(1, 2) == Fraction(1, 2))
    assert (Rational(1, 2) != Rational(1, 3))
    assert (hash(Rational(2, 4)) == hash(Fraction(1, 2)))
    assert (len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1)


def test_ordering():
    """compare_to gives the sign of the difference."""
    assert (Rational(1, 3).compare_to(Rational(1, 2)) == -1)
    assert (Rational(1, 2).compare_to(Rational(1, 3)) == 1)
    assert (Rational(2, 4).compare_to(Rational(1, 2)) == 0)
    assert (Rational(-1, 2) < 0 < Rational(1, 3) <= Rational(1, 3))
    assert (sorted([Rational(1, 2), Rational(-3), Rational(1, 3)]) == [-3, Rational(1, 3), Rational(1, 2)])


def test_truncation():
    """Integer conversion truncates toward zero."""
    assert (Rational(7, 2).to_integer() == 3)
    assert (Rational(-7, 2).to_integer() == -3)
    assert (int(Rational(-1, 3)) == 0)
    assert (Rational(8, 2).int_value() == 4)
    with pytest.raises(ml.NotIntegerError):
        Rational(7, 2).int_value()


def test_mediant():
    """The mediant uses the reduced components."""
    assert (Rational.mediant(Rational(1, 3), Rational(2, 4)) == Rational(2, 5))


def test_value_of():
    """Python numbers convert exactly, floats to the closest simple fraction."""
    assert (Rational.value_of(3) == 3)
    assert (Rational.value_of(Fraction(3, 9)) == Rational(1, 3))
    assert (Rational.value_of(SympyRational(5, 10)) == Rational(1, 2))
    assert (Rational.value_of(0.1) == Rational(1, 10))
    assert (Rational.value_of("-6/8") == Rational(-3, 4))
    with pytest.raises(TypeError):
        Rational.value_of(True)
    with pytest.raises(ValueError):
        Rational.value_of(float("nan"))


def test_parse_and_format():
    """Text form round trips."""
    for text in ["0", "7", "-7", "1/2", "-22/45"]:
        assert (str(Rational.parse_rational(text)) == text)
    assert (str(Rational.parse_rational(" 4/6 ")) == "2/3")
    with pytest.raises(ValueError):
        Rational.parse_rational("1/2/3")
    with pytest.raises(ValueError):
        Rational.parse_rational("a/2")


def test_sign_helpers():
    """abs, signum and negate."""
    assert (abs(Rational(-3, 4)) == Rational(3, 4))
    assert (Rational(-3, 4).signum() == -1)
    assert (Rational.ZERO.signum() == 0)
    assert (-Rational(3, 4) == Rational(-3, 4))
    assert (float(Rational(3, 4)) == 0.75)


def test_not_equal_to_bool():
    """Booleans are not numbers here, comparing with them is simply unequal."""
    assert (not (Rational(1) == True))
    assert (Rational(0) != False)
    assert (Rational(1) not in [True, False])
    assert (ml.Complex(1) != True)


@pytest.mark.parametrize("text", ["1_0", "1_0/3", "2/1_5", "+", "", "1/", "١"])
def test_parse_rejects_non_decimal_digits(text):
    with pytest.raises(ValueError):
        Rational.parse_rational(text)
    with pytest.raises(ValueError):
        ml.parse_number(text)
