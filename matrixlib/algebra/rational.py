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
"""Exact rational numbers over arbitrary precision integers

Rational keeps its numerator and denominator in lowest terms with a positive
denominator. Python ints have arbitrary precision, so no arithmetic ever
rounds or overflows.
"""

import math
import re
from fractions import Fraction
from numbers import Integral
from typing import Union

from sympy import Rational as SympyRational

from matrixlib.algebra.quantity import NumberKind, Quantity
from matrixlib.exceptions import DivisionByZeroError, NotIntegerError
from matrixlib.names import FRACTION_BAR

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _lcm(m: int, n: int) -> int:
    m, n = abs(m), abs(n)
    return m * (n // math.gcd(m, n))


class Rational(Quantity):
    """Immutable fraction of two Python ints.

    Example:
        >>> Rational(1, 2) + Rational(1, 3)
        Rational(5, 6)

    Args:
        numerator (int): The numerator of the fraction.
        denominator (int): The denominator of the fraction, nonzero. Defaults to 1.

    Raises:
        DivisionByZeroError: The denominator is zero.
    """
    kind = NumberKind.RATIONAL

    def __init__(self, numerator: int, denominator: int = 1):
        numerator = _to_int(numerator)
        denominator = _to_int(denominator)
        if denominator == 0:
            raise DivisionByZeroError("Denominator is zero")
        g = math.gcd(numerator, denominator)
        numerator //= g
        denominator //= g
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        self._num = numerator
        self._den = denominator

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    # -- Quantity primitives --------------------------------------------------

    def promote(self, kind: NumberKind) -> Quantity:
        if kind is NumberKind.RATIONAL:
            return self
        return kind.implementation(self, Rational.ZERO)

    def _add(self, b: 'Rational') -> 'Rational':
        a = self
        if a._den == b._den:
            return Rational(a._num + b._num, a._den)
        if a._num == 0:
            return b
        if b._num == 0:
            return a
        # Dividing out the common factors first keeps the cross products small
        f = math.gcd(a._num, b._num)
        g = math.gcd(a._den, b._den)
        cross = (a._num // f) * (b._den // g) + (b._num // f) * (a._den // g)
        return Rational(cross * f, _lcm(a._den, b._den))

    def _multiply(self, b: 'Rational') -> 'Rational':
        return Rational(self._num * b._num, self._den * b._den)

    def _divide(self, b: 'Rational') -> 'Rational':
        return self._multiply(b.reciprocal())

    def _compare_to(self, b: 'Rational') -> int:
        lhs = self._num * b._den
        rhs = b._num * self._den
        return (lhs > rhs) - (lhs < rhs)

    def _equals(self, b: 'Rational') -> bool:
        return self._num * b._den == b._num * self._den

    def negate(self) -> 'Rational':
        return Rational(-self._num, self._den)

    def is_zero(self) -> bool:
        return self._num == 0

    def int_value(self) -> int:
        if self._den != 1:
            raise NotIntegerError(self)
        return self._num

    # -- Rational specific ----------------------------------------------------

    def reciprocal(self) -> 'Rational':
        """Returns 1/this

        Raises:
            DivisionByZeroError: This rational is zero.
        """
        if self._num == 0:
            raise DivisionByZeroError()
        return Rational(self._den, self._num)

    def abs(self) -> 'Rational':
        """Returns the distance of this rational from zero"""
        if self._num >= 0:
            return self
        return self.negate()

    def signum(self) -> int:
        """Returns -1, 0 or 1 depending on the sign"""
        return (self._num > 0) - (self._num < 0)

    def is_integer(self) -> bool:
        return self._den == 1

    def to_integer(self) -> int:
        """Returns the value truncated toward zero"""
        q = abs(self._num) // self._den
        return q if self._num >= 0 else -q

    def to_fraction(self) -> Fraction:
        return Fraction(self._num, self._den)

    @staticmethod
    def mediant(r: 'Rational', s: 'Rational') -> 'Rational':
        """Returns (r.num + s.num) / (r.den + s.den)

        ``mediant(1/3, 2/4)`` is ``(1+1)/(3+2)`` since 2/4 is stored reduced as 1/2.
        """
        return Rational(r._num + s._num, r._den + s._den)

    @staticmethod
    def value_of(value: Union['Rational', int, Fraction, SympyRational, float, str]) -> 'Rational':
        """Creates a Rational from various Python number types.

        Floats are converted with ``Fraction.limit_denominator`` so that
        ``0.1`` becomes ``1/10`` rather than its binary expansion.

        Raises:
            TypeError: The value cannot be represented as a rational.
            ValueError: A string is not a valid rational.
        """
        if isinstance(value, Rational):
            return value
        if isinstance(value, str):
            return Rational.parse_rational(value)
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to Rational")
        if isinstance(value, Integral):
            return Rational(int(value))
        if isinstance(value, Fraction):
            return Rational(value.numerator, value.denominator)
        if isinstance(value, SympyRational):
            return Rational(int(value.p), int(value.q))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"Cannot convert {value} to Rational")
            frac = Fraction(value).limit_denominator()
            return Rational(frac.numerator, frac.denominator)
        # numpy floating point scalars and similar
        if hasattr(value, '__float__') and not isinstance(value, Quantity):
            return Rational.value_of(float(value))
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational")

    @staticmethod
    def parse_rational(text: str) -> 'Rational':
        """Parses ``"n"`` or ``"n/d"``.

        Raises:
            ValueError: The text is not a valid rational.
            DivisionByZeroError: The denominator is zero.
        """
        if text is None:
            raise ValueError("Cannot parse None as Rational")
        parts = text.strip().split(FRACTION_BAR)
        if len(parts) > 2:
            raise ValueError(f"Invalid fraction format: {text!r}")
        numerator = _parse_int(parts[0], text)
        if len(parts) == 1:
            return Rational(numerator)
        return Rational(numerator, _parse_int(parts[1], text))

    # -- Python protocol ------------------------------------------------------

    def _ordered(self, other):
        if isinstance(other, (Integral, Fraction)) and not isinstance(other, bool):
            other = Rational.value_of(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return self._compare_to(other)

    def __lt__(self, other):
        c = self._ordered(other)
        return c if c is NotImplemented else c < 0

    def __le__(self, other):
        c = self._ordered(other)
        return c if c is NotImplemented else c <= 0

    def __gt__(self, other):
        c = self._ordered(other)
        return c if c is NotImplemented else c > 0

    def __ge__(self, other):
        c = self._ordered(other)
        return c if c is NotImplemented else c >= 0

    def __abs__(self):
        return self.abs()

    def __int__(self) -> int:
        return self.to_integer()

    def __float__(self) -> float:
        return self._num / self._den

    def __hash__(self) -> int:
        return hash(Fraction(self._num, self._den))

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}{FRACTION_BAR}{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"


def _parse_int(part: str, text: str) -> int:
    # Plain decimal digits only, int() would also accept "1_0" and non-ASCII digits
    part = part.strip()
    if not _INTEGER.fullmatch(part):
        raise ValueError(f"Invalid fraction format: {text!r}")
    return int(part)


def _to_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"Rational components must be integers, got {type(value).__name__}")
    return int(value)


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)
