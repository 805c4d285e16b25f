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
"""Exact complex numbers with rational components"""

import math

from matrixlib.algebra.quantity import NumberKind, Numeric, Quantity
from matrixlib.algebra.rational import Rational
from matrixlib.exceptions import NonRealError
from matrixlib.names import COMPLEX_PLUS, IMAGINARY_UNIT, INT_MAX


class Complex(Quantity):
    """Immutable value ``a+bi`` of the complex plane.

    Args:
        real (Rational or int): The value along the real axis.
        imaginary (Rational or int): The coefficient of ``i``. Defaults to 0.
    """
    kind = NumberKind.COMPLEX

    def __init__(self, real: Numeric, imaginary: Numeric = 0):
        self._real = Rational.value_of(real)
        self._imag = Rational.value_of(imaginary)

    @property
    def real(self) -> Rational:
        return self._real

    @property
    def imaginary(self) -> Rational:
        return self._imag

    def is_real(self) -> bool:
        """Determines if there is no imaginary part"""
        return self._imag.is_zero()

    def to_rational(self) -> Rational:
        """Returns the value on the real axis.

        Raises:
            NonRealError: The value has a nonzero imaginary part.
        """
        if not self.is_real():
            raise NonRealError(self)
        return self._real

    def conjugate(self) -> 'Complex':
        return Complex(self._real, self._imag.negate())

    # -- Quantity primitives --------------------------------------------------

    def promote(self, kind: NumberKind) -> Quantity:
        if kind is not NumberKind.COMPLEX:
            raise ValueError(f"Cannot promote a complex value to {kind.name}")
        return self

    def _add(self, b: 'Complex') -> 'Complex':
        return Complex(self._real.add(b._real), self._imag.add(b._imag))

    def _multiply(self, b: 'Complex') -> 'Complex':
        # (a+bi)(c+di) = (ac - bd) + (ad + bc)i
        a, bi = self._real, self._imag
        c, d = b._real, b._imag
        real = a.multiply(c).subtract(bi.multiply(d))
        imag = a.multiply(d).add(bi.multiply(c))
        return Complex(real, imag)

    def _divide(self, b: 'Complex') -> 'Complex':
        """Divides by ``c+di`` using the denominator ``c^2 + cd``.

        The textbook denominator is ``c^2 + d^2``. The ``c(c+d)`` form is kept
        as is, which gives wrong quotients whenever ``d`` is nonzero and
        raises DivisionByZeroError for divisors with ``c == 0`` or ``c == -d``.
        Division by a real value is unaffected.
        """
        a, bi = self._real, self._imag
        c, d = b._real, b._imag
        divisor = c.pow(2).add(c.multiply(d))
        real = a.multiply(c).subtract(bi.multiply(d))
        imag = bi.multiply(c).subtract(a.multiply(d))
        return Complex(real.divide(divisor), imag.divide(divisor))

    def _compare_to(self, b: 'Complex') -> int:
        """Distance between the two points, truncated to an int.

        This is not an ordering of the complex plane: it is never negative,
        so ``a.compare_to(b) == b.compare_to(a)``, and points closer than 1
        apart compare as 0 although they are not equal. It only exists for
        display and sorting convenience. Distances above INT_MAX saturate.
        """
        if self._equals(b):
            return 0
        dr = self._real.subtract(b._real).pow(2)
        di = self._imag.subtract(b._imag).pow(2)
        distance = math.isqrt(dr.add(di).to_integer())
        return min(distance, INT_MAX)

    def _equals(self, b: 'Complex') -> bool:
        return self._real == b._real and self._imag == b._imag

    def negate(self) -> 'Complex':
        return Complex(self._real.negate(), self._imag.negate())

    def is_zero(self) -> bool:
        return self._real.is_zero() and self._imag.is_zero()

    def int_value(self) -> int:
        return self.to_rational().int_value()

    @staticmethod
    def parse_complex(text: str) -> 'Complex':
        """Parses ``"a+bi"``, ``"a"``, ``"bi"`` or ``"i"``.

        Components are rationals in the form accepted by
        ``Rational.parse_rational``. A negative imaginary part is written
        ``"a+-bi"``, the form ``str()`` produces.

        Raises:
            ValueError: The text is not a valid complex number.
        """
        if text is None:
            raise ValueError("Cannot parse None as Complex")
        s = text.strip()
        if s.startswith(COMPLEX_PLUS):
            s = s[1:]
        parts = s.split(COMPLEX_PLUS)
        if len(parts) == 1:
            if s.endswith(IMAGINARY_UNIT):
                return Complex(Rational.ZERO, _parse_coefficient(s))
            return Complex(Rational.parse_rational(s), Rational.ZERO)
        if len(parts) != 2 or not parts[1].strip().endswith(IMAGINARY_UNIT):
            raise ValueError(f"Invalid complex format: {text!r}")
        return Complex(Rational.parse_rational(parts[0]), _parse_coefficient(parts[1]))

    # -- Python protocol ------------------------------------------------------

    def __complex__(self) -> complex:
        return complex(float(self._real), float(self._imag))

    def __hash__(self) -> int:
        if self.is_real():
            return hash(self._real)
        return hash((self._real, self._imag))

    def __str__(self) -> str:
        if self._imag.is_zero():
            return str(self._real)
        if self._real.is_zero():
            return f"{self._imag}{IMAGINARY_UNIT}"
        return f"{self._real}{COMPLEX_PLUS}{self._imag}{IMAGINARY_UNIT}"

    def __repr__(self) -> str:
        return f"Complex({self._real!r}, {self._imag!r})"


def _parse_coefficient(text: str) -> Rational:
    coefficient = text.strip()[:-len(IMAGINARY_UNIT)].strip()
    if coefficient in ('', '+'):
        return Rational.ONE
    if coefficient == '-':
        return Rational.ONE.negate()
    return Rational.parse_rational(coefficient)


Complex.ZERO = Complex(Rational.ZERO, Rational.ZERO)
Complex.ONE = Complex(Rational.ONE, Rational.ZERO)
Complex.I = Complex(Rational.ZERO, Rational.ONE)
