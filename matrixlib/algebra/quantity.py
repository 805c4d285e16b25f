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
"""Abstract numeric value shared by the rational and complex number types

A Quantity is an immutable, exact number. Concrete implementations register
themselves under a NumberKind tag. Arithmetic between two quantities of
different kinds first promotes both operands to the wider kind, so a
Rational combined with a Complex always yields a Complex. Demotion back to
the narrower kind only happens on request.
"""

from abc import ABC, abstractmethod
from enum import Enum
from fractions import Fraction
from numbers import Integral
from typing import Dict, Tuple, Type, Union

from sympy import Rational as SympyRational

from matrixlib.exceptions import DivisionByZeroError

# Python values that are accepted wherever a Quantity is expected
Numeric = Union['Quantity', int, Fraction, SympyRational, float, str]

_IMPLEMENTATIONS: Dict['NumberKind', Type['Quantity']] = {}


class NumberKind(Enum):
    """Closed set of number kinds, ordered from narrowest to widest."""
    RATIONAL = 0
    COMPLEX = 1

    @property
    def implementation(self) -> Type['Quantity']:
        """The Quantity subclass registered for this kind"""
        return _IMPLEMENTATIONS[self]

    @property
    def zero(self) -> 'Quantity':
        """The additive identity of this kind"""
        return self.implementation.ZERO

    @property
    def one(self) -> 'Quantity':
        """The multiplicative identity of this kind"""
        return self.implementation.ONE

    def widest(self, other: 'NumberKind') -> 'NumberKind':
        """Returns the kind that can represent values of both kinds"""
        return self if self.value >= other.value else other


class Quantity(ABC):
    """Exact number supporting closed field-like arithmetic.

    Subclasses set the class attribute ``kind`` and implement the same-kind
    primitives (``_add``, ``_multiply``, ...). The public operations accept
    any Quantity or plain Python number and take care of promotion.
    """
    kind: NumberKind = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.kind is not None:
            _IMPLEMENTATIONS[cls.kind] = cls

    # -- same-kind primitives -------------------------------------------------

    @abstractmethod
    def promote(self, kind: NumberKind) -> 'Quantity':
        """Returns this value represented as the given (equal or wider) kind"""

    @abstractmethod
    def _add(self, other: 'Quantity') -> 'Quantity':
        pass

    @abstractmethod
    def _multiply(self, other: 'Quantity') -> 'Quantity':
        pass

    @abstractmethod
    def _divide(self, other: 'Quantity') -> 'Quantity':
        pass

    @abstractmethod
    def _compare_to(self, other: 'Quantity') -> int:
        pass

    @abstractmethod
    def _equals(self, other: 'Quantity') -> bool:
        pass

    @abstractmethod
    def negate(self) -> 'Quantity':
        """Returns the additive inverse of this quantity"""

    @abstractmethod
    def is_zero(self) -> bool:
        """Determines if the quantity equals the additive identity"""

    @abstractmethod
    def int_value(self) -> int:
        """Returns the quantity as a Python int.

        Raises:
            NotIntegerError: The value is not a whole number.
            NonRealError: The value has an imaginary part.
        """

    # -- promotion ------------------------------------------------------------

    def _unify(self, other: Numeric) -> Tuple['Quantity', 'Quantity']:
        other = as_quantity(other)
        kind = self.kind.widest(other.kind)
        return self.promote(kind), other.promote(kind)

    # -- public arithmetic ----------------------------------------------------

    def add(self, other: Numeric) -> 'Quantity':
        """Returns the sum of this quantity and ``other``"""
        a, b = self._unify(other)
        return a._add(b)

    def subtract(self, other: Numeric) -> 'Quantity':
        """Returns the difference of this quantity and ``other``"""
        a, b = self._unify(other)
        return a._add(b.negate())

    def multiply(self, other: Numeric) -> 'Quantity':
        """Returns the product of this quantity and ``other``"""
        a, b = self._unify(other)
        return a._multiply(b)

    def divide(self, other: Numeric) -> 'Quantity':
        """Returns the quotient of this quantity by ``other``

        Raises:
            DivisionByZeroError: ``other`` is zero.
        """
        a, b = self._unify(other)
        if b.is_zero():
            raise DivisionByZeroError()
        return a._divide(b)

    def pow(self, exponent: int) -> 'Quantity':
        """Raises this quantity to an integer power by binary exponentiation.

        The exponent is decomposed into its binary digits. Successive
        squarings x, x^2, x^4, ... are computed once and the ones that
        belong to set bits are multiplied together, so x^n costs O(log n)
        multiplications. The table of squarings only lives for this call.

        A negative exponent gives the reciprocal of the positive power and
        ``pow(0)`` gives the multiplicative identity.

        Args:
            exponent (int): The power to raise the value to.

        Returns:
            (Quantity): This quantity raised to ``exponent``, of the same kind.

        Raises:
            TypeError: ``exponent`` is not an int.
            DivisionByZeroError: Zero raised to a negative power.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, Integral):
            raise TypeError(f"Exponent must be an integer, got {type(exponent).__name__}")
        exponent = int(exponent)
        one = self.kind.one
        if exponent == 0:
            return one
        bits = abs(exponent)
        squarings = [self]  # squarings[k] == self ** (2 ** k)
        result = one
        k = 0
        while True:
            if bits & 1:
                result = result.multiply(squarings[k])
            bits >>= 1
            if not bits:
                break
            squarings.append(squarings[k].multiply(squarings[k]))
            k += 1
        if exponent < 0:
            return one.divide(result)
        return result

    def compare_to(self, other: Numeric) -> int:
        """Compares this quantity with ``other``; 0 means equal.

        For rationals the result is the sign of ``self - other``. Complex
        values use a distance order, see ``Complex.compare_to``.
        """
        a, b = self._unify(other)
        return a._compare_to(b)

    # -- Python protocol ------------------------------------------------------

    def __eq__(self, other) -> bool:
        if isinstance(other, bool) or not isinstance(other, (Quantity, Integral, Fraction)):
            return NotImplemented
        a, b = self._unify(other)
        return a._equals(b)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return as_quantity(other).add(self)

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return as_quantity(other).subtract(self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return as_quantity(other).multiply(self)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return as_quantity(other).divide(self)

    def __pow__(self, exponent):
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self


def as_quantity(value: Numeric) -> Quantity:
    """Converts a Python value to a Quantity.

    Args:
        value (Quantity, int, Fraction, sympy.Rational, float or str):
            Quantities are returned unchanged, strings are parsed with
            ``parse_number`` and every other value becomes a Rational.

    Returns:
        (Quantity): The value as an exact quantity.
    """
    if isinstance(value, Quantity):
        return value
    if isinstance(value, str):
        return parse_number(value)
    return NumberKind.RATIONAL.implementation.value_of(value)


def parse_number(text: str) -> Quantity:
    """Parses a quantity from its text form.

    Accepts the forms produced by ``str()``: ``"3"``, ``"-3/4"``, ``"2i"``,
    ``"1/2+3i"``. Real values are returned as Rational, everything else as
    Complex.

    Raises:
        ValueError: The text is not a valid number.
    """
    value = NumberKind.COMPLEX.implementation.parse_complex(text)
    if value.is_real():
        return value.to_rational()
    return value
