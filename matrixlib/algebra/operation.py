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
"""Arithmetic operators understood by the expression interpreter"""

from enum import Enum

from matrixlib.algebra.quantity import Quantity


class Operation(Enum):
    """Binary arithmetic operation and its operator symbol.

    The value is the symbol, so ``Operation('+') is Operation.ADD``.
    """
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POW = '^'

    @property
    def operator(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        """Binding strength; higher binds tighter"""
        if self is Operation.POW:
            return 3
        if self in (Operation.MULTIPLY, Operation.DIVIDE):
            return 2
        return 1

    @staticmethod
    def is_operator(char: str) -> bool:
        """Determines if the character is an operator symbol"""
        return char in _SYMBOLS

    @staticmethod
    def parse_operator(symbol: str) -> 'Operation':
        """Returns the operation for a symbol

        Raises:
            ValueError: The symbol is not a single operator.
        """
        try:
            return Operation(symbol.strip())
        except ValueError:
            raise ValueError(f"Input must be a single operator, got {symbol!r}") from None

    def apply(self, a: Quantity, b: Quantity) -> Quantity:
        """Performs this operation on two quantities, e.g. ``a+b``

        For POW the exponent ``b`` must be an integer.

        Raises:
            NotIntegerError: POW with a non-integer exponent.
            DivisionByZeroError: DIVIDE by zero.
        """
        if self is Operation.ADD:
            return a.add(b)
        if self is Operation.SUBTRACT:
            return a.subtract(b)
        if self is Operation.MULTIPLY:
            return a.multiply(b)
        if self is Operation.DIVIDE:
            return a.divide(b)
        return a.pow(b.int_value())


_SYMBOLS = frozenset(op.value for op in Operation)
