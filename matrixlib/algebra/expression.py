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
"""Evaluation of algebraic expressions over exact quantities

An expression contains numbers, the imaginary unit, the operators
``+ - * / ^`` and parentheses, but no variables.

    >>> evaluate("3-4*5+7+2^3")
    Rational(-2, 1)
    >>> evaluate("4(5)")
    Rational(20, 1)
"""

import logging
import re
from typing import List, Tuple

from matrixlib.algebra.complex import Complex
from matrixlib.algebra.operation import Operation
from matrixlib.algebra.quantity import Quantity
from matrixlib.algebra.rational import Rational
from matrixlib.exceptions import ExpressionSyntaxError
from matrixlib.names import IMAGINARY_UNIT

LOG = logging.getLogger(__name__)

NUMBER = 'number'
OPERATOR = 'operator'
LPAREN = '('
RPAREN = ')'

_TOKEN = re.compile(r"\s*(?:(\d+)?(" + re.escape(IMAGINARY_UNIT) + r")|(\d+)|([-+*/^])|([()]))")


class Expression:
    """Validated expression text. Build instances with ``Expression.build``."""

    def __init__(self, expression: str, parentheses: int):
        self._expression = expression
        self._parentheses = parentheses

    @classmethod
    def build(cls, text: str) -> 'Expression':
        """Validates expression text.

        Square brackets are read as parentheses. Missing closing parentheses
        are appended at the end, surplus closing parentheses are an error.

        Args:
            text (str): The expression, e.g. ``"(3+12)^2"``.

        Returns:
            (Expression): The validated expression.

        Raises:
            ExpressionSyntaxError: The text is empty, has more closing than
                opening parentheses, or misplaces an operator.
        """
        if text is None:
            raise ExpressionSyntaxError(text, "Expression cannot be None")
        s = "".join(text.replace('[', '(').replace(']', ')').split())
        if not s:
            raise ExpressionSyntaxError(text, "Empty expression")
        left, right = s.count('('), s.count(')')
        if left < right:
            raise ExpressionSyntaxError(text, "Unbalanced parentheses")
        if not _valid_operators(s):
            raise ExpressionSyntaxError(text)
        return cls(s + ')' * (left - right), left)

    @property
    def parentheses(self) -> int:
        """Number of parenthesis pairs"""
        return self._parentheses

    def operators(self) -> int:
        """Number of operator symbols"""
        return sum(1 for c in self._expression if Operation.is_operator(c))

    def evaluate(self) -> Quantity:
        """Returns the value of the expression

        Raises:
            ExpressionSyntaxError: The expression cannot be parsed.
            DivisionByZeroError: A division by zero occurs.
            NotIntegerError: An exponent is not a whole number.
        """
        parser = _Parser(self._expression, _tokenize(self._expression))
        value = parser.parse()
        LOG.debug("Evaluated %s = %s", self._expression, value)
        return value

    def __str__(self) -> str:
        return self._expression

    def __repr__(self) -> str:
        return f"Expression({self._expression!r})"


def evaluate(text: str) -> Quantity:
    """Builds and evaluates an expression in one step"""
    return Expression.build(text).evaluate()


def _valid_operators(s: str) -> bool:
    # A minus sign may start the expression or follow another operator or an opening parenthesis
    if Operation.is_operator(s[-1]):
        return False
    previous = '('
    for c in s:
        if Operation.is_operator(c):
            if (previous == '(' or Operation.is_operator(previous)) and c != '-':
                return False
            if previous == '-' and c == '-':
                return False
        elif c == ')' and Operation.is_operator(previous):
            return False
        previous = c
    return True


def _tokenize(s: str) -> List[Tuple[str, object]]:
    tokens = []
    pos = 0
    while pos < len(s):
        match = _TOKEN.match(s, pos)
        if match is None:
            raise ExpressionSyntaxError(s, f"Unexpected character {s[pos]!r}")
        coefficient, unit, integer, operator, paren = match.groups()
        if unit:
            scalar = Rational(int(coefficient)) if coefficient else Rational.ONE
            tokens.append((NUMBER, Complex(Rational.ZERO, scalar)))
        elif integer:
            tokens.append((NUMBER, Rational(int(integer))))
        elif operator:
            tokens.append((OPERATOR, Operation(operator)))
        else:
            tokens.append((paren, paren))
        pos = match.end()
    return tokens


class _Parser:
    """Precedence climbing over the token list"""

    def __init__(self, expression: str, tokens: List[Tuple[str, object]]):
        self.expression = expression
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> Quantity:
        value = self._parse_expression(1)
        if self.pos != len(self.tokens):
            raise ExpressionSyntaxError(self.expression, "Unexpected trailing input")
        return value

    def _peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return (None, None)

    def _next_operation(self):
        kind, value = self._peek()
        if kind == OPERATOR:
            return value, True
        # Implicit multiplication next to parentheses: 4(5), (2)(3), (2)3
        previous = self.tokens[self.pos - 1][0] if self.pos > 0 else None
        if kind == LPAREN or (kind == NUMBER and previous == RPAREN):
            return Operation.MULTIPLY, False
        return None, False

    def _parse_expression(self, min_precedence: int) -> Quantity:
        lhs = self._parse_unary()
        while True:
            operation, explicit = self._next_operation()
            if operation is None or operation.precedence < min_precedence:
                return lhs
            if explicit:
                self.pos += 1
            if operation is Operation.POW:
                rhs = self._parse_expression(operation.precedence)
            else:
                rhs = self._parse_expression(operation.precedence + 1)
            lhs = operation.apply(lhs, rhs)

    def _parse_unary(self) -> Quantity:
        kind, value = self._peek()
        if kind == OPERATOR and value is Operation.SUBTRACT:
            self.pos += 1
            return self._parse_expression(Operation.POW.precedence).negate()
        return self._parse_atom()

    def _parse_atom(self) -> Quantity:
        kind, value = self._peek()
        if kind == NUMBER:
            self.pos += 1
            return value
        if kind == LPAREN:
            self.pos += 1
            inner = self._parse_expression(1)
            if self._peek()[0] != RPAREN:
                raise ExpressionSyntaxError(self.expression, "Missing closing parenthesis")
            self.pos += 1
            return inner
        raise ExpressionSyntaxError(self.expression, "Expected a number or '('")
