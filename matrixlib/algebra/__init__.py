"""
Exact Numeric Tower

This package provides the numbers matrices are built from:
- Rational: exact fractions of arbitrary precision integers
- Complex: values a+bi with rational components
- Expression: evaluation of algebraic expressions over these numbers

All operations are exact; no value is ever rounded.
"""

from .quantity import NumberKind, Quantity, as_quantity, parse_number
from .rational import Rational
from .complex import Complex
from .operation import Operation
from .expression import Expression, evaluate

__all__ = [
    'NumberKind',
    'Quantity',
    'as_quantity',
    'parse_number',
    'Rational',
    'Complex',
    'Operation',
    'Expression',
    'evaluate',
]
