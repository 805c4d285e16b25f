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
"""Building matrices from their text form

The text form is the one produced by ``str(matrix)``::

    [{1,2};{3/4,1+2i}]

Rows are enclosed in ``{`` and ``}`` and separated by ``;``, values within
a row are separated by ``,`` and the whole matrix is enclosed in ``[`` and
``]``. Whitespace is ignored.
"""

import logging
from typing import List

from matrixlib.algebra.quantity import Quantity, parse_number
from matrixlib.exceptions import ReadMatrixError
from matrixlib.matrices import Matrix, SquareMatrix
from matrixlib.names import MATRIX_END, MATRIX_START, ROW_END, ROW_SEPARATOR, ROW_START, SEPARATOR

LOG = logging.getLogger(__name__)


def parse_matrix(text: str) -> Matrix:
    """Builds a matrix from its text form.

    If the amount of rows equals the amount of columns, the result is a
    SquareMatrix.

    Args:
        text (str): A matrix in text form, e.g. ``'[{1,0};{0,1}]'``.

    Returns:
        (Matrix): A new writable matrix.

    Raises:
        ReadMatrixError: The text is not a well-formed matrix.
    """
    if text is None:
        raise ReadMatrixError("Cannot read a matrix from None")
    s = "".join(text.split())
    _require_delimiters(s, MATRIX_START, MATRIX_END)
    body = s[len(MATRIX_START):-len(MATRIX_END)]
    if not body:
        raise ReadMatrixError("Empty matrix")
    return from_rows([_parse_row(row) for row in body.split(ROW_SEPARATOR)])


def from_rows(rows: List[List[Quantity]]) -> Matrix:
    """Builds a matrix from a list of equally long rows

    Returns a SquareMatrix when there are as many rows as columns.

    Raises:
        ReadMatrixError: There are no rows or the rows differ in length.
    """
    if not rows or not rows[0]:
        raise ReadMatrixError("Empty matrix")
    columns = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != columns:
            raise ReadMatrixError(f"Row {index} has {len(row)} values, expected {columns}")
    LOG.debug("Read %dx%d matrix", len(rows), columns)
    if len(rows) == columns:
        return SquareMatrix(columns, rows)
    return Matrix(len(rows), columns, rows)


def format_matrix(matrix: Matrix) -> str:
    """Returns the text form of a matrix, the inverse of ``parse_matrix``"""
    return str(matrix)


def _parse_row(text: str) -> List[Quantity]:
    _require_delimiters(text, ROW_START, ROW_END)
    body = text[len(ROW_START):-len(ROW_END)]
    if not body:
        raise ReadMatrixError("Empty row")
    values = []
    for value in body.split(SEPARATOR):
        try:
            values.append(parse_number(value))
        except (ValueError, ZeroDivisionError) as e:
            raise ReadMatrixError(f"Invalid value {value!r}") from e
    return values


def _require_delimiters(text: str, start: str, end: str) -> None:
    if not text:
        raise ReadMatrixError(f"Expected {start!r} but received nothing")
    if not text.startswith(start):
        raise ReadMatrixError.unexpected(text[0], start)
    if not text.endswith(end) or len(text) < len(start) + len(end):
        raise ReadMatrixError.unexpected(text[-1], end)
