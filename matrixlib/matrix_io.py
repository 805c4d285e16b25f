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
"""Reading and writing matrices from and to files

Two formats are supported. The compressed format is the gzip-compressed text
form of a matrix (see ``builder``), the CSV format holds one matrix row per
line with each value in its text form, e.g. ``3/4`` or ``1+2i``.
"""

import csv
import gzip
import logging
import os
import zlib
from typing import Union

from matrixlib.algebra.quantity import parse_number
from matrixlib.builder import from_rows, parse_matrix
from matrixlib.exceptions import ReadMatrixError
from matrixlib.matrices import Matrix

LOG = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


# ==================================
# Compressed text form
# ==================================
def save_compressed(matrix: Matrix, path: PathLike, encoding: str = "utf-8"):
    """Writes a matrix as gzip-compressed text

    Args:
        matrix (Matrix): The matrix to save.

        path (str or os.PathLike): Target file, overwritten if present.

        encoding (str): Text encoding of the compressed content.
    """
    data = str(matrix).encode(encoding)
    with gzip.open(path, "wb") as fp:
        fp.write(data)
    LOG.debug("Saved %dx%d matrix to %s", matrix.row_count, matrix.column_count, path)


def load_compressed(path: PathLike, encoding: str = "utf-8") -> Matrix:
    """Reads a matrix saved by ``save_compressed``

    Args:
        path (str or os.PathLike): File to read.

        encoding (str): Text encoding of the compressed content.

    Returns:
        (Matrix): The matrix, a SquareMatrix if it is square.

    Raises:
        FileNotFoundError: The file does not exist.

        ReadMatrixError: The file is no gzip file, is truncated or does not
        hold a matrix.
    """
    with open(path, "rb") as raw:
        try:
            with gzip.GzipFile(fileobj=raw, mode="rb") as fp:
                text = fp.read().decode(encoding)
        except (OSError, EOFError, UnicodeDecodeError, zlib.error) as e:
            raise ReadMatrixError(f"{path} is not a valid matrix file or is corrupted") from e
    LOG.debug("Loaded matrix from %s", path)
    return parse_matrix(text)


# ==================================
# CSV
# ==================================
def write_csv(matrix: Matrix, path: PathLike, encoding: str = "utf-8") -> int:
    """Writes a matrix as CSV, one row per line

    Returns:
        int: number of rows written.
    """
    with open(path, "w", newline="", encoding=encoding) as fp:
        writer = csv.writer(fp, lineterminator="\n")
        for row in range(matrix.row_count):
            writer.writerow([str(v) for v in matrix.get_row(row)])
    LOG.debug("Wrote %dx%d matrix to %s", matrix.row_count, matrix.column_count, path)
    return matrix.row_count


def read_csv(path: PathLike, encoding: str = "utf-8") -> Matrix:
    """Reads a matrix from CSV

    Blank lines and whitespace around values are ignored.

    Args:
        path (str or os.PathLike): File to read.

        encoding (str): Text encoding of the file.

    Returns:
        (Matrix): The matrix, a SquareMatrix if it is square.

    Raises:
        ReadMatrixError: The file is empty, its rows differ in length or a
        value is not a number.
    """
    rows = []
    with open(path, newline="", encoding=encoding) as fp:
        for line, record in enumerate(csv.reader(fp), start=1):
            if not any(cell.strip() for cell in record):
                continue
            try:
                rows.append([parse_number(cell.strip()) for cell in record])
            except (ValueError, ZeroDivisionError) as e:
                raise ReadMatrixError(f"Invalid value in line {line} of {path}") from e
    if not rows:
        raise ReadMatrixError(f"{path} holds no matrix")
    return from_rows(rows)
