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
"""The read-only identity matrix"""

from matrixlib.algebra.quantity import NumberKind
from matrixlib.matrices.square_matrix import SquareMatrix


class IdentityMatrix(SquareMatrix):
    """The NxN identity matrix: one on the diagonal, zero everywhere else.

    An identity matrix is read-only. Every mutating operation raises
    ImmutableMatrixError; ``copy()`` returns a writable SquareMatrix.
    Identity matrices are triangular and have a determinant of one.
    """

    def __init__(self, dimension: int, kind: NumberKind = NumberKind.RATIONAL):
        super().__init__(dimension, kind=kind)
        one = kind.one
        for i in range(dimension):
            self._set(i, i, one)
        self._read_only = True

    def _copy_type(self) -> type:
        return SquareMatrix
