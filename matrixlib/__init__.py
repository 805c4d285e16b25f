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
"""matrixlib package for exact rational and complex matrix algebra"""

from .names import *
import logging

__version__ = "1.0"


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .exceptions import *
from .algebra import *
from .matrices import *
from .builder import format_matrix, from_rows, parse_matrix
from .matrix_io import load_compressed, read_csv, save_compressed, write_csv
from .convert import from_numpy, from_sparse, from_sympy, to_fraction, to_numpy, to_sympy, to_sympy_rational
