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
"""Table of named matrices shared by commands and the expression evaluator"""

from typing import Dict, Iterator, List
import logging
import re

from .errors import InvalidName, NameNotFound
from .matrix import Matrix
from .names import RESERVED_PREFIX, RESULT_PREFIX

LOG = logging.getLogger(__name__)

USER_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
RESULT_NAME = re.compile('^' + re.escape(RESULT_PREFIX) + r'\d+$')


def is_reserved_name(name: str) -> bool:
    return name.startswith(RESERVED_PREFIX)


def is_result_name(name: str) -> bool:
    """True for names of the form __result<digits> used for intermediate results."""
    return RESULT_NAME.match(name) is not None


class SymbolTable:
    """Mapping from names to matrices
    
    User names must be identifiers that do not begin with '__'. That prefix is
    reserved for intermediate results (__result0, __result1, ...) which the
    expression evaluator stores while it chains operations. Stored matrices are
    owned by the table: assign stores a copy, so later changes to the assigned
    object do not leak into the table.
    """

    def __init__(self):
        self._matrices: Dict[str, Matrix] = {}

    def assign(self, name: str, matrix: Matrix):
        """Create or overwrite the user matrix stored under name."""
        if not USER_NAME.match(name) or is_reserved_name(name):
            raise InvalidName(f"Invalid matrix name '{name}'. Names must be identifiers "
                              f"and must not begin with '{RESERVED_PREFIX}'.")
        LOG.debug("Assigning %dx%d matrix to %s.", matrix.rows, matrix.cols, name)
        self._matrices[name] = matrix.copy()

    def store_temporary(self, name: str, matrix: Matrix):
        if not is_result_name(name):
            raise InvalidName(f"'{name}' is not a name for an intermediate result.")
        self._matrices[name] = matrix

    def discard(self, name: str):
        self._matrices.pop(name, None)

    def found_matrix(self, name: str) -> bool:
        """Whether name refers to a user matrix or to an intermediate result
        
        Stray names with the reserved prefix that are not of the form
        __result<digits> are never reported as found.
        """
        if is_reserved_name(name) and not is_result_name(name):
            return False
        return name in self._matrices

    def lookup(self, name: str) -> Matrix:
        """Stored matrix (not a copy, so row operations act in place)."""
        if not self.found_matrix(name):
            raise NameNotFound(f"Matrix {name} not found.")
        return self._matrices[name]

    def reset(self):
        """Drop all entries."""
        LOG.info("Clearing %d matrices.", len(self._matrices))
        self._matrices.clear()

    def names(self) -> List[str]:
        return sorted(n for n in self._matrices if not is_reserved_name(n))

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and self.found_matrix(name)

    def __getitem__(self, name: str) -> Matrix:
        return self.lookup(name)

    def __setitem__(self, name: str, matrix: Matrix):
        self.assign(name, matrix)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self.names())
