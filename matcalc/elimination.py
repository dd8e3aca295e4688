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
"""Gaussian and Gauss-Jordan elimination on dense matrices

Both algorithms work on a copy of their input and use the row operations of Matrix.
Pivots are chosen as the first nonzero entry (scanning columns left to right and, within
a column, rows top to bottom). Exact zero tests are safe here because add_rows snaps
cancelled entries to exactly zero.
"""

from typing import Optional, Tuple
import logging

from .matrix import Matrix, almost_equal

LOG = logging.getLogger(__name__)


def find_pivot(matrix: Matrix, top_row: int) -> Optional[Tuple[int, int]]:
    """Find the first nonzero entry at or below top_row
    
    Columns are scanned from left to right, rows from top_row downward.
    
    Args:
        matrix (Matrix):
            Matrix to search.
            
        top_row (int):
            First row that may hold the pivot.

    Returns:
        (tuple or None):
        (row, col) of the pivot, or None if all remaining rows are zero.
    """
    for col in range(matrix.cols):
        for row in range(top_row, matrix.rows):
            if matrix.at(row, col) != 0:
                return row, col
    return None


def leading_column(matrix: Matrix, row: int) -> Optional[int]:
    """Column index of the first nonzero entry of a row, None for an all-zero row."""
    for col in range(matrix.cols):
        if matrix.at(row, col) != 0:
            return col
    return None


def row_echelon(matrix: Matrix) -> Matrix:
    """Compute a row echelon form by Gaussian elimination
    
    The input is not modified. A matrix that already is in row echelon form is
    returned as an (unchanged) copy. Otherwise, for every row from the top, the first
    nonzero entry in the remaining rows is swapped up, normalized to 1 and used to
    eliminate the entries below it.
    
    Example:
        row_echelon(Matrix.from_rows([[1, 2], [3, 4]])) -> [[1, 2], [0, 1]]
    
    Args:
        matrix (Matrix):
            Input matrix.

    Returns:
        (Matrix):
        A matrix in row echelon form that is row-equivalent to the input.
    """
    A = matrix.copy()
    if A.is_row_echelon_form():
        return A
    for top_row in range(A.rows):
        pivot = find_pivot(A, top_row)
        if pivot is None:
            LOG.debug("  No pivot below row %d, remaining rows are zero.", top_row)
            break
        pivot_row, col = pivot
        if pivot_row != top_row:
            LOG.debug("  Swapping rows %d and %d.", pivot_row, top_row)
            A.swap_rows(pivot_row, top_row)
        leading = A.at(top_row, col)
        if leading != 1:
            A.multiply_row(top_row, 1.0 / leading)
            if almost_equal(A.at(top_row, col), 1.0):
                A.set_at(top_row, col, 1.0)
        LOG.debug("  Pivot (%d, %d), normalized from %g.", top_row, col, leading)
        for row in range(top_row + 1, A.rows):
            entry = A.at(row, col)
            if entry != 0:
                A.add_rows(top_row, row, -entry)
    return A


def reduced_row_echelon(matrix: Matrix) -> Matrix:
    """Compute the reduced row echelon form by Gauss-Jordan elimination
    
    The row echelon form is computed first. The rows are then swept from the bottom to
    the top and every pivot is used to clear the entries above it. All-zero rows are
    skipped.
    
    Args:
        matrix (Matrix):
            Input matrix.

    Returns:
        (Matrix):
        The reduced row echelon form of the input, with zeros above and below every pivot.
    """
    A = row_echelon(matrix)
    for bottom_row in range(A.rows - 1, 0, -1):
        col = leading_column(A, bottom_row)
        if col is None:
            continue
        for row in range(bottom_row):
            entry = A.at(row, col)
            if entry != 0:
                A.add_rows(bottom_row, row, -entry)
    return A


def rank(matrix: Matrix) -> int:
    """Number of nonzero rows in the row echelon form of the matrix."""
    A = row_echelon(matrix)
    return sum(1 for i in range(A.rows) if leading_column(A, i) is not None)
