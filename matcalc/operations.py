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
"""Matrix builders and derived operations

Builders: identity, zero, random_matrix
Transforms: transpose, augment, minor, adjugate, inverse, power
Scalars: determinant
"""

from typing import Optional
import logging
import numpy as np

from .config import Configuration
from .elimination import reduced_row_echelon
from .errors import DimensionMismatch, NotSquare, OutOfBounds, ParseError, Singular
from .matrix import Matrix, almost_equal

LOG = logging.getLogger(__name__)


def identity(size: int) -> Matrix:
    """size x size matrix with ones on the diagonal and zeros elsewhere."""
    return Matrix.from_numpy(np.eye(size))


def zero(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of zeros."""
    return Matrix(rows, cols, 0.0)


def random_matrix(rows: int, cols: int, lower: int, upper: int, seed: Optional[int] = None) -> Matrix:
    """Matrix of uniformly distributed integers
    
    Args:
        rows, cols (int):
            Dimensions of the matrix.

        lower, upper (int):
            Inclusive bounds of the drawn integers.

        seed (int): (Default: Configuration().random_seed)
            Seed of the random number generator. Equal seeds produce equal matrices.

    Returns:
        (Matrix):
        A rows x cols matrix with integer entries in [lower, upper].
    """
    if lower > upper:
        raise ParseError(f"Lower bound {lower} is greater than upper bound {upper}.")
    if seed is None:
        seed = Configuration().random_seed
    try:
        rng = np.random.default_rng(seed)
        values = rng.integers(lower, upper, size=(rows, cols), endpoint=True)
    except ValueError as err:
        raise ParseError(f"Cannot draw random integers in [{lower}, {upper}] with seed {seed}: {err}") from err
    return Matrix.from_numpy(values)


def transpose(matrix: Matrix) -> Matrix:
    """cols x rows matrix T with T(j, i) = A(i, j)."""
    return Matrix.from_numpy(matrix.to_numpy().T)


def augment(left: Matrix, right: Matrix) -> Matrix:
    """Place two matrices with equal row count side by side
    
    Args:
        left (Matrix):
            Matrix that fills the first left.cols columns.

        right (Matrix):
            Matrix that fills the remaining right.cols columns.

    Returns:
        (Matrix):
        A left.rows x (left.cols + right.cols) matrix [left | right].
    """
    if left.rows != right.rows:
        raise DimensionMismatch(f"Number of rows not equal ({left.rows} and {right.rows}), cannot augment.")
    result = Matrix(left.rows, left.cols + right.cols)
    for i in range(left.rows):
        for j in range(left.cols):
            result.set_at(i, j, left.at(i, j))
        for j in range(right.cols):
            result.set_at(i, left.cols + j, right.at(i, j))
    return result


def minor(matrix: Matrix, row: int, col: int) -> Matrix:
    """Submatrix without the given row and column
    
    A matrix with only one row or only one column has no proper minor; in that case
    a copy of the matrix itself is returned.
    
    Args:
        matrix (Matrix):
            Input matrix.

        row, col (int):
            Row and column to delete.

    Returns:
        (Matrix):
        The (rows-1) x (cols-1) minor matrix.
    """
    if not 0 <= row < matrix.rows or not 0 <= col < matrix.cols:
        raise OutOfBounds(f"Position ({row}, {col}) out of bounds for {matrix.rows}x{matrix.cols} matrix.")
    if matrix.rows == 1 or matrix.cols == 1:
        LOG.warning("Matrix with a single row or column has no minor, returning the matrix itself.")
        return matrix.copy()
    data = np.delete(np.delete(matrix.to_numpy(), row, axis=0), col, axis=1)
    return Matrix.from_numpy(data)


def determinant(matrix: Matrix) -> float:
    """Determinant by cofactor expansion along the first row
    
    The expansion is recursive and takes O(n!) time, which is fine for the small
    matrices typed in interactively.
    
    Args:
        matrix (Matrix):
            Square input matrix. The empty 0x0 matrix has determinant 1.

    Returns:
        (float):
        The determinant.
    """
    if not matrix.is_square():
        raise NotSquare(f"Determinant requires a square matrix, got {matrix.rows}x{matrix.cols}.")
    n = matrix.rows
    if n == 0:
        return 1.0
    if n == 1:
        return matrix.at(0, 0)
    if n == 2:
        return matrix.at(0, 0) * matrix.at(1, 1) - matrix.at(0, 1) * matrix.at(1, 0)
    det = 0.0
    for j in range(n):
        a = matrix.at(0, j)
        if a == 0:
            continue
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * a * determinant(minor(matrix, 0, j))
    return det


def adjugate(matrix: Matrix) -> Matrix:
    """Transposed matrix of cofactors C(i, j) = (-1)^(i+j) * det(minor(A, i, j))."""
    if not matrix.is_square():
        raise NotSquare(f"Adjugate requires a square matrix, got {matrix.rows}x{matrix.cols}.")
    n = matrix.rows
    if n == 1:
        return identity(1)
    cofactors = Matrix(n, n)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            cofactors.set_at(i, j, sign * determinant(minor(matrix, i, j)) + 0.0)
    return transpose(cofactors)


def inverse(matrix: Matrix) -> Matrix:
    """Invert a square matrix with Gauss-Jordan elimination
    
    The reduced row echelon form of [A | I] is computed. If its left half is the
    identity, the right half is the inverse of A.
    
    Args:
        matrix (Matrix):
            Square matrix to invert.

    Returns:
        (Matrix):
        The inverse matrix.

    Raises:
        NotSquare: If the matrix is not square.
        Singular: If the matrix is not invertible.
    """
    if not matrix.is_square():
        raise NotSquare(f"Inverse does not exist for non-square {matrix.rows}x{matrix.cols} matrix.")
    n = matrix.rows
    reduced = reduced_row_echelon(augment(matrix, identity(n))).to_numpy()
    if not np.all(almost_equal(reduced[:, :n], np.eye(n))):
        raise Singular("Matrix is singular, inverse does not exist.")
    return Matrix.from_numpy(reduced[:, n:])


def power(matrix: Matrix, exponent: int) -> Matrix:
    """Matrix raised to a non-negative integer power, see Matrix.__pow__."""
    return matrix ** exponent
