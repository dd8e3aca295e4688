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
"""Dense matrix with row operations and arithmetic

The Matrix class owns a single contiguous, row-major numpy buffer of float64 values.
Copies are deep, and all element access is bounds checked. Arithmetic operators always
return new matrices; the row operations (swap_rows, add_rows, multiply_row) work in place
and are the building blocks of the elimination algorithms in matcalc.elimination.
"""

from numbers import Integral, Real
from typing import Iterable, Iterator, List, Tuple
import numpy as np

from .config import Configuration
from .errors import DimensionMismatch, NotSquare, OutOfBounds, UnsupportedOperation


def almost_equal(a, b, rel_tol: float = None, abs_tol: float = None):
    """Test numbers (or arrays of numbers) for equality within tolerance
    
    Two values are almost equal if |a - b| <= max(rel_tol * max(|a|, |b|), abs_tol).
    The relative term handles large magnitudes, the absolute floor handles comparisons
    against zero. The same test is used for zero snapping in add_rows, for matrix
    equality and for the pivot check of is_row_echelon_form.
    
    Args:
        a, b (float or numpy.ndarray):
            Values to compare. Arrays are compared elementwise.

        rel_tol (float): (Default: Configuration().rel_tol)
            Relative tolerance.

        abs_tol (float): (Default: Configuration().abs_tol)
            Absolute tolerance.

    Returns:
        (bool or numpy.ndarray of bool):
        Result of the comparison, elementwise if arrays were passed.
    """
    conf = Configuration()
    if rel_tol is None:
        rel_tol = conf.rel_tol
    if abs_tol is None:
        abs_tol = conf.abs_tol
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    with np.errstate(invalid='ignore'):
        bound = np.maximum(rel_tol * np.maximum(np.abs(a), np.abs(b)), abs_tol)
        result = np.abs(a - b) <= bound
    if result.ndim == 0:
        return bool(result)
    return result


class Matrix:
    """Dense matrix of floats
    
    Initialize a rows x cols matrix, filled with a constant value.
    
    Example:
        A = Matrix(2, 3)          # 2x3 zero matrix
        B = Matrix(2, 2, 1.0)     # 2x2 matrix of ones
        C = Matrix.from_rows([[1, 2], [3, 4]])
        
    A matrix with zero rows or zero columns is empty and holds no elements.
    
    Args:
        rows (int): (Default: 0)
            Number of rows.

        cols (int): (Default: 0)
            Number of columns.

        fill (float): (Default: 0.0)
            Initial value of every element.
    """

    __hash__ = None

    def __init__(self, rows: int = 0, cols: int = 0, fill: float = 0.0):
        if rows < 0 or cols < 0:
            raise DimensionMismatch(f"Matrix dimensions must not be negative: {rows}x{cols}")
        self._rows = int(rows)
        self._cols = int(cols)
        self._data = np.full((self._rows, self._cols), float(fill), dtype=float)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> 'Matrix':
        """Create a matrix from a nested sequence of row values.
        
        Raises DimensionMismatch if the rows differ in length.
        """
        rows = [list(r) for r in rows]
        if not rows:
            return cls()
        num_cols = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != num_cols:
                raise DimensionMismatch(f"Row {i} has {len(r)} elements, expected {num_cols}.")
        matrix = cls(len(rows), num_cols)
        if num_cols:
            matrix._data[:, :] = np.array(rows, dtype=float)
        return matrix

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Matrix':
        """Create a matrix from a two dimensional numpy array (the array is copied)."""
        array = np.asarray(array, dtype=float)
        if array.ndim != 2:
            raise DimensionMismatch(f"Expected a two dimensional array, got {array.ndim} dimensions.")
        matrix = cls(*array.shape)
        matrix._data[:, :] = array
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        return self._rows * self._cols

    def is_empty(self) -> bool:
        return self._rows == 0 or self._cols == 0

    def is_square(self) -> bool:
        return self._rows == self._cols

    def _check_row(self, row: int):
        if not 0 <= row < self._rows:
            raise OutOfBounds(f"Row index {row} out of bounds for matrix with {self._rows} rows.")

    def _check_col(self, col: int):
        if not 0 <= col < self._cols:
            raise OutOfBounds(f"Column index {col} out of bounds for matrix with {self._cols} columns.")

    def at(self, row: int, col: int) -> float:
        """Get value at position (row, col)."""
        self._check_row(row)
        self._check_col(col)
        return float(self._data[row, col])

    def set_at(self, row: int, col: int, value: float):
        """Set value at position (row, col)."""
        self._check_row(row)
        self._check_col(col)
        self._data[row, col] = value

    def __getitem__(self, index: Tuple[int, int]) -> float:
        return self.at(*index)

    def __setitem__(self, index: Tuple[int, int], value: float):
        self.set_at(*index, value)

    def __iter__(self) -> Iterator[float]:
        # row-major order, like the underlying buffer
        return (float(v) for v in self._data.ravel())

    def row(self, row: int) -> List[float]:
        self._check_row(row)
        return self._data[row].tolist()

    def tolist(self) -> List[List[float]]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def copy(self) -> 'Matrix':
        """Deep copy of this matrix"""
        return Matrix.from_numpy(self._data)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    # Row operations (in place)
    def swap_rows(self, r1: int, r2: int):
        """Exchange rows r1 and r2."""
        self._check_row(r1)
        self._check_row(r2)
        if r1 != r2:
            self._data[[r1, r2]] = self._data[[r2, r1]]

    def add_rows(self, src: int, dst: int, scalar: float = 1.0):
        """Add scalar times row src to row dst
        
        Elements of dst that cancel out (dst[j] almost equal to -scalar*src[j]) are set
        to exactly zero, so that elimination leaves clean zeros below and above pivots.
        
        Args:
            src (int):
                Index of the row that is scaled and added.
                
            dst (int):
                Index of the row that is modified.
                
            scalar (float): (Default: 1.0)
                Factor applied to row src.
        """
        self._check_row(src)
        self._check_row(dst)
        addend = scalar * self._data[src]
        target = self._data[dst]
        cancels = almost_equal(target, -addend)
        result = target + addend
        result[cancels] = 0.0
        self._data[dst] = result

    def multiply_row(self, row: int, scalar: float):
        """Multiply the nonzero elements of a row by scalar, zeros stay untouched."""
        self._check_row(row)
        nonzero = self._data[row] != 0
        self._data[row, nonzero] *= scalar

    # Arithmetic
    def _check_same_shape(self, other: 'Matrix', action: str):
        if self.shape != other.shape:
            raise DimensionMismatch(f"Incompatible matrices, cannot {action} "
                                    f"{self._rows}x{self._cols} and {other.rows}x{other.cols}.")

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'add')
        return Matrix.from_numpy(self._data + other._data)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'subtract')
        return Matrix.from_numpy(self._data - other._data)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self._cols != other.rows:
                raise DimensionMismatch(f"Cannot multiply {self._rows}x{self._cols} "
                                        f"by {other.rows}x{other.cols} matrix.")
            return Matrix.from_numpy(self._data @ other._data)
        if isinstance(other, Real):
            return self._scaled(float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._scaled(float(other))
        return NotImplemented

    def _scaled(self, k: float) -> 'Matrix':
        # exact zeros stay zero (no -0.0, no 0*inf)
        with np.errstate(invalid='ignore'):
            result = self._data * k
        result[self._data == 0] = 0.0
        return Matrix.from_numpy(result)

    def __neg__(self):
        return self._scaled(-1.0)

    def __pos__(self):
        return self.copy()

    def __pow__(self, exponent):
        """Raise a square matrix to a non-negative integer power by repeated squaring."""
        if isinstance(exponent, Real) and not isinstance(exponent, Integral):
            if not float(exponent).is_integer():
                raise UnsupportedOperation(f"Exponent must be an integer, got {exponent}.")
            exponent = int(exponent)
        if not isinstance(exponent, Integral):
            return NotImplemented
        if exponent < 0:
            raise UnsupportedOperation("Negative exponents are not supported, use inverse.")
        if not self.is_square():
            raise NotSquare(f"Only square matrices can be raised to a power, got {self._rows}x{self._cols}.")
        with np.errstate(over='ignore', invalid='ignore'):
            return Matrix.from_numpy(np.linalg.matrix_power(self._data, int(exponent)))

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(almost_equal(self._data, other._data)))

    # Predicates
    def is_row_echelon_form(self) -> bool:
        """Test whether the matrix is in row echelon form
        
        Each nonzero row must start with a leading 1 that lies strictly right of the
        leading 1 of the row above, and all-zero rows must come after all nonzero rows.
        """
        prev_col = -1
        seen_zero_row = False
        for i in range(self._rows):
            nonzero = np.flatnonzero(self._data[i])
            if nonzero.size == 0:
                seen_zero_row = True
                continue
            lead = int(nonzero[0])
            if seen_zero_row or lead <= prev_col or not almost_equal(self._data[i, lead], 1.0):
                return False
            prev_col = lead
        return True

    def is_zero_matrix(self) -> bool:
        return not np.any(self._data)

    # Formatting
    def __str__(self) -> str:
        width = Configuration().column_width
        lines = []
        for i in range(self._rows):
            # + 0.0 turns -0.0 into 0.0
            lines.append(''.join(f"{v + 0.0:<{width}g} " for v in self._data[i]))
        return '\n'.join(lines) + ('\n' if lines else '')

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"
