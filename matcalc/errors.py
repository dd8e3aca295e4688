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
"""Errors raised by the matrix engine, the expression evaluator and the command layer"""


class MatrixError(Exception):
    """Base class of all errors raised in matcalc"""


class OutOfBounds(MatrixError, IndexError):
    """A row or column index exceeds the extent of a matrix"""


class DimensionMismatch(MatrixError, ValueError):
    """Operand shapes are incompatible with the requested operation"""


class NotSquare(DimensionMismatch):
    """Operation is only defined for square matrices"""


class Singular(MatrixError, ArithmeticError):
    """Matrix is not invertible"""


class UnknownOperand(MatrixError, ValueError):
    """Token is neither a known matrix nor a number"""


class UnsupportedOperation(MatrixError, TypeError):
    """Operator is not defined for the given operand kinds"""


class NameNotFound(MatrixError, KeyError):
    """No matrix is stored under the given name"""

    def __str__(self):
        # KeyError would quote the message
        return str(self.args[0]) if self.args else ''


class InvalidName(MatrixError, ValueError):
    """Name cannot be used for a user matrix"""


class ParseError(MatrixError, ValueError):
    """Matrix literal or command argument could not be parsed"""


class EvaluationError(MatrixError):
    """Expression could not be evaluated

    The error that aborted the evaluation is available as __cause__.
    """


class UsageError(MatrixError):
    """Command was called with the wrong number of arguments"""

    def __init__(self, usage: str):
        super().__init__("Usage: " + usage)
        self.usage = usage


class UnknownCommand(MatrixError):
    """Line is neither a command, an assignment nor an expression"""
