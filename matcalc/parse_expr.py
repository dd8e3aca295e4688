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
"""Functions for parsing and evaluating matrix expressions and matrix literals

Expressions arrive already split at whitespace, e.g. ['(A', '+', 'B)', '*', '2'].
Evaluation runs in three steps:

    tokenize_math:  isolate parentheses        -> ['(', 'A', '+', 'B', ')', '*', '2']
    to_postfix:     shunting-yard conversion   -> ['A', 'B', '+', '2', '*']
    evaluate:       stack evaluation of the postfix sequence against a SymbolTable
"""

from fractions import Fraction
from typing import List, Union
import logging
import re

from .errors import EvaluationError, MatrixError, ParseError, UnknownOperand, UnsupportedOperation
from .matrix import Matrix
from .names import LPAREN, MINUS, OPERATOR_PRECEDENCE, PLUS, POWER, RESULT_PREFIX, RPAREN, TIMES
from .symbols import SymbolTable

LOG = logging.getLogger(__name__)

NUMBER = re.compile(r'^-?(\d+\.?\d*|\.\d+)$')


def is_number(token: str) -> bool:
    """Numeric literal: optional leading '-', digits and at most one '.'"""
    return NUMBER.match(token) is not None


def is_operator(token: str) -> bool:
    return token in OPERATOR_PRECEDENCE


def tokenize_math(tokens: List[str]) -> List[str]:
    """Split parentheses off the tokens they are attached to
    
    E.g.: ['((A', '+', 'B)', '*', 'C)'] -> ['(', '(', 'A', '+', 'B', ')', '*', 'C', ')']
    
    Args:
        tokens (list of str):
            Whitespace separated parts of an expression.

    Returns:
        (list of str):
        Tokens with every parenthesis as a separate token, order preserved.
    """
    split = []
    for token in tokens:
        while token.startswith(LPAREN):
            split.append(LPAREN)
            token = token[1:]
        closing = 0
        while token.endswith(RPAREN):
            closing += 1
            token = token[:-1]
        if token:
            split.append(token)
        split += [RPAREN] * closing
    return split


def to_postfix(tokens: List[str]) -> List[str]:
    """Convert an infix expression to postfix notation (shunting-yard)
    
    Operators bind with the precedences + - : 1, * : 2, ^ : 3 and are left associative.
    
    E.g.: ['A', '*', '2', '+', 'B'] -> ['A', '2', '*', 'B', '+']
    
    Args:
        tokens (list of str):
            Infix expression. Parentheses may still be attached to operands.

    Returns:
        (list of str):
        The expression in postfix order.
    """
    stack = [LPAREN]
    postfix = []
    for token in tokenize_math(tokens) + [RPAREN]:
        if is_operator(token):
            precedence = OPERATOR_PRECEDENCE[token]
            while stack and is_operator(stack[-1]) and precedence <= OPERATOR_PRECEDENCE[stack[-1]]:
                postfix.append(stack.pop())
            stack.append(token)
        elif token == RPAREN:
            while stack and stack[-1] != LPAREN:
                postfix.append(stack.pop())
            if not stack:
                raise EvaluationError("Unbalanced parentheses, missing (")
            stack.pop()
        elif token == LPAREN:
            stack.append(token)
        else:
            postfix.append(token)
    if stack:
        raise EvaluationError("Unbalanced parentheses, missing )")
    return postfix


def resolve_operand(token: str, symbols: SymbolTable) -> Union[Matrix, float]:
    """Matrix or number that a token stands for
    
    A name prefixed with '-' stands for the negated matrix; the stored matrix
    itself is left unchanged.
    """
    if symbols.found_matrix(token):
        return symbols.lookup(token)
    if token.startswith(MINUS) and symbols.found_matrix(token[1:]):
        return -symbols.lookup(token[1:])
    if is_number(token):
        return float(token)
    raise UnknownOperand(f"Unknown operand '{token}'.")


def do_op(a: str, b: str, op: str, symbols: SymbolTable) -> Matrix:
    """Apply a binary operator to two operand tokens
    
    Defined combinations:
        matrix + matrix, matrix - matrix, matrix * matrix
        matrix * number, number * matrix
        matrix ^ number (non-negative integer exponent)

    Args:
        a, b (str):
            Left and right operand tokens (matrix names or numeric literals).

        op (str):
            One of '+', '-', '*', '^'.

        symbols (SymbolTable):
            Table used to resolve matrix names.

    Returns:
        (Matrix):
        Result of the operation.
    """
    left = resolve_operand(a, symbols)
    right = resolve_operand(b, symbols)
    if isinstance(left, Matrix) and isinstance(right, Matrix):
        if op == PLUS:
            return left + right
        if op == MINUS:
            return left - right
        if op == TIMES:
            return left * right
    elif isinstance(left, Matrix):
        if op == TIMES:
            return left * right
        if op == POWER:
            return left ** right
    elif isinstance(right, Matrix):
        if op == TIMES:
            return left * right
    kinds = ' and '.join('matrix' if isinstance(x, Matrix) else 'number' for x in (left, right))
    raise UnsupportedOperation(f"Operator {op} is not defined for {kinds}.")


def evaluate(tokens: List[str], symbols: SymbolTable) -> Matrix:
    """Evaluate an arithmetic expression over named matrices
    
    Intermediate results are stored in the symbol table as __result0, __result1, ...
    so that later operators can refer to them by name. They are removed again when the
    evaluation ends, whether it succeeded or not.
    
    Example:
        evaluate(['A', '*', '2', '+', 'B'], symbols)
    
    Args:
        tokens (list of str):
            Whitespace separated expression.

        symbols (SymbolTable):
            Table with the matrices the expression refers to.

    Returns:
        (Matrix):
        The value of the expression (a new matrix).

    Raises:
        EvaluationError: If any step fails. The original error is chained as __cause__.
    """
    if not tokens:
        raise EvaluationError("Empty expression.")
    postfix = to_postfix(tokens)
    LOG.debug("Postfix expression: %s", ' '.join(postfix))
    stack = []
    created = []
    try:
        for token in postfix:
            if not is_operator(token):
                stack.append(token)
                continue
            if len(stack) < 2:
                raise EvaluationError(f"Operator {token} is missing an operand.")
            b = stack.pop()
            a = stack.pop()
            name = RESULT_PREFIX + str(len(created))
            symbols.store_temporary(name, do_op(a, b, token, symbols))
            created.append(name)
            LOG.debug("  %s = %s %s %s", name, a, token, b)
            stack.append(name)
        if len(stack) != 1:
            raise EvaluationError("Operands without operator in expression.")
        result = resolve_operand(stack[0], symbols)
        if not isinstance(result, Matrix):
            raise EvaluationError("Expression does not evaluate to a matrix.")
        return result.copy()
    except EvaluationError:
        raise
    except MatrixError as err:
        raise EvaluationError("Evaluation error: " + str(err)) from err
    finally:
        for name in created:
            symbols.discard(name)


def parse_number(text: str) -> float:
    """Parse a decimal number or a fraction n/d, e.g. '-0.5' or '1/3'."""
    try:
        return float(Fraction(text.strip()))
    except (ValueError, ZeroDivisionError, OverflowError):
        raise ParseError(f"Invalid number '{text}'.")


def parse_matrix_literal(text: str) -> Matrix:
    """Translate a matrix literal into a matrix
    
    E.g.: input: text='[[1, 2], [1/2, -4]]' translates into the 2x2 matrix [[1.0, 2.0], [0.5, -4.0]]
    
    Args:
        text (str):
            Literal of nested brackets, one inner bracket per row, elements separated by
            commas. Whitespace is ignored, so the literal may come from several tokens.

    Returns:
        (Matrix):
        The matrix described by the literal.
    """
    text = ''.join(text.split())
    opening = text.count('[')
    closing = text.count(']')
    if opening != closing:
        raise ParseError("Missing " + ('[' if opening < closing else ']'))
    if text == '[]':
        return Matrix()
    if not re.fullmatch(r'\[\[[^\[\]]*\](,\[[^\[\]]*\])*\]', text):
        raise ParseError(f"Malformed matrix literal '{text}'.")
    rows = [[parse_number(v) for v in row.split(',')] for row in re.findall(r'\[([^\[\]]*)\]', text[1:-1])]
    lengths = {len(r) for r in rows}
    if len(lengths) != 1:
        raise ParseError("All rows of a matrix literal must have the same number of elements.")
    return Matrix.from_rows(rows)
