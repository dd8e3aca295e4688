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
"""Command table and dispatcher of the matrix interpreter

Every command is a Command entry in COMMANDS with its usage line, the accepted number
of arguments and a handler. Handlers receive the arguments (the tokens after the command
name) and the Session and return a Matrix or None. Lines that are not commands are
assignments ('<name> = ...') or arithmetic expressions.
"""

from typing import Callable, Dict, List, NamedTuple, Optional, TextIO, Tuple
import logging
import sys

from .elimination import rank, reduced_row_echelon, row_echelon
from .errors import InvalidName, ParseError, UnknownCommand, UsageError
from .matrix import Matrix
from .names import *
from .operations import adjugate, augment, determinant, identity, inverse, minor, random_matrix, transpose, zero
from .parse_expr import evaluate, is_number, parse_matrix_literal, parse_number
from .symbols import SymbolTable

LOG = logging.getLogger(__name__)


class Session:
    """State of one interpreter session
    
    Args:
        symbols (SymbolTable): (Default: new empty table)
            Named matrices of this session.

        out (file-like): (Default: sys.stdout)
            Stream that print and help write to.
    """

    def __init__(self, symbols: Optional[SymbolTable] = None, out: Optional[TextIO] = None):
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.out = out if out is not None else sys.stdout


class Command(NamedTuple):
    name: str
    usage: str
    min_args: int
    max_args: int
    handler: Callable[[List[str], Session], Optional[Matrix]]
    aliases: Tuple[str, ...] = ()
    returns_matrix: bool = True


def _index(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ParseError(f"Invalid index '{token}', expected a non-negative integer.")
    if value < 0:
        raise ParseError(f"Invalid index '{token}', expected a non-negative integer.")
    return value


def _integer(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"Invalid integer '{token}'.")


# Handlers
def _reset(args, session):
    session.symbols.reset()


def _print(args, session):
    result = do_command(args, session)
    if result is not None:
        session.out.write(str(result))


def _help(args, session):
    for command in _COMMAND_LIST:
        session.out.write(command.usage + '\n')
    session.out.write('<matrix> = [[a11,a12,...,a1N],...,[aM1,aM2,...,aMN]]\n')
    session.out.write('<matrix> = <command|expression>\n')
    session.out.write('<expression> with operators + - * ^ and parentheses\n')


def _transpose(args, session):
    return transpose(session.symbols.lookup(args[0]))


def _inverse(args, session):
    return inverse(session.symbols.lookup(args[0]))


def _row_echelon(args, session):
    return row_echelon(session.symbols.lookup(args[0]))


def _reduced_row_echelon(args, session):
    return reduced_row_echelon(session.symbols.lookup(args[0]))


def _swap_rows(args, session):
    session.symbols.lookup(args[0]).swap_rows(_index(args[1]), _index(args[2]))


def _add_rows(args, session):
    scalar = parse_number(args[3]) if len(args) == 4 else 1.0
    session.symbols.lookup(args[0]).add_rows(_index(args[1]), _index(args[2]), scalar)


def _multiply_row(args, session):
    session.symbols.lookup(args[0]).multiply_row(_index(args[1]), parse_number(args[2]))


def _random(args, session):
    seed = _integer(args[4]) if len(args) == 5 else None
    return random_matrix(_index(args[0]), _index(args[1]), _integer(args[2]), _integer(args[3]), seed)


def _identity(args, session):
    return identity(_index(args[0]))


def _zero(args, session):
    return zero(_index(args[0]), _index(args[1]))


def _augment(args, session):
    return augment(session.symbols.lookup(args[0]), session.symbols.lookup(args[1]))


def _minor(args, session):
    return minor(session.symbols.lookup(args[0]), _index(args[1]), _index(args[2]))


def _determinant(args, session):
    return Matrix(1, 1, determinant(session.symbols.lookup(args[0])))


def _adjugate(args, session):
    return adjugate(session.symbols.lookup(args[0]))


def _rank(args, session):
    return Matrix(1, 1, rank(session.symbols.lookup(args[0])))


_COMMAND_LIST = [
    Command(RESET, "reset", 0, 0, _reset, returns_matrix=False),
    Command(PRINT, "print <command|expression>", 1, sys.maxsize, _print, returns_matrix=False),
    Command(TRANSPOSE, "transpose <matrix>", 1, 1, _transpose),
    Command(INVERSE, "inverse <matrix>", 1, 1, _inverse),
    Command(ROW_ECHELON, "row_echelon <matrix>", 1, 1, _row_echelon, ('re',)),
    Command(REDUCED_ROW_ECHELON, "reduced_row_echelon <matrix>", 1, 1, _reduced_row_echelon, ('rre',)),
    Command(SWAP_ROWS, "swap_rows <matrix> <r1> <r2>", 3, 3, _swap_rows, returns_matrix=False),
    Command(ADD_ROWS, "add_rows <matrix> <row1> <row2> [<scalar>]", 3, 4, _add_rows, returns_matrix=False),
    Command(MULTIPLY_ROW, "multiply_row <matrix> <row> <scalar>", 3, 3, _multiply_row, returns_matrix=False),
    Command(RANDOM, "random <rows> <cols> <lower_bound> <upper_bound> [<seed>]", 4, 5, _random),
    Command(IDENTITY, "identity <size>", 1, 1, _identity),
    Command(ZERO, "zero <rows> <cols>", 2, 2, _zero),
    Command(AUGMENT, "augment <matrix1> <matrix2>", 2, 2, _augment),
    Command(MINOR, "minor <matrix> <row> <col>", 3, 3, _minor),
    Command(DETERMINANT, "determinant <matrix>", 1, 1, _determinant, ('det',)),
    Command(ADJUGATE, "adjugate <matrix>", 1, 1, _adjugate, ('adj',)),
    Command(RANK, "rank <matrix>", 1, 1, _rank),
    Command(HELP, "help", 0, 0, _help, returns_matrix=False),
]

COMMANDS: Dict[str, Command] = {}
for _command in _COMMAND_LIST:
    COMMANDS[_command.name] = _command
    for _alias in _command.aliases:
        COMMANDS[_alias] = _command

ASSIGN_USAGE = "<matrix> = <[[...],...]|command|expression>"


def assign(tokens: List[str], session: Session):
    """Store the value of the right hand side of '<name> = ...' under name
    
    The right hand side is either a matrix literal, a command or an expression.
    An existing matrix of the same name is overwritten.
    """
    name = tokens[0]
    if len(tokens) < 3:
        raise UsageError(ASSIGN_USAGE)
    if name in COMMANDS or name == EXIT:
        raise InvalidName(f"'{name}' is a command and cannot name a matrix.")
    rhs = tokens[2:]
    command = COMMANDS.get(rhs[0])
    if (command is not None and not command.returns_matrix) or (len(rhs) > 1 and rhs[1] == ASSIGN):
        raise UsageError(ASSIGN_USAGE)
    if rhs[0].startswith('['):
        value = parse_matrix_literal(' '.join(rhs))
    else:
        value = do_command(rhs, session)
        if value is None:
            raise UsageError(ASSIGN_USAGE)
    session.symbols.assign(name, value)


def do_command(tokens: List[str], session: Session) -> Optional[Matrix]:
    """Execute one whitespace-split line
    
    Args:
        tokens (list of str):
            Parts of the line, e.g. ['inverse', 'A'] or ['A', '*', '2'].

        session (Session):
            Session whose symbol table is read and modified.

    Returns:
        (Matrix or None):
        The matrix computed by the line, None for commands that only have side effects.
    """
    if not tokens:
        return None
    first = tokens[0]
    if len(tokens) > 1 and tokens[1] == ASSIGN:
        assign(tokens, session)
        return None
    command = COMMANDS.get(first)
    if command is not None:
        args = tokens[1:]
        if not command.min_args <= len(args) <= command.max_args:
            raise UsageError(command.usage)
        LOG.info("Command %s %s", command.name, ' '.join(args))
        return command.handler(args, session)
    if session.symbols.found_matrix(first) or is_number(first) or first.startswith((LPAREN, MINUS)):
        return evaluate(tokens, session.symbols)
    raise UnknownCommand(f"Command {first} does not exist.")
