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
"""Static strings used in the matcalc package

    Commands

        RESET = 'reset'

        PRINT = 'print'

        TRANSPOSE = 'transpose'

        INVERSE = 'inverse'

        ROW_ECHELON = 'row_echelon'

        REDUCED_ROW_ECHELON = 'reduced_row_echelon'

        SWAP_ROWS = 'swap_rows'

        ADD_ROWS = 'add_rows'

        MULTIPLY_ROW = 'multiply_row'

        RANDOM = 'random'

        IDENTITY = 'identity'

        ZERO = 'zero'

        AUGMENT = 'augment'

        MINOR = 'minor'

        DETERMINANT = 'determinant'

        ADJUGATE = 'adjugate'

        RANK = 'rank'

        HELP = 'help'

        EXIT = 'exit'

        ASSIGN = '='

    Expressions

        PLUS = '+'

        MINUS = '-'

        TIMES = '*'

        POWER = '^'

        LPAREN = '('

        RPAREN = ')'

        RESERVED_PREFIX = '__'

        RESULT_PREFIX = '__result'

    Options

        REL_TOL = 'rel_tol'

        ABS_TOL = 'abs_tol'

        SEED = 'seed'
"""

# Commands
RESET = 'reset'
PRINT = 'print'
TRANSPOSE = 'transpose'
INVERSE = 'inverse'
ROW_ECHELON = 'row_echelon'
REDUCED_ROW_ECHELON = 'reduced_row_echelon'
SWAP_ROWS = 'swap_rows'
ADD_ROWS = 'add_rows'
MULTIPLY_ROW = 'multiply_row'
RANDOM = 'random'
IDENTITY = 'identity'
ZERO = 'zero'
AUGMENT = 'augment'
MINOR = 'minor'
DETERMINANT = 'determinant'
ADJUGATE = 'adjugate'
RANK = 'rank'
HELP = 'help'
EXIT = 'exit'
ASSIGN = '='

# Expressions
PLUS = '+'
MINUS = '-'
TIMES = '*'
POWER = '^'
LPAREN = '('
RPAREN = ')'
OPERATOR_PRECEDENCE = {PLUS: 1, MINUS: 1, TIMES: 2, POWER: 3}
RESERVED_PREFIX = '__'
RESULT_PREFIX = '__result'

# Options
REL_TOL = 'rel_tol'
ABS_TOL = 'abs_tol'
SEED = 'seed'
