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
"""Interactive loop and command line entry point of the matrix interpreter"""

from argparse import ArgumentParser
from typing import List, Optional, TextIO
import logging
import sys

from .commands import Session, do_command
from .config import Configuration
from .errors import MatrixError
from .names import ABS_TOL, EXIT, REL_TOL, SEED

LOG = logging.getLogger(__name__)


def repl(stream: TextIO, session: Optional[Session] = None, err: Optional[TextIO] = None,
         interactive: Optional[bool] = None) -> Session:
    """Read and execute lines until the stream ends or 'exit' is read
    
    Errors of single lines are written to err and do not stop the loop.
    
    Args:
        stream (file-like):
            Source of the lines, e.g. an opened file or sys.stdin.

        session (Session): (Default: new session writing to sys.stdout)
            Session the lines are executed in.

        err (file-like): (Default: sys.stderr)
            Stream for error and usage messages.

        interactive (bool): (Default: stream is sys.stdin)
            Whether to print a prompt before each line.

    Returns:
        (Session):
        The session, holding all matrices defined by the lines.
    """
    if session is None:
        session = Session()
    if err is None:
        err = sys.stderr
    if interactive is None:
        interactive = stream is sys.stdin
    prompt = Configuration().prompt
    LOG.info("Starting interpreter.")
    line = ''
    line_number = 0
    while True:
        if interactive:
            session.out.write(prompt)
            session.out.flush()
        line = stream.readline()
        if not line:
            break
        line_number += 1
        tokens = line.split()
        if not tokens:
            continue
        if tokens[0] == EXIT:
            if not interactive and stream.readline():
                LOG.warning("Input stopped by exit on line %d, the remaining lines are ignored.", line_number)
            break
        try:
            do_command(tokens, session)
        except MatrixError as e:
            err.write(str(e) + '\n')
            LOG.debug("Line failed: %s", line.rstrip(), exc_info=True)
    if interactive and not line:
        session.out.write('\n')
    LOG.info("Interpreter stopped.")
    return session


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point: matcalc [file] [-v] [--rel-tol X] [--abs-tol X]"""
    parser = ArgumentParser(prog='matcalc', description='Interactive calculator for dense matrices.')
    parser.add_argument('file', nargs='?', help='text file with one command per line (default: read from stdin)')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='log progress (-vv for debug output)')
    parser.add_argument('--rel-tol', type=float, help='relative tolerance of numerical comparisons')
    parser.add_argument('--abs-tol', type=float, help='absolute tolerance of numerical comparisons')
    parser.add_argument('--seed', type=int, help='default seed of the random command')
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s:%(name)s: %(message)s')

    conf = Configuration()
    for key, attribute in ((REL_TOL, 'rel_tol'), (ABS_TOL, 'abs_tol'), (SEED, 'random_seed')):
        value = getattr(args, key)
        if value is not None:
            setattr(conf, attribute, value)

    if args.file:
        try:
            with open(args.file) as stream:
                repl(stream)
        except OSError as e:
            logging.error("Cannot read " + args.file + ": " + str(e))
            return 1
    else:
        repl(sys.stdin)
    return 0


if __name__ == '__main__':
    sys.exit(main())
