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
"""Process-wide settings of the matcalc package"""

from typing import Optional
import numpy as np


class Configuration:
    """Singleton holding the numerical tolerances and output settings

    Every call of Configuration() returns the same instance, so a setting changed
    in one place (e.g. by the command line interface) is seen by every matrix
    operation afterwards.

    Attributes:
        rel_tol (float):
            Relative tolerance of the almost-equal test used for zero snapping,
            matrix equality and pivot checks. Defaults to a few units of machine epsilon.

        abs_tol (float):
            Absolute floor of the almost-equal test. Values closer than this are
            always considered equal, which makes comparisons against zero work.

        column_width (int):
            Width of one column when a matrix is printed.

        prompt (str):
            Prompt printed by the interactive loop.

        random_seed (int or None):
            Seed used by the random matrix builder if no seed is passed explicitly.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.reset()
        return cls._instance

    def reset(self) -> None:
        """Restore the default settings."""
        self.rel_tol: float = 4 * np.finfo(float).eps
        self.abs_tol: float = 1e-12
        self.column_width: int = 10
        self.prompt: str = 'mat> '
        self.random_seed: Optional[int] = None

    def __repr__(self) -> str:
        return (f"Configuration(rel_tol={self.rel_tol}, abs_tol={self.abs_tol}, "
                f"column_width={self.column_width}, prompt={self.prompt!r}, random_seed={self.random_seed})")
