# ========================================
# Copyright 2021 22nd Solutions, LLC
# Copyright 2024 Martin TOUZOT
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR
# OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE
# USE OR OTHER DEALINGS IN THE SOFTWARE.
#
# ========================================
"""3x3 cube model: facelets, face turns, scrambles and playback."""

from rubikscube.rubikscube import (
    MOVES,
    SOLVED_COLORS,
    Cube,
    Cube_Color,
    Face,
    Moves,
    ParsedAlgorithm,
    UnsupportedMove,
    apply_algorithm,
    apply_move,
    clone,
    generate_scramble,
    inverse_move,
    is_solved,
    parse_algorithm,
    parse_move,
    rotate_face_clockwise,
    rotate_face_counter_clockwise,
    solved_cube,
)
from rubikscube.playback import Playback, StepOutOfRange, format_time

__version__ = "0.1.0"

__all__ = [
    "MOVES",
    "SOLVED_COLORS",
    "Cube",
    "Cube_Color",
    "Face",
    "Moves",
    "ParsedAlgorithm",
    "Playback",
    "StepOutOfRange",
    "UnsupportedMove",
    "apply_algorithm",
    "apply_move",
    "clone",
    "format_time",
    "generate_scramble",
    "inverse_move",
    "is_solved",
    "parse_algorithm",
    "parse_move",
    "rotate_face_clockwise",
    "rotate_face_counter_clockwise",
    "solved_cube",
]
