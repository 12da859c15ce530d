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
"""Step by step playback of an algorithm, and time formatting."""

from __future__ import annotations
from typing import Iterable, List, Optional, Union
import logging

from rubikscube.rubikscube import Cube, Moves, apply_move

logger = logging.getLogger("rubikscube_playback")


class StepOutOfRange(IndexError):
    """Raised when a playback index is outside ``[0, len(algorithm)]``."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Step {index} is outside the range 0..{length}")


# -------------------------------------------------
# -------------------------------------------------
# Playback of an algorithm
# -------------------------------------------------
# -------------------------------------------------
class Playback:
    """
    Play an algorithm one move at a time.

    The cube after each step is computed once and kept, so stepping
    backward or seeking is a lookup.

    :ivar algorithm: The moves being played
    :type algorithm: Moves
    :ivar states: Cube after the first i moves, for i in 0..len(algorithm)
    :type states: List[Cube]
    :ivar index: Number of moves played so far
    :type index: int
    """

    def __init__(
        self, start: Cube, algorithm: Union[Moves, Iterable[str], str]
    ) -> None:
        """
        Playback class constructor.

        :param start: The cube before the first move, copied.
        :type start: Cube
        :param algorithm: The moves to play.
        :type algorithm: Moves
        :raises UnsupportedMove: If the algorithm holds an unknown move.
        """
        self.algorithm = Moves(algorithm)

        self.states: List[Cube] = [start.copy()]
        for move in self.algorithm:
            self.states.append(apply_move(self.states[-1], move))

        self.index = 0
        logger.info(f"Playback of {len(self.algorithm)} moves: {self.algorithm}")

    def __len__(self) -> int:
        return len(self.algorithm)

    @property
    def state(self) -> Cube:
        """Copy of the cube at the current step."""
        return self.states[self.index].copy()

    @property
    def at_start(self) -> bool:
        return self.index == 0

    @property
    def at_end(self) -> bool:
        return self.index == len(self.algorithm)

    @property
    def next_move(self) -> Optional[str]:
        """Move played by the next :meth:`step_forward`, None at the end."""
        if self.at_end:
            return None
        return self.algorithm[self.index]

    @property
    def previous_move(self) -> Optional[str]:
        """Move undone by the next :meth:`step_backward`, None at the start."""
        if self.at_start:
            return None
        return self.algorithm[self.index - 1]

    def remaining(self) -> Moves:
        """Return the moves not played yet."""
        return self.algorithm[self.index :]

    def step_forward(self) -> Cube:
        """
        Play the next move.

        :returns: The cube after the move.
        :rtype: Cube
        :raises StepOutOfRange: If every move has been played.
        """
        return self.seek(self.index + 1)

    def step_backward(self) -> Cube:
        """
        Undo the last played move.

        :returns: The cube before that move.
        :rtype: Cube
        :raises StepOutOfRange: If no move has been played.
        """
        return self.seek(self.index - 1)

    def seek(self, index: int, clamp: bool = False) -> Cube:
        """
        Jump to a step.

        :param index: Number of moves played after the jump.
        :type index: int
        :param clamp: Move to the nearest end instead of raising when
                      index is out of range.
        :type clamp: bool
        :returns: The cube at that step.
        :rtype: Cube
        :raises StepOutOfRange: If index is out of range and clamp is False.
        """
        length = len(self.algorithm)
        if not 0 <= index <= length:
            if not clamp:
                raise StepOutOfRange(index, length)
            index = min(max(index, 0), length)

        self.index = index
        logger.debug(f"Playback at step {self.index}/{length}")
        return self.state

    def reset(self) -> Cube:
        """Go back to the cube before the first move."""
        return self.seek(0)


# ---------------------------------------------------
# Timer display
# ---------------------------------------------------
def format_time(time_ms: Union[int, float]) -> str:
    """
    Format a duration as ``MM:SS.mmm``.

    Minutes and seconds are zero padded to two digits and milliseconds to
    three; durations of 100 minutes and more keep every minute digit.

    :param time_ms: The duration in milliseconds, fractions are dropped.
    :type time_ms: int or float
    :returns: The formatted duration, e.g. ``01:05.432`` for 65432.
    :rtype: str
    :raises ValueError: If the duration is negative.
    """
    time_ms = int(time_ms)
    if time_ms < 0:
        raise ValueError(f"Duration must not be negative, got {time_ms}")

    minutes, time_ms = divmod(time_ms, 60000)
    seconds, milliseconds = divmod(time_ms, 1000)
    return f"{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
