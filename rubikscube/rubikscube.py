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
"""Defines the 3x3 cube model, its moves and the move notation."""

from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple, Union
import random
import logging

Grid = List[List["Cube_Color"]]
FaceletRef = Tuple["Face", int, int]

# -------------------------------------------------
# -------------------------------------------------
# Setup Logging capability
# -------------------------------------------------
# -------------------------------------------------
logging.basicConfig()
logger = logging.getLogger("rubikscube")


class UnsupportedMove(ValueError):
    """Raised when a move token is not one of the 18 face turns."""

    def __init__(self, move: object) -> None:
        self.move = move
        super().__init__(f"Unsupported move {move!r}")


# Defines Cube Faces and Colors
class Cube_Color(Enum):
    """
    Enum representing the six facelet colors.

    The value of each member is the lowercase name used when a cube is
    serialized for a renderer.

    Attributes:
        White (str): Color of the up face on a solved cube.
        Red (str): Color of the right face on a solved cube.
        Orange (str): Color of the left face on a solved cube.
        Yellow (str): Color of the down face on a solved cube.
        Green (str): Color of the front face on a solved cube.
        Blue (str): Color of the back face on a solved cube.
    """

    White = "white"
    Red = "red"
    Orange = "orange"
    Yellow = "yellow"
    Green = "green"
    Blue = "blue"


class Face(Enum):
    """Enum of the six cube faces, valued with their serialized names."""

    Front = "front"
    Back = "back"
    Right = "right"
    Left = "left"
    Up = "up"
    Down = "down"

    @property
    def symbol(self) -> str:
        """Return the one-letter notation symbol of the face."""
        return self.name[0]

    @property
    def opposite(self) -> Face:
        """Return the face on the other side of the cube."""
        return OPPOSITE_FACES[self]


OPPOSITE_FACES = {
    Face.Front: Face.Back,
    Face.Back: Face.Front,
    Face.Right: Face.Left,
    Face.Left: Face.Right,
    Face.Up: Face.Down,
    Face.Down: Face.Up,
}

FACE_SYMBOLS = {face.symbol: face for face in Face}

# Number of clockwise quarter turns for each suffix
TURN_SUFFIXES = {"": 1, "'": 3, "2": 2}

# The 18 moves, grouped by face
MOVES = tuple(
    symbol + suffix for symbol in "UDRLFB" for suffix in ("", "'", "2")
)

SOLVED_COLORS = {
    Face.Front: Cube_Color.Green,
    Face.Back: Cube_Color.Blue,
    Face.Right: Cube_Color.Red,
    Face.Left: Cube_Color.Orange,
    Face.Up: Cube_Color.White,
    Face.Down: Cube_Color.Yellow,
}

# -------------------------------------------------------------
# Bands moved by each clockwise face turn.
#
# Every face is seen from outside the cube. Front, right, back
# and left have row 0 against the up face. The up face has row 0
# against the back face, the down face has row 0 against the front
# face, and both have col 0 against the left face.
#
# A clockwise turn sends facelet k of band i to facelet k of
# band i + 1 (the last band wraps to the first one).
# -------------------------------------------------------------
_ROW_0 = [(0, 0), (0, 1), (0, 2)]
_ROW_2 = [(2, 0), (2, 1), (2, 2)]
_COL_0 = [(0, 0), (1, 0), (2, 0)]
_COL_2 = [(0, 2), (1, 2), (2, 2)]

FACE_BANDS: Dict[Face, List[Tuple[Face, List[Tuple[int, int]]]]] = {
    Face.Up: [
        (Face.Front, _ROW_0),
        (Face.Left, _ROW_0),
        (Face.Back, _ROW_0),
        (Face.Right, _ROW_0),
    ],
    Face.Down: [
        (Face.Front, _ROW_2),
        (Face.Right, _ROW_2),
        (Face.Back, _ROW_2),
        (Face.Left, _ROW_2),
    ],
    Face.Right: [
        (Face.Front, _COL_2),
        (Face.Up, _COL_2),
        (Face.Back, _COL_0[::-1]),
        (Face.Down, _COL_2),
    ],
    Face.Left: [
        (Face.Front, _COL_0),
        (Face.Down, _COL_0),
        (Face.Back, _COL_2[::-1]),
        (Face.Up, _COL_0),
    ],
    Face.Front: [
        (Face.Up, _ROW_2),
        (Face.Right, _COL_0),
        (Face.Down, _ROW_0[::-1]),
        (Face.Left, _COL_2[::-1]),
    ],
    Face.Back: [
        (Face.Up, _ROW_0),
        (Face.Left, _COL_0[::-1]),
        (Face.Down, _ROW_2[::-1]),
        (Face.Right, _COL_2),
    ],
}


# -----------------------------------------------
# Move notation helpers
# -----------------------------------------------
def split_move(move: str) -> Tuple[Face, int]:
    """
    Split a move token into the turned face and its quarter turns.

    :param move: A move token such as ``R``, ``R'`` or ``R2``.
    :type move: str
    :returns: The turned face and the number of clockwise quarter turns.
    :rtype: Tuple[Face, int]
    :raises UnsupportedMove: If the token is not one of the 18 moves.
    """
    if not isinstance(move, str) or move not in MOVES:
        raise UnsupportedMove(move)
    return FACE_SYMBOLS[move[0]], TURN_SUFFIXES[move[1:]]


def inverse_move(move: str) -> str:
    """Return the move undoing ``move`` (``R`` <-> ``R'``, ``R2`` -> ``R2``)."""
    face, turns = split_move(move)
    for suffix, suffix_turns in TURN_SUFFIXES.items():
        if suffix_turns == (4 - turns) % 4:
            return face.symbol + suffix
    raise UnsupportedMove(move)


def parse_move(move_str: str) -> Optional[str]:
    """
    Parse one move token.

    :param move_str: Text of a single move, surrounding blanks are ignored.
    :type move_str: str
    :returns: The move token, or None when the text is not a move or not
              a string at all.
    :rtype: str or NoneType
    """
    if not isinstance(move_str, str):
        return None
    token = move_str.strip()
    if token in MOVES:
        return token
    return None


class ParsedAlgorithm(NamedTuple):
    """Result of :func:`parse_algorithm`: the moves and the dropped tokens."""

    moves: Moves
    skipped: List[str]


def parse_algorithm(algorithm_str: str, strict: bool = False) -> ParsedAlgorithm:
    """
    Parse a whitespace separated algorithm.

    Every token goes through :func:`parse_move`. Unknown tokens are
    reported in the ``skipped`` list and logged as a warning, so the
    caller always knows when part of the text was not applied.

    :param algorithm_str: The algorithm text, e.g. ``"R U R' U'"``.
    :type algorithm_str: str
    :param strict: Raise instead of skipping unknown tokens.
    :type strict: bool
    :returns: The parsed moves and the list of skipped tokens.
    :rtype: ParsedAlgorithm
    :raises UnsupportedMove: In strict mode, on the first unknown token.
    """
    move_list = list()
    skipped = list()
    for token in algorithm_str.split():
        move = parse_move(token)
        if move is None:
            if strict:
                raise UnsupportedMove(token)
            logger.warning(f"Skipping unknown move {token!r}")
            skipped.append(token)
        else:
            move_list.append(move)
    return ParsedAlgorithm(Moves(move_list), skipped)


# -----------------------------------------------
# Defines Cube moves - an immutable sequence of
# move tokens in the U|D|R|L|F|B notation
# ----------------------------------------------
class Moves:
    """
    Define an algorithm: an ordered, immutable sequence of moves.

    A Moves object is built from a notation string or from a list of move
    tokens. Every token is checked against the 18 face turns.
    """

    def __init__(
        self, move_str: Union[str, Iterable[str], Moves] = ""
    ) -> None:
        """
        Moves class constructor.

        :param move_str: A string of space separated moves, an iterable of
                         move tokens or another Moves object. Defaults to
                         an empty string.
        :type move_str: str or Iterable[str] or Moves
        :raises UnsupportedMove: If any token is not one of the 18 moves.
        """
        if isinstance(move_str, Moves):
            self.move_list: Tuple[str, ...] = move_str.move_list
            return

        if isinstance(move_str, str):
            move_str = move_str.split()

        move_list = list()
        for move in move_str:
            if not isinstance(move, str) or move not in MOVES:
                raise UnsupportedMove(move)
            move_list.append(move)
        self.move_list = tuple(move_list)

    def __repr__(self) -> str:
        """Return the official string representation of a Moves object."""
        return f"Moves('{self}')"

    def __str__(self) -> str:
        """
        Convert all the moves from the Moves object to a string.

        :returns: The moves separated by a single space.
        :rtype: str
        """
        return " ".join(self.move_list)

    def __iter__(self):
        return iter(self.move_list)

    def __len__(self) -> int:
        return len(self.move_list)

    def __getitem__(self, index: Union[int, slice]) -> Union[str, Moves]:
        """
        Return the move at an index, or a Moves object for a slice.

        :param index: The index or slice of the moves to retrieve.
        :type index: int or slice
        :returns: The move token, or the moves of the slice.
        :rtype: str or Moves
        :raises IndexError: If the index is out of range.
        """
        if isinstance(index, slice):
            return Moves(self.move_list[index])
        return self.move_list[index]

    def __add__(self, other: Union[Moves, Iterable[str], str]) -> Moves:
        """
        Combine two Moves objects.

        :param other: Moves (or anything Moves accepts) to append.
        :type other: Moves
        :returns: A new Moves object with both move lists.
        :rtype: Moves
        """
        return Moves(self.move_list + Moves(other).move_list)

    def __eq__(self, other: object) -> bool:
        """
        Check Moves equality with another Moves object or list of tokens.

        :param other: The moves to compare with.
        :type other: Moves or list or tuple
        :returns: True if both hold the same moves in the same order.
        :rtype: bool
        """
        if isinstance(other, Moves):
            return self.move_list == other.move_list
        if isinstance(other, (list, tuple)):
            return self.move_list == tuple(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.move_list)

    def inverse(self) -> Moves:
        """
        Return the moves undoing this sequence.

        Each move is replaced by its inverse, and the order is reversed.

        :returns: A Moves object with the inverse sequence.
        :rtype: Moves
        """
        return Moves([inverse_move(move) for move in reversed(self.move_list)])

    @classmethod
    def randomize(
        cls,
        num_rot: int,
        seed: Optional[int] = None,
        avoid_cancellation: bool = False,
    ) -> Moves:
        """
        Generate a random sequence of moves.

        Each move is drawn independently and uniformly from the 18 face
        turns, so immediate repeats and inverse pairs can occur. With
        avoid_cancellation, a move never turns the same face as the
        previous one.

        :param num_rot: Number of moves to draw, at least 0.
        :type num_rot: int
        :param seed: Seed for a reproducible sequence, optional.
        :type seed: int, optional
        :param avoid_cancellation: Never turn the same face twice in a row.
        :type avoid_cancellation: bool
        :returns: The random moves.
        :rtype: Moves
        :raises ValueError: If num_rot is not a non-negative integer.
        """
        if isinstance(num_rot, bool) or not isinstance(num_rot, int) or num_rot < 0:
            raise ValueError(f"Scramble length must be a non-negative integer, got {num_rot!r}")

        rng = random.Random(seed) if seed is not None else random

        move_list = list()
        for loop1 in range(num_rot):
            choices = MOVES
            if avoid_cancellation and move_list:
                last_face = move_list[-1][0]
                choices = [move for move in MOVES if move[0] != last_face]
            move_list.append(rng.choice(choices))

        moves = cls(move_list)
        logger.info("Randomized moves: {}".format(moves))
        return moves

    @classmethod
    def scramble(cls, num_rot: int, **kwargs) -> Moves:
        """Generate a random scramble of moves, see :meth:`randomize`."""
        return cls.randomize(num_rot, **kwargs)


def generate_scramble(
    length: int = 25,
    seed: Optional[int] = None,
    avoid_cancellation: bool = False,
) -> Moves:
    """
    Generate a random scramble.

    :param length: Number of moves, defaults to 25.
    :type length: int
    :param seed: Seed for a reproducible scramble, optional.
    :type seed: int, optional
    :param avoid_cancellation: Never turn the same face twice in a row.
    :type avoid_cancellation: bool
    :returns: The scramble.
    :rtype: Moves
    """
    return Moves.scramble(length, seed=seed, avoid_cancellation=avoid_cancellation)


# ---------------------------------------------------
# Face grid rotations
# ---------------------------------------------------
def rotate_face_clockwise(grid: Grid) -> Grid:
    """
    Rotate a 3x3 face grid by 90 degrees clockwise.

    :param grid: The face grid, left untouched.
    :type grid: List[List[Cube_Color]]
    :returns: A new rotated grid where ``out[col][2 - row] = grid[row][col]``.
    :rtype: List[List[Cube_Color]]
    """
    size = len(grid)
    rotated = [[None] * size for loop1 in range(size)]
    for row in range(size):
        for col in range(size):
            rotated[col][size - 1 - row] = grid[row][col]
    return rotated


def rotate_face_counter_clockwise(grid: Grid) -> Grid:
    """Rotate a 3x3 face grid by 90 degrees counter-clockwise."""
    return rotate_face_clockwise(rotate_face_clockwise(rotate_face_clockwise(grid)))


# ---------------------------------------------------
# Main class to hold the model of a 3x3 cube
# ---------------------------------------------------
class Cube:
    """
    Define the Cube class.

    Hold the facelet colors of a 3x3 cube, one 3x3 grid per face. A new
    Cube is solved. Moves never change a Cube: :meth:`apply_moves` and
    :func:`apply_move` return a new one.
    """

    # Corner facelets, the up/down facelet first then clockwise
    CornerFacelets: List[List[FaceletRef]] = [
        [(Face.Up, 2, 2), (Face.Right, 0, 0), (Face.Front, 0, 2)],
        [(Face.Up, 2, 0), (Face.Front, 0, 0), (Face.Left, 0, 2)],
        [(Face.Up, 0, 0), (Face.Left, 0, 0), (Face.Back, 0, 2)],
        [(Face.Up, 0, 2), (Face.Back, 0, 0), (Face.Right, 0, 2)],
        [(Face.Down, 0, 2), (Face.Front, 2, 2), (Face.Right, 2, 0)],
        [(Face.Down, 0, 0), (Face.Left, 2, 2), (Face.Front, 2, 0)],
        [(Face.Down, 2, 0), (Face.Back, 2, 2), (Face.Left, 2, 0)],
        [(Face.Down, 2, 2), (Face.Right, 2, 2), (Face.Back, 2, 0)],
    ]

    # Edge facelet pairs
    EdgeFacelets: List[List[FaceletRef]] = [
        [(Face.Up, 1, 2), (Face.Right, 0, 1)],
        [(Face.Up, 2, 1), (Face.Front, 0, 1)],
        [(Face.Up, 1, 0), (Face.Left, 0, 1)],
        [(Face.Up, 0, 1), (Face.Back, 0, 1)],
        [(Face.Down, 1, 2), (Face.Right, 2, 1)],
        [(Face.Down, 0, 1), (Face.Front, 2, 1)],
        [(Face.Down, 1, 0), (Face.Left, 2, 1)],
        [(Face.Down, 2, 1), (Face.Back, 2, 1)],
        [(Face.Front, 1, 2), (Face.Right, 1, 0)],
        [(Face.Front, 1, 0), (Face.Left, 1, 2)],
        [(Face.Back, 1, 2), (Face.Left, 1, 0)],
        [(Face.Back, 1, 0), (Face.Right, 1, 2)],
    ]

    def __init__(self) -> None:
        """
        Cube class constructor.

        :returns: None
        :rtype: NoneType
        """
        self.state: Dict[Face, Grid] = dict()
        self.initialize()

    def initialize(self) -> None:
        """
        Reset the facelets to the solved cube.

        Front is green, back blue, right red, left orange, up white and
        down yellow.

        :returns: None
        :rtype: NoneType
        """
        for face in Face:
            color = SOLVED_COLORS[face]
            self.state[face] = [[color] * 3 for loop1 in range(3)]

    def copy(self) -> Cube:
        """
        Return an independent deep copy of the cube.

        :returns: A new Cube with the same facelets.
        :rtype: Cube
        """
        new_cube = Cube.__new__(Cube)
        new_cube.state = {
            face: [list(row) for row in grid] for face, grid in self.state.items()
        }
        return new_cube

    def apply_moves(self, moves: Union[Moves, Iterable[str], str]) -> Cube:
        """
        Return the cube reached by applying moves to this one.

        :param moves: The moves to apply, in order.
        :type moves: Moves
        :returns: A new Cube, this one is unchanged.
        :rtype: Cube
        """
        return apply_algorithm(self, moves)

    def is_solved(self) -> bool:
        """
        Check if the cube is solved.

        A cube is solved when each face shows a single color. The colors
        do not have to be the ones of :func:`solved_cube`.

        :returns: True if the cube is solved, False otherwise
        :rtype: bool
        """
        for grid in self.state.values():
            first_color = grid[0][0]
            for row in grid:
                for color in row:
                    if color != first_color:
                        return False
        return True

    # --------------------------------------------------------
    # Manual edit of the facelets
    # --------------------------------------------------------
    def get_facelet(self, face: Union[Face, str], row: int, col: int) -> Cube_Color:
        """Return the color at row, col of a face."""
        face = Face(face)
        self._check_position(row, col)
        return self.state[face][row][col]

    def set_facelet(
        self,
        face: Union[Face, str],
        row: int,
        col: int,
        color: Union[Cube_Color, str],
    ) -> None:
        """
        Paint one facelet.

        The cube can end up in a state no sequence of moves reaches,
        see :meth:`is_valid`.

        :param face: The face to edit, a Face or its name.
        :type face: Face or str
        :param row: Row on the face, 0 to 2.
        :type row: int
        :param col: Column on the face, 0 to 2.
        :type col: int
        :param color: The new color, a Cube_Color or its name.
        :type color: Cube_Color or str
        :returns: None
        :raises ValueError: On an unknown face or color.
        :raises IndexError: If row or col is not an int between 0 and 2.
        """
        face = Face(face)
        color = Cube_Color(color)
        self._check_position(row, col)
        self.state[face][row][col] = color

    @staticmethod
    def _check_position(row: int, col: int) -> None:
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, int):
                raise IndexError(f"Facelet position ({row!r}, {col!r}) must use integers")
        if not (0 <= row <= 2 and 0 <= col <= 2):
            raise IndexError(f"Facelet position ({row}, {col}) is outside the 3x3 face")

    # --------------------------------------------------------
    # Checks on the facelets
    # --------------------------------------------------------
    def color_counts(self) -> Dict[Cube_Color, int]:
        """Count how many facelets show each color."""
        counts = {color: 0 for color in Cube_Color}
        for grid in self.state.values():
            for row in grid:
                for color in row:
                    counts[color] += 1
        return counts

    def is_valid(self) -> bool:
        """
        Check if the facelets can be reached from a solved cube.

        The centers define which face each color belongs to. Every corner
        and edge must then be a real piece, each present once, with a
        corner twist sum divisible by 3, an even edge flip sum and the
        same permutation parity for corners and edges.

        :returns: True if some sequence of moves gives this cube.
        :rtype: bool
        """
        counts = self.color_counts()
        if any(count != 9 for count in counts.values()):
            return False

        centers = {face: self.state[face][1][1] for face in Face}
        if len(set(centers.values())) != 6:
            return False
        color_face = {color: face for face, color in centers.items()}
        up_down = (centers[Face.Up], centers[Face.Down])

        # corners
        corner_homes = [tuple(ref[0] for ref in refs) for refs in self.CornerFacelets]
        corner_perm = list()
        corner_twist = 0
        for refs in self.CornerFacelets:
            colors = [self.state[face][row][col] for face, row, col in refs]
            twist = [loop1 for loop1 in range(3) if colors[loop1] in up_down]
            if len(twist) != 1:
                return False
            faces = tuple(color_face[colors[(twist[0] + loop1) % 3]] for loop1 in range(3))
            if faces not in corner_homes:
                return False
            corner_perm.append(corner_homes.index(faces))
            corner_twist += twist[0]

        # edges
        edge_homes = [tuple(ref[0] for ref in refs) for refs in self.EdgeFacelets]
        edge_perm = list()
        edge_flip = 0
        for refs in self.EdgeFacelets:
            faces = tuple(color_face[self.state[face][row][col]] for face, row, col in refs)
            if faces in edge_homes:
                edge_perm.append(edge_homes.index(faces))
            elif faces[::-1] in edge_homes:
                edge_perm.append(edge_homes.index(faces[::-1]))
                edge_flip += 1
            else:
                return False

        if len(set(corner_perm)) != 8 or len(set(edge_perm)) != 12:
            return False
        if corner_twist % 3 or edge_flip % 2:
            return False
        return _parity(corner_perm) == _parity(edge_perm)

    # --------------------------------------------------------
    # Plain value for renderers
    # --------------------------------------------------------
    def to_dict(self) -> Dict[str, List[List[str]]]:
        """
        Return the cube as plain data.

        :returns: Face names mapped to 3x3 lists of color names.
        :rtype: Dict[str, List[List[str]]]
        """
        return {
            face.value: [[color.value for color in row] for row in self.state[face]]
            for face in Face
        }

    @classmethod
    def from_dict(cls, data: Dict[str, List[List[str]]]) -> Cube:
        """
        Build a cube from the plain data of :meth:`to_dict`.

        :param data: Face names mapped to 3x3 lists of color names.
        :type data: dict
        :returns: The new Cube.
        :rtype: Cube
        :raises ValueError: If a face is missing, a grid is not 3x3, or a
                            color is unknown.
        """
        missing = [face.value for face in Face if face.value not in data]
        if missing:
            raise ValueError(f"Missing faces: {missing}")

        cube = cls()
        for face in Face:
            grid = data[face.value]
            if len(grid) != 3 or any(len(row) != 3 for row in grid):
                raise ValueError(f"Face {face.value} is not a 3x3 grid")
            cube.state[face] = [[Cube_Color(color) for color in row] for row in grid]
        return cube

    # --------------------------------------------------------
    # Helper functions
    # --------------------------------------------------------
    def print_piece_square(self, color: Cube_Color) -> str:
        """
        Print on console a facelet with its color as background.

        :param color: The facelet color.
        :type color: Cube_Color
        :returns: A formatted string with ANSI color codes for console output.
        :rtype: str
        """
        text = ""
        if color == Cube_Color.Red:
            text = "\033[48;5;124m"
        elif color == Cube_Color.White:
            text = "\033[107m"
        elif color == Cube_Color.Orange:
            text = "\033[48;5;202m"
        elif color == Cube_Color.Yellow:
            text = "\033[48;5;11m"
        elif color == Cube_Color.Blue:
            text = "\033[48;5;27m"
        elif color == Cube_Color.Green:
            text = "\033[102m"
        text += "\033[30m    "
        text += "\033[0m"

        return text

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __eq__(self, other: object) -> bool:
        """
        Check Cube object state equality to other Cube object.

        :param other: The Cube object to compare against.
        :type other: Cube
        :returns: True if both Cube have the same facelets, False otherwise.
        :rtype: bool
        """
        if not isinstance(other, Cube):
            return NotImplemented
        for face in Face:
            if other.state[face] != self.state[face]:
                return False
        return True

    __hash__ = None

    def __repr__(self) -> str:
        """
        Convert Cube object to a JSON-like string.

        :returns: A string representation of the Cube object.
        :rtype: str
        """
        str_val = "{"
        for loop1, face in enumerate(Face):
            rows = [
                "[" + ", ".join('"{}"'.format(color.value) for color in row) + "]"
                for row in self.state[face]
            ]
            str_val += ' "{}" : [{}]'.format(face.value, ", ".join(rows))
            if loop1 < 5:
                str_val += ","
        str_val += " }"

        return str_val

    def __str__(self) -> str:
        """
        Convert Cube object to an unfolded colored net.

        The up face is printed above the front face, the left, front, right
        and back faces side by side, and the down face below.

        :returns: A string representation of the Cube in a visual format.
        :rtype: str
        """
        cube_str = "\n"

        # print upper state
        for row in self.state[Face.Up]:
            cube_str += "            "
            for color in row:
                cube_str += self.print_piece_square(color)
            cube_str += "\n"

        # print core middle
        for loop1 in range(3):
            for face in (Face.Left, Face.Front, Face.Right, Face.Back):
                for color in self.state[face][loop1]:
                    cube_str += self.print_piece_square(color)
            cube_str += "\n"

        # print down
        for row in self.state[Face.Down]:
            cube_str += "            "
            for color in row:
                cube_str += self.print_piece_square(color)
            cube_str += "\n"
        cube_str += "\n"

        return cube_str


def _parity(permutation: List[int]) -> int:
    inversions = 0
    for loop1 in range(len(permutation)):
        for loop2 in range(loop1 + 1, len(permutation)):
            if permutation[loop1] > permutation[loop2]:
                inversions += 1
    return inversions % 2


# ---------------------------------------------------
# Cube state functions
# ---------------------------------------------------
def solved_cube() -> Cube:
    """Return a new solved cube in the reference colors."""
    return Cube()


def is_solved(cube: Cube) -> bool:
    """Return True if every face of the cube shows a single color."""
    return cube.is_solved()


def clone(cube: Cube) -> Cube:
    """Return an independent deep copy of the cube."""
    return cube.copy()


# ---------------------------------------------------
# Move engine
# ---------------------------------------------------
def _turn_clockwise(cube: Cube, face: Face) -> None:
    # rotate the face itself
    cube.state[face] = rotate_face_clockwise(cube.state[face])

    # cycle the bands, the last band goes to the first one
    bands = FACE_BANDS[face]
    carry = [cube.state[bands[-1][0]][row][col] for row, col in bands[-1][1]]
    for band_face, band in bands:
        grid = cube.state[band_face]
        next_carry = [grid[row][col] for row, col in band]
        for loop1, (row, col) in enumerate(band):
            grid[row][col] = carry[loop1]
        carry = next_carry


def apply_move(cube: Cube, move: Union[str, Moves]) -> Cube:
    """
    Apply a single move.

    The turned face rotates by a quarter turn clockwise for ``X``, three
    quarter turns for ``X'`` and two for ``X2``. The band of facelets
    bordering it on the four neighbor faces cycles with it.

    :param cube: The cube to turn, left untouched.
    :type cube: Cube
    :param move: A move token, or a Moves object holding one move.
    :type move: str or Moves
    :returns: The new cube.
    :rtype: Cube
    :raises UnsupportedMove: If the move is not one of the 18 face turns.
    """
    if isinstance(move, Moves):
        if len(move) != 1:
            raise UnsupportedMove(str(move))
        move = move[0]

    face, turns = split_move(move)

    new_cube = cube.copy()
    for loop1 in range(turns):
        _turn_clockwise(new_cube, face)
    logger.debug(f"Applied move {move}")
    return new_cube


def apply_algorithm(cube: Cube, algorithm: Union[Moves, Iterable[str], str]) -> Cube:
    """
    Apply moves from left to right.

    :param cube: The start cube, left untouched.
    :type cube: Cube
    :param algorithm: The moves; a notation string is parsed strictly.
    :type algorithm: Moves or Iterable[str] or str
    :returns: The cube after the last move, or a copy of cube when there
              are no moves.
    :rtype: Cube
    :raises UnsupportedMove: On the first move that is not a face turn.
    """
    if isinstance(algorithm, str):
        algorithm = Moves(algorithm)

    new_cube = cube.copy()
    for move in algorithm:
        new_cube = apply_move(new_cube, move)
    return new_cube
