#!/usr/bin/env python3
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
"""
Create a command line interface to turn, scramble and replay a 3x3 cube.

Usage :
    python scripts/rubikscube_cli.py [--length N] [--seed S] [--no-cancel]

Documented commands (type help <topic>):
========================================
back          instructions  paint       reset    solved  valid
debug_level   inverse       print_cube  scramble step
help          load          quit        seek     time
move
"""
import argparse
import cmd
import logging
import random

import rubikscube

# Setup logger
logging.basicConfig()
logger = logging.getLogger("rubikscube_cli")


def parse_args(argv=None) -> tuple:
    """
    Parse command line arguments of the cube CLI.

    :param argv: Arguments to parse, defaults to the command line.
    :type argv: list, optional
    :returns: A tuple containing the known and unknown arguments.
    :rtype: tuple
    """
    parser = argparse.ArgumentParser(
        description="Turn, scramble and replay a 3x3 cube"
    )
    parser.add_argument(
        "--verbose", help="increase output verbosity", action="store_true"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Turns on debug prints"
    )
    parser.add_argument(
        "-l",
        "--length",
        action="store",
        default=25,
        type=int,
        help="Default number of moves of a scramble",
    )
    parser.add_argument(
        "--seed",
        action="store",
        type=int,
        help="Seed for reproducible scrambles",
    )
    parser.add_argument(
        "--no-cancel",
        action="store_true",
        help="Never turn the same face twice in a row when scrambling",
    )

    return parser.parse_known_args(argv)


# ------------------------------------------------
# Main Command line interface for the cube
# ------------------------------------------------
class rubikscube_cli(cmd.Cmd):
    """Define the main command line interface (CLI) for the cube model."""

    modules = ["rubikscube", "rubikscube_playback", "rubikscube_cli"]

    def __init__(self, args=None):
        """Initialize a CLI holding a solved cube."""
        cmd.Cmd.__init__(self)
        if args is None:
            args, _ = parse_args([])

        self.scramble_length = args.length
        self.avoid_cancellation = args.no_cancel
        self.rng = random.Random(args.seed) if args.seed is not None else None

        self.cube = rubikscube.solved_cube()
        self.playback = None
        self.set_prompt()

    def set_prompt(self) -> None:
        """Set the prompt, showing the playback step when one is loaded."""
        if self.playback is not None:
            self.prompt = f"CUBE [{self.playback.index}/{len(self.playback)}]> "
        else:
            self.prompt = "CUBE> "

    # ----------------------------------------------------
    # Helper functions for the CLI
    # ----------------------------------------------------
    def check_playback(self) -> bool:
        """
        Check if an algorithm is loaded for playback.

        :returns: the playback status. Log a warning message if no.
        :rtype: bool
        """
        if self.playback is not None:
            return True
        else:
            logger.warning("No algorithm loaded, please run load first")
            return False

    def parse_moves(self, args: str):
        """Parse the moves of a command, reporting skipped tokens."""
        moves, skipped = rubikscube.parse_algorithm(args)
        if skipped:
            print("Skipped unknown moves: {}".format(" ".join(skipped)))
        return moves

    def set_cube(self, cube) -> None:
        """Replace the cube, dropping any playback."""
        self.cube = cube
        self.playback = None
        self.set_prompt()

    def show_step(self) -> None:
        """Move the cube to the playback step and print it."""
        self.cube = self.playback.state
        self.set_prompt()
        print(self.cube)

    # ----------------------------------------------------
    # CLI commands
    # ----------------------------------------------------
    def do_print_cube(self, args):
        """Print the current state of the cube."""
        print(self.cube)

    def do_reset(self, args):
        """Go back to a solved cube."""
        logger.info("Resetting the cube")
        self.set_cube(rubikscube.solved_cube())

    def do_scramble(self, args):
        """
        Scramble a solved cube.

        Usage:
            scramble      # use the default length
            scramble 30   # 30 random moves
        """
        length = self.scramble_length
        if args.strip():
            try:
                length = int(args)
            except ValueError:
                print("Error - the scramble length must be a number")
                return

        seed = self.rng.randrange(2**32) if self.rng else None
        try:
            scramble = rubikscube.generate_scramble(
                length, seed=seed, avoid_cancellation=self.avoid_cancellation
            )
        except ValueError as err:
            print(f"Error - {err}")
            return

        print("Scramble: {}".format(scramble))
        self.set_cube(rubikscube.solved_cube().apply_moves(scramble))
        print(self.cube)

    def do_move(self, args):
        """
        Apply moves to the cube.

        Usage:
            move [U|D|R|L|F|B]['|2] ...

        Example:
            move R U R' U'
        """
        moves = self.parse_moves(args)
        self.set_cube(self.cube.apply_moves(moves))
        print(self.cube)

    def do_load(self, args):
        """
        Load an algorithm to play it one move at a time from the current cube.

        Usage:
            load F R U R' U' F'
        """
        moves = self.parse_moves(args)
        self.playback = rubikscube.Playback(self.cube, moves)
        self.set_prompt()
        print("Loaded {} moves".format(len(moves)))

    def do_step(self, args):
        """Play the next move of the loaded algorithm."""
        if self.check_playback():
            move = self.playback.next_move
            try:
                self.playback.step_forward()
            except rubikscube.StepOutOfRange:
                print("Already at the last move")
                return
            print("Move: {}".format(move))
            self.show_step()

    def do_back(self, args):
        """Undo the last played move of the loaded algorithm."""
        if self.check_playback():
            move = self.playback.previous_move
            try:
                self.playback.step_backward()
            except rubikscube.StepOutOfRange:
                print("Already at the first move")
                return
            print("Undo: {}".format(move))
            self.show_step()

    def do_seek(self, args):
        """
        Jump to a step of the loaded algorithm, clamped to the algorithm.

        Usage:
            seek 0    # before the first move
            seek 5    # after the fifth move
        """
        if self.check_playback():
            try:
                index = int(args)
            except ValueError:
                print("Error - pick a step number")
                return
            self.playback.seek(index, clamp=True)
            self.show_step()

    def do_instructions(self, args):
        """Return the moves of the loaded algorithm that are not played yet."""
        if self.check_playback():
            remaining = self.playback.remaining()
            if len(remaining) > 0:
                print("Instructions: {}".format(remaining))
            else:
                print("Instructions are empty")

    def complete_paint(self, text, line, begidx, endidx):
        """List faces then colors, possibly starting with `text`."""
        position = len(line[:begidx].split())
        if position == 1:
            names = [face.value for face in rubikscube.Face]
        elif position == 4:
            names = [color.value for color in rubikscube.Cube_Color]
        else:
            names = list()
        return [f for f in names if f.startswith(text)]

    def do_paint(self, args):
        """
        Paint one facelet. The cube may then be unreachable by moves.

        Usage:
            paint <face> <row> <col> <color>

        Example:
            paint front 0 2 red
        """
        values = args.split()
        if len(values) != 4:
            print("syntax: paint <face> <row> <col> <color>")
            return

        face, row, col, color = values
        cube = self.cube.copy()
        try:
            cube.set_facelet(face, int(row), int(col), color)
        except (ValueError, IndexError) as err:
            print(f"Error - {err}")
            return
        self.set_cube(cube)
        print(self.cube)

    def do_solved(self, args):
        """Tell whether every face shows a single color."""
        if self.cube.is_solved():
            print("The cube is solved")
        else:
            print("The cube is not solved")

    def do_valid(self, args):
        """Tell whether moves can reach the current cube from a solved one."""
        if self.cube.is_valid():
            print("The cube can be reached with moves")
        else:
            print("No sequence of moves reaches this cube")

    def do_inverse(self, args):
        """
        Print the moves undoing an algorithm.

        Usage:
            inverse R U R' U'
        """
        moves = self.parse_moves(args)
        print("Inverse: {}".format(moves.inverse()))

    def do_time(self, args):
        """
        Format a time in milliseconds as MM:SS.mmm.

        Usage:
            time 65432
        """
        try:
            print(rubikscube.format_time(int(args)))
        except ValueError:
            print("Error - pick a positive number of milliseconds")

    def complete_debug_level(self, text, line, begidx, endidx):
        """List all debug level, possibly starting with `text`."""
        completions = list()
        levels = ["debug", "info", "warning", "error"]

        if not text:
            completions = levels
        else:
            completions = [f for f in levels if f.startswith(text)]

        return completions

    def do_debug_level(self, args):
        """
        Set the level of debug info to provide across all the components.

        Usage:
            debug_level [debug | info | warning | error ]
        """
        level = None
        if "debug" in args:
            level = logging.DEBUG
        elif "info" in args:
            level = logging.INFO
        elif "warning" in args:
            level = logging.WARNING
        elif "error" in args:
            level = logging.ERROR

        if level:
            for name in self.modules:
                logging.getLogger(name).setLevel(level)

    def do_quit(self, args) -> bool:
        """Exit the cube Command line interface.

        :returns: True once exit
        :rtype: bool
        """
        return True

    def help_quit(self):
        """Log help to quit the current CLI."""
        print("syntax: quit")


def main():
    """Start the cube command line interface and run the CLI loop."""
    args, _ = parse_args()

    level = None
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    if level:
        for name in rubikscube_cli.modules:
            logging.getLogger(name).setLevel(level)

    print("Starting cube Command line interface (CLI)")

    # Allocate the CLI
    cli = rubikscube_cli(args)

    # Run the CLI loop
    cli.cmdloop()


if __name__ == "__main__":
    main()
